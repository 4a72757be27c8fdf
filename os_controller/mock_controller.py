"""Deterministic in-memory backend for offline runs and tests."""

from __future__ import annotations

from os_controller.base_controller import WorkspaceBackend
from world_model.desktop_state import RunningApplication, WindowHandle


class MockController(WorkspaceBackend):
    """Fake application/window registry.

    Window titles are stored per pid; activation moves the frontmost pid to the
    target after `activation_lag` further `frontmost_pid` polls, simulating the
    asynchronous window server. Every mutating call is recorded in `actions`.
    """

    def __init__(
        self,
        apps: list[RunningApplication] | None = None,
        windows: dict[int, list[str]] | None = None,
        menu_bar_pid: int | None = None,
        frontmost: int | None = None,
        activation_lag: int = 0,
        failing_actions: set[str] | None = None,
    ) -> None:
        self.apps = list(apps or [])
        self.windows = {pid: list(titles) for pid, titles in (windows or {}).items()}
        self.menu_bar_pid = menu_bar_pid
        self.frontmost = frontmost
        self.activation_lag = activation_lag
        self.failing_actions = set(failing_actions or ())
        self.actions: list[tuple[str, int, int | None]] = []
        self.window_queries: list[int] = []
        self._pending: tuple[int, int] | None = None

    def _by_pid(self, pid: int | None) -> RunningApplication | None:
        for app in self.apps:
            if app.pid == pid:
                return app
        return None

    def menu_bar_owner(self) -> RunningApplication | None:
        return self._by_pid(self.menu_bar_pid)

    def frontmost_pid(self) -> int | None:
        if self._pending is not None:
            pid, remaining = self._pending
            if remaining <= 0:
                self.frontmost = pid
                self._pending = None
            else:
                self._pending = (pid, remaining - 1)
        return self.frontmost

    def running_applications(self) -> list[RunningApplication]:
        return list(self.apps)

    def list_windows(self, app: RunningApplication) -> list[WindowHandle]:
        self.window_queries.append(app.pid)
        return [
            WindowHandle(title=title, index=index, pid=app.pid, element=(app.pid, index))
            for index, title in enumerate(self.windows.get(app.pid, []))
        ]

    def activate(self, app: RunningApplication) -> bool:
        self.actions.append(("activate", app.pid, None))
        self._pending = (app.pid, self.activation_lag)
        return "activate" not in self.failing_actions

    def raise_window(self, window: WindowHandle) -> bool:
        self.actions.append(("raise", window.pid, window.index))
        return "raise" not in self.failing_actions

    def set_main_window(self, window: WindowHandle) -> bool:
        self.actions.append(("set_main", window.pid, window.index))
        return "set_main" not in self.failing_actions
