"""Base interface for workspace and accessibility backends."""

from __future__ import annotations

from abc import ABC, abstractmethod

from world_model.desktop_state import RunningApplication, WindowHandle


class WorkspaceBackend(ABC):
    """Read-only view of OS process and window state, plus the few actions we need."""

    @abstractmethod
    def menu_bar_owner(self) -> RunningApplication | None:
        """Return the application owning the menu bar, if any."""
        pass

    @abstractmethod
    def frontmost_pid(self) -> int | None:
        """Return the pid of the frontmost application, if any."""
        pass

    @abstractmethod
    def running_applications(self) -> list[RunningApplication]:
        """Return running applications in OS enumeration order."""
        pass

    @abstractmethod
    def list_windows(self, app: RunningApplication) -> list[WindowHandle]:
        """Return the app's accessibility windows, unfiltered, in OS order."""
        pass

    @abstractmethod
    def activate(self, app: RunningApplication) -> bool:
        """Request activation of an application. Returns once the request is queued."""
        pass

    @abstractmethod
    def raise_window(self, window: WindowHandle) -> bool:
        """Perform the raise action on a window."""
        pass

    @abstractmethod
    def set_main_window(self, window: WindowHandle) -> bool:
        """Mark a window as its application's main window."""
        pass

    def has_titled_window(self, app: RunningApplication) -> bool:
        """Probe whether the app owns at least one window with a non-empty title."""
        return any(window.has_title for window in self.list_windows(app))
