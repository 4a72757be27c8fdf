"""Activation and raise of a previously listed window."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from core.errors import ApplicationNotFound, RaiseFailed, WindowIndexOutOfRange
from core.policy_runtime import RaiserConfig
from core.reference import WindowReference
from os_controller.base_controller import WorkspaceBackend
from world_model.desktop_state import RunningApplication, WindowHandle

logger = logging.getLogger("fw.raiser")


class WindowRaiser:
    """Re-resolves a WindowReference against live state and raises the window."""

    def __init__(
        self,
        backend: WorkspaceBackend,
        config: RaiserConfig | None = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.backend = backend
        self.config = config or RaiserConfig()
        self.sleep = sleep
        self.clock = clock

    def find_application(self, reference: WindowReference) -> RunningApplication:
        """Match by display name; the captured pid breaks ties between duplicates."""
        candidates = [
            app
            for app in self.backend.running_applications()
            if app.name == reference.app and not app.terminated
        ]
        if not candidates:
            raise ApplicationNotFound(f"App not found: {reference.app}")
        if reference.pid is not None:
            for app in candidates:
                if app.pid == reference.pid:
                    return app
            logger.info("pid %s for %s is gone; using pid %s", reference.pid, reference.app, candidates[0].pid)
        return candidates[0]

    def wait_for_activation(self, app: RunningApplication) -> bool:
        """Poll the frontmost pid with backoff until it is `app` or the timeout passes."""
        deadline = self.clock() + self.config.activation_timeout
        delay = self.config.poll_initial_delay
        while True:
            if self.backend.frontmost_pid() == app.pid:
                return True
            remaining = deadline - self.clock()
            if remaining <= 0:
                logger.warning(
                    "%s did not become frontmost within %.2fs; raising anyway.",
                    app.name,
                    self.config.activation_timeout,
                )
                return False
            self.sleep(min(delay, remaining))
            delay = min(delay * self.config.poll_backoff, self.config.poll_max_delay)

    def select_window(self, reference: WindowReference, windows: list[WindowHandle]) -> WindowHandle:
        if not 0 <= reference.window < len(windows):
            raise WindowIndexOutOfRange(
                f"Window not found: index {reference.window} of {len(windows)} in {reference.app}"
            )
        window = windows[reference.window]
        if not self.config.verify_title or reference.title is None or window.title == reference.title:
            return window

        for candidate in windows:
            if candidate.title == reference.title:
                logger.warning(
                    "Window %d moved to %d since listing (%r).",
                    reference.window,
                    candidate.index,
                    reference.title,
                )
                return candidate
        logger.warning(
            "Window %d title changed from %r to %r; raising it anyway.",
            reference.window,
            reference.title,
            window.title,
        )
        return window

    def raise_reference(self, raw: str | None) -> WindowHandle:
        """Decode `raw`, activate the owning app and raise the referenced window."""
        reference = WindowReference.decode(raw)
        app = self.find_application(reference)

        if not self.backend.activate(app):
            logger.warning("Activation request for %s (pid %s) was refused.", app.name, app.pid)
        self.wait_for_activation(app)

        window = self.select_window(reference, self.backend.list_windows(app))
        raised = self.backend.raise_window(window)
        made_main = self.backend.set_main_window(window)
        if not (raised and made_main):
            raise RaiseFailed(f"Failed to raise window: {window.title or window.index}")
        logger.debug("Raised window %d of %s", window.index, app.name)
        return window
