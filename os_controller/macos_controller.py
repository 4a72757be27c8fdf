"""macOS backend over NSWorkspace and the Accessibility (AX) API via PyObjC."""

from __future__ import annotations

import logging
from typing import Any

from core.errors import BackendUnavailable
from os_controller.base_controller import WorkspaceBackend
from world_model.desktop_state import ActivationPolicy, RunningApplication, WindowHandle

try:
    from AppKit import NSWorkspace
except ImportError:
    NSWorkspace = None

try:
    from ApplicationServices import (
        AXUIElementCopyAttributeValue,
        AXUIElementCreateApplication,
        AXUIElementCreateSystemWide,
        AXUIElementGetPid,
        AXUIElementPerformAction,
        AXUIElementSetAttributeValue,
    )
except ImportError:
    AXUIElementCreateApplication = None

AX_ERROR_SUCCESS = 0
AX_WINDOWS = "AXWindows"
AX_TITLE = "AXTitle"
AX_MAIN = "AXMain"
AX_RAISE = "AXRaise"
AX_FOCUSED_APPLICATION = "AXFocusedApplication"

# NSApplicationActivationOptions: no flags, matches a plain activate().
ACTIVATE_DEFAULT = 0


class MacOSController(WorkspaceBackend):
    """Live backend. Every call is a fresh blocking query against OS state."""

    def __init__(self) -> None:
        self.logger = logging.getLogger("fw.macos")
        if NSWorkspace is None or AXUIElementCreateApplication is None:
            self.logger.warning("pyobjc AppKit/ApplicationServices frameworks are not installed.")

    def _check_available(self) -> None:
        if NSWorkspace is None or AXUIElementCreateApplication is None:
            raise BackendUnavailable()

    def _workspace(self) -> Any:
        self._check_available()
        return NSWorkspace.sharedWorkspace()

    @staticmethod
    def _snapshot(ns_app: Any) -> RunningApplication:
        bundle_url = ns_app.bundleURL()
        policy = int(ns_app.activationPolicy())
        try:
            activation_policy = ActivationPolicy(policy)
        except ValueError:
            activation_policy = ActivationPolicy.PROHIBITED
        return RunningApplication(
            name=ns_app.localizedName() or "Unknown",
            bundle_id=ns_app.bundleIdentifier(),
            path=bundle_url.path() if bundle_url is not None else None,
            pid=int(ns_app.processIdentifier()),
            activation_policy=activation_policy,
            terminated=bool(ns_app.isTerminated()),
        )

    def menu_bar_owner(self) -> RunningApplication | None:
        owner = self._workspace().menuBarOwningApplication()
        return self._snapshot(owner) if owner is not None else None

    def frontmost_pid(self) -> int | None:
        self._check_available()
        # NSWorkspace only refreshes frontmostApplication from the run loop,
        # which a short-lived CLI never spins. Ask the AX system-wide element.
        err, focused = AXUIElementCopyAttributeValue(
            AXUIElementCreateSystemWide(), AX_FOCUSED_APPLICATION, None
        )
        if err == AX_ERROR_SUCCESS and focused is not None:
            err, pid = AXUIElementGetPid(focused, None)
            if err == AX_ERROR_SUCCESS:
                return int(pid)
        front = self._workspace().frontmostApplication()
        return int(front.processIdentifier()) if front is not None else None

    def running_applications(self) -> list[RunningApplication]:
        return [self._snapshot(app) for app in self._workspace().runningApplications()]

    def _ns_app(self, pid: int) -> Any | None:
        for ns_app in self._workspace().runningApplications():
            if int(ns_app.processIdentifier()) == pid:
                return ns_app
        return None

    def list_windows(self, app: RunningApplication) -> list[WindowHandle]:
        self._check_available()
        ax_app = AXUIElementCreateApplication(app.pid)
        err, windows = AXUIElementCopyAttributeValue(ax_app, AX_WINDOWS, None)
        if err != AX_ERROR_SUCCESS or windows is None:
            self.logger.debug("AXWindows query failed for %s (pid %s): %s", app.name, app.pid, err)
            return []
        handles: list[WindowHandle] = []
        for index, element in enumerate(windows):
            err, title = AXUIElementCopyAttributeValue(element, AX_TITLE, None)
            text = str(title) if err == AX_ERROR_SUCCESS and title is not None else ""
            handles.append(WindowHandle(title=text, index=index, pid=app.pid, element=element))
        return handles

    def activate(self, app: RunningApplication) -> bool:
        ns_app = self._ns_app(app.pid)
        if ns_app is None:
            return False
        return bool(ns_app.activateWithOptions_(ACTIVATE_DEFAULT))

    def raise_window(self, window: WindowHandle) -> bool:
        self._check_available()
        err = AXUIElementPerformAction(window.element, AX_RAISE)
        if err != AX_ERROR_SUCCESS:
            self.logger.warning("AXRaise failed on window %d (pid %s): %s", window.index, window.pid, err)
        return err == AX_ERROR_SUCCESS

    def set_main_window(self, window: WindowHandle) -> bool:
        self._check_available()
        err = AXUIElementSetAttributeValue(window.element, AX_MAIN, True)
        if err != AX_ERROR_SUCCESS:
            self.logger.warning("Setting AXMain failed on window %d (pid %s): %s", window.index, window.pid, err)
        return err == AX_ERROR_SUCCESS
