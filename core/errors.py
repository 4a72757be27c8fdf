"""Error kinds raised by window resolution and raising."""

from __future__ import annotations


class WindowSwitcherError(Exception):
    """Base error; `message` is the short line shown to the launcher."""

    default_message = "Window switcher error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NoTargetApplication(WindowSwitcherError):
    default_message = "No app found"


class NoWindowsFound(WindowSwitcherError):
    default_message = "No windows found"


class MalformedReference(WindowSwitcherError):
    default_message = "Invalid argument"


class ApplicationNotFound(WindowSwitcherError):
    default_message = "App not found"


class WindowIndexOutOfRange(WindowSwitcherError):
    default_message = "Window not found"


class RaiseFailed(WindowSwitcherError):
    default_message = "Failed to raise window"


class BackendUnavailable(WindowSwitcherError):
    default_message = "macOS accessibility frameworks are unavailable"


class ConfigInvalid(WindowSwitcherError):
    default_message = "Invalid configuration"
