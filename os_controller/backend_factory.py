"""Workspace backend factory."""

from __future__ import annotations

from core.policy_runtime import BackendConfig
from os_controller.base_controller import WorkspaceBackend
from os_controller.macos_controller import MacOSController
from os_controller.mock_controller import MockController
from world_model.desktop_state import ActivationPolicy, RunningApplication


def build_backend(config: BackendConfig) -> WorkspaceBackend:
    """Build the configured backend; `mock` serves the registry under `backend.mock`."""
    if config.type == "mock":
        registry = config.mock
        apps = [
            RunningApplication(
                name=app.name,
                bundle_id=app.bundle_id,
                path=app.path,
                pid=app.pid,
                activation_policy=ActivationPolicy[app.activation_policy.upper()],
                terminated=app.terminated,
            )
            for app in registry.apps
        ]
        return MockController(
            apps=apps,
            windows={app.pid: app.windows for app in registry.apps},
            menu_bar_pid=registry.menu_bar_pid,
            frontmost=registry.frontmost,
        )
    return MacOSController()
