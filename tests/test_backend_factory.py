"""Backend factory tests."""

from __future__ import annotations

from core.policy_runtime import BackendConfig, MockAppConfig, MockBackendConfig
from os_controller.backend_factory import build_backend
from os_controller.macos_controller import MacOSController
from os_controller.mock_controller import MockController
from world_model.desktop_state import ActivationPolicy


def test_default_backend_is_macos() -> None:
    assert isinstance(build_backend(BackendConfig()), MacOSController)


def test_mock_backend_serves_configured_registry() -> None:
    config = BackendConfig(
        type="mock",
        mock=MockBackendConfig(
            menu_bar_pid=20,
            apps=[
                MockAppConfig(name="Dock", pid=19, activation_policy="accessory"),
                MockAppConfig(name="Preview", pid=20, path="/System/Applications/Preview.app", windows=["a.pdf", ""]),
            ],
        ),
    )

    backend = build_backend(config)

    assert isinstance(backend, MockController)
    assert backend.menu_bar_owner().name == "Preview"
    assert backend.running_applications()[0].activation_policy == ActivationPolicy.ACCESSORY
    windows = backend.list_windows(backend.menu_bar_owner())
    assert [window.title for window in windows] == ["a.pdf", ""]
