"""Target application resolution tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from core.errors import NoTargetApplication
from core.resolver import TargetApplicationResolver
from os_controller.mock_controller import MockController
from world_model.desktop_state import ActivationPolicy, RunningApplication

ALFRED = "com.runningwithcrayons.Alfred"


def _app(name: str, pid: int, bundle_id: str | None = None, **kwargs) -> RunningApplication:
    return RunningApplication(
        name=name,
        bundle_id=bundle_id or f"com.example.{name.lower()}",
        path=f"/Applications/{name}.app",
        pid=pid,
        **kwargs,
    )


def test_menu_bar_owner_is_primary_signal() -> None:
    safari = _app("Safari", 10)
    notes = _app("Notes", 11)
    backend = MockController(apps=[notes, safari], windows={11: ["Note"]}, menu_bar_pid=10)

    assert TargetApplicationResolver(backend, ALFRED).resolve() == safari
    # The primary path never probes windows.
    assert backend.window_queries == []


def test_launcher_as_menu_bar_owner_triggers_fallback() -> None:
    alfred = _app("Alfred", 1, bundle_id=ALFRED)
    textedit = _app("TextEdit", 20)
    backend = MockController(
        apps=[alfred, textedit],
        windows={1: ["Alfred Preferences"], 20: ["Untitled"]},
        menu_bar_pid=1,
    )

    resolved = TargetApplicationResolver(backend, ALFRED).resolve()
    assert resolved == textedit
    assert resolved.bundle_id != ALFRED


@pytest.mark.parametrize("position", [0, 1, 2, 3])
def test_single_eligible_app_selected_regardless_of_position(position: int) -> None:
    fillers = [
        _app("Helper", 30, activation_policy=ActivationPolicy.ACCESSORY),
        _app("Dead", 31, terminated=True),
        _app("Blank", 32),
    ]
    target = _app("Preview", 40)
    apps = list(fillers)
    apps.insert(position, target)
    backend = MockController(
        apps=apps,
        windows={30: ["Helper window"], 31: ["Dead window"], 32: ["", ""], 40: ["", "doc.pdf"]},
        menu_bar_pid=None,
    )

    assert TargetApplicationResolver(backend, ALFRED).resolve() == target


def test_fallback_stops_at_first_titled_candidate() -> None:
    first = _app("Mail", 50)
    second = _app("Music", 51)
    backend = MockController(apps=[first, second], windows={50: ["Inbox"], 51: ["Library"]})

    assert TargetApplicationResolver(backend, ALFRED).resolve() == first
    assert backend.window_queries == [50]


def test_launcher_never_returned_from_fallback() -> None:
    alfred = _app("Alfred", 1, bundle_id=ALFRED)
    backend = MockController(apps=[alfred], windows={1: ["Alfred"]}, menu_bar_pid=1)

    with pytest.raises(NoTargetApplication):
        TargetApplicationResolver(backend, ALFRED).resolve()


def test_no_candidates_raises() -> None:
    backend = MockController(apps=[_app("Finder", 5)], windows={5: [""]})

    with pytest.raises(NoTargetApplication) as exc_info:
        TargetApplicationResolver(backend, ALFRED).resolve()
    assert exc_info.value.message == "No app found"


def test_resolver_works_against_any_backend() -> None:
    backend = MagicMock()
    owner = _app("Xcode", 77)
    backend.menu_bar_owner.return_value = owner

    assert TargetApplicationResolver(backend, ALFRED).resolve() is owner
    backend.running_applications.assert_not_called()
