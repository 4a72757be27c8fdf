"""Launcher output schema and fuzzy matching tests."""

from __future__ import annotations

import json

from ui.alfred.fuzzy import fuzzy_match, fuzzy_score, fuzzy_sort
from ui.alfred.output import Icon, Item, Output, Text


def test_unset_fields_are_omitted() -> None:
    item = Item(title="Title", subtitle="Sub", arg="/path")
    assert item.to_dict() == {"title": "Title", "subtitle": "Sub", "arg": "/path"}


def test_aliases_serialize_to_alfred_keys() -> None:
    item = Item(
        title="doc",
        match_field="doc",
        item_type="file",
        icon=Icon.fileicon("/Applications/Safari.app"),
        text=Text(copy_text="doc"),
        valid=False,
    )
    data = item.to_dict()

    assert data["match"] == "doc"
    assert data["type"] == "file"
    assert data["icon"] == {"type": "fileicon", "path": "/Applications/Safari.app"}
    assert data["text"] == {"copy": "doc"}
    assert data["valid"] is False


def test_plain_image_icon_has_no_type() -> None:
    assert Icon.image("icon.png").to_dict() == {"path": "icon.png"}
    assert Icon.filetype("public.folder").to_dict() == {"type": "filetype", "path": "public.folder"}


def test_modifier_overrides() -> None:
    item = Item(title="t").with_cmd("a1", "cmd sub").with_alt("a2", "alt sub")
    mods = item.to_dict()["mods"]

    assert mods["cmd"] == {"valid": True, "arg": "a1", "subtitle": "cmd sub"}
    assert mods["alt"] == {"valid": True, "arg": "a2", "subtitle": "alt sub"}
    assert "ctrl" not in mods


def test_output_json() -> None:
    raw = Output(items=[Item(title="Test", subtitle="Sub", arg="val")]).to_json()

    assert '"title":"Test"' in raw
    assert '"arg":"val"' in raw
    assert "rerun" not in json.loads(raw)


def test_output_json_keeps_unicode() -> None:
    raw = Output(items=[Item(title="Résumé — final")], rerun=0.5).to_json()

    assert "Résumé — final" in raw
    assert json.loads(raw)["rerun"] == 0.5


def test_fuzzy_match() -> None:
    assert fuzzy_match("fc", "flow-code")
    assert fuzzy_match("fl", "flow")
    assert fuzzy_match("FL", "flow")
    assert fuzzy_match("", "anything")
    assert not fuzzy_match("xyz", "abc")
    assert not fuzzy_match("ba", "ab")


def test_fuzzy_score() -> None:
    assert fuzzy_score("fl", "flow") > fuzzy_score("fl", "alfred")
    assert fuzzy_score("fc", "flow-code") == 45
    assert fuzzy_score("", "anything") == 0
    assert fuzzy_score("xyz", "abc") == -1


def test_fuzzy_sort_is_stable_for_ties() -> None:
    titles = ["alfred", "flow", "notes", "flow copy"]

    ranked = fuzzy_sort(titles, "fl", key=str)

    assert ranked[:2] == ["flow", "flow copy"]
    assert ranked[-1] == "notes"
