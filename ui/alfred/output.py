"""Alfred Script Filter JSON models."""

from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict, Field


class _AlfredModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class Icon(_AlfredModel):
    """Item icon; `type` is unset for plain image paths."""

    icon_type: str | None = Field(default=None, alias="type")
    path: str

    @classmethod
    def fileicon(cls, path: str) -> Icon:
        """Render the icon of the file or bundle at `path`."""
        return cls(icon_type="fileicon", path=path)

    @classmethod
    def filetype(cls, uti: str) -> Icon:
        return cls(icon_type="filetype", path=uti)

    @classmethod
    def image(cls, path: str) -> Icon:
        return cls(path=path)


class ModItem(_AlfredModel):
    """Override applied while a modifier key is held."""

    valid: bool | None = None
    arg: str | None = None
    subtitle: str | None = None


class Mods(_AlfredModel):
    cmd: ModItem | None = None
    alt: ModItem | None = None
    ctrl: ModItem | None = None
    shift: ModItem | None = None


class Text(_AlfredModel):
    """Text for copy (cmd-C) and Large Type (cmd-L)."""

    copy_text: str | None = Field(default=None, alias="copy")
    largetype: str | None = None


class Item(_AlfredModel):
    """One result row. Window rows leave `mods` unset; the helpers serve other row kinds."""

    uid: str | None = None
    title: str
    subtitle: str | None = None
    arg: str | None = None
    icon: Icon | None = None
    valid: bool | None = None
    autocomplete: str | None = None
    match_field: str | None = Field(default=None, alias="match")
    item_type: str | None = Field(default=None, alias="type")
    mods: Mods | None = None
    text: Text | None = None
    quicklookurl: str | None = None

    def with_cmd(self, arg: str, subtitle: str) -> Item:
        """Cmd+Return override. Window rows set none: their only action is the raise."""
        mods = self.mods or Mods()
        mods = mods.model_copy(update={"cmd": ModItem(valid=True, arg=arg, subtitle=subtitle)})
        return self.model_copy(update={"mods": mods})

    def with_alt(self, arg: str, subtitle: str) -> Item:
        mods = self.mods or Mods()
        mods = mods.model_copy(update={"alt": ModItem(valid=True, arg=arg, subtitle=subtitle)})
        return self.model_copy(update={"mods": mods})


class Output(_AlfredModel):
    """Top-level Script Filter payload."""

    items: list[Item] = Field(default_factory=list)
    rerun: float | None = None

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))
