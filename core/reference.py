"""Serialized window references passed from the lister to the raiser."""

from __future__ import annotations

import json

from pydantic import BaseModel, StrictInt, StrictStr, ValidationError

from core.errors import MalformedReference
from world_model.desktop_state import RunningApplication, WindowHandle


class WindowReference(BaseModel):
    """Launcher-visible identity of one window.

    `window` is the ordinal in the owning app's unfiltered window list at
    listing time. `title` and `pid` are optional on input.
    """

    app: StrictStr
    window: StrictInt
    title: StrictStr | None = None
    pid: StrictInt | None = None

    @classmethod
    def for_window(cls, app: RunningApplication, window: WindowHandle) -> WindowReference:
        return cls(app=app.name, window=window.index, title=window.title, pid=app.pid)

    def encode(self) -> str:
        """Compact JSON with keys in app, window, title, pid order."""
        return json.dumps(
            self.model_dump(exclude_none=True),
            ensure_ascii=False,
            separators=(",", ":"),
        )

    @classmethod
    def decode(cls, raw: str | None) -> WindowReference:
        """Parse a reference string, raising MalformedReference on any problem."""
        if raw is None or not raw.strip():
            raise MalformedReference("Usage: raise-window <json-arg>")
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise MalformedReference(f"Invalid argument: {exc.msg}") from exc
        if not isinstance(payload, dict):
            raise MalformedReference("Invalid argument: expected a JSON object")
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            fields = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
            raise MalformedReference(f"Invalid argument: bad or missing {', '.join(fields)}") from exc
