"""Desktop state schema: running applications and their windows."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class ActivationPolicy(IntEnum):
    """Mirrors NSApplicationActivationPolicy values."""

    REGULAR = 0
    ACCESSORY = 1
    PROHIBITED = 2


@dataclass(frozen=True)
class RunningApplication:
    """Read-only snapshot of one live process as reported by the workspace."""

    name: str
    bundle_id: str | None
    path: str | None
    pid: int
    activation_policy: ActivationPolicy = ActivationPolicy.REGULAR
    terminated: bool = False

    @property
    def is_regular(self) -> bool:
        return self.activation_policy == ActivationPolicy.REGULAR


@dataclass(frozen=True)
class WindowHandle:
    """One accessibility window node of a running application.

    `index` is the position in the unfiltered window list returned by the
    accessibility query that produced this handle. `element` is the backend's
    opaque node and is only meaningful to the backend that created it.
    """

    title: str
    index: int
    pid: int
    element: Any = None

    @property
    def has_title(self) -> bool:
        return bool(self.title)
