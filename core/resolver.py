"""Resolution of the application the user was using before the launcher opened."""

from __future__ import annotations

import logging

from core.errors import NoTargetApplication
from os_controller.base_controller import WorkspaceBackend
from world_model.desktop_state import RunningApplication

logger = logging.getLogger("fw.resolver")


class TargetApplicationResolver:
    """Finds the previously foregrounded app while the launcher holds focus.

    The launcher takes keyboard focus but not the menu bar, so the menu bar
    owner is the primary signal. When it is missing or is the launcher, the
    first regular, live, non-launcher process owning a titled window wins.
    """

    def __init__(self, backend: WorkspaceBackend, launcher_bundle_id: str) -> None:
        self.backend = backend
        self.launcher_bundle_id = launcher_bundle_id

    def is_launcher(self, app: RunningApplication) -> bool:
        return app.bundle_id == self.launcher_bundle_id

    def resolve(self) -> RunningApplication:
        owner = self.backend.menu_bar_owner()
        if owner is not None and not self.is_launcher(owner):
            logger.debug("Menu bar owner: %s (pid %s)", owner.name, owner.pid)
            return owner

        logger.info("Menu bar owner unusable (%s); scanning running applications.", owner and owner.name)
        for app in self.backend.running_applications():
            if not app.is_regular or app.terminated or self.is_launcher(app):
                continue
            if self.backend.has_titled_window(app):
                logger.debug("Fallback selected %s (pid %s)", app.name, app.pid)
                return app

        raise NoTargetApplication()
