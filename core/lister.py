"""Window enumeration and launcher result encoding."""

from __future__ import annotations

import logging

from core.errors import NoTargetApplication, NoWindowsFound
from core.policy_runtime import ListerConfig
from core.reference import WindowReference
from core.resolver import TargetApplicationResolver
from os_controller.base_controller import WorkspaceBackend
from ui.alfred.fuzzy import fuzzy_match, fuzzy_sort
from ui.alfred.output import Icon, Item, Output, Text
from world_model.desktop_state import RunningApplication

logger = logging.getLogger("fw.lister")


class WindowLister:
    """Builds the result rows for the resolved application's titled windows."""

    def __init__(
        self,
        backend: WorkspaceBackend,
        resolver: TargetApplicationResolver,
        config: ListerConfig | None = None,
    ) -> None:
        self.backend = backend
        self.resolver = resolver
        self.config = config or ListerConfig()

    def _icon(self, app: RunningApplication | None) -> Icon:
        path = app.path if app is not None and app.path else self.config.fallback_icon
        return Icon.fileicon(path)

    def window_items(self, app: RunningApplication) -> list[Item]:
        """One item per titled window; ordinals come from the unfiltered list."""
        items: list[Item] = []
        icon = self._icon(app)
        for window in self.backend.list_windows(app):
            if not window.has_title:
                continue
            reference = WindowReference.for_window(app, window)
            items.append(
                Item(
                    title=window.title,
                    subtitle=app.name,
                    arg=reference.encode(),
                    match_field=window.title,
                    icon=icon,
                    text=Text(copy_text=window.title, largetype=window.title),
                )
            )
        if not items:
            raise NoWindowsFound()
        return items

    def placeholder(self, title: str, subtitle: str, app: RunningApplication | None = None) -> Item:
        return Item(
            title=title,
            subtitle=subtitle,
            arg="",
            match_field="",
            icon=self._icon(app),
            valid=False,
        )

    def build(self, query: str | None = None) -> Output:
        """Resolve, enumerate and encode. Never raises the resolution errors."""
        try:
            app = self.resolver.resolve()
        except NoTargetApplication as exc:
            logger.info("%s", exc.message)
            return self._output([self.placeholder(exc.message, "Could not determine frontmost app")])

        try:
            items = self.window_items(app)
        except NoWindowsFound as exc:
            logger.info("%s for %s (pid %s)", exc.message, app.name, app.pid)
            return self._output([self.placeholder(exc.message, app.name, app)])

        if query:
            items = fuzzy_sort(
                [item for item in items if fuzzy_match(query, item.match_field or "")],
                query,
                key=lambda item: item.match_field or "",
            )
            if not items:
                return self._output([self.placeholder("No matching windows", app.name, app)])

        logger.debug("Listed %d windows for %s", len(items), app.name)
        return self._output(items)

    def _output(self, items: list[Item]) -> Output:
        return Output(items=items, rerun=self.config.rerun)
