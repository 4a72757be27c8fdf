"""Typer command handlers."""

from __future__ import annotations

import typer

from core.errors import WindowSwitcherError
from core.orchestrator import Orchestrator, RuntimeBundle
from core.policy_runtime import ListerConfig
from ui.alfred.output import Icon, Item, Output


def _runtime() -> RuntimeBundle:
    bundle = Orchestrator().build()
    return bundle


def _error_item(message: str, icon_path: str) -> Item:
    return Item(
        title=message,
        subtitle="Could not query windows",
        arg="",
        match_field="",
        icon=Icon.fileicon(icon_path),
        valid=False,
    )


def list_windows(query: str | None = None) -> None:
    """Print launcher JSON for the previous app's windows. Always exits 0."""
    fallback_icon = ListerConfig().fallback_icon
    try:
        bundle = _runtime()
        fallback_icon = bundle.config.lister.fallback_icon
        output = bundle.lister.build(query)
    except WindowSwitcherError as exc:
        output = Output(items=[_error_item(exc.message, fallback_icon)])
    typer.echo(output.to_json())


def raise_window(arg: str | None) -> None:
    """Raise the window named by a lister reference; exit 1 with a message on failure."""
    try:
        bundle = _runtime()
        bundle.raiser.raise_reference(arg)
    except WindowSwitcherError as exc:
        typer.echo(exc.message)
        raise typer.Exit(code=1) from exc


def config_show() -> None:
    """Show effective runtime config."""
    try:
        bundle = _runtime()
    except WindowSwitcherError as exc:
        typer.echo(exc.message)
        raise typer.Exit(code=1) from exc
    typer.echo(bundle.config.model_dump_json(indent=2))
