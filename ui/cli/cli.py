"""CLI entrypoint for flow-windows."""

from __future__ import annotations

import typer

from ui.cli import commands

app = typer.Typer(help="List and raise windows of the previously active app")
config_app = typer.Typer(help="Configuration commands")


@app.command("list")
def list_cmd(
    query: str | None = typer.Argument(None, help="Optional fuzzy filter over window titles"),
) -> None:
    """List windows of the app that was frontmost before the launcher."""
    commands.list_windows(query=query)


@app.command("raise")
def raise_cmd(
    arg: str | None = typer.Argument(None, help="Window reference JSON emitted by 'list'"),
) -> None:
    """Bring one listed window to the front."""
    commands.raise_window(arg=arg)


@config_app.command("show")
def config_show_cmd() -> None:
    """Show effective configuration."""
    commands.config_show()


app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


def list_main() -> None:
    """Script Filter entrypoint: flow-windows-list [QUERY]."""
    typer.run(list_cmd)


def raise_main() -> None:
    """Run Script entrypoint: flow-windows-raise <json-arg>."""
    typer.run(raise_cmd)


if __name__ == "__main__":
    main()
