"""CLI entry point for Dragboard."""

from __future__ import annotations

import click

from dragboard import __version__
from dragboard.cli.replay import replay
from dragboard.constants import DEFAULT_CONFIG_PATH


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version and exit")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """Kanban board with drag-and-drop reordering."""
    if version:
        click.echo(f"dragboard {__version__}")
        ctx.exit(0)

    if ctx.invoked_subcommand is None:
        ctx.invoke(tui)


cli.add_command(replay)


@cli.command()
@click.option("--config", "config_path", default=DEFAULT_CONFIG_PATH, help="Path to config.toml")
@click.option("--empty", is_flag=True, help="Start with an empty board instead of the demo")
def tui(config_path: str, empty: bool) -> None:
    """Run the board TUI (default command)."""
    from dragboard.app import DragboardApp

    app = DragboardApp(config_path=config_path, seed_demo=False if empty else None)
    app.run()


if __name__ == "__main__":
    cli()
