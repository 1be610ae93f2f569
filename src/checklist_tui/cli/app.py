"""Typer CLI application."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from checklist_tui.errors import TerminalIOError
from checklist_tui.log import setup_logging

logger = logging.getLogger(__name__)


class LogLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


def _version_callback(value: bool) -> None:
    if value:
        from checklist_tui import __version__
        typer.echo(f"checklist-tui {__version__}")
        raise typer.Exit()


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="checklist-tui",
        help="Browse a checklist in a full-screen terminal view.",
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    def launch() -> None:
        from checklist_tui.cli.studio.checklist import run_checklist

        try:
            run_checklist()
        except TerminalIOError as e:
            logger.error("terminal failure: %s", e, exc_info=True)
            err_console.print(f"[bold red]Terminal error:[/] {escape(str(e))}")
            raise typer.Exit(1)

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        log_file: Annotated[Optional[Path], typer.Option("--log-file", help="Write debug/info logs to this file")] = None,
        log_level: Annotated[LogLevel, typer.Option("--log-level", help="Minimum level written to the log file")] = LogLevel.INFO,
        version: Annotated[bool, typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit")] = False,
    ) -> None:
        """Browse a checklist in a full-screen terminal view.

        Keys: [bold]↑/↓[/] move, [bold]←[/] deselect, [bold]End[/] projects panel,
        [bold]Home[/] text box, [bold]Esc[/] quit.
        """
        setup_logging(log_file, log_level.value)
        if ctx.invoked_subcommand is None:
            launch()

    @app.command()
    def run() -> None:
        """Launch the interactive checklist (the default)."""
        launch()

    @app.command(name="list")
    def list_entries() -> None:
        """Print the checklist without taking over the terminal."""
        from checklist_tui.core.model import ChecklistModel

        model = ChecklistModel.with_seed()
        for index, entry in enumerate(model):
            lines = entry.display_text().split('\n')
            console.print(f"[dim]{index:>2}[/] {escape(lines[0])}")
            for line in lines[1:]:
                console.print(f"       {escape(line)}")

    @app.command()
    def keys() -> None:
        """Show the key bindings."""
        from checklist_tui.cli.core.shortcuts import ShortcutRegistry

        for line in ShortcutRegistry().help_lines():
            console.print(escape(line))

    return app
