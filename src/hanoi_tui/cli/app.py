"""Typer CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from hanoi_tui.cli.core.shortcuts import controls_lines
from hanoi_tui.config import GameConfig
from hanoi_tui.core.constants import DEFAULT_DISKS

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(log_file: Optional[Path]) -> None:
    """Send debug logs to ``log_file``; the game screen owns stdout/stderr."""
    if log_file is None:
        return
    logging.basicConfig(filename=str(log_file), level=logging.DEBUG, format=LOG_FORMAT)


def _color_supported(console: Console) -> bool:
    return console.color_system is not None and not console.no_color


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="hanoi",
        help="Play the Tower of Hanoi in your terminal.",
        add_completion=False,
        context_settings=CONTEXT_SETTINGS,
        rich_markup_mode="rich",
    )
    console = Console()

    # Blank-line separated so rich help keeps one control per line
    @app.command(
        context_settings=CONTEXT_SETTINGS,
        epilog="\n\n".join(controls_lines()),
    )
    def play(
        disks: Annotated[int, typer.Option(
            "--disks", "-d",
            min=1,
            envvar="HANOI_DISKS",
            help="Number of disks to play with.",
        )] = DEFAULT_DISKS,
        no_color: Annotated[bool, typer.Option(
            "--no-color", "-nc",
            envvar="HANOI_NO_COLOR",
            help="Disable colour; disk parity is shown with E/O glyphs instead.",
        )] = False,
        log_file: Annotated[Optional[Path], typer.Option(
            "--log-file",
            dir_okay=False,
            help="Write debug logs to this file.",
        )] = None,
    ) -> None:
        """Move every disk from the left pole to the right pole."""
        from hanoi_tui.cli import player

        config = GameConfig(
            disks=disks,
            use_color=not no_color and _color_supported(console),
            log_file=log_file,
        )
        _configure_logging(config.log_file)

        state = player.run_game(config)

        message = state.result_message()
        if message:
            style = "bold green" if state.perfect else "bold"
            console.print(message, style=style, highlight=False)

    return app
