"""
Event Logger - a personal, file-backed event log for the terminal.

Usage:
    event-logger                      # interactive menu
    event-logger log "Fed the cat"
    event-logger list
    event-logger search 19-10-2026
    event-logger stats
"""

from typing import Optional

import typer

from event_logger.cli.commands import register_commands
from event_logger.cli.helpers import AppState, configure_logging, console, get_state
from event_logger.cli.menu import MenuContext, run_menu
from event_logger.config import load_settings

__version__ = "1.0.0"

app = typer.Typer(
    name="event-logger",
    help="Log timestamped events to a text file and query them later.",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def callback(
    ctx: typer.Context,
    file: Optional[str] = typer.Option(
        None,
        "--file",
        "-f",
        help="Event log file (default: EVENT_LOGGER_FILE, config.toml, or results/events.txt)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
):
    """Start the interactive menu when no subcommand is provided."""
    if version:
        console.print(f"event-logger {__version__}")
        raise typer.Exit()

    configure_logging(verbose)
    state = AppState(settings=load_settings(file), verbose=verbose)
    ctx.obj = state

    if ctx.invoked_subcommand is None:
        run_menu(MenuContext(service=state.open_service(), console=console))


@app.command()
def menu(ctx: typer.Context):
    """Run the interactive numbered menu."""
    state = get_state(ctx)
    run_menu(MenuContext(service=state.open_service(), console=console))


register_commands(app)


def main():
    app()


if __name__ == "__main__":
    main()
