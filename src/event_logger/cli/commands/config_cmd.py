"""Top-level ``event-logger config`` command.

Shows where the event log lives and which layer of the resolution
chain supplied it; optionally persists a new location to config.toml.
"""

from __future__ import annotations

from typing import Optional

import toml  # type: ignore[import-untyped]
import typer
from rich.table import Table

from event_logger.cli.helpers import console, get_state
from event_logger.config import ConfigFile


def config(
    ctx: typer.Context,
    set_directory: Optional[str] = typer.Option(
        None,
        "--set-directory",
        help="Persist the log directory in config.toml",
    ),
    set_file_name: Optional[str] = typer.Option(
        None,
        "--set-file-name",
        help="Persist the log file name in config.toml",
    ),
) -> None:
    """Display (or update) the event log location."""
    config_file = ConfigFile()

    updates: dict[str, str] = {}
    if set_directory:
        updates["directory"] = set_directory
    if set_file_name:
        updates["file_name"] = set_file_name

    if updates:
        try:
            config_file.set_storage(**updates)
        except (OSError, toml.TomlDecodeError) as e:
            console.print(f"[red]Error:[/red] Could not write {config_file.config_file}: {e}")
            raise typer.Exit(1)
        console.print(f"[green]✓[/green] Saved to {config_file.config_file}")
        return

    settings = get_state(ctx).settings

    table = Table(title="Event Logger Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="bold")
    table.add_row("Directory", str(settings.directory))
    table.add_row("File name", settings.file_name)
    table.add_row("Log file", str(settings.file_path))
    table.add_row("Origin", _format_origin(settings.origin))
    table.add_row("Config file", str(config_file.config_file))

    console.print(table)


def _format_origin(origin: str) -> str:
    """Format an origin label for display with color coding."""
    colors = {
        "option": "green",
        "env": "yellow",
        "config": "blue",
        "default": "dim",
    }
    color = colors.get(origin, "white")
    return f"[{color}]{origin}[/{color}]"
