"""CLI command modules for event-logger.

Each module holds plain command functions; ``register_commands`` attaches
them to the top-level typer app.
"""

import typer

from .config_cmd import config
from .doctor import doctor
from .events import clear, delete, list_events, log, search, stats


def register_commands(app: typer.Typer) -> None:
    """Attach every command to *app*."""
    app.command()(log)
    app.command("list")(list_events)
    app.command()(stats)
    app.command()(search)
    app.command()(delete)
    app.command()(clear)
    app.command()(config)
    app.command()(doctor)


__all__ = ["register_commands"]
