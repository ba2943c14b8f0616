"""Shared console, state and rendering helpers for CLI commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, TypeVar

import typer
from rich.console import Console
from rich.logging import RichHandler

from event_logger.bootstrap import BootstrapError, ensure_log_file
from event_logger.config import Settings
from event_logger.models import Event, EventStatistics
from event_logger.service import EventService
from event_logger.store import EventStore, StoreError

console = Console()

T = TypeVar("T")

HEADER_RULE_CHAR = "—"

EMPTY_STATISTICS = EventStatistics(total_count=0, today_count=0, first_event=None, last_event=None)


@dataclass
class AppState:
    """Per-invocation state stored on ``typer.Context.obj``."""

    settings: Settings
    verbose: bool = False

    def open_service(self) -> EventService:
        """Bootstrap the log file and return a service bound to it.

        Exits with code 1 if the file cannot be created.
        """
        try:
            path = ensure_log_file(self.settings.directory, self.settings.file_name)
        except BootstrapError as e:
            console.print(f"[red]Initialization error:[/red] {e}")
            raise typer.Exit(code=1) from None
        return EventService(EventStore(path))


def get_state(ctx: typer.Context) -> AppState:
    state = ctx.find_object(AppState)
    if state is None:
        raise RuntimeError("CLI state not initialised; invoke through the main app")
    return state


def configure_logging(verbose: bool) -> None:
    """Route ``event_logger`` log records to stderr via Rich."""
    pkg_logger = logging.getLogger("event_logger")
    for handler in list(pkg_logger.handlers):
        if isinstance(handler, RichHandler):
            pkg_logger.removeHandler(handler)
    pkg_logger.addHandler(
        RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
    )
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def read_or_default(read: Callable[[], T], default: T, out: Console = console) -> T:
    """Run a store query, degrading an unreadable log to *default* with a warning on *out*."""
    try:
        return read()
    except StoreError as e:
        out.print(f"[yellow]Warning:[/yellow] {e}")
        return default


def print_header(title: str, out: Console = console) -> None:
    out.print(f"[bold]{title}[/bold]")
    out.print(HEADER_RULE_CHAR * len(title))


def print_events(events: list[Event], out: Console = console) -> None:
    """Print *events* numbered from 1, the numbering ``delete`` accepts."""
    for number, event in enumerate(events, start=1):
        out.print(f"{number}) {event}", markup=False, highlight=False, soft_wrap=True)


def print_statistics(stats: EventStatistics, out: Console = console) -> None:
    out.print(f"Total events logged: {stats.total_count}")
    out.print(f"Events today: {stats.today_count}")
    first = str(stats.first_event) if stats.first_event else "N/A"
    last = str(stats.last_event) if stats.last_event else "N/A"
    out.print(f"First event: {first}", markup=False, highlight=False, soft_wrap=True)
    out.print(f"Last event: {last}", markup=False, highlight=False, soft_wrap=True)
