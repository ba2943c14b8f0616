"""Event log commands: log, list, stats, search, delete, clear."""

from __future__ import annotations

import json

import typer

from event_logger.cli.helpers import (
    EMPTY_STATISTICS,
    console,
    get_state,
    print_events,
    print_header,
    print_statistics,
    read_or_default,
)
from event_logger.models import has_line_break
from event_logger.service import InvalidDateError
from event_logger.store import StoreError


def log(
    ctx: typer.Context,
    description: list[str] = typer.Argument(..., help="Event description (words are joined with spaces)"),
) -> None:
    """Log a new event stamped with the current time."""
    service = get_state(ctx).open_service()
    text = " ".join(description)

    if not text.strip():
        console.print("[red]Error:[/red] Event description must not be empty.")
        raise typer.Exit(code=1)

    if has_line_break(text):
        console.print("[red]Error:[/red] Event description must be a single line.")
        raise typer.Exit(code=1)

    if not service.log_new_event(text):
        console.print("[red]Error:[/red] Failed to log event.")
        raise typer.Exit(code=1)

    console.print("[green]✓[/green] Event logged successfully!")


def list_events(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show all logged events, numbered from 1."""
    service = get_state(ctx).open_service()
    events = read_or_default(service.get_all_events, [])

    if json_output:
        print(json.dumps([e.to_line() for e in events], indent=2, ensure_ascii=False))
        return

    print_header("LOGGED EVENTS")
    if not events:
        console.print("No events logged yet.")
        return

    console.print(f"Total events: {len(events)}")
    console.print()
    print_events(events)


def stats(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show total and today's event counts plus the first and last event."""
    service = get_state(ctx).open_service()
    snapshot = read_or_default(service.get_statistics, EMPTY_STATISTICS)

    if json_output:
        print(json.dumps(snapshot.to_dict(), indent=2, ensure_ascii=False))
        return

    print_header("STATISTICS")
    print_statistics(snapshot)


def search(
    ctx: typer.Context,
    date_text: str = typer.Argument(..., metavar="DATE", help="Date in dd-MM-yyyy format"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show events logged on a given date."""
    service = get_state(ctx).open_service()

    try:
        matches = read_or_default(lambda: service.search_events_by_date(date_text), [])
    except InvalidDateError:
        console.print("[red]Error:[/red] Invalid date format. Please use dd-MM-yyyy.")
        raise typer.Exit(code=1) from None

    if json_output:
        print(json.dumps([e.to_line() for e in matches], indent=2, ensure_ascii=False))
        return

    console.print(f"Search results for {date_text}:", markup=False)
    if not matches:
        console.print("No events found for this date.")
        return

    console.print(f"Found {len(matches)} event(s):")
    console.print()
    print_events(matches)


def delete(
    ctx: typer.Context,
    number: int = typer.Argument(..., help="Event number as shown by 'list' (starting at 1)"),
) -> None:
    """Delete one event by its list number."""
    service = get_state(ctx).open_service()

    try:
        service.get_all_events()
    except StoreError as e:
        console.print(f"[red]Error:[/red] Cannot read event log: {e}")
        raise typer.Exit(code=1) from None

    if not service.delete_event(number):
        console.print(f"[red]Error:[/red] No event number {number}.")
        raise typer.Exit(code=1)

    console.print(f"[green]✓[/green] Event {number} deleted.")


def clear(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Delete every logged event."""
    service = get_state(ctx).open_service()

    if not yes and not typer.confirm("Delete ALL events?", default=False):
        console.print("Cancelled.")
        raise typer.Exit(code=0)

    if not service.delete_all_events():
        console.print("[red]Error:[/red] Failed to delete events.")
        raise typer.Exit(code=1)

    console.print("[green]✓[/green] All events deleted.")
