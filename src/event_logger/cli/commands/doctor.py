"""``event-logger doctor``: check that the log file is usable."""

from __future__ import annotations

import typer

from event_logger.bootstrap import file_exists, is_readable, is_writable
from event_logger.cli.helpers import console, get_state


def doctor(ctx: typer.Context) -> None:
    """Report whether the event log exists and is readable and writable."""
    path = get_state(ctx).settings.file_path
    checks = [
        ("exists", file_exists(path)),
        ("readable", is_readable(path)),
        ("writable", is_writable(path)),
    ]

    console.print(f"Event log: {path}", markup=False)
    for label, ok in checks:
        mark = "[green]✓[/green]" if ok else "[red]✗[/red]"
        console.print(f"  {mark} {label}")

    if not all(ok for _, ok in checks):
        raise typer.Exit(code=1)
