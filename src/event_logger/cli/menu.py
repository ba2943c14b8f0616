"""Interactive numbered-menu loop.

All screens receive an explicit MenuContext; nothing is kept in module
globals. The loop ends on choice 0 or end of input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from rich.console import Console
from rich.panel import Panel

from event_logger.cli.helpers import (
    EMPTY_STATISTICS,
    print_events,
    print_header,
    print_statistics,
    read_or_default,
)
from event_logger.service import EventService, InvalidDateError

PRESS_ENTER_MSG = "(Press Enter to return)"


class EndOfInput(Exception):
    """Raised when the input stream is exhausted."""


@dataclass
class MenuContext:
    """Collaborators shared by every menu screen."""

    service: EventService
    console: Console

    def ask(self, screen: str) -> str:
        try:
            return self.console.input(f"\n[dim]\\[terminal][/dim] {screen}/> ").strip()
        except EOFError:
            raise EndOfInput() from None

    def wait_for_enter(self) -> None:
        self.console.print(f"\n[dim]{PRESS_ENTER_MSG}[/dim]")
        self.ask("continue")


def show_log_new_event(menu: MenuContext) -> None:
    print_header("LOG NEW EVENT", menu.console)
    menu.console.print("Enter an event description (or leave empty to cancel)")
    text = menu.ask("log-new-event")

    if not text:
        menu.console.print("No event description provided. Cancelled.")
    elif menu.service.log_new_event(text):
        menu.console.print("[green]Event logged successfully![/green]")
    else:
        menu.console.print("[red]Failed to log event. Please try again.[/red]")


def show_logged_events(menu: MenuContext) -> None:
    print_header("VIEW LOGGED EVENTS", menu.console)
    events = read_or_default(menu.service.get_all_events, [], menu.console)

    if not events:
        menu.console.print("No events logged yet.")
        return

    menu.console.print(f"Total events: {len(events)}\n")
    print_events(events, menu.console)
    menu.wait_for_enter()


def show_statistics(menu: MenuContext) -> None:
    print_header("STATISTICS", menu.console)
    snapshot = read_or_default(menu.service.get_statistics, EMPTY_STATISTICS, menu.console)
    print_statistics(snapshot, menu.console)
    menu.wait_for_enter()


def show_search_by_date(menu: MenuContext) -> None:
    print_header("SEARCH EVENTS BY DATE", menu.console)
    menu.console.print("Enter a date to search for events (format: dd-MM-yyyy)")
    date_text = menu.ask("search-events-by-date")

    if not date_text:
        menu.console.print("No date provided. Cancelled.")
        return

    try:
        matches = read_or_default(
            lambda: menu.service.search_events_by_date(date_text), [], menu.console
        )
    except InvalidDateError:
        menu.console.print("[red]Invalid date format. Please use dd-MM-yyyy.[/red]")
        return

    menu.console.print(f"\nSearch results for {date_text}:", markup=False)
    if matches:
        menu.console.print(f"Found {len(matches)} event(s):\n")
        print_events(matches, menu.console)
    else:
        menu.console.print("No events found for this date.")
    menu.wait_for_enter()


def show_delete_event(menu: MenuContext) -> None:
    print_header("DELETE EVENT", menu.console)
    events = read_or_default(menu.service.get_all_events, [], menu.console)
    if not events:
        menu.console.print("No events logged yet.")
        return

    print_events(events, menu.console)
    menu.console.print("\nEnter the number of the event to delete (or leave empty to cancel)")
    text = menu.ask("delete-event")
    if not text:
        menu.console.print("Cancelled.")
        return

    try:
        number = int(text)
    except ValueError:
        menu.console.print("[red]Invalid input. Please enter a number.[/red]")
        return

    if menu.service.delete_event(number):
        menu.console.print(f"[green]Event {number} deleted.[/green]")
    else:
        menu.console.print(f"[red]No event number {number}.[/red]")


def show_delete_all(menu: MenuContext) -> None:
    print_header("DELETE ALL EVENTS", menu.console)
    answer = menu.ask("delete-all (y/N)")
    if answer.lower() not in ("y", "yes"):
        menu.console.print("Cancelled.")
        return

    if menu.service.delete_all_events():
        menu.console.print("[green]All events deleted.[/green]")
    else:
        menu.console.print("[red]Failed to delete events.[/red]")


MENU_ITEMS: dict[int, tuple[str, Callable[[MenuContext], None]]] = {
    1: ("Log a new event", show_log_new_event),
    2: ("View logged events", show_logged_events),
    3: ("Show statistics", show_statistics),
    4: ("Search events by date", show_search_by_date),
    5: ("Delete an event", show_delete_event),
    6: ("Delete all events", show_delete_all),
}


def show_main_menu(menu: MenuContext) -> bool:
    """Render the main menu and dispatch one choice.

    Returns:
        True to keep running, False to exit.
    """
    print_header("MAIN MENU", menu.console)
    menu.console.print("\\[KEY] ACTION")
    for key, (label, _) in MENU_ITEMS.items():
        menu.console.print(f"\\[ {key} ] {label}")
    menu.console.print("\\[ 0 ] Exit")

    choice_text = menu.ask("main-menu")
    menu.console.print()

    try:
        choice = int(choice_text)
    except ValueError:
        menu.console.print("[red]Invalid input. Please enter a number.[/red]\n")
        return True

    if choice == 0:
        return False

    item = MENU_ITEMS.get(choice)
    if item is None:
        menu.console.print(f"[red]Invalid choice. Please enter a number from 0 to {len(MENU_ITEMS)}.[/red]\n")
        return True

    item[1](menu)
    menu.console.print()
    return True


def run_menu(menu: MenuContext) -> None:
    """Run the interactive loop until the user exits or input ends."""
    menu.console.print(
        Panel.fit("[bold]Event Logger[/bold]\nTerminal Edition", border_style="cyan")
    )
    try:
        while show_main_menu(menu):
            pass
    except EndOfInput:
        menu.console.print()
    menu.console.print("Exiting Event Logger. Goodbye!")
