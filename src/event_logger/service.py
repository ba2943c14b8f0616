"""Event service: input validation and statistics on top of EventStore."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from event_logger.models import Event, EventStatistics, has_line_break, parse_date
from event_logger.store import EventStore

logger = logging.getLogger(__name__)


class InvalidDateError(ValueError):
    """Raised when a search date is empty or not in ``dd-MM-yyyy`` form."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid date {text!r}: expected dd-MM-yyyy")


class EventService:
    """Use-case layer consumed by the CLI.

    Args:
        store: Repository backing the log.
        clock: Returns the current local time. Used for new event
            timestamps and for the "today" statistic.
    """

    def __init__(
        self,
        store: EventStore,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._store = store
        self._clock = clock

    @property
    def store(self) -> EventStore:
        return self._store

    def log_new_event(self, description: str | None) -> bool:
        """Record a new event stamped with the current time.

        Returns:
            False without touching the store when the trimmed description
            is empty or contains a line break, otherwise the result of the
            append.
        """
        if description is None or not description.strip():
            logger.debug("Rejected empty event description")
            return False
        if has_line_break(description):
            logger.debug("Rejected multi-line event description")
            return False
        event = Event.create(description, now=self._clock())
        return self._store.append(event)

    def get_all_events(self) -> list[Event]:
        return self._store.scan_all()

    def search_events_by_date(self, date_text: str) -> list[Event]:
        """Return events logged on the given ``dd-MM-yyyy`` date.

        An empty list means the date was valid but nothing matched.

        Raises:
            InvalidDateError: If *date_text* is empty or malformed,
                including calendar nonsense such as ``31-02-2024``.
        """
        parsed = parse_date((date_text or "").strip())
        if parsed is None:
            raise InvalidDateError(date_text)
        return self._store.scan_by_date(parsed.date())

    def get_statistics(self) -> EventStatistics:
        """Compose a statistics snapshot from four independent store queries."""
        return EventStatistics(
            total_count=self._store.count(),
            today_count=len(self._store.scan_today(self._clock().date())),
            first_event=self._store.first(),
            last_event=self._store.last(),
        )

    def delete_event(self, event_number: int) -> bool:
        """Delete the event shown to the user as number *event_number* (1-based)."""
        if event_number < 1:
            return False
        return self._store.delete_at(event_number - 1)

    def delete_all_events(self) -> bool:
        return self._store.delete_all()

    def has_events(self) -> bool:
        return self._store.has_events()
