"""Event log value types.

Defines the Event record, its one-line text encoding, the MalformedLine
decode failure and the EventStatistics snapshot.

Line format::

    dd-MM-yyyy HH:mm:ss — <description>
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any

TIMESTAMP_FORMAT = "%d-%m-%Y %H:%M:%S"
DATE_FORMAT = "%d-%m-%Y"
SEPARATOR = " — "

# strptime accepts unpadded fields, the line format does not.
_TIMESTAMP_PATTERN = re.compile(r"^\d{2}-\d{2}-\d{4} \d{2}:\d{2}:\d{2}$")
_DATE_PATTERN = re.compile(r"^\d{2}-\d{2}-\d{4}$")


def has_line_break(text: str) -> bool:
    """Return True if *text* would span more than one stored line."""
    return "\n" in text or "\r" in text


def parse_timestamp(text: str) -> datetime | None:
    """Parse a ``dd-MM-yyyy HH:mm:ss`` timestamp, or return None."""
    if not _TIMESTAMP_PATTERN.match(text):
        return None
    try:
        return datetime.strptime(text, TIMESTAMP_FORMAT)
    except ValueError:
        return None


def parse_date(text: str) -> datetime | None:
    """Parse a ``dd-MM-yyyy`` date (midnight), or return None."""
    if not _DATE_PATTERN.match(text):
        return None
    try:
        return datetime.strptime(text, DATE_FORMAT)
    except ValueError:
        return None


@dataclass(frozen=True)
class MalformedLine:
    """A stored line that could not be decoded into an Event."""

    line: str
    reason: str


@dataclass(frozen=True)
class Event:
    """One logged occurrence: a second-precision timestamp and a description."""

    timestamp: datetime
    description: str

    @classmethod
    def create(cls, description: str, now: datetime | None = None) -> Event:
        """Build an event stamped with the current time.

        The description is trimmed and the timestamp truncated to whole
        seconds so that the event survives an encode/decode cycle.
        """
        moment = now if now is not None else datetime.now()
        return cls(
            timestamp=moment.replace(microsecond=0),
            description=description.strip(),
        )

    def to_line(self) -> str:
        """Encode the event as a single storage line (no terminator)."""
        return self.timestamp.strftime(TIMESTAMP_FORMAT) + SEPARATOR + self.description

    @classmethod
    def from_line(cls, line: str) -> Event | None:
        result = decode_line(line)
        return result if isinstance(result, Event) else None

    def __str__(self) -> str:
        return self.to_line()


def decode_line(line: str) -> Event | MalformedLine:
    """Decode a storage line.

    Returns the Event on success, otherwise a MalformedLine carrying the
    reason. Never raises.
    """
    if not line or not line.strip():
        return MalformedLine(line=line, reason="blank")

    head, sep, tail = line.partition(SEPARATOR)
    if not sep:
        return MalformedLine(line=line, reason="missing separator")

    timestamp = parse_timestamp(head.strip())
    if timestamp is None:
        return MalformedLine(line=line, reason="bad timestamp")

    return Event(timestamp=timestamp, description=tail.strip())


@dataclass(frozen=True)
class EventStatistics:
    """Point-in-time summary of the event log."""

    total_count: int
    today_count: int
    first_event: Event | None
    last_event: Event | None

    @property
    def has_events(self) -> bool:
        return self.total_count > 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_count": self.total_count,
            "today_count": self.today_count,
            "first_event": self.first_event.to_line() if self.first_event else None,
            "last_event": self.last_event.to_line() if self.last_event else None,
        }
