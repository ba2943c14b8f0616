"""EventStore: line-oriented file repository for events.

Every query re-reads the file; the store keeps no state besides the
path. Supports:

- Append of one encoded line per event
- Full and date-filtered scans in file (append) order
- Malformed line tolerance (undecodable lines skipped with a warning)
- Positional delete via full rewrite (temp file + rename)
- Bulk clear (truncate)

The file is assumed to be owned by a single running process. Concurrent
writers from other processes can lose updates.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from datetime import date
from pathlib import Path

from event_logger.models import Event, MalformedLine, decode_line

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the event file exists but cannot be read."""


class EventStore:
    """File-backed repository of events.

    Args:
        file_path: Path to the event log. A missing file reads as an
            empty log; parent directories are created on first append.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    def append(self, event: Event) -> bool:
        """Append *event* as one line.

        Returns:
            True on success, False on any I/O failure.
        """
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._file_path, "a", encoding="utf-8") as f:
                f.write(event.to_line() + "\n")
                f.flush()
        except OSError as e:
            logger.error("Error writing to %s: %s", self._file_path, e)
            return False
        return True

    def scan_all(self) -> list[Event]:
        """Read every decodable event in file order.

        Blank lines are ignored. Malformed lines are skipped with a
        warning log.

        Returns:
            Events in append order; empty when the file does not exist.

        Raises:
            StoreError: If the file exists but cannot be read.
        """
        if not self._file_path.exists():
            return []

        events: list[Event] = []
        skipped = 0

        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                for line_number, raw_line in enumerate(f, start=1):
                    line = raw_line.rstrip("\r\n")
                    if not line.strip():
                        continue
                    result = decode_line(line)
                    if isinstance(result, MalformedLine):
                        skipped += 1
                        logger.warning(
                            "Skipping malformed event line %d (%s): %s",
                            line_number,
                            result.reason,
                            line[:100],
                        )
                        continue
                    events.append(result)
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as e:
            raise StoreError(f"Error reading {self._file_path}: {e}") from e

        if skipped:
            logger.warning("Skipped %d malformed line(s) in %s", skipped, self._file_path)

        return events

    def scan_by_date(self, day: date) -> list[Event]:
        """Return events whose calendar date equals *day*."""
        return [e for e in self.scan_all() if e.timestamp.date() == day]

    def scan_today(self, today: date | None = None) -> list[Event]:
        return self.scan_by_date(today if today is not None else date.today())

    def first(self) -> Event | None:
        events = self.scan_all()
        return events[0] if events else None

    def last(self) -> Event | None:
        events = self.scan_all()
        return events[-1] if events else None

    def count(self) -> int:
        return len(self.scan_all())

    def has_events(self) -> bool:
        return self.count() > 0

    def delete_at(self, index: int) -> bool:
        """Remove the event at 0-based *index* of :meth:`scan_all`.

        Surviving events are rewritten in their original order using
        their canonical encoding. Previously malformed lines are dropped.
        The rewrite goes to a temporary file in the same directory which
        then replaces the log, so a crash leaves either the old or the
        new content.

        Returns:
            True if the event was removed; False if *index* is out of
            range or the file could not be read or written (in which
            case the file is unchanged).
        """
        try:
            events = self.scan_all()
        except StoreError as e:
            logger.error("Cannot delete event %d: %s", index, e)
            return False

        if index < 0 or index >= len(events):
            logger.debug("Delete index %d out of range [0, %d)", index, len(events))
            return False

        remaining = events[:index] + events[index + 1:]
        try:
            self._rewrite(remaining)
        except OSError as e:
            logger.error("Error rewriting %s: %s", self._file_path, e)
            return False
        return True

    def delete_all(self) -> bool:
        """Truncate the log to zero length, leaving the file in place.

        Returns:
            True on success, False if the file could not be truncated.
        """
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._file_path, "w", encoding="utf-8"):
                pass
        except OSError as e:
            logger.error("Error truncating %s: %s", self._file_path, e)
            return False
        return True

    def _rewrite(self, events: list[Event]) -> None:
        """Atomically replace the file contents with *events*."""
        directory = self._file_path.parent
        directory.mkdir(parents=True, exist_ok=True)

        # Temp file in the same directory keeps os.replace on one filesystem
        fd, tmp_path = tempfile.mkstemp(
            dir=directory,
            prefix=f".{self._file_path.name}.",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                for event in events:
                    f.write(event.to_line() + "\n")
                f.flush()
                os.fsync(f.fileno())
            if self._file_path.exists():
                os.chmod(tmp_path, stat.S_IMODE(self._file_path.stat().st_mode))
            os.replace(tmp_path, self._file_path)
        except Exception:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
