"""Tests for EventService validation, index translation and statistics."""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path

import pytest

from event_logger.models import Event, EventStatistics
from event_logger.service import EventService, InvalidDateError
from event_logger.store import EventStore, StoreError
from tests.event_logger.factories import make_event, ticking_clock


def _descriptions(events: list[Event]) -> list[str]:
    return [e.description for e in events]


# --- log_new_event ---


def test_log_new_event_appends_trimmed_event(service: EventService, fixed_now: datetime) -> None:
    assert service.log_new_event("  Fed the cat  ") is True
    assert service.get_all_events() == [Event(fixed_now, "Fed the cat")]


@pytest.mark.parametrize("description", ["", "   ", "\t\n", None])
def test_log_new_event_rejects_empty(
    service: EventService, store: EventStore, description: str | None
) -> None:
    assert service.log_new_event(description) is False
    assert not store.file_path.exists()


@pytest.mark.parametrize("description", ["line one\nline two", "a\rb", "a\r\nb"])
def test_log_new_event_rejects_line_breaks(
    service: EventService, store: EventStore, description: str
) -> None:
    assert service.log_new_event(description) is False
    assert not store.file_path.exists()


def test_line_break_rejection_keeps_existing_log_intact(
    service: EventService, store: EventStore
) -> None:
    service.log_new_event("first")
    before = store.file_path.read_bytes()

    assert service.log_new_event("19-10-2026 09:00:00 — forged\nsecond") is False

    assert store.file_path.read_bytes() == before
    assert _descriptions(service.get_all_events()) == ["first"]


def test_log_new_event_reports_store_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    service = EventService(EventStore(blocker / "events.txt"))
    assert service.log_new_event("anything") is False


# --- search_events_by_date ---


def test_search_returns_matches(store: EventStore) -> None:
    service = EventService(store, clock=ticking_clock(datetime(2026, 10, 19, 23, 59, 58)))
    service.log_new_event("late on the 19th")
    service.log_new_event("still the 19th")
    service.log_new_event("the 20th")

    assert _descriptions(service.search_events_by_date("19-10-2026")) == [
        "late on the 19th",
        "still the 19th",
    ]
    assert _descriptions(service.search_events_by_date(" 20-10-2026 ")) == ["the 20th"]


def test_search_valid_date_without_matches_is_empty_list(service: EventService) -> None:
    service.log_new_event("something")
    result = service.search_events_by_date("01-01-2000")
    assert result == []


@pytest.mark.parametrize(
    "text",
    ["31-02-2024", "2024-02-01", "1-2-2024", "", "   ", "yesterday", "19/10/2026"],
)
def test_search_invalid_date_raises(service: EventService, text: str) -> None:
    with pytest.raises(InvalidDateError) as exc_info:
        service.search_events_by_date(text)
    assert exc_info.value.text == text
    assert "dd-MM-yyyy" in str(exc_info.value)


def test_invalid_date_is_distinguishable_from_no_matches(service: EventService) -> None:
    assert service.search_events_by_date("01-01-2000") == []
    with pytest.raises(InvalidDateError):
        service.search_events_by_date("31-02-2024")


def test_invalid_date_error_is_value_error() -> None:
    assert issubclass(InvalidDateError, ValueError)


# --- statistics ---


def test_statistics_on_empty_store(service: EventService) -> None:
    assert service.get_statistics() == EventStatistics(
        total_count=0, today_count=0, first_event=None, last_event=None
    )
    assert not service.has_events()


def test_statistics_counts_today_from_clock(store: EventStore, fixed_now: datetime) -> None:
    store.append(make_event("yesterday", timestamp=datetime(2026, 10, 18, 22, 0, 0)))
    store.append(make_event("this morning", timestamp=datetime(2026, 10, 19, 7, 0, 0)))
    service = EventService(store, clock=lambda: fixed_now)
    service.log_new_event("just now")

    stats = service.get_statistics()

    assert stats.total_count == 3
    assert stats.today_count == 2
    assert stats.first_event is not None and stats.first_event.description == "yesterday"
    assert stats.last_event == Event(fixed_now, "just now")
    assert service.has_events()


# --- delete ---


def test_example_scenario_log_delete_stats(store: EventStore) -> None:
    service = EventService(store, clock=ticking_clock(datetime(2026, 10, 19, 10, 0, 0)))
    for description in ("A", "B", "C"):
        assert service.log_new_event(description)

    assert _descriptions(service.get_all_events()) == ["A", "B", "C"]

    assert service.delete_event(2) is True

    assert _descriptions(service.get_all_events()) == ["A", "C"]
    assert service.get_statistics().total_count == 2


@pytest.mark.parametrize("number", [0, -1, -100])
def test_delete_event_rejects_non_positive(service: EventService, number: int) -> None:
    service.log_new_event("keep me")
    assert service.delete_event(number) is False
    assert len(service.get_all_events()) == 1


def test_delete_event_beyond_end(service: EventService) -> None:
    service.log_new_event("only one")
    assert service.delete_event(2) is False
    assert len(service.get_all_events()) == 1


def test_delete_event_is_one_based(store: EventStore) -> None:
    service = EventService(store, clock=ticking_clock(datetime(2026, 10, 19, 10, 0, 0)))
    service.log_new_event("first")
    service.log_new_event("second")

    assert service.delete_event(1)
    assert _descriptions(service.get_all_events()) == ["second"]


def test_delete_all_events(service: EventService, store: EventStore) -> None:
    service.log_new_event("A")
    service.log_new_event("B")

    assert service.delete_all_events() is True
    assert service.get_all_events() == []
    assert store.file_path.exists()
    assert service.log_new_event("after clear")
    assert len(service.get_all_events()) == 1


# --- error propagation ---


def test_get_all_events_propagates_store_error(store: EventStore, service: EventService) -> None:
    store.file_path.parent.mkdir(parents=True)
    store.file_path.write_bytes(b"\xff\xfe\n")

    with pytest.raises(StoreError):
        service.get_all_events()


def test_store_property(service: EventService, store: EventStore) -> None:
    assert service.store is store


def test_default_clock_stamps_today(store: EventStore) -> None:
    service = EventService(store)
    service.log_new_event("now")
    assert service.get_statistics().today_count == 1
    assert service.get_all_events()[0].timestamp.date() == date.today()
