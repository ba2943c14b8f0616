"""Shared fixtures for event logger tests."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest
from typer.testing import CliRunner

from event_logger.config import FILE_ENV_VAR, HOME_ENV_VAR
from event_logger.service import EventService
from event_logger.store import EventStore


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep config lookups and relative paths inside tmp_path."""
    home = tmp_path / "home"
    monkeypatch.setenv(HOME_ENV_VAR, str(home))
    monkeypatch.delenv(FILE_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    return home


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    return tmp_path / "results" / "events.txt"


@pytest.fixture
def store(log_path: Path) -> EventStore:
    return EventStore(log_path)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 10, 19, 9, 15, 30)


@pytest.fixture
def service(store: EventStore, fixed_now: datetime) -> EventService:
    return EventService(store, clock=lambda: fixed_now)


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI runner."""
    return CliRunner()
