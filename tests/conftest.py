"""Shared test fixtures."""

import logging
from datetime import datetime
from pathlib import Path

import pytest

from hrtracker.config.paths import ENV_VAR, get_tracker_home
from hrtracker.logging import LOG_LEVEL_ENV_VAR, JSONLHandler
from hrtracker.schedules import ScheduleStore


@pytest.fixture(autouse=True)
def tracker_home(monkeypatch, tmp_path: Path) -> Path:
    """Point HRTRACKER_HOME at a temporary directory for every test."""
    home = tmp_path / "home"
    monkeypatch.setenv(ENV_VAR, str(home))
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    get_tracker_home.cache_clear()
    yield home
    get_tracker_home.cache_clear()


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by configure_logging() during a test."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler or isinstance(
            handler, JSONLHandler
        ):
            root.removeHandler(handler)
            handler.close()


@pytest.fixture
def now() -> datetime:
    """A fixed reference instant with a non-zero time of day."""
    return datetime(2026, 1, 12, 14, 30, 15, 123456)


@pytest.fixture
def schedule_file(tmp_path: Path) -> Path:
    return tmp_path / "data" / "schedules.jsonl"


@pytest.fixture
def store(schedule_file: Path) -> ScheduleStore:
    return ScheduleStore(schedule_file)


@pytest.fixture
def cli_runner():
    """Create a Typer CLI test runner with colors disabled."""
    from typer.testing import CliRunner

    return CliRunner(env={"NO_COLOR": "1"})
