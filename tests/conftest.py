"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import date, datetime
from pathlib import Path

import pytest

# Project root holds the top-level packages
sys.path.insert(0, str(Path(__file__).parent.parent))

from utils.config import CONFIG  # noqa: E402
from wallcal_calendar.calendar import EventStore  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_delivery(monkeypatch, tmp_path):
    """Keep reminder delivery out of the working tree and off stdout."""
    monkeypatch.setitem(CONFIG["delivery"], "outbox_path", str(tmp_path / "outbox" / "notifications.jsonl"))
    monkeypatch.setitem(CONFIG["delivery"], "console_echo", False)
    monkeypatch.setitem(CONFIG["calendar"], "locale", None)
    monkeypatch.setitem(CONFIG["notifications"], "interval_seconds", 30)


@pytest.fixture
def store():
    """Fresh, empty event store."""
    return EventStore()


@pytest.fixture
def day():
    """A Friday."""
    return date(2025, 11, 7)


@pytest.fixture
def sink():
    """Collecting sink: a list that scheduler can call."""
    class _Collector(list):
        def __call__(self, notification):
            self.append(notification)
    return _Collector()


@pytest.fixture
def at():
    """Build a naive wall-clock datetime on the fixture day."""
    def _at(hour, minute, second=0, on=date(2025, 11, 7)):
        return datetime(on.year, on.month, on.day, hour, minute, second)
    return _at
