import calendar
import logging
import threading
import time
from contextlib import contextmanager
from datetime import date

from wallcal_calendar.grid import YearMonth
from wallcal_calendar.labels import day_heading, month_title, weekday_names


def test_month_title():
    assert month_title(YearMonth(2025, 11)) == "NOVEMBER 2025"
    assert month_title(YearMonth(2026, 1)) == "JANUARY 2026"


def test_day_heading():
    assert day_heading(date(2025, 11, 7)) == ("FRIDAY", "7 NOV 25")
    assert day_heading(date(2009, 3, 23)) == ("MONDAY", "23 MAR 09")


def test_weekday_names_monday_first():
    assert weekday_names() == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    assert weekday_names(abbreviated=False)[0] == "Monday"
    assert weekday_names(abbreviated=False)[-1] == "Sunday"


def test_unknown_locale_falls_back_with_warning(caplog):
    with caplog.at_level(logging.WARNING):
        title = month_title(YearMonth(2025, 11), "xx_NOWHERE.UTF-8")
    assert title == "NOVEMBER 2025"
    assert "xx_NOWHERE.UTF-8" in caplog.text


def test_locale_switches_never_overlap(monkeypatch):
    active = []
    depth = []

    @contextmanager
    def recording_locale(name):
        active.append(name)
        depth.append(len(active))
        time.sleep(0.01)
        try:
            yield
        finally:
            active.pop()

    monkeypatch.setattr(calendar, "different_locale", recording_locale)
    workers = [
        threading.Thread(target=month_title, args=(YearMonth(2025, 11), "de_DE.UTF-8"))
        for _ in range(6)
    ]
    for w in workers:
        w.start()
    for w in workers:
        w.join()

    assert len(depth) == 6
    assert max(depth) == 1
