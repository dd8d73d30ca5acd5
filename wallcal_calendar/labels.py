# Display names for the month header, weekday row and day detail heading.
#
# locale_name=None uses the interpreter's default (C) names. A named locale is
# applied through calendar.different_locale; if the system does not have it
# installed we warn once per name and fall back to the default names.

from __future__ import annotations

import calendar
import locale
import logging
import threading
from datetime import date
from typing import Callable, List, Optional, TypeVar

from wallcal_calendar.grid import YearMonth

logger = logging.getLogger(__name__)

T = TypeVar("T")

_warned: set = set()
_locale_lock = threading.Lock()


def _in_locale(locale_name: Optional[str], lookup: Callable[[], T]) -> T:
    # setlocale is process-wide: one lookup at a time, default-locale ones too.
    with _locale_lock:
        if locale_name:
            try:
                with calendar.different_locale(locale_name):
                    return lookup()
            except locale.Error:
                if locale_name not in _warned:
                    _warned.add(locale_name)
                    logger.warning("Locale %s is not available, using default names", locale_name)
        return lookup()


def month_title(month: YearMonth, locale_name: Optional[str] = None) -> str:
    """e.g. 'NOVEMBER 2025'"""
    name = _in_locale(locale_name, lambda: calendar.month_name[month.month])
    return f"{name.upper()} {month.year}"


def weekday_names(locale_name: Optional[str] = None, abbreviated: bool = True) -> List[str]:
    """Monday-first header names for the 7 grid columns."""
    source = calendar.day_abbr if abbreviated else calendar.day_name
    return _in_locale(locale_name, lambda: [source[i] for i in range(7)])


def day_heading(day: date, locale_name: Optional[str] = None) -> tuple[str, str]:
    """Detail pane heading, e.g. ('FRIDAY', '7 NOV 25')."""
    weekday, month_abbr = _in_locale(
        locale_name,
        lambda: (calendar.day_name[day.weekday()], calendar.month_abbr[day.month]),
    )
    return weekday.upper(), f"{day.day} {month_abbr} {day.year % 100:02d}".upper()
