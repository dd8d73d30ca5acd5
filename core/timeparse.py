# Free-form event time parsing.
#
# Event times are whatever the user typed: "10:00-11:00", "8:00", "All Day",
# "lunch". Only the leading H:mm / HH:mm token matters; anything else maps to
# UNPARSEABLE, which sorts after every real time and never fires a reminder.

from __future__ import annotations

import re
from datetime import time

UNPARSEABLE = time.max

_START_RE = re.compile(r"[0-9]{1,2}:[0-9]{2}.*")


def parse_start_time(raw: str | None) -> time:
    """Return the start time-of-day encoded at the front of ``raw``.

    Never raises: malformed or out-of-range input returns UNPARSEABLE.
    """
    if not isinstance(raw, str):
        return UNPARSEABLE
    t = raw.strip()
    if not _START_RE.fullmatch(t):
        return UNPARSEABLE
    if t.index(":") == 1:
        t = "0" + t
    try:
        h, m = t[:5].split(":")
        return time(int(h), int(m))
    except ValueError:
        return UNPARSEABLE


def is_unparseable(value: time) -> bool:
    return value == UNPARSEABLE


def format_start_time(value: time) -> str:
    if is_unparseable(value):
        return "unparseable"
    return value.strftime("%H:%M")
