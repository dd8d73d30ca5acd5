# Day detail ordering.
#
# Inputs: the store + a date.
#
# Behavior:
#   - Parses each event's free-form time with core.timeparse
#   - Sorts by parsed start time; Python's sort is stable, so equal times
#     (including every unparseable "All Day"/"lunch" entry, which all map to
#     the same sentinel) keep their insertion order and land at the end.
#
# Output of plan_day():
#   {
#     "date": "2025-11-07",
#     "weekday": "FRIDAY",
#     "heading": "7 NOV 25",
#     "events": [{id, title, time, start, notified}, ...]   # display order
#   }

from datetime import date
from typing import Dict, List, Optional

from core.timeparse import format_start_time, parse_start_time
from utils.config import CONFIG
from wallcal_calendar.calendar import Event, EventStore
from wallcal_calendar.labels import day_heading


def ordered_events_for_date(store: EventStore, day: date) -> List[Event]:
    return sorted(store.snapshot_for_date(day), key=lambda e: parse_start_time(e.time))


def plan_day(store: EventStore, day: date, locale_name: Optional[str] = None) -> Dict:
    if locale_name is None:
        locale_name = CONFIG["calendar"]["locale"]
    weekday, heading = day_heading(day, locale_name)

    events = []
    for e in ordered_events_for_date(store, day):
        row = e.as_dict()
        row["start"] = format_start_time(parse_start_time(e.time))
        events.append(row)

    return {
        "date": day.isoformat(),
        "weekday": weekday,
        "heading": heading,
        "events": events,
    }
