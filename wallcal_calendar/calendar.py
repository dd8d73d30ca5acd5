# In-memory calendar store: date -> events, insertion ordered.
#
# Events are addressed by reference. Two events with the same title and time
# are still two events; removal only ever takes out the exact object passed.

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Set


@dataclass(eq=False)
class Event:
    title: str
    time: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    notified: bool = False          # flips once when the reminder fires

    def as_dict(self) -> Dict:
        return {
            "id": self.id,
            "title": self.title,
            "time": self.time,
            "notified": self.notified,
        }


class EventStore:
    """Events bucketed by calendar date.

    One store-wide lock serialises mutation and iteration, so the reminder
    tick and request handlers never see a half-applied change.
    """

    def __init__(self) -> None:
        self._events: Dict[date, List[Event]] = {}
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def add_event(self, day: date, title: str, time: str) -> Event:
        ev = Event(title=title, time=time)
        with self._lock:
            self._events.setdefault(day, []).append(ev)
        return ev

    def remove_event(self, day: date, event: Event) -> None:
        with self._lock:
            bucket = self._events.get(day)
            if not bucket:
                return
            for i, e in enumerate(bucket):
                if e is event:
                    del bucket[i]
                    break
            if not bucket:
                self._events.pop(day, None)

    def events_for_date(self, day: date) -> List[Event]:
        """Live list for ``day`` (empty list when there is nothing stored).

        Callers that need a stable view should copy it or use
        snapshot_for_date().
        """
        with self._lock:
            return self._events.get(day, [])

    def snapshot_for_date(self, day: date) -> List[Event]:
        with self._lock:
            return list(self._events.get(day, ()))

    def count_for_date(self, day: date) -> int:
        with self._lock:
            return len(self._events.get(day, ()))

    def find_event(self, day: date, event_id: str) -> Optional[Event]:
        with self._lock:
            for e in self._events.get(day, ()):
                if e.id == event_id:
                    return e
        return None

    def dates_with_events(self, year: int, month: int) -> Set[date]:
        with self._lock:
            return {d for d, evs in self._events.items()
                    if d.year == year and d.month == month and evs}

    def total_events(self) -> int:
        with self._lock:
            return sum(len(evs) for evs in self._events.values())

    def __len__(self) -> int:
        return self.total_events()

    def __contains__(self, day: object) -> bool:
        with self._lock:
            return bool(self._events.get(day))  # type: ignore[arg-type]
