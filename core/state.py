# Application state shared by every presentation layer: the one event store,
# the month/selection the user is looking at and the reminder feed.

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from core.delivery import NotificationFeed
from utils.config import CONFIG
from wallcal_calendar.calendar import Event, EventStore
from wallcal_calendar.grid import CellDescriptor, YearMonth, build_grid


@dataclass
class CalendarViewState:
    current_month: YearMonth
    selected_date: Optional[date] = None

    @classmethod
    def starting(cls, today: Optional[date] = None) -> "CalendarViewState":
        today = today or date.today()
        return cls(current_month=YearMonth.from_date(today), selected_date=today)

    def reset(self, today: Optional[date] = None) -> None:
        fresh = CalendarViewState.starting(today)
        self.current_month = fresh.current_month
        self.selected_date = fresh.selected_date

    def next_month(self) -> YearMonth:
        self.current_month = self.current_month.plus_months(1).clamped()
        return self.current_month

    def previous_month(self) -> YearMonth:
        self.current_month = self.current_month.minus_months(1).clamped()
        return self.current_month

    def jump_to(self, day: date) -> YearMonth:
        # Only the visible month moves; the selection stays where it was.
        self.current_month = YearMonth.from_date(day)
        return self.current_month

    def select(self, day: date) -> None:
        self.selected_date = day


DEMO_DATE = date(2025, 11, 7)


@dataclass
class AppState:
    store: EventStore = field(default_factory=EventStore)
    view: CalendarViewState = field(default_factory=CalendarViewState.starting)
    feed: NotificationFeed = field(default_factory=NotificationFeed)

    def submit_event(self, title: str, time: str = "", day: Optional[date] = None) -> Optional[Event]:
        """Add-event form semantics.

        Empty titles are ignored (returns None). An empty time is stored as the
        configured default ("All Day"). Without ``day`` the event goes on the
        selected date.
        """
        if not title:
            return None
        day = day or self.view.selected_date
        if day is None:
            return None
        return self.store.add_event(day, title, time or CONFIG["calendar"]["default_time"])

    def delete_event(self, day: date, event: Event) -> None:
        self.store.remove_event(day, event)

    def month_cells(self, today: Optional[date] = None, month: Optional[YearMonth] = None) -> List[CellDescriptor]:
        return build_grid(
            self.store,
            month or self.view.current_month,
            today or date.today(),
            self.view.selected_date,
        )

    def seed_demo_data(self, today: Optional[date] = None) -> None:
        today = today or date.today()
        self.store.add_event(DEMO_DATE, "Lecture", "08:00-09:00")
        self.store.add_event(DEMO_DATE, "Math Deadline", "13:00-14:00")
        self.store.add_event(DEMO_DATE, "Futsal", "20:00-22:00")

        self.store.add_event(today, "Team Meeting", "10:00-11:00")
        self.store.add_event(today, "Lunch", "12:00-13:00")
