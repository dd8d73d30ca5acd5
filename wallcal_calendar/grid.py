# Month grid layout.
#
# A month renders as 7 columns, Monday first. Leading blanks push day 1 under
# its weekday; nothing is emitted after the last day, renderers pad the final
# row themselves if they want a full week.

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date
from typing import Dict, List, Optional

from wallcal_calendar.calendar import EventStore

WEEK_WIDTH = 7


@dataclass(frozen=True, order=True)
class YearMonth:
    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be in 1..12, got {self.month}")

    @classmethod
    def from_date(cls, d: date) -> "YearMonth":
        return cls(d.year, d.month)

    @classmethod
    def current(cls) -> "YearMonth":
        return cls.from_date(date.today())

    def plus_months(self, n: int) -> "YearMonth":
        # pure integer arithmetic, defined for every offset
        y, m0 = divmod(self.year * 12 + (self.month - 1) + n, 12)
        return YearMonth(y, m0 + 1)

    def minus_months(self, n: int) -> "YearMonth":
        return self.plus_months(-n)

    def in_date_range(self) -> bool:
        return MINYEAR <= self.year <= MAXYEAR

    def clamped(self) -> "YearMonth":
        """Nearest month that datetime.date can represent."""
        if self.year < MINYEAR:
            return YearMonth(MINYEAR, 1)
        if self.year > MAXYEAR:
            return YearMonth(MAXYEAR, 12)
        return self

    def length_of_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    def at_day(self, day: int) -> date:
        return date(self.year, self.month, day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class CellDescriptor:
    index: int
    date: Optional[date]
    is_today: bool = False
    is_selected: bool = False
    event_count: int = 0

    @property
    def is_blank(self) -> bool:
        return self.date is None

    @property
    def row(self) -> int:
        return self.index // WEEK_WIDTH

    @property
    def column(self) -> int:
        return self.index % WEEK_WIDTH

    @property
    def day(self) -> Optional[int]:
        return self.date.day if self.date else None

    def as_dict(self) -> Dict:
        return {
            "date": self.date.isoformat() if self.date else None,
            "day": self.day,
            "row": self.row,
            "column": self.column,
            "is_today": self.is_today,
            "is_selected": self.is_selected,
            "event_count": self.event_count,
        }


def build_grid(
    store: EventStore,
    month: YearMonth,
    today: Optional[date],
    selected_date: Optional[date],
) -> List[CellDescriptor]:
    """Cells for ``month`` in row-major reading order.

    Leading blanks come first (one per weekday before the 1st, Monday=0), then
    one cell per day. today / selected_date outside the month simply mark
    nothing.
    """
    offset = month.first_day().weekday()
    cells = [CellDescriptor(index=i, date=None) for i in range(offset)]
    for d in range(1, month.length_of_month() + 1):
        day = month.at_day(d)
        cells.append(CellDescriptor(
            index=len(cells),
            date=day,
            is_today=(day == today),
            is_selected=(day == selected_date),
            event_count=store.count_for_date(day),
        ))
    return cells


def grid_rows(cells: List[CellDescriptor]) -> List[List[CellDescriptor]]:
    """Chunk cells into weeks. The last row may be short."""
    return [cells[i:i + WEEK_WIDTH] for i in range(0, len(cells), WEEK_WIDTH)]
