from wallcal_calendar.calendar import Event, EventStore
from wallcal_calendar.grid import CellDescriptor, YearMonth, build_grid, grid_rows

__all__ = ["Event", "EventStore", "CellDescriptor", "YearMonth", "build_grid", "grid_rows"]
