# api/routes_calendar.py
from __future__ import annotations

import datetime as dt
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field
from starlette.requests import Request

from core.state import AppState
from planning.daily_planner import plan_day
from utils.config import CONFIG
from wallcal_calendar.grid import YearMonth
from wallcal_calendar.labels import month_title, weekday_names

router = APIRouter(prefix="/api", tags=["calendar"])


# ---------- App state accessors ----------
def get_state(request: Request) -> AppState:
    state: AppState = getattr(request.app.state, "calendar", None)
    if state is None:
        raise HTTPException(status_code=500, detail="Calendar state not initialized")
    return state


def _parse_day(date_str: Optional[str], fallback: Optional[dt.date]) -> dt.date:
    if not date_str:
        return fallback or dt.date.today()
    try:
        return dt.date.fromisoformat(date_str)
    except ValueError:
        raise HTTPException(status_code=400, detail="Bad date")


# ---------- Schemas ----------
class CellOut(BaseModel):
    date: Optional[dt.date] = None
    day: Optional[int] = None
    row: int
    column: int
    is_today: bool
    is_selected: bool
    event_count: int


class MonthOut(BaseModel):
    year: int
    month: int
    title: str
    weekdays: List[str]
    selected_date: Optional[dt.date] = None
    cells: List[CellOut]


class EventOut(BaseModel):
    id: str
    title: str
    time: str
    start: Optional[str] = None
    notified: bool = False


class DayOut(BaseModel):
    date: dt.date
    weekday: str
    heading: str
    events: List[EventOut]


class CreateEventRequest(BaseModel):
    title: str = Field(..., min_length=1)
    time: str = ""
    date: Optional[dt.date] = Field(default=None, description="Defaults to the selected date")


class DateBody(BaseModel):
    date: dt.date


class NotificationOut(BaseModel):
    title: str
    header: str
    message: str
    event_title: str
    event_id: str
    date: dt.date
    at: str


class MessageResponse(BaseModel):
    message: str


def _month_out(state: AppState, month: YearMonth) -> MonthOut:
    locale_name = CONFIG["calendar"]["locale"]
    cells = state.month_cells(month=month)
    return MonthOut(
        year=month.year,
        month=month.month,
        title=month_title(month, locale_name),
        weekdays=weekday_names(locale_name),
        selected_date=state.view.selected_date,
        cells=[CellOut(**c.as_dict()) for c in cells],
    )


# ---------- Routes ----------
@router.get("/month", response_model=MonthOut)
def get_month(
    year: Optional[int] = Query(default=None, ge=dt.MINYEAR, le=dt.MAXYEAR),
    month: Optional[int] = Query(default=None, ge=1, le=12),
    state: AppState = Depends(get_state),
):
    if (year is None) != (month is None):
        raise HTTPException(status_code=400, detail="Pass both year and month, or neither")
    target = YearMonth(year, month) if year is not None else state.view.current_month
    return _month_out(state, target)


@router.post("/month/next", response_model=MonthOut)
def next_month(state: AppState = Depends(get_state)):
    return _month_out(state, state.view.next_month())


@router.post("/month/previous", response_model=MonthOut)
def previous_month(state: AppState = Depends(get_state)):
    return _month_out(state, state.view.previous_month())


@router.post("/month/jump", response_model=MonthOut)
def jump_to(body: DateBody, state: AppState = Depends(get_state)):
    return _month_out(state, state.view.jump_to(body.date))


@router.post("/select", response_model=MonthOut)
def select_day(body: DateBody, state: AppState = Depends(get_state)):
    state.view.select(body.date)
    return _month_out(state, state.view.current_month)


@router.get("/schedule/daily", response_model=DayOut)
def daily(date_str: Optional[str] = None, state: AppState = Depends(get_state)):
    d = _parse_day(date_str, state.view.selected_date)
    return DayOut(**plan_day(state.store, d))


@router.post("/events", response_model=EventOut, status_code=201)
def add_event(body: CreateEventRequest, state: AppState = Depends(get_state)):
    ev = state.submit_event(body.title, body.time, day=body.date)
    if ev is None:
        raise HTTPException(status_code=400, detail="No date selected")
    return EventOut(**ev.as_dict())


@router.delete("/events/{event_id}", response_model=MessageResponse)
def delete_event(event_id: str, date_str: Optional[str] = None, state: AppState = Depends(get_state)):
    d = _parse_day(date_str, state.view.selected_date)
    ev = state.store.find_event(d, event_id)
    if ev is None:
        raise HTTPException(status_code=404, detail="Event not found")
    state.delete_event(d, ev)
    return MessageResponse(message="deleted")


@router.get("/notifications", response_model=List[NotificationOut])
def notifications(state: AppState = Depends(get_state)):
    return [NotificationOut(**n) for n in state.feed.as_dicts()]


# ---------- Mount helper ----------
def mount_calendar_routes(app, state: AppState) -> None:
    """Attach the calendar state to app.state and include this router."""
    app.state.calendar = state
    app.include_router(router)


__all__ = ["router", "mount_calendar_routes"]
