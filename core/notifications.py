# Reminder engine: polls today's events and fires one notification per event
# when the wall clock reaches its start minute.
#
# Matching is by (hour, minute) at tick time. There is no
# catch-up: if no tick lands inside an event's start minute (interval longer
# than a minute, process suspended, clock jump) that reminder is missed. This
# is a known limitation of polling, not something a later tick repairs.
#
# Each Event carries its own `notified` flag. It is set when the reminder is
# delivered and only cleared again if delivery for that event fails.

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Callable, Dict, List, Optional

from core.timeparse import is_unparseable, parse_start_time
from utils.config import CONFIG
from wallcal_calendar.calendar import EventStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    title: str
    message: str
    event_title: str
    event_id: str
    day: date
    at: datetime
    header: str = field(default="Reminder")

    def as_dict(self) -> Dict:
        return {
            "title": self.title,
            "header": self.header,
            "message": self.message,
            "event_title": self.event_title,
            "event_id": self.event_id,
            "date": self.day.isoformat(),
            "at": self.at.isoformat(timespec="seconds"),
        }


# Return values are ignored by the scheduler.
Sink = Callable[[Notification], object]


class NotificationScheduler:
    def __init__(
        self,
        store: EventStore,
        sink: Sink,
        interval_seconds: Optional[float] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        ncfg = CONFIG["notifications"]
        self.store = store
        self.sink = sink
        if interval_seconds is None:
            interval_seconds = ncfg["interval_seconds"]
        self.interval_seconds = float(interval_seconds)
        self.clock = clock
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def _build(self, event_title: str, event_id: str, now: datetime) -> Notification:
        ncfg = CONFIG["notifications"]
        return Notification(
            title=ncfg["title"],
            header=ncfg["header"],
            message=ncfg["message_template"].format(title=event_title),
            event_title=event_title,
            event_id=event_id,
            day=now.date(),
            at=now,
        )

    def tick(self, now: Optional[datetime] = None) -> List[Notification]:
        """Run one check. Returns the notifications delivered by this tick.

        Due events are claimed (flag set) under the store lock, then handed to
        the sink with the lock released. A sink failure un-claims that event so
        a later tick in the same minute retries it; other due events still go out.
        """
        now = now or self.clock()
        today = now.date()

        due = []
        with self.store.lock:
            for ev in self.store.snapshot_for_date(today):
                if ev.notified:
                    continue
                start = parse_start_time(ev.time)
                if is_unparseable(start):
                    continue
                if start.hour == now.hour and start.minute == now.minute:
                    ev.notified = True
                    due.append(ev)

        fired: List[Notification] = []
        for ev in due:
            n = self._build(ev.title, ev.id, now)
            try:
                self.sink(n)
            except Exception:
                logger.exception("Could not deliver reminder for %r", ev.title)
                with self.store.lock:
                    ev.notified = False
                continue
            fired.append(n)
            logger.info("Reminder fired for %r (%s)", ev.title, ev.time)

        logger.debug("Tick at %s: %d reminder(s) fired", now.strftime("%H:%M:%S"), len(fired))
        return fired

    async def run(self) -> None:
        """Tick every interval until stop() is called."""
        loop = asyncio.get_running_loop()
        self._running = True
        logger.info("Reminder scheduler started (every %ss)", self.interval_seconds)
        try:
            while self._running:
                started = loop.time()
                try:
                    await asyncio.to_thread(self.tick)
                except Exception:
                    logger.exception("Reminder tick failed")
                elapsed = loop.time() - started
                await asyncio.sleep(max(0.0, self.interval_seconds - elapsed))
        finally:
            self._running = False
            logger.info("Reminder scheduler stopped")

    def stop(self) -> None:
        self._running = False
