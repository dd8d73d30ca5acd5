# Delivery adapters for fired reminders: console echo, a JSONL outbox and a
# bounded in-memory feed the HTTP layer reads from.

from __future__ import annotations

import json
import logging
import threading
from collections import deque
from datetime import datetime
from pathlib import Path
from typing import Dict, List

from core.notifications import Notification, Sink
from utils.config import CONFIG

logger = logging.getLogger(__name__)


def ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def write_notifications_jsonl(notifications: List[Notification], out_path: str | Path = None) -> int:
    """Append notifications to the JSONL outbox. Returns count written."""
    if out_path is None:
        out_path = CONFIG["delivery"]["outbox_path"]
    p = Path(out_path)
    ensure_parent(p)

    count = 0
    with p.open("a", encoding="utf-8") as f:
        for n in notifications:
            rec = n.as_dict()
            rec["created"] = datetime.now().isoformat(timespec="seconds")
            rec["source"] = "wallcal"
            f.write(json.dumps(rec, ensure_ascii=False) + "\n")
            count += 1
    return count


def echo_to_console(notifications: List[Notification]) -> None:
    for n in notifications:
        print(f"{n.at.strftime('%H:%M')}  [{n.header}]  {n.title}: {n.message}")


def deliver_notification(notification: Notification) -> int:
    """Default sink: echo + outbox if enabled.

    Returns the number of records written to the outbox (0 or 1). The scheduler
    ignores it; callers delivering by hand can check it.
    """
    dcfg = CONFIG["delivery"]
    if dcfg.get("console_echo", True):
        echo_to_console([notification])
    if dcfg.get("enabled", True):
        try:
            return write_notifications_jsonl([notification])
        except OSError:
            logger.exception("Could not write reminder to outbox %s", dcfg.get("outbox_path"))
    return 0


class NotificationFeed:
    """Most recent reminders, newest last. Usable directly as a sink."""

    def __init__(self, max_items: int | None = None) -> None:
        if max_items is None:
            max_items = CONFIG["feed"]["max_items"]
        self._items: deque = deque(maxlen=max_items)
        self._lock = threading.Lock()

    def __call__(self, notification: Notification) -> None:
        with self._lock:
            self._items.append(notification)

    def recent(self) -> List[Notification]:
        with self._lock:
            return list(self._items)

    def as_dicts(self) -> List[Dict]:
        return [n.as_dict() for n in self.recent()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


def fan_out(*sinks: Sink) -> Sink:
    """Combine sinks; each notification goes to every sink in order."""
    def _sink(notification: Notification) -> None:
        for s in sinks:
            s(notification)
    return _sink
