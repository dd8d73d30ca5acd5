# Core loop handler: boots app state and keeps the reminder scheduler ticking.

import asyncio
from datetime import date
from typing import Optional

from core.delivery import deliver_notification, fan_out
from core.notifications import NotificationScheduler
from core.state import AppState
from planning.daily_planner import plan_day
from utils.config import CONFIG
from utils.debug import debug_log


def build_scheduler(state: AppState, interval_seconds: Optional[float] = None) -> NotificationScheduler:
    """Scheduler wired to the default sinks: console/outbox + the state's feed."""
    return NotificationScheduler(
        state.store,
        fan_out(deliver_notification, state.feed),
        interval_seconds=interval_seconds,
    )


def boot(seed: Optional[bool] = None) -> AppState:
    state = AppState()
    debug_log("State initialized")

    if seed is None:
        seed = CONFIG["calendar"]["seed_demo_data"]
    if seed:
        state.seed_demo_data()
        debug_log(f"Seeded {len(state.store)} demo event(s)")
    return state


def run(interval_seconds: Optional[float] = None, seed: Optional[bool] = None) -> AppState:
    print("[wallcal] Booting up reminder loop...")
    state = boot(seed)

    today = plan_day(state.store, date.today())
    print(f"\n=== {today['weekday']} {today['heading']} ===")
    for e in today["events"]:
        print(f"- {e['time']}: {e['title']}")
    if not today["events"]:
        print("- (no events today)")

    if not CONFIG["notifications"].get("enabled", True):
        print("\nReminders are disabled by config.")
        return state

    scheduler = build_scheduler(state, interval_seconds)
    print(f"\nWatching for reminders every {scheduler.interval_seconds:g}s (Ctrl-C to stop).")
    try:
        asyncio.run(scheduler.run())
    except KeyboardInterrupt:
        scheduler.stop()
        print("\nStopped.")
    return state
