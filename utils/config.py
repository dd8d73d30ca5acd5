# Config flags and runtime settings
#
# Values below are defaults; a .env file or the environment can override the
# ones that have a WALLCAL_* variable.

import os

from dotenv import load_dotenv

load_dotenv()


def env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


CONFIG = {
    "debug_mode": env_flag("WALLCAL_DEBUG", False),

    # Reminder engine (core/notifications.py)
    "notifications": {
        "enabled": env_flag("WALLCAL_NOTIFICATIONS", True),
        "interval_seconds": _env_int("WALLCAL_TICK_SECONDS", 30),
        "title": "Event Reminder",
        "header": "Reminder",
        "message_template": "It's time for: {title}",
    },

    # Month grid + day detail
    "calendar": {
        "locale": os.getenv("WALLCAL_LOCALE") or None,   # None -> default C names
        "default_time": "All Day",                       # form submit with empty time
        "seed_demo_data": env_flag("WALLCAL_SEED", True),
    },

    # Delivery of fired reminders
    "delivery": {
        "enabled": True,
        "console_echo": True,                                        # print to stdout too
        "outbox_path": os.getenv("WALLCAL_OUTBOX", "outbox/notifications.jsonl"),
    },

    # Recent reminders kept in memory for the HTTP feed
    "feed": {
        "max_items": 50,
    },

    "api": {
        "host": os.getenv("WALLCAL_HOST", "127.0.0.1"),
        "port": _env_int("WALLCAL_PORT", 8000),
    },
}
