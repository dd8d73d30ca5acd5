# Minimal CLI over the wallcal core: month grid, day list, reminders

import argparse
from datetime import date
from typing import List

from core.brain import boot, run
from core.timeparse import format_start_time, parse_start_time
from planning.daily_planner import plan_day
from utils.config import CONFIG
from utils.debug import configure_logging
from wallcal_calendar.grid import CellDescriptor, YearMonth, build_grid, grid_rows
from wallcal_calendar.labels import month_title, weekday_names

CELL_WIDTH = 7


def _date_arg(s: str) -> date:
    try:
        return date.fromisoformat(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")


def _cell_text(c: CellDescriptor) -> str:
    if c.is_blank:
        return " " * CELL_WIDTH
    token = f"{c.day:2d}"
    if c.is_today:
        token = f"[{token}]"
    elif c.is_selected:
        token = f"<{token}>"
    else:
        token = f" {token} "
    if c.event_count:
        token += f"*{c.event_count}"
    return token.ljust(CELL_WIDTH)


def render_month(cells: List[CellDescriptor], month: YearMonth, locale_name=None) -> str:
    lines = [month_title(month, locale_name)]
    lines.append("".join(f" {n:<{CELL_WIDTH - 1}}" for n in weekday_names(locale_name)).rstrip())
    for row in grid_rows(cells):
        lines.append("".join(_cell_text(c) for c in row).rstrip())
    return "\n".join(lines)


def _print_day(day_plan: dict):
    print(f"{day_plan['weekday']}  {day_plan['heading']}")
    if not day_plan["events"]:
        print("  (no events)")
    for e in day_plan["events"]:
        print(f"  {e['time']:<14} {e['title']}  (id={e['id']})")


def cmd_month(args):
    state = boot(seed=not args.no_seed)
    today = args.today or date.today()
    if (args.year is None) != (args.month is None):
        raise SystemExit("month: pass both --year and --month, or neither")
    if args.year is not None:
        try:
            month = YearMonth(args.year, args.month)
        except ValueError as e:
            raise SystemExit(f"month: {e}")
    else:
        month = YearMonth.from_date(today)
    selected = args.selected or today
    cells = build_grid(state.store, month, today, selected)
    print(render_month(cells, month, CONFIG["calendar"]["locale"]))


def cmd_day(args):
    state = boot(seed=not args.no_seed)
    _print_day(plan_day(state.store, args.date or date.today()))


def cmd_add(args):
    state = boot(seed=not args.no_seed)
    ev = state.submit_event(args.title, args.time, day=args.date)
    if ev is None:
        print("Title is required; nothing added.")
        return
    print(f"Added: {ev.title} @ {ev.time} on {args.date.isoformat()} (id={ev.id})")
    _print_day(plan_day(state.store, args.date))


def cmd_parse_time(args):
    print(format_start_time(parse_start_time(args.text)))


def cmd_watch(args):
    run(interval_seconds=args.interval, seed=not args.no_seed)


def cmd_serve(args):
    import uvicorn

    uvicorn.run("main:app", host=args.host, port=args.port)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="wallcal", description="wallcal personal calendar")
    p.add_argument("--no-seed", action="store_true", help="Start with an empty calendar")
    p.add_argument("--debug", action="store_true", help="Verbose logging")
    sub = p.add_subparsers(required=True)

    sp = sub.add_parser("month", help="Print a month grid")
    sp.add_argument("--year", type=int)
    sp.add_argument("--month", type=int)
    sp.add_argument("--selected", type=_date_arg, help="YYYY-MM-DD (defaults to today)")
    sp.add_argument("--today", type=_date_arg, help="Override today's date (YYYY-MM-DD)")
    sp.set_defaults(func=cmd_month)

    sp = sub.add_parser("day", help="List a day's events in time order")
    sp.add_argument("date", nargs="?", type=_date_arg, help="YYYY-MM-DD (defaults to today)")
    sp.set_defaults(func=cmd_day)

    sp = sub.add_parser("add", help="Add an event and show the day")
    sp.add_argument("date", type=_date_arg)
    sp.add_argument("title")
    sp.add_argument("time", nargs="?", default="", help='Free text, e.g. "10:00-11:00" (default: All Day)')
    sp.set_defaults(func=cmd_add)

    sp = sub.add_parser("parse-time", help="Show how a time string sorts")
    sp.add_argument("text")
    sp.set_defaults(func=cmd_parse_time)

    sp = sub.add_parser("watch", help="Run the reminder loop until Ctrl-C")
    sp.add_argument("--interval", type=float, default=None,
                    help=f"Seconds between checks (default {CONFIG['notifications']['interval_seconds']})")
    sp.set_defaults(func=cmd_watch)

    sp = sub.add_parser("serve", help="Run the HTTP API")
    sp.add_argument("--host", default=CONFIG["api"]["host"])
    sp.add_argument("--port", type=int, default=CONFIG["api"]["port"])
    sp.set_defaults(func=cmd_serve)

    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.debug:
        CONFIG["debug_mode"] = True
    configure_logging(debug=args.debug or None)
    args.func(args)


if __name__ == "__main__":
    main()
