from __future__ import annotations

import argparse
from datetime import date
import importlib
import inspect
import logging
import sys

from .core.errors import TriCalendarError


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _today() -> tuple[int, int, int]:
    # The one place the wall clock is read.
    t = date.today()
    return (t.year, t.month, t.day)


def cmd_day(argv: list[str]) -> int:
    import tricalendar
    from tricalendar.attributes.registry import list_attributes
    from tricalendar.render.numerals import to_bengali_number

    p = argparse.ArgumentParser(prog="tricalendar day", description="Gregorian -> Bengali and Hijri day labels")
    p.add_argument("ymd", nargs=3, type=int, metavar=("Y", "M", "D"), help="Gregorian date, month 1-12")
    p.add_argument("--attr", action="append", default=[], choices=list_attributes(),
                   help="attribute name (repeatable)")
    args = p.parse_args(argv)

    try:
        info = tricalendar.day_info(tuple(args.ymd), attributes=tuple(args.attr))
    except TriCalendarError as e:
        p.error(str(e))

    b, h = info.bengali, info.hijri
    print(f"Gregorian : {info.civil_date}")
    print(f"Bengali   : {to_bengali_number(b.day)} {b.month_name} {to_bengali_number(b.year)}"
          f"  (month {b.month + 1}, day {b.day}, year {b.year}; {b.season})")
    print(f"Hijri     : {h.day} {h.month_name} {h.year}  /  {h.month_name_bengali}"
          f"  (month {h.month + 1}, day {h.day}, year {h.year})")
    for k, v in (info.attributes or {}).items():
        print(f"{k:<10}: {v}")
    return 0


def cmd_month(argv: list[str]) -> int:
    import tricalendar

    p = argparse.ArgumentParser(prog="tricalendar month", description="Print a month in one of the calendar views.")
    p.add_argument("ym", nargs="*", type=int, metavar="Y M", help="Gregorian year and month (default: current month)")
    p.add_argument("--view", choices=tricalendar.VIEWS, default="unified")
    p.add_argument("--html", action="store_true", help="Emit HTML markup instead of a text grid.")
    p.add_argument("--today", nargs=3, type=int, metavar=("Y", "M", "D"),
                   help="Date to highlight as today (default: the system date).")
    p.add_argument("--no-today", action="store_true", help="Do not highlight any date.")
    p.add_argument("--shift", type=int, default=0, help="Move the month cursor by N months (negative for back).")
    args = p.parse_args(argv)

    if args.ym and len(args.ym) != 2:
        p.error("expected Y M")

    today = None if args.no_today else (tuple(args.today) if args.today else _today())
    if args.ym:
        year, month = args.ym
    else:
        year, month = (today or _today())[:2]

    try:
        year, month = tricalendar.shift_month(year, month, args.shift)
        out = tricalendar.render_view(args.view, year, month, today=today, fmt="html" if args.html else "text")
    except TriCalendarError as e:
        p.error(str(e))

    print(out, end="")
    return 0


def cmd_info(argv: list[str]) -> int:
    import tricalendar

    p = argparse.ArgumentParser(prog="tricalendar info", description="Season, Bengali season, day of year and week number.")
    p.add_argument("ymd", nargs="*", type=int, metavar="Y M D", help="Gregorian date (default: today)")
    args = p.parse_args(argv)

    if args.ymd and len(args.ymd) != 3:
        p.error("expected Y M D")
    d = tuple(args.ymd) if args.ymd else _today()

    try:
        info = tricalendar.info_bar(d)
    except TriCalendarError as e:
        p.error(str(e))

    for k, v in info.items():
        print(f"{k:<15}: {v}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="tricalendar", description="Gregorian / Bengali / Hijri calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Bengali and Hijri day labels")
    sub.add_parser("month", help="Print a month grid (unified, english, bengali, hijri, all)")
    sub.add_parser("info", help="Season, day of year and week number")
    sub.add_parser("new-years", help="Print New Year table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["month-lengths"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "month":
        return cmd_month(rest)

    if args.cmd == "info":
        return cmd_info(rest)

    if args.cmd == "new-years":
        return _run_module_main("tricalendar.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "month-lengths": "tricalendar.diagnostics.month_lengths",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
