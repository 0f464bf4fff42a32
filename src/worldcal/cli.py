from __future__ import annotations

import argparse
import importlib
import inspect
import json
import sys
from typing import List, Optional

from .config import calendar_to_dict, load_calendar_file
from .core.calendar import CalendarDefinition, default_calendar
from .core.date import FULL_FORMAT, CalendarDate
from .core.errors import CalendarConfigError, CalendarError
from .log import configure_logging


def _run_module_main(modpath: str, argv: List[str]) -> int:
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


def _calendar(path: Optional[str]) -> CalendarDefinition:
    if path is None:
        return default_calendar()
    return load_calendar_file(path)


def _add_calendar_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument("--calendar", metavar="FILE", help="JSON calendar definition (default: built-in Gregorian-shaped calendar)")


def cmd_parse(argv: List[str]) -> int:
    p = argparse.ArgumentParser(prog="worldcal parse", description="Date text -> day count")
    p.add_argument("text", help='e.g. "9/22/2017" or "Sep 22, 2017 AD"')
    _add_calendar_arg(p)
    args = p.parse_args(argv)

    print(CalendarDate.parse(_calendar(args.calendar), args.text).days)
    return 0


def cmd_format(argv: List[str]) -> int:
    p = argparse.ArgumentParser(prog="worldcal format", description="Reformat date text using %-directives")
    p.add_argument("text")
    p.add_argument("--layout", default=FULL_FORMAT, help="default: %(default)r")
    _add_calendar_arg(p)
    args = p.parse_args(argv)

    print(CalendarDate.parse(_calendar(args.calendar), args.text).format(args.layout))
    return 0


def cmd_days(argv: List[str]) -> int:
    p = argparse.ArgumentParser(prog="worldcal days", description="Day count -> date text")
    p.add_argument("days", type=int, help="days since 1/1/1 (may be negative)")
    p.add_argument("--layout", default=FULL_FORMAT, help="default: %(default)r")
    _add_calendar_arg(p)
    args = p.parse_args(argv)

    print(CalendarDate(_calendar(args.calendar), args.days).format(args.layout))
    return 0


def cmd_month(argv: List[str]) -> int:
    p = argparse.ArgumentParser(prog="worldcal month", description="Print the month containing a date as a text grid")
    p.add_argument("text")
    _add_calendar_arg(p)
    args = p.parse_args(argv)

    print(CalendarDate.parse(_calendar(args.calendar), args.text).text_calendar_month(), end="")
    return 0


def cmd_check(argv: List[str]) -> int:
    p = argparse.ArgumentParser(prog="worldcal check", description="Validate a JSON calendar definition")
    p.add_argument("file")
    args = p.parse_args(argv)

    try:
        load_calendar_file(args.file)
    except CalendarConfigError as e:
        print(e)
        return 1
    print("OK")
    return 0


def cmd_dump_default(argv: List[str]) -> int:
    p = argparse.ArgumentParser(prog="worldcal dump-default", description="Print the built-in calendar as JSON")
    p.parse_args(argv)

    print(json.dumps(calendar_to_dict(default_calendar()), indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="worldcal", description="Custom calendar engine")
    p.add_argument("--log-level", default="WARNING", help="DEBUG, INFO, WARNING (default), ERROR")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("parse", help="Date text -> day count.")
    sub.add_parser("format", help="Reformat date text using %%-directives.")
    sub.add_parser("days", help="Day count -> date text.")
    sub.add_parser("month", help="Print a month grid.")
    sub.add_parser("check", help="Validate a JSON calendar definition.")
    sub.add_parser("dump-default", help="Print the built-in calendar as JSON.")

    sp = sub.add_parser("diag", help="Run a diagnostic tool.")
    sp.add_argument("tool", choices=["round-trip", "year-lengths"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as e:
        p.error(str(e))

    commands = {
        "parse": cmd_parse,
        "format": cmd_format,
        "days": cmd_days,
        "month": cmd_month,
        "check": cmd_check,
        "dump-default": cmd_dump_default,
    }

    try:
        if args.cmd == "diag":
            tool_map = {
                "round-trip": "worldcal.diagnostics.round_trip",
                "year-lengths": "worldcal.diagnostics.year_lengths",
            }
            return _run_module_main(tool_map[args.tool], rest)
        return commands[args.cmd](rest)
    except CalendarError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
