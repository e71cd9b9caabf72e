from __future__ import annotations

import argparse
import logging
import sys
import re
from datetime import date

from calchina.core.errors import CalchinaError


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--backend", default="lunardate")
    p.add_argument("--verbose", action="store_true", help="log conversions at DEBUG level")


def _setup_logging(args: argparse.Namespace) -> None:
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def cmd_day(argv: list[str]) -> int:
    import calchina

    p = argparse.ArgumentParser(prog="calchina day", description="Gregorian -> Chinese date and diary date")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    _add_common(p)
    args = p.parse_args(argv)
    _setup_logging(args)

    d = _parse_ymd(args.date)
    info = calchina.day_info(d, backend=args.backend, attributes=tuple(args.attr))
    cal = calchina.make_diary_calendar(calchina.DiaryConfig(backend=args.backend))

    print(f"Date       : {d.isoformat()} (absolute day {info.absolute_day})")
    print(f"Chinese    : {cal.date_string(info.absolute_day)}")
    print(f"Diary date : {info.diary.month}/{info.diary.day}/{info.diary.year}")
    for k, v in (info.attributes or {}).items():
        print(f"  {k} = {v}")
    return 0

def cmd_pack(argv: list[str]) -> int:
    import calchina
    from calchina.core.time import absolute_from_date

    p = argparse.ArgumentParser(prog="calchina pack", description="Gregorian -> diary date month/day/packed-year")
    p.add_argument("date", help="YYYY-MM-DD")
    _add_common(p)
    args = p.parse_args(argv)
    _setup_logging(args)

    dd = calchina.pack(absolute_from_date(_parse_ymd(args.date)), backend=args.backend)
    print(f"{dd.month}/{dd.day}/{dd.year}")
    return 0

def cmd_unpack(argv: list[str]) -> int:
    import calchina
    from calchina.core.time import date_from_absolute

    p = argparse.ArgumentParser(prog="calchina unpack", description="Diary date -> Gregorian date")
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    p.add_argument("year", type=int, help="packed year, cycle*100 + year")
    p.add_argument("--leap", action="store_true", help="prefer the leap month of that number if the year has one")
    _add_common(p)
    args = p.parse_args(argv)
    _setup_logging(args)

    absolute_day = calchina.unpack(
        calchina.DiaryDate(args.month, args.day, args.year), prefer_leap=args.leap, backend=args.backend
    )
    print(date_from_absolute(absolute_day).isoformat())
    return 0

def cmd_months(argv: list[str]) -> int:
    import calchina

    p = argparse.ArgumentParser(prog="calchina months", description="List the months of a Chinese year")
    p.add_argument("cycle", type=int)
    p.add_argument("year", type=int)
    _add_common(p)
    args = p.parse_args(argv)
    _setup_logging(args)

    cfg = calchina.DiaryConfig(backend=args.backend)
    for m in calchina.months_in_year(args.cycle, args.year, backend=args.backend):
        first = calchina.to_gregorian(calchina.ChineseDate(args.cycle, args.year, m, 1), backend=args.backend)
        print(f"{str(m):>4}  {cfg.month_name(m.number, m.is_leap)}  begins {first.isoformat()}")
    return 0

def cmd_mark(argv: list[str]) -> int:
    import calchina
    from calchina.core.time import absolute_from_date, date_from_absolute

    p = argparse.ArgumentParser(prog="calchina mark", description="List the days a diary pattern marks (0 = any)")
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    p.add_argument("year", type=int, help="packed year, or 0 for any")
    p.add_argument("--start", required=True, help="YYYY-MM-DD")
    p.add_argument("--end", required=True, help="YYYY-MM-DD")
    _add_common(p)
    args = p.parse_args(argv)
    _setup_logging(args)

    start = absolute_from_date(_parse_ymd(args.start))
    end = absolute_from_date(_parse_ymd(args.end))
    if end < start:
        raise SystemExit("--end must be >= --start")

    marker = calchina.WindowMarker(start, end)
    cal = calchina.make_diary_calendar(calchina.DiaryConfig(backend=args.backend), mark=marker)
    cal.mark_pattern(args.month, args.day, args.year)
    for absolute_day in sorted(marker.marks):
        print(f"{date_from_absolute(absolute_day).isoformat()}  {cal.date_string(absolute_day)}")
    return 0

def cmd_anniversary(argv: list[str]) -> int:
    import calchina
    from calchina.core.time import absolute_from_date

    p = argparse.ArgumentParser(prog="calchina anniversary", description="Check whether a date is an anniversary")
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    p.add_argument("--year", type=int, default=None, help="packed year of the original event")
    p.add_argument("--on", required=True, help="YYYY-MM-DD")
    _add_common(p)
    args = p.parse_args(argv)
    _setup_logging(args)

    res = calchina.anniversary(
        args.month, args.day, args.year, absolute_from_date(_parse_ymd(args.on)), backend=args.backend
    )
    if res is None:
        print("no anniversary")
        return 1
    if res.recurring:
        print("anniversary (recurring, no starting year)")
    else:
        print(f"anniversary: {res.years} years")
    return 0

def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `calchina YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return _run(cmd_day, argv)

    p = argparse.ArgumentParser(prog="calchina", description="Chinese calendar diary toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Chinese date and diary date")
    sub.add_parser("pack", help="Gregorian -> diary date")
    sub.add_parser("unpack", help="Diary date -> Gregorian")
    sub.add_parser("months", help="List the months of a Chinese year")
    sub.add_parser("mark", help="List the days a diary pattern marks")
    sub.add_parser("anniversary", help="Check a date against an anniversary")

    args, rest = p.parse_known_args(argv)

    commands = {
        "day": cmd_day,
        "pack": cmd_pack,
        "unpack": cmd_unpack,
        "months": cmd_months,
        "mark": cmd_mark,
        "anniversary": cmd_anniversary,
    }
    return _run(commands[args.cmd], rest)

def _run(fn, argv: list[str]) -> int:
    try:
        return fn(argv)
    except CalchinaError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
