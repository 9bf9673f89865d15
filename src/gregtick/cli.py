from __future__ import annotations

import argparse
import logging
import sys

from gregtick.core.errors import ValidationError


def _fail(exc: Exception) -> int:
    print(f"error: {exc}", file=sys.stderr)
    return 1


def cmd_instant(argv: list[str]) -> int:
    from gregtick import Instant

    p = argparse.ArgumentParser(prog="gregtick instant", description="Civil date/time -> ticks since 0001-01-01T00:00:00")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    p.add_argument("hour", type=int, nargs="?", default=0)
    p.add_argument("minute", type=int, nargs="?", default=0)
    p.add_argument("second", type=float, nargs="?", default=0.0)
    args = p.parse_args(argv)

    try:
        inst = Instant.from_gregorian_or_raise(args.year, args.month, args.day, args.hour, args.minute, args.second)
    except ValidationError as exc:
        return _fail(exc)

    print(f"ticks       = {inst.since_epoch.nanoseconds}")
    print(f"since epoch = {inst.since_epoch}")
    return 0


def cmd_duration(argv: list[str]) -> int:
    from gregtick import Duration

    p = argparse.ArgumentParser(prog="gregtick duration", description="Sum unit durations and render the result.")
    p.add_argument("--days", type=float, default=0.0)
    p.add_argument("--hours", type=float, default=0.0)
    p.add_argument("--minutes", type=float, default=0.0)
    p.add_argument("--seconds", type=float, default=0.0)
    p.add_argument("--milliseconds", type=float, default=0.0)
    p.add_argument("--microseconds", type=float, default=0.0)
    p.add_argument("--nanoseconds", type=int, default=0)
    args = p.parse_args(argv)

    try:
        total = (
            Duration.days(args.days)
            + Duration.hours(args.hours)
            + Duration.minutes(args.minutes)
            + Duration.seconds(args.seconds)
            + Duration.milliseconds(args.milliseconds)
            + Duration.microseconds(args.microseconds)
            + Duration.new(args.nanoseconds)
        )
    except ValueError as exc:
        return _fail(exc)

    print(total)
    print(f"nanoseconds = {total.nanoseconds}")
    return 0


def cmd_calendar(argv: list[str]) -> int:
    import gregtick as gt

    p = argparse.ArgumentParser(prog="gregtick calendar", description="Leap status and day counts for a year, month or date.")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int, nargs="?")
    p.add_argument("day", type=int, nargs="?")
    args = p.parse_args(argv)

    if not gt.is_valid_year(args.year):
        return _fail(gt.InvalidYearError(f"year must be in {gt.MIN_YEAR}..{gt.MAX_YEAR}, got {args.year}"))

    leap = gt.is_leap_year(args.year)
    print(f"year {args.year}: {'leap' if leap else 'common'}, {gt.days_in_year(args.year)} days")
    if args.month is None:
        return 0

    dim = gt.days_in_month(args.month, leap)
    if dim is None:
        return _fail(gt.InvalidMonthError(f"month must be in 1..12, got {args.month}"))
    print(f"month {args.month:02d}: {dim} days, {gt.cumulative_days_for_month(args.month, leap)} days before")
    if args.day is None:
        return 0

    try:
        gt.check_year_month_day(args.year, args.month, args.day)
    except ValidationError as exc:
        return _fail(exc)
    print(f"day of year      = {gt.day_of_year(args.year, args.month, args.day)}")
    print(f"days since epoch = {gt.days_since_epoch(args.year, args.month, args.day)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="gregtick", description="Exact Gregorian instants and nanosecond durations.")
    p.add_argument("-v", "--verbose", action="store_true", help="log at DEBUG level")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("instant", help="Civil date/time -> ticks since the epoch", add_help=False)
    sub.add_parser("duration", help="Build and render a duration from unit values", add_help=False)
    sub.add_parser("calendar", help="Leap status, month lengths and day ordinals", add_help=False)

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "instant":
        return cmd_instant(rest)

    if args.cmd == "duration":
        return cmd_duration(rest)

    if args.cmd == "calendar":
        return cmd_calendar(rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
