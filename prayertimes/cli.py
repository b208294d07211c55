"""Command line entry point: show the prayer times of a day."""

from __future__ import annotations

import argparse
import sys
from datetime import date, datetime, timedelta
from typing import Sequence

from rich.console import Console

from .repo import PrayerTimesError, PrayerTimesRepo, same_day
from .storage import FileStorage
from .ui import render_active_prayer_tracking, render_daily_prayer_schedule


def build_parser(today: date) -> argparse.ArgumentParser:
    """Return the argument parser, defaulting the date to *today*."""
    parser = argparse.ArgumentParser(prog="prayers", description="Get prayer times for today")
    parser.add_argument("-y", "--year", type=int, default=today.year, help="Set year")
    parser.add_argument("-m", "--month", type=int, default=today.month, help="Set month")
    parser.add_argument("-d", "--day", type=int, default=today.day, help="Set day")
    return parser


def _requested_date(year: int, month: int, day: int, now: datetime) -> datetime:
    # Out-of-range months and days carry over into the next unit.
    carried_year, month_index = divmod(year * 12 + month - 1, 12)
    start = datetime(carried_year, month_index + 1, 1, now.hour, now.minute)
    return start + timedelta(days=day - 1)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the exit status."""
    now = datetime.now()
    args = build_parser(now).parse_args(argv)
    try:
        requested = _requested_date(args.year, args.month, args.day, now)
    except (ValueError, OverflowError) as exc:
        print(f"Error: invalid date: {exc}", file=sys.stderr)
        return 1

    repo = PrayerTimesRepo(FileStorage(f"{requested.year}.json"))
    console = Console(highlight=False)
    try:
        if same_day(now, requested):
            render_active_prayer_tracking(repo.active_prayer_tracking(requested), console)
        else:
            render_daily_prayer_schedule(repo.daily_prayer_schedule(requested), console)
    except PrayerTimesError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())