"""Terminal rendering of prayer schedules."""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .models import ActivePrayerTracking, DailyPrayerSchedule, Prayer

ACCENT_STYLE = "bright_green"
PROGRESS_STYLE = "on bright_green"
PROGRESS_SYMBOL = "─"
PROGRESS_WIDTH = 40

_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def _console(console: Console | None) -> Console:
    return console if console is not None else Console(highlight=False)


def _format_clock(moment: datetime) -> str:
    suffix = "pm" if moment.hour >= 12 else "am"
    return f"{moment.hour % 12 or 12}:{moment.minute:02d} {suffix}"


def _hours_and_minutes(duration: timedelta) -> tuple[int, int]:
    seconds = duration.total_seconds()
    hours = int(seconds / 3600)
    minutes = int(math.fmod(int(seconds / 60), 60))
    return hours, minutes


def render_daily_prayer_schedule(
    schedule: DailyPrayerSchedule, console: Console | None = None
) -> None:
    """Show the date and the day's prayer times."""
    console = _console(console)
    render_date(schedule.date, console)
    render_prayer_times(schedule.prayers, console)


def render_active_prayer_tracking(
    tracking: ActivePrayerTracking, console: Console | None = None
) -> None:
    """Show today's prayer times, the time left to the next prayer and a progress bar."""
    console = _console(console)
    render_date(tracking.date, console)
    render_prayer_times(tracking.prayers, console)
    render_time_remaining(tracking.next_prayer, tracking.time_remaining, console)
    render_time_progress(tracking.previous_prayer, tracking.next_prayer, tracking.progress, console)


def render_prayer_times(prayers: Sequence[Prayer], console: Console | None = None) -> None:
    """Show the prayers as a table: names as headers, times in one row."""
    table = Table(box=box.ROUNDED)
    for prayer in prayers:
        table.add_column(Text(prayer.name, style=ACCENT_STYLE), justify="center")
    table.add_row(*(_format_clock(prayer.time) for prayer in prayers))
    _console(console).print(table)


def render_date(date: datetime, console: Console | None = None) -> None:
    """Show the date as weekday followed by day/month/year."""
    text = f"{_WEEKDAYS[date.weekday()]} {date:%d/%m/%Y}"
    _console(console).print(text, markup=False, highlight=False)


def format_time_remaining(next_prayer: str, duration: timedelta) -> str:
    """Return the plain sentence telling the hours and minutes left to *next_prayer*."""
    hours, minutes = _hours_and_minutes(duration)
    return f"{hours} hours, {minutes} minutes to {next_prayer}"


def render_time_remaining(
    next_prayer: str, duration: timedelta, console: Console | None = None
) -> None:
    """Show the hours and minutes left to the next prayer."""
    hours, minutes = _hours_and_minutes(duration)
    text = Text.assemble(
        (str(hours), ACCENT_STYLE),
        " hours, ",
        (str(minutes), ACCENT_STYLE),
        " minutes to ",
        (next_prayer, ACCENT_STYLE),
    )
    _console(console).print(text)


def progress_bar(percent: float) -> Text:
    """Return a bar whose filled part is proportional to *percent*."""
    filled = int(percent / 100 * PROGRESS_WIDTH)
    empty = PROGRESS_WIDTH - filled
    bar = Text()
    if filled > 0:
        bar.append(" " * filled, style=PROGRESS_STYLE)
    if empty > 0:
        bar.append(PROGRESS_SYMBOL * empty)
    return bar


def render_time_progress(
    previous_prayer: str,
    next_prayer: str,
    percent: float,
    console: Console | None = None,
) -> None:
    """Show the previous and next prayer with a progress bar between them."""
    line = Text.assemble(previous_prayer, " ", progress_bar(percent), " ", next_prayer)
    _console(console).print(line, soft_wrap=True)