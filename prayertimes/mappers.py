"""Conversion of wire records into domain records."""

from __future__ import annotations

import re
from datetime import datetime

from .models import SORTED_PRAYER_NAMES, DailyPrayersDto, DayPrayers, Prayer, PrayerTimesDto

_TIME_PATTERN = re.compile(r"(\d{1,2}):(\d{2}) (am|pm)")


def map_to_day_prayers(dto: DailyPrayersDto) -> DayPrayers:
    """Build the day's prayers from its wire record; raise ValueError if it is malformed."""
    try:
        day = datetime.strptime(dto.gregorian, "%d/%m/%Y")
    except ValueError as exc:
        raise ValueError(f"invalid date {dto.gregorian!r}") from exc
    return DayPrayers(id=dto.id, date=day, prayers=sorted_prayer_times(day, dto.prayers))


def sorted_prayer_times(day: datetime, prayer_times: PrayerTimesDto) -> list[Prayer]:
    """Return the day's prayers in order, each at its time on the given day."""
    return [
        Prayer(name=name, time=parse_time(day, text))
        for name, text in zip(SORTED_PRAYER_NAMES, prayer_times.sorted_prayers())
    ]


def parse_time(requested: datetime, text: str) -> datetime:
    """Parse a time such as "12:05 pm" onto the date of *requested*, at second 59."""
    match = _TIME_PATTERN.fullmatch(text.strip().lower())
    if match is None:
        raise ValueError(f"invalid time {text!r}")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 12:
        raise ValueError(f"hour out of range in {text!r}")
    if minute > 59:
        raise ValueError(f"minute out of range in {text!r}")
    if match.group(3) == "pm" and hour < 12:
        hour += 12
    elif match.group(3) == "am" and hour == 12:
        hour = 0
    return requested.replace(hour=hour, minute=minute, second=59, microsecond=0)