"""Looking up prayer times for a day and tracking the current prayer period."""

from __future__ import annotations

import json
import math
import urllib.error
import urllib.request
from contextlib import suppress
from datetime import datetime, timedelta
from typing import Callable

from .mappers import map_to_day_prayers
from .models import (
    ActivePrayerTracking,
    DailyPrayerSchedule,
    DailyPrayersDto,
    DayPrayers,
    Prayer,
    PrayerTimesResponse,
)
from .storage import Storage

DAYS_URL = "https://ibad-al-rahman.github.io/prayer-times/v1/year/days/{year}.json"
FETCH_TIMEOUT = 30.0


class PrayerTimesError(Exception):
    """Raised when prayer times for a requested day cannot be produced."""


def same_day(first: datetime, second: datetime) -> bool:
    """Return True if both moments fall on the same calendar day."""
    return (first.year, first.month, first.day) == (second.year, second.month, second.day)


def format_date(date: datetime) -> str:
    """Format a date the way the yearly document keys its days.

    Days are always two digits; months are padded only below September.
    """
    day = f"{date.day:02d}"
    month = f"{date.month:02d}" if date.month < 9 else str(date.month)
    return f"{day}/{month}/{date.year}"


def find_prayer_times(data: PrayerTimesResponse, date_str: str) -> DailyPrayersDto | None:
    """Return the day entry whose Gregorian date equals *date_str*, if any."""
    return next((day for day in data.year if day.gregorian == date_str), None)


def time_remaining_to(next_prayer_time: datetime, now: datetime) -> timedelta:
    """Return the time left until *next_prayer_time*; raise ValueError if it has passed."""
    if now > next_prayer_time:
        raise ValueError("next prayer time has already passed")
    return next_prayer_time - now


def time_progress_percent(
    previous_prayer_time: datetime,
    next_prayer_time: datetime,
    now: datetime,
) -> float:
    """Return how far *now* is between two prayers, as a percentage from 0 to 100."""
    total = (next_prayer_time - previous_prayer_time).total_seconds()
    remaining = (next_prayer_time - now).total_seconds()
    if remaining <= 0:
        return 100.0
    if total == 0:
        return 0.0
    percent = 100 - (remaining / total) * 100.0
    if math.isnan(percent) or percent < 0:
        return 0.0
    return min(percent, 100.0)


def fetch_prayer_times(year: int) -> PrayerTimesResponse:
    """Download the prayer times document for *year*."""
    url = DAYS_URL.format(year=year)
    try:
        with urllib.request.urlopen(url, timeout=FETCH_TIMEOUT) as response:
            status = response.status
            body = response.read()
    except urllib.error.HTTPError as exc:
        raise PrayerTimesError(f"response not ok: {exc.code}") from exc
    if status != 200:
        raise PrayerTimesError(f"response not ok: {status}")
    return PrayerTimesResponse.from_dict(json.loads(body))


class PrayerTimesRepo:
    """Serves prayer schedules from local storage, fetching the year when it is missing."""

    def __init__(
        self,
        storage: Storage,
        fetch: Callable[[int], PrayerTimesResponse] | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._storage = storage
        self._fetch = fetch if fetch is not None else fetch_prayer_times
        self._clock = clock if clock is not None else datetime.now

    def daily_prayer_schedule(self, date: datetime) -> DailyPrayerSchedule:
        """Return the prayers of the day of *date*."""
        day = self._day_prayers_for(date)
        return DailyPrayerSchedule(date=day.date, prayers=day.prayers)

    def active_prayer_tracking(self, date: datetime) -> ActivePrayerTracking:
        """Return the day's prayers with the current position between prayers."""
        day = self._day_prayers_for(date)
        now = self._clock()
        previous, upcoming = self._previous_and_next(day, now)
        try:
            remaining = time_remaining_to(upcoming.time, now)
        except ValueError as exc:
            raise PrayerTimesError("Failed to get time remaining to next prayer") from exc
        return ActivePrayerTracking(
            date=day.date,
            prayers=day.prayers,
            previous_prayer=previous.name,
            next_prayer=upcoming.name,
            time_remaining=remaining,
            progress=time_progress_percent(previous.time, upcoming.time, now),
        )

    def _load_or_fetch(self, year: int) -> PrayerTimesResponse:
        try:
            return self._storage.load()
        except (OSError, ValueError):
            pass
        print("Fetching data from internet...")
        print(f"year={year}")
        try:
            data = self._fetch(year)
        except (OSError, ValueError, PrayerTimesError):
            print("Failed to fetch data from internet")
            raise PrayerTimesError("Failed to get day prayer") from None
        with suppress(OSError):
            self._storage.save(data)
        return data

    def _day_prayers_for(self, date: datetime) -> DayPrayers:
        data = self._load_or_fetch(date.year)
        entry = find_prayer_times(data, format_date(date))
        if entry is None:
            raise PrayerTimesError("Failed to get day prayer")
        try:
            return map_to_day_prayers(entry)
        except ValueError as exc:
            raise PrayerTimesError("Failed to get day prayer") from exc

    def _previous_and_next(self, day: DayPrayers, now: datetime) -> tuple[Prayer, Prayer]:
        try:
            yesterday = self._day_prayers_for(now - timedelta(days=1))
            tomorrow = self._day_prayers_for(now + timedelta(days=1))
        except PrayerTimesError as exc:
            raise PrayerTimesError("Could not get previous or next prayer") from exc
        if not (yesterday.prayers and tomorrow.prayers):
            raise PrayerTimesError("Could not get previous or next prayer")

        # Yesterday's last prayer and tomorrow's first bound today's prayers.
        combined = [yesterday.prayers[-1], *day.prayers, tomorrow.prayers[0]]
        index = next((i for i, prayer in enumerate(combined) if prayer.time >= now), None)
        if not index:
            raise PrayerTimesError("Could not get previous or next prayer")
        return combined[index - 1], combined[index]