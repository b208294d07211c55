"""Data records for prayer times: the wire format and the domain view."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Mapping

# The only place where prayer names are spelled out, in the order of the day.
SORTED_PRAYER_NAMES: tuple[str, ...] = ("Fajr", "Dhuhr", "Asr", "Maghrib", "Isha")


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a JSON object, got {type(data).__name__}")
    return data


@dataclass
class PrayerTimesDto:
    """The five prayer times of one day, as text such as "12:05 pm"."""

    fajr: str = ""
    dhuhr: str = ""
    asr: str = ""
    maghrib: str = ""
    isha: str = ""

    def sorted_prayers(self) -> list[str]:
        """Return the prayer times in the order they fall during the day."""
        return [self.fajr, self.dhuhr, self.asr, self.maghrib, self.isha]

    @classmethod
    def from_dict(cls, data: Any) -> PrayerTimesDto:
        data = _mapping(data, "prayerTimes")
        return cls(
            fajr=data.get("fajr", ""),
            dhuhr=data.get("dhuhr", ""),
            asr=data.get("asr", ""),
            maghrib=data.get("maghrib", ""),
            isha=data.get("ishaa", ""),
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "fajr": self.fajr,
            "dhuhr": self.dhuhr,
            "asr": self.asr,
            "maghrib": self.maghrib,
            "ishaa": self.isha,
        }


@dataclass
class Event:
    """A named occasion on a day, in English and Arabic."""

    en: str = ""
    ar: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Event:
        data = _mapping(data, "event")
        return cls(en=data.get("en", ""), ar=data.get("ar", ""))

    def to_dict(self) -> dict[str, str]:
        return {"en": self.en, "ar": self.ar}


@dataclass
class DailyPrayersDto:
    """One day's entry of the yearly prayer times document."""

    id: int = 0
    week_id: int = 0
    gregorian: str = ""
    hijri: str = ""
    prayers: PrayerTimesDto = field(default_factory=PrayerTimesDto)
    event: Event = field(default_factory=Event)

    @classmethod
    def from_dict(cls, data: Any) -> DailyPrayersDto:
        data = _mapping(data, "day")
        return cls(
            id=data.get("id", 0),
            week_id=data.get("weekId", 0),
            gregorian=data.get("gregorian", ""),
            hijri=data.get("hijri", ""),
            prayers=PrayerTimesDto.from_dict(data.get("prayerTimes")),
            event=Event.from_dict(data.get("event")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "weekId": self.week_id,
            "gregorian": self.gregorian,
            "hijri": self.hijri,
            "prayerTimes": self.prayers.to_dict(),
            "event": self.event.to_dict(),
        }


@dataclass
class PrayerTimesResponse:
    """The yearly prayer times document."""

    year: list[DailyPrayersDto] = field(default_factory=list)
    sha1: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> PrayerTimesResponse:
        data = _mapping(data, "response")
        days = data.get("year") or []
        if not isinstance(days, list):
            raise ValueError("year must be a JSON array")
        return cls(
            year=[DailyPrayersDto.from_dict(day) for day in days],
            sha1=data.get("sha1", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"year": [day.to_dict() for day in self.year], "sha1": self.sha1}


@dataclass
class Prayer:
    """A named prayer at a point in time."""

    name: str
    time: datetime


@dataclass
class DayPrayers:
    """The prayers of one day with the day's identifier."""

    id: int
    date: datetime
    prayers: list[Prayer]


@dataclass
class DailyPrayerSchedule:
    """The prayers of one day."""

    date: datetime
    prayers: list[Prayer]


@dataclass
class ActivePrayerTracking(DailyPrayerSchedule):
    """Today's schedule with the position between the previous and next prayer."""

    previous_prayer: str
    next_prayer: str
    time_remaining: timedelta
    progress: float