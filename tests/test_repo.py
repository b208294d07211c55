import json
import urllib.error
from datetime import datetime, timedelta
from unittest.mock import MagicMock, patch

import pytest

from prayertimes.models import (
    SORTED_PRAYER_NAMES,
    DailyPrayersDto,
    PrayerTimesDto,
    PrayerTimesResponse,
)
from prayertimes.repo import (
    PrayerTimesError,
    PrayerTimesRepo,
    fetch_prayer_times,
    find_prayer_times,
    format_date,
    same_day,
    time_progress_percent,
    time_remaining_to,
)
from prayertimes.storage import Storage

TIMES = PrayerTimesDto(
    fajr="5:30 am", dhuhr="12:00 pm", asr="3:00 pm", maghrib="5:00 pm", isha="6:30 pm"
)
JAN4 = datetime(2024, 1, 4)
JAN5 = datetime(2024, 1, 5)
JAN6 = datetime(2024, 1, 6)


class MemoryStorage(Storage):
    def __init__(self, data=None):
        self.data = data
        self.saved = []

    def load(self):
        if self.data is None:
            raise FileNotFoundError("nothing stored")
        return self.data

    def save(self, data):
        self.saved.append(data)
        self.data = data


def make_response(*days, times=TIMES):
    return PrayerTimesResponse(
        year=[
            DailyPrayersDto(id=i, gregorian=format_date(d), prayers=times)
            for i, d in enumerate(days, 1)
        ]
    )


def make_repo(now, data=None, fetch=None):
    storage = MemoryStorage(make_response(JAN4, JAN5, JAN6) if data is None else data)
    return PrayerTimesRepo(storage, fetch=fetch, clock=lambda: now)


def test_daily_schedule_lists_prayers_in_order():
    repo = make_repo(JAN5)
    schedule = repo.daily_prayer_schedule(JAN5 + timedelta(hours=9))
    assert schedule.date == JAN5
    assert [p.name for p in schedule.prayers] == list(SORTED_PRAYER_NAMES)
    assert schedule.prayers[1].time == datetime(2024, 1, 5, 12, 0, 59)
    assert all(a.time < b.time for a, b in zip(schedule.prayers, schedule.prayers[1:]))


def test_daily_schedule_missing_day_raises():
    repo = make_repo(JAN5)
    with pytest.raises(PrayerTimesError):
        repo.daily_prayer_schedule(datetime(2024, 2, 1))


def test_active_tracking_between_dhuhr_and_asr():
    now = datetime(2024, 1, 5, 13, 0)
    tracking = make_repo(now).active_prayer_tracking(now)
    assert tracking.previous_prayer == "Dhuhr"
    assert tracking.next_prayer == "Asr"
    assert now + tracking.time_remaining == tracking.prayers[2].time
    assert 0.0 < tracking.progress < 100.0
    assert tracking.date == JAN5


def test_active_tracking_before_fajr_uses_yesterdays_isha():
    now = datetime(2024, 1, 5, 4, 0)
    tracking = make_repo(now).active_prayer_tracking(now)
    assert tracking.previous_prayer == "Isha"
    assert tracking.next_prayer == "Fajr"
    assert now + tracking.time_remaining == tracking.prayers[0].time


def test_active_tracking_after_isha_uses_tomorrows_fajr():
    now = datetime(2024, 1, 5, 22, 0)
    tracking = make_repo(now).active_prayer_tracking(now)
    assert tracking.previous_prayer == "Isha"
    assert tracking.next_prayer == "Fajr"
    assert now + tracking.time_remaining == datetime(2024, 1, 6, 5, 30, 59)


def test_active_tracking_without_tomorrow_raises():
    now = datetime(2024, 1, 5, 13, 0)
    repo = make_repo(now, data=make_response(JAN4, JAN5))
    with pytest.raises(PrayerTimesError, match="previous or next"):
        repo.active_prayer_tracking(now)


def test_missing_cache_fetches_and_saves():
    fetched = []
    data = make_response(JAN4, JAN5, JAN6)

    def fetch(year):
        fetched.append(year)
        return data

    storage = MemoryStorage()
    repo = PrayerTimesRepo(storage, fetch=fetch, clock=lambda: JAN5)
    schedule = repo.daily_prayer_schedule(JAN5)
    assert fetched == [2024]
    assert storage.saved == [data]
    assert schedule.date == JAN5


def test_failed_fetch_raises_and_reports(capsys):
    def fetch(year):
        raise OSError("offline")

    repo = PrayerTimesRepo(MemoryStorage(), fetch=fetch, clock=lambda: JAN5)
    with pytest.raises(PrayerTimesError):
        repo.daily_prayer_schedule(JAN5)
    assert "Failed to fetch data from internet" in capsys.readouterr().out


def test_malformed_time_raises():
    bad = PrayerTimesDto(fajr="noon", dhuhr="12:00 pm", asr="3:00 pm", maghrib="5:00 pm", isha="6:30 pm")
    repo = make_repo(JAN5, data=make_response(JAN5, times=bad))
    with pytest.raises(PrayerTimesError):
        repo.daily_prayer_schedule(JAN5)


def test_same_day():
    assert same_day(datetime(2024, 1, 5, 1, 0), datetime(2024, 1, 5, 23, 59))
    assert not same_day(datetime(2024, 1, 5), datetime(2024, 1, 6))
    assert not same_day(datetime(2023, 1, 5), datetime(2024, 1, 5))


def test_format_date():
    assert format_date(JAN5) == "05/01/2024"
    assert format_date(datetime(2024, 9, 5)) == "05/9/2024"
    assert format_date(datetime(2024, 12, 25)) == "25/12/2024"


def test_find_prayer_times():
    data = make_response(JAN4, JAN5)
    found = find_prayer_times(data, format_date(JAN5))
    assert found is data.year[1]
    assert find_prayer_times(data, format_date(JAN6)) is None


def test_time_remaining_to():
    now = datetime(2024, 1, 5, 13, 0)
    target = datetime(2024, 1, 5, 15, 0, 59)
    assert now + time_remaining_to(target, now) == target
    assert time_remaining_to(now, now) == timedelta(0)
    with pytest.raises(ValueError):
        time_remaining_to(now, target)


def test_time_progress_percent():
    start = datetime(2024, 1, 5, 12, 0)
    end = datetime(2024, 1, 5, 14, 0)
    assert time_progress_percent(start, end, datetime(2024, 1, 5, 13, 0)) == pytest.approx(50.0)
    assert time_progress_percent(start, end, end) == 100.0
    assert time_progress_percent(start, end, end + timedelta(hours=1)) == 100.0
    assert time_progress_percent(start, end, start - timedelta(hours=1)) == 0.0
    assert time_progress_percent(start, end, start) == pytest.approx(0.0)


def test_time_progress_percent_grows_with_time():
    start = datetime(2024, 1, 5, 12, 0)
    end = datetime(2024, 1, 5, 14, 0)
    values = [time_progress_percent(start, end, start + timedelta(minutes=m)) for m in range(0, 121, 10)]
    assert values == sorted(values)


def _fake_urlopen(status, body):
    response = MagicMock()
    response.status = status
    response.read.return_value = body
    handle = MagicMock()
    handle.__enter__.return_value = response
    handle.__exit__.return_value = False
    return handle


def test_fetch_prayer_times_parses_document():
    data = make_response(JAN5)
    body = json.dumps(data.to_dict()).encode()
    with patch("urllib.request.urlopen", return_value=_fake_urlopen(200, body)) as opener:
        result = fetch_prayer_times(2024)
    assert result == data
    assert "2024.json" in opener.call_args.args[0]


def test_fetch_prayer_times_rejects_bad_status():
    with patch("urllib.request.urlopen", return_value=_fake_urlopen(204, b"")):
        with pytest.raises(PrayerTimesError):
            fetch_prayer_times(2024)


def test_fetch_prayer_times_http_error():
    error = urllib.error.HTTPError("http://localhost/x", 404, "Not Found", None, None)
    with patch("urllib.request.urlopen", side_effect=error):
        with pytest.raises(PrayerTimesError, match="404"):
            fetch_prayer_times(2024)