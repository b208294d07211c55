# prayertimes

A small terminal tool that shows the five daily prayer times (Fajr, Dhuhr,
Asr, Maghrib, Isha) for a given day.

If the requested day is today, it shows three more things:

- how many hours and minutes are left until the next prayer;
- the names of the previous and next prayer;
- a 40-character bar between those two names, showing how far the current
  time has got from the previous prayer to the next one.

## Installation

```
pip install .
```

## Usage

Show today's prayer times, the time left to the next prayer and the progress bar:

```
prayers
```

Show the schedule for another day:

```
prayers --year 2025 --month 3 --day 14
prayers -m 12 -d 1
```

Any part of the date you leave out (`-y/--year`, `-m/--month`, `-d/--day`)
takes today's value. A month or day beyond its range carries over into the
next month or year; `-m 13` is January of the following year.

The output begins with the date as weekday and `day/month/year`, for example
`Friday 14/03/2025`. Below it comes a table with the prayer names as column
headers and their times, such as `4:35 am`, in a single row. For today two
more lines follow. The first reads like `2 hours, 13 minutes to Asr`. The
second shows the previous prayer's name, the progress bar and the next
prayer's name.

When the prayer times for a day cannot be found or downloaded, the command
prints `Error: ...` to standard error and exits with status 1.

## Data and caching

The prayer-time calendar comes as one JSON document per year. The first time
you ask for a year, its calendar is downloaded and saved to
`~/.prayer-times-cli/<year>.json`. Later runs read that file and need no
network connection. If the saved file is missing or cannot be read, the
calendar is downloaded again.

## Using it as a library

```python
from datetime import datetime

from prayertimes.repo import PrayerTimesRepo
from prayertimes.storage import FileStorage
from prayertimes.ui import render_active_prayer_tracking, render_daily_prayer_schedule

repo = PrayerTimesRepo(FileStorage("2025.json"))
render_daily_prayer_schedule(repo.daily_prayer_schedule(datetime(2025, 3, 14)))
```

- `PrayerTimesRepo(storage, fetch=None, clock=None)` takes any
  `prayertimes.storage.Storage`. It can also take a function that downloads a
  year's `PrayerTimesResponse` and a function that returns the current time,
  which makes it easy to test.
- `daily_prayer_schedule(date)` returns a `DailyPrayerSchedule`.
- `active_prayer_tracking(date)` returns an `ActivePrayerTracking`, which adds
  `previous_prayer`, `next_prayer`, `time_remaining` and `progress`
  (0 to 100).
- `FileStorage(file_name, root_dir=None)` keeps a document as indented JSON.
  By default it writes under `~/.prayer-times-cli`.
- Both repository methods raise `prayertimes.repo.PrayerTimesError` when they
  cannot find or download the prayer times for the requested day.

The rendering functions in `prayertimes.ui` take an optional `rich`
`Console`. `format_time_remaining(next_prayer, duration)` and
`progress_bar(percent)` return the remaining-time sentence and the bar
without printing them.

## What it does not do

- There is one calendar source. You cannot choose a city, a location or a
  calculation method.
- The command always uses `~/.prayer-times-cli` for its cache. Only the
  library's `FileStorage` accepts another directory.
- Today's tracking also needs yesterday's and tomorrow's prayers, and it looks
  them up in the current year's file. On the first and last day of a year this
  lookup fails, and the command reports an error instead of showing the
  tracking.

## Development

```
pip install -e ".[test]"
pytest
```