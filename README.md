# fitbitapi

A small Python client for the Fitbit Web API. It fetches a day's sleep logs
and a day's activity summary, turns the JSON into dataclasses, and offers an
in-memory cache so that each date is only requested once.

No third-party packages are needed; HTTP is done with the standard library
(`urllib.request`).

## Installation

```
pip install .
```

## Fetching data

You need an OAuth2 access token for the Fitbit API. It is sent as a
`Bearer` token in the `Authorization` header.

```python
from datetime import date

from fitbitapi.fitbit_client import FitbitClient, FitbitError

client = FitbitClient("token", timeout=30)

try:
    sleep = client.fetch_sleep_data(date(2025, 3, 30))
    activity = client.fetch_activity_summary(date(2025, 3, 30))
except FitbitError as exc:
    print("request failed:", exc)
else:
    print("asleep for", sleep.total_duration_asleep())
    print("efficiency", sleep.sleep_efficiency())
    print("fell asleep at", sleep.time_fell_asleep())
    print("woke up at", sleep.wake_up_time())
    print("steps", activity.steps())
```

`timeout` is in seconds and defaults to 30. Sleep data comes from the v1.2
sleep endpoint and activity data from the v1 activities endpoint.

Errors, all in `fitbitapi.fitbit_client`:

- `RequestError` - the request failed or the server answered with an error
  status; for an HTTP error the status code is in its `status` attribute,
  otherwise `status` is `None`.
- `JsonError` - the body is not JSON, or not a document of the expected shape.
- Both derive from `FitbitError`.

## Sleep data

`fitbitapi.sleep.SleepResponse` holds the day's logs (`sleep`, a list of
`SleepData`) and a `summary` (`SleepSummary`). Each log carries its
`levels`: the level periods (`data`, `short_data`, lists of `LevelData`)
and per-level totals. A period's `level` is a `SleepLevel`: `DEEP`,
`LIGHT`, `REM`, `WAKE` or `UNKNOWN`; `LevelData.is_sleep()` is true for
every level except `WAKE`.

The analysis methods work on the main sleep, the first log marked
`is_main_sleep`:

- `main_sleep()` - that log, or `None`
- `total_duration_asleep()` - the summary's total minutes asleep as a `timedelta`
- `sleep_efficiency()` - the main sleep's efficiency, or `None`
- `time_fell_asleep()` - start of the first non-wake period longer than
  300 seconds, or `None`
- `wake_up_time()` - time of day the main sleep ended, or `None`
- `total_duration_awake_during_sleep()` - the summed length of all level
  periods of the main sleep, or `None`
- `time_awake_between(start, end)` - the part of the window not covered by
  a non-wake period of the main sleep; the whole window if there is no main sleep

Responses you already hold as dictionaries can be parsed with
`SleepResponse.from_dict(...)`. Missing fields and unknown level names
raise `ValueError`.

## Activity data

`fitbitapi.activity_summary.ActivitySummaryResponse` holds `activities`,
`summary` and `goals`. The summary carries calories, steps, floors,
elevation, active minutes, resting heart rate, `distances` (each with an
`ActivityType`) and `heart_rate_zones` (each with a `HeartRateZoneName`:
`OUT_OF_RANGE`, `FAT_BURN`, `CARDIO`, `PEAK`). `steps()` returns the
day's step count. Parse a dictionary with
`ActivitySummaryResponse.from_dict(...)`; missing fields and unknown enum
values raise `ValueError`.

## Caching

```python
from datetime import date

from fitbitapi.fitbit_client import FitbitClient
from fitbitapi.response_cache import FitbitResponseCache

cache = FitbitResponseCache(FitbitClient("token", timeout=30))

day = date(2025, 3, 30)
first = cache.get_sleep_response(day)   # fetched from the API
again = cache.get_sleep_response(day)   # served from the cache

cache.remove_from_cache(day)  # forget one date
cache.clear_cache()           # forget everything
client = cache.client()       # the wrapped client
```

Errors raised by the client pass through and nothing is cached for that
date. Any object with `fetch_sleep_data(date)` and
`fetch_activity_summary(date)` methods (see `FitbitClientProtocol`) can
stand in for the client, which makes the cache easy to use with test
doubles.

## What it does not do

- It does not obtain or refresh access tokens; you supply a token.
- The cache lives in memory only and is not written to disk.
- Individual logged activities are parsed as empty `Activity` objects; none
  of their fields are read.
- There is no command-line program; the package is a library.

## Running the tests

```
pip install -e ".[test]"
pytest
```