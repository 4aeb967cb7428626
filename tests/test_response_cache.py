from datetime import date

import pytest

from fitbitapi.activity_summary import ActivitySummaryResponse
from fitbitapi.fitbit_client import RequestError
from fitbitapi.response_cache import FitbitResponseCache
from fitbitapi.sleep import SleepResponse

DAY = date(2024, 1, 1)
OTHER_DAY = date(2024, 1, 2)

ACTIVITY_JSON = {
    "activities": [],
    "summary": {
        "caloriesOut": 1746,
        "activityCalories": 62,
        "caloriesBMR": 668,
        "activeScore": -1,
        "steps": 27,
        "floors": 0,
        "elevation": 0.0,
        "sedentaryMinutes": 552,
        "lightlyActiveMinutes": 14,
        "fairlyActiveMinutes": 0,
        "veryActiveMinutes": 0,
        "distances": [{"activity": "total", "distance": 0.0197}],
        "marginalCalories": 40,
        "restingHeartRate": 60,
        "heartRateZones": [
            {"minutes": 412, "caloriesOut": 529.8314, "name": "Out of Range", "min": 30, "max": 114}
        ],
    },
    "goals": {
        "caloriesOut": 2545,
        "steps": 8000,
        "distance": 8.05,
        "floors": 10,
        "activeMinutes": 30,
    },
}


class FakeClient:
    def __init__(self, fail_times=0):
        self.sleep_calls = []
        self.activity_calls = []
        self.fail_times = fail_times

    def fetch_sleep_data(self, day):
        self.sleep_calls.append(day)
        if self.fail_times:
            self.fail_times -= 1
            raise RequestError("boom", status=500)
        return SleepResponse()

    def fetch_activity_summary(self, day):
        self.activity_calls.append(day)
        if self.fail_times:
            self.fail_times -= 1
            raise RequestError("boom", status=500)
        return ActivitySummaryResponse.from_dict(ACTIVITY_JSON)


def test_cache_behavior():
    client = FakeClient()
    cache = FitbitResponseCache(client)
    first = cache.get_sleep_response(DAY)
    second = cache.get_sleep_response(DAY)
    assert client.sleep_calls == [DAY]
    assert first is second


def test_clear_cache():
    client = FakeClient()
    cache = FitbitResponseCache(client)
    cache.get_sleep_response(DAY)
    cache.clear_cache()
    cache.get_sleep_response(DAY)
    assert client.sleep_calls == [DAY, DAY]


def test_remove_from_cache():
    client = FakeClient()
    cache = FitbitResponseCache(client)
    cache.get_sleep_response(DAY)
    cache.remove_from_cache(DAY)
    cache.get_sleep_response(DAY)
    assert client.sleep_calls == [DAY, DAY]


def test_remove_from_cache_keeps_other_dates():
    client = FakeClient()
    cache = FitbitResponseCache(client)
    cache.get_sleep_response(DAY)
    cache.get_sleep_response(OTHER_DAY)
    cache.remove_from_cache(DAY)
    cache.get_sleep_response(OTHER_DAY)
    cache.get_sleep_response(DAY)
    assert client.sleep_calls == [DAY, OTHER_DAY, DAY]


def test_remove_unknown_date_leaves_cache_intact():
    client = FakeClient()
    cache = FitbitResponseCache(client)
    cache.get_sleep_response(DAY)
    cache.remove_from_cache(OTHER_DAY)
    cache.get_sleep_response(DAY)
    assert client.sleep_calls == [DAY]


def test_activity_summary_is_cached():
    client = FakeClient()
    cache = FitbitResponseCache(client)
    first = cache.get_activity_summary_response(DAY)
    second = cache.get_activity_summary_response(DAY)
    assert client.activity_calls == [DAY]
    assert first is second
    assert first.steps() == 27


def test_clear_cache_drops_activity_summaries():
    client = FakeClient()
    cache = FitbitResponseCache(client)
    cache.get_activity_summary_response(DAY)
    cache.clear_cache()
    cache.get_activity_summary_response(DAY)
    assert client.activity_calls == [DAY, DAY]


def test_remove_from_cache_drops_activity_summary():
    client = FakeClient()
    cache = FitbitResponseCache(client)
    cache.get_activity_summary_response(DAY)
    cache.remove_from_cache(DAY)
    cache.get_activity_summary_response(DAY)
    assert client.activity_calls == [DAY, DAY]


def test_sleep_and_activity_are_cached_separately():
    client = FakeClient()
    cache = FitbitResponseCache(client)
    cache.get_sleep_response(DAY)
    cache.get_activity_summary_response(DAY)
    assert client.sleep_calls == [DAY]
    assert client.activity_calls == [DAY]


def test_errors_propagate_and_are_not_cached():
    client = FakeClient(fail_times=1)
    cache = FitbitResponseCache(client)
    with pytest.raises(RequestError) as info:
        cache.get_sleep_response(DAY)
    assert info.value.status == 500
    response = cache.get_sleep_response(DAY)
    assert response == SleepResponse()
    assert client.sleep_calls == [DAY, DAY]


def test_client_returns_underlying_client():
    client = FakeClient()
    cache = FitbitResponseCache(client)
    assert cache.client() is client