"""Per-date cache of Fitbit API responses."""

from __future__ import annotations

from datetime import date
from typing import Generic, TypeVar

from fitbitapi.activity_summary import ActivitySummaryResponse
from fitbitapi.fitbit_client import FitbitClientProtocol
from fitbitapi.sleep import SleepResponse

C = TypeVar("C", bound=FitbitClientProtocol)


class FitbitResponseCache(Generic[C]):
    """Caches responses by date so each date is fetched from the API at most once."""

    def __init__(self, fitbit_client: C) -> None:
        self._client = fitbit_client
        self._sleep_responses: dict[date, SleepResponse] = {}
        self._activity_summary_responses: dict[date, ActivitySummaryResponse] = {}

    def get_sleep_response(self, date: date) -> SleepResponse:
        """Return the sleep response for a date, fetching it if not cached.

        Errors from the client propagate and nothing is cached.
        """
        if date not in self._sleep_responses:
            self._sleep_responses[date] = self._client.fetch_sleep_data(date)
        return self._sleep_responses[date]

    def get_activity_summary_response(self, date: date) -> ActivitySummaryResponse:
        """Return the activity summary for a date, fetching it if not cached.

        Errors from the client propagate and nothing is cached.
        """
        if date not in self._activity_summary_responses:
            self._activity_summary_responses[date] = self._client.fetch_activity_summary(date)
        return self._activity_summary_responses[date]

    def clear_cache(self) -> None:
        """Forget every cached response."""
        self._sleep_responses.clear()
        self._activity_summary_responses.clear()

    def remove_from_cache(self, date: date) -> None:
        """Forget the cached responses for one date."""
        self._sleep_responses.pop(date, None)
        self._activity_summary_responses.pop(date, None)

    def client(self) -> C:
        """Return the underlying client."""
        return self._client