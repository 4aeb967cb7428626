"""HTTP client for the Fitbit web API."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from datetime import date
from typing import Any, Callable, Protocol, TypeVar

from fitbitapi.activity_summary import ActivitySummaryResponse
from fitbitapi.sleep import SleepResponse

API_BASE_URL = "https://api.fitbit.com"
SLEEP_API_VERSION = "1.2"
ACTIVITY_API_VERSION = "1"
DEFAULT_TIMEOUT = 30.0

T = TypeVar("T")


class FitbitError(Exception):
    """Base class for errors raised while talking to the Fitbit API."""


class RequestError(FitbitError):
    """The HTTP request failed or the server answered with an error status."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class JsonError(FitbitError):
    """The response body could not be read as the expected JSON document."""


class FitbitClientProtocol(Protocol):
    """Operations offered by a Fitbit client."""

    def fetch_sleep_data(self, date: date) -> SleepResponse:
        """Fetch the sleep logs of a day."""
        ...

    def fetch_activity_summary(self, date: date) -> ActivitySummaryResponse:
        """Fetch the activity summary of a day."""
        ...


class FitbitClient:
    """Client authenticated with an OAuth2 access token."""

    def __init__(self, access_token: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._access_token = access_token
        self.timeout = timeout

    def __repr__(self) -> str:
        return f"{type(self).__name__}(timeout={self.timeout!r})"

    def _request(self, url: str, parse: Callable[[Any], T]) -> T:
        request = urllib.request.Request(
            url, headers={"Authorization": f"Bearer {self._access_token}"}
        )
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                body = response.read()
        except urllib.error.HTTPError as exc:
            raise RequestError(str(exc), status=exc.code) from exc
        except OSError as exc:
            raise RequestError(str(exc)) from exc
        try:
            return parse(json.loads(body))
        except (ValueError, TypeError, KeyError) as exc:
            raise JsonError(str(exc)) from exc

    @staticmethod
    def _url(version: str, resource: str, day: date) -> str:
        return f"{API_BASE_URL}/{version}/user/-/{resource}/date/{day.strftime('%Y-%m-%d')}.json"

    def fetch_sleep_data(self, date: date) -> SleepResponse:
        """Fetch the sleep logs of a day."""
        url = self._url(SLEEP_API_VERSION, "sleep", date)
        return self._request(url, SleepResponse.from_dict)

    def fetch_activity_summary(self, date: date) -> ActivitySummaryResponse:
        """Fetch the activity summary of a day."""
        url = self._url(ACTIVITY_API_VERSION, "activities", date)
        return self._request(url, ActivitySummaryResponse.from_dict)