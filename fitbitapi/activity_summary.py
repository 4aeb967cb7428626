"""Daily activity summary returned by the activities endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


def _field(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None
    except TypeError:
        raise ValueError(f"expected an object holding `{key}`") from None


def _enum(kind: type[Enum], value: Any) -> Any:
    try:
        return kind(value)
    except ValueError:
        raise ValueError(f"unknown {kind.__name__} value: {value!r}") from None


class ActivityType(Enum):
    """Category a distance entry is counted under."""

    TOTAL = "total"
    TRACKER = "tracker"
    LOGGED_ACTIVITIES = "loggedActivities"
    VERY_ACTIVE = "veryActive"
    MODERATELY_ACTIVE = "moderatelyActive"
    LIGHTLY_ACTIVE = "lightlyActive"
    SEDENTARY_ACTIVE = "sedentaryActive"


class HeartRateZoneName(Enum):
    """Name of a heart rate zone."""

    OUT_OF_RANGE = "Out of Range"
    FAT_BURN = "Fat Burn"
    CARDIO = "Cardio"
    PEAK = "Peak"


@dataclass
class Activity:
    """A logged activity; no fields are read from it yet."""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Activity:
        if not isinstance(data, Mapping):
            raise ValueError("expected an object for an activity")
        return cls()


@dataclass
class Distance:
    """Distance covered in one activity category."""

    activity: ActivityType
    distance: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Distance:
        return cls(
            activity=_enum(ActivityType, _field(data, "activity")),
            distance=float(_field(data, "distance")),
        )


@dataclass
class HeartRateZone:
    """Time and calories spent in one heart rate zone."""

    minutes: int
    calories_out: float
    name: HeartRateZoneName
    min: int
    max: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> HeartRateZone:
        return cls(
            minutes=int(_field(data, "minutes")),
            calories_out=float(_field(data, "caloriesOut")),
            name=_enum(HeartRateZoneName, _field(data, "name")),
            min=int(_field(data, "min")),
            max=int(_field(data, "max")),
        )


@dataclass
class Summary:
    """Totals of the day's activity."""

    calories_out: int
    activity_calories: int
    calories_bmr: int
    active_score: int
    steps: int
    floors: int
    elevation: float
    sedentary_minutes: int
    lightly_active_minutes: int
    fairly_active_minutes: int
    very_active_minutes: int
    distances: list[Distance] = field(default_factory=list)
    marginal_calories: int = 0
    resting_heart_rate: int = 0
    heart_rate_zones: list[HeartRateZone] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Summary:
        return cls(
            calories_out=int(_field(data, "caloriesOut")),
            activity_calories=int(_field(data, "activityCalories")),
            calories_bmr=int(_field(data, "caloriesBMR")),
            active_score=int(_field(data, "activeScore")),
            steps=int(_field(data, "steps")),
            floors=int(_field(data, "floors")),
            elevation=float(_field(data, "elevation")),
            sedentary_minutes=int(_field(data, "sedentaryMinutes")),
            lightly_active_minutes=int(_field(data, "lightlyActiveMinutes")),
            fairly_active_minutes=int(_field(data, "fairlyActiveMinutes")),
            very_active_minutes=int(_field(data, "veryActiveMinutes")),
            distances=[Distance.from_dict(item) for item in _field(data, "distances")],
            marginal_calories=int(_field(data, "marginalCalories")),
            resting_heart_rate=int(_field(data, "restingHeartRate")),
            heart_rate_zones=[
                HeartRateZone.from_dict(item) for item in _field(data, "heartRateZones")
            ],
        )


@dataclass
class Goals:
    """The user's daily activity goals."""

    calories_out: int
    steps: int
    distance: float
    floors: int
    active_minutes: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Goals:
        return cls(
            calories_out=int(_field(data, "caloriesOut")),
            steps=int(_field(data, "steps")),
            distance=float(_field(data, "distance")),
            floors=int(_field(data, "floors")),
            active_minutes=int(_field(data, "activeMinutes")),
        )


@dataclass
class ActivitySummaryResponse:
    """Activities, summary and goals for one day."""

    activities: list[Activity]
    summary: Summary
    goals: Goals

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ActivitySummaryResponse:
        return cls(
            activities=[Activity.from_dict(item) for item in _field(data, "activities")],
            summary=Summary.from_dict(_field(data, "summary")),
            goals=Goals.from_dict(_field(data, "goals")),
        )

    def steps(self) -> int:
        """Steps taken during the day."""
        return self.summary.steps