"""Sleep log data returned by the sleep endpoint (API version 1.2)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Any, Mapping

_EPOCH_DATE = date(1970, 1, 1)
_EPOCH = datetime(1970, 1, 1)

# Shorter sleep stages are not taken as the moment of falling asleep.
MIN_SLEEP_SECONDS = 300


def _field(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None
    except TypeError:
        raise ValueError(f"expected an object holding `{key}`") from None


def _datetime(value: Any) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid date-time: {value!r}") from exc


def _date(value: Any) -> date:
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid date: {value!r}") from exc


class SleepLevel(Enum):
    """Stage of sleep recorded for a period."""

    DEEP = "deep"
    LIGHT = "light"
    REM = "rem"
    WAKE = "wake"
    UNKNOWN = "unknown"


@dataclass
class LevelData:
    """A period spent in one sleep level."""

    date_time: datetime
    level: SleepLevel = SleepLevel.WAKE
    seconds: int = 0

    @property
    def end(self) -> datetime:
        return self.date_time + timedelta(seconds=self.seconds)

    def is_sleep(self) -> bool:
        """Return True unless the period is spent awake."""
        return self.level is not SleepLevel.WAKE

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LevelData:
        try:
            level = SleepLevel(_field(data, "level"))
        except ValueError as exc:
            raise ValueError(f"unknown sleep level: {data.get('level')!r}") from exc
        return cls(
            date_time=_datetime(_field(data, "dateTime")),
            level=level,
            seconds=int(_field(data, "seconds")),
        )


@dataclass
class LevelSummary:
    """Totals for one sleep level."""

    count: int = 0
    minutes: int = 0
    thirty_day_avg_minutes: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LevelSummary:
        return cls(
            count=int(_field(data, "count")),
            minutes=int(_field(data, "minutes")),
            thirty_day_avg_minutes=float(_field(data, "thirtyDayAvgMinutes")),
        )


@dataclass
class LevelsSummary:
    """Totals for every sleep level."""

    deep: LevelSummary = field(default_factory=LevelSummary)
    light: LevelSummary = field(default_factory=LevelSummary)
    rem: LevelSummary = field(default_factory=LevelSummary)
    wake: LevelSummary = field(default_factory=LevelSummary)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LevelsSummary:
        return cls(
            deep=LevelSummary.from_dict(_field(data, "deep")),
            light=LevelSummary.from_dict(_field(data, "light")),
            rem=LevelSummary.from_dict(_field(data, "rem")),
            wake=LevelSummary.from_dict(_field(data, "wake")),
        )


@dataclass
class SleepLevels:
    """The level periods of one sleep log."""

    data: list[LevelData] = field(default_factory=list)
    short_data: list[LevelData] = field(default_factory=list)
    summary: LevelsSummary = field(default_factory=LevelsSummary)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SleepLevels:
        return cls(
            data=[LevelData.from_dict(item) for item in _field(data, "data")],
            short_data=[LevelData.from_dict(item) for item in _field(data, "shortData")],
            summary=LevelsSummary.from_dict(_field(data, "summary")),
        )


@dataclass
class SleepData:
    """One sleep log."""

    date_of_sleep: date = _EPOCH_DATE
    duration: int = 0
    efficiency: int = 0
    end_time: datetime = _EPOCH
    info_code: int = 0
    is_main_sleep: bool = False
    levels: SleepLevels = field(default_factory=SleepLevels)
    log_id: int = 0
    log_type: str = ""
    minutes_after_wakeup: int = 0
    minutes_asleep: int = 0
    minutes_awake: int = 0
    minutes_to_fall_asleep: int = 0
    start_time: datetime = _EPOCH
    time_in_bed: int = 0
    sleep_type: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SleepData:
        return cls(
            date_of_sleep=_date(_field(data, "dateOfSleep")),
            duration=int(_field(data, "duration")),
            efficiency=int(_field(data, "efficiency")),
            end_time=_datetime(_field(data, "endTime")),
            info_code=int(_field(data, "infoCode")),
            is_main_sleep=bool(_field(data, "isMainSleep")),
            levels=SleepLevels.from_dict(_field(data, "levels")),
            log_id=int(_field(data, "logId")),
            log_type=str(_field(data, "logType")),
            minutes_after_wakeup=int(_field(data, "minutesAfterWakeup")),
            minutes_asleep=int(_field(data, "minutesAsleep")),
            minutes_awake=int(_field(data, "minutesAwake")),
            minutes_to_fall_asleep=int(_field(data, "minutesToFallAsleep")),
            start_time=_datetime(_field(data, "startTime")),
            time_in_bed=int(_field(data, "timeInBed")),
            sleep_type=str(_field(data, "type")),
        )


@dataclass
class StagesSummary:
    """Minutes spent in each stage across all logs."""

    deep: int = 0
    light: int = 0
    rem: int = 0
    wake: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StagesSummary:
        return cls(
            deep=int(_field(data, "deep")),
            light=int(_field(data, "light")),
            rem=int(_field(data, "rem")),
            wake=int(_field(data, "wake")),
        )


@dataclass
class SleepSummary:
    """Totals across all sleep logs of a day."""

    stages: StagesSummary = field(default_factory=StagesSummary)
    total_minutes_asleep: int = 0
    total_sleep_records: int = 0
    total_time_in_bed: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SleepSummary:
        return cls(
            stages=StagesSummary.from_dict(_field(data, "stages")),
            total_minutes_asleep=int(_field(data, "totalMinutesAsleep")),
            total_sleep_records=int(_field(data, "totalSleepRecords")),
            total_time_in_bed=int(_field(data, "totalTimeInBed")),
        )


@dataclass
class SleepResponse:
    """The sleep logs and summary for one day."""

    sleep: list[SleepData] = field(default_factory=list)
    summary: SleepSummary = field(default_factory=SleepSummary)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SleepResponse:
        return cls(
            sleep=[SleepData.from_dict(item) for item in _field(data, "sleep")],
            summary=SleepSummary.from_dict(_field(data, "summary")),
        )

    def main_sleep(self) -> SleepData | None:
        """Return the first log marked as the main sleep, if any."""
        return next((log for log in self.sleep if log.is_main_sleep), None)

    def total_duration_asleep(self) -> timedelta:
        return timedelta(minutes=self.summary.total_minutes_asleep)

    def sleep_efficiency(self) -> int | None:
        main = self.main_sleep()
        return main.efficiency if main else None

    def time_fell_asleep(self) -> datetime | None:
        """Start of the first non-wake period of the main sleep longer than five minutes."""
        main = self.main_sleep()
        if main is None:
            return None
        return next(
            (
                stage.date_time
                for stage in main.levels.data
                if stage.is_sleep() and stage.seconds > MIN_SLEEP_SECONDS
            ),
            None,
        )

    def wake_up_time(self) -> time | None:
        main = self.main_sleep()
        return main.end_time.time() if main else None

    def total_duration_awake_during_sleep(self) -> timedelta | None:
        """Sum of the durations of all level periods of the main sleep."""
        main = self.main_sleep()
        if main is None:
            return None
        return timedelta(seconds=sum(level.seconds for level in main.levels.data))

    def time_awake_between(self, start: datetime, end: datetime) -> timedelta:
        """Time between start and end not covered by a non-wake period of the main sleep."""
        total = end - start
        main = self.main_sleep()
        if main is None:
            return total
        asleep = timedelta()
        for level in main.levels.data:
            if level.level is SleepLevel.WAKE or level.date_time >= end:
                continue
            level_start = max(level.date_time, start)
            level_end = min(level.end, end)
            if level_start < level_end:
                asleep += level_end - level_start
        return total - asleep