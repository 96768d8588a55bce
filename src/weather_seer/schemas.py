"""
Domain models for weather-seer.

Pydantic models for the evidence a user records about a day. These define the
canonical schema of observation files; the inference engine reads them but
never mutates them.
"""

from __future__ import annotations

from datetime import date
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from weather_seer.reference.hours import to_linear_hour
from weather_seer.reference.weather import AmbiguousWeather, Hemisphere, Weather, parse_weather

# Placeholder in StarInfo.seconds for a star whose second was not caught.
UNKNOWN_SECOND = 99

DEFAULT_RAINBOW_TIME = 10

# =============================================================================
# Day classification
# =============================================================================


class DayType(StrEnum):
    """What the user saw that day, if anything notable."""

    NO_DATA = "no_data"
    NONE = "none"
    SHOWER = "shower"
    RAINBOW = "rainbow"
    AURORA = "aurora"


class ShowerType(StrEnum):
    """Meteor shower intensity. Only read when the day type is a shower."""

    NOT_SURE = "not_sure"
    LIGHT = "light"
    HEAVY = "heavy"


# =============================================================================
# Evidence
# =============================================================================


class WeatherTypeInfo(BaseModel):
    """The weather seen at one hour."""

    model_config = {"frozen": True}

    hour: int = Field(..., ge=0, le=23)
    expected: Weather | AmbiguousWeather

    @field_validator("expected", mode="before")
    @classmethod
    def _parse_expected(cls, value: Any) -> Any:
        if isinstance(value, Weather | AmbiguousWeather):
            return value
        if isinstance(value, bool):
            msg = f"weather must be a name or ordinal, got {value!r}"
            raise ValueError(msg)
        if isinstance(value, str | int):
            return parse_weather(value)
        return value


class StarInfo(BaseModel):
    """A minute in which at least one shooting star was seen."""

    model_config = {"frozen": True}

    hour: int = Field(..., ge=0, le=23)
    minute: int = Field(..., ge=0, le=59)
    seconds: tuple[int, ...] = ()

    @field_validator("seconds")
    @classmethod
    def _check_seconds(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        for second in value:
            if second != UNKNOWN_SECOND and not 0 <= second <= 59:
                msg = f"second must be 0-59 or {UNKNOWN_SECOND}, got {second}"
                raise ValueError(msg)
        return value

    @property
    def known_seconds(self) -> list[int]:
        """Seconds that were actually recorded."""
        return [s for s in self.seconds if s != UNKNOWN_SECOND]


class GapInfo(BaseModel):
    """An inclusive time range in which no shooting star was seen."""

    model_config = {"frozen": True}

    start_hour: int = Field(..., ge=0, le=23)
    start_minute: int = Field(..., ge=0, le=59)
    end_hour: int = Field(..., ge=0, le=23)
    end_minute: int = Field(..., ge=0, le=59)

    @model_validator(mode="after")
    def _check_order(self) -> GapInfo:
        start = (to_linear_hour(self.start_hour), self.start_minute)
        end = (to_linear_hour(self.end_hour), self.end_minute)
        if start > end:
            msg = (
                f"gap starts at {self.start_hour:02d}:{self.start_minute:02d}, "
                f"after its end {self.end_hour:02d}:{self.end_minute:02d}"
            )
            raise ValueError(msg)
        return self


# =============================================================================
# Day
# =============================================================================


class DayObservation(BaseModel):
    """Everything recorded about one calendar date."""

    year: int = Field(..., ge=1)
    month: int = Field(..., ge=1, le=12)
    day: int = Field(..., ge=1, le=31)
    day_type: DayType = DayType.NO_DATA
    shower_type: ShowerType = ShowerType.NOT_SURE
    rainbow_time: int = Field(default=DEFAULT_RAINBOW_TIME, ge=0, le=23)
    rainbow_double: bool = False
    aurora_fine01: bool = False
    aurora_fine03: bool = False
    aurora_fine05: bool = False
    types: list[WeatherTypeInfo] = Field(default_factory=list)
    stars: list[StarInfo] = Field(default_factory=list)
    gaps: list[GapInfo] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_date(self) -> DayObservation:
        # Raises ValueError for e.g. Feb 30, which pydantic reports.
        date(self.year, self.month, self.day)
        return self

    @classmethod
    def empty(cls, on: date) -> DayObservation:
        """A fresh record for ``on`` with no evidence."""
        return cls(year=on.year, month=on.month, day=on.day)

    @property
    def calendar_date(self) -> date:
        return date(self.year, self.month, self.day)


def is_day_non_empty(day: DayObservation) -> bool:
    """Whether the user has recorded anything that constrains the day."""
    return day.day_type != DayType.NO_DATA or len(day.types) > 0


class ObservationLog(BaseModel):
    """An island's recorded days, as stored in an observation file."""

    hemisphere: Hemisphere = Hemisphere.NORTHERN
    days: list[DayObservation] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_dates(self) -> ObservationLog:
        seen: set[date] = set()
        for day in self.days:
            if day.calendar_date in seen:
                msg = f"date {day.calendar_date.isoformat()} is recorded more than once"
                raise ValueError(msg)
            seen.add(day.calendar_date)
        return self
