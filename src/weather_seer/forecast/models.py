"""Forecast data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from weather_seer.reference.patterns import pattern_name

if TYPE_CHECKING:
    from datetime import date

    from weather_seer.reference.patterns import Pattern
    from weather_seer.reference.weather import (
        CloudLevel,
        FogLevel,
        Hemisphere,
        SnowLevel,
        SpecialDay,
        Weather,
    )


@dataclass(frozen=True)
class ShootingStar:
    """A minute with shooting stars and the second each one falls."""

    hour: int
    minute: int
    seconds: tuple[int, ...]

    @property
    def count(self) -> int:
        return len(self.seconds)


@dataclass
class DayForecast:
    """Everything the simulator says about one date."""

    date: date
    pattern: Pattern
    weather: list[Weather]  # indexed by hour, 0-23
    wind_power: list[int]  # indexed by hour, 0-23
    special_day: SpecialDay
    snow_level: SnowLevel
    cloud_level: CloudLevel
    fog_level: FogLevel
    water_fog: bool
    rainbow_count: int
    rainbow_hour: int
    aurora: bool
    light_shower: bool
    heavy_shower: bool
    shooting_stars: list[ShootingStar] = field(default_factory=list)

    @property
    def pattern_name(self) -> str:
        return pattern_name(self.pattern)

    @property
    def star_count(self) -> int:
        """Total shooting stars over the night."""
        return sum(s.count for s in self.shooting_stars)


@dataclass
class MonthForecast:
    """Daily forecasts for a month plus counts of notable days."""

    hemisphere: Hemisphere
    seed: int
    year: int
    month: int
    days: list[DayForecast] = field(default_factory=list)
    aurora_count: int = 0
    rainbow_count: int = 0
    single_rainbow_count: int = 0
    double_rainbow_count: int = 0
    light_shower_count: int = 0
    heavy_shower_count: int = 0

    def add_day(self, forecast: DayForecast) -> None:
        """Append a day and update the counts."""
        self.days.append(forecast)
        if forecast.aurora:
            self.aurora_count += 1
        if forecast.rainbow_count > 0:
            self.rainbow_count += 1
        if forecast.rainbow_count == 1:
            self.single_rainbow_count += 1
        if forecast.rainbow_count == 2:
            self.double_rainbow_count += 1
        if forecast.light_shower:
            self.light_shower_count += 1
        if forecast.heavy_shower:
            self.heavy_shower_count += 1

    @property
    def start_date(self) -> date:
        return self.days[0].date
