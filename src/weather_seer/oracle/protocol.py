"""Interface of the weather simulator.

The simulator is a deterministic function bank: given hemisphere, seed, date
and pattern it always returns the same observables. weather-seer never
reimplements it; any object (or module) providing these callables works.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
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
class RainbowInfo:
    """Rainbows on a day: how many (0, 1 or 2) and at which hour."""

    count: int
    hour: int

    @property
    def is_double(self) -> bool:
        return self.count == 2


@runtime_checkable
class WeatherOracle(Protocol):
    """Pure queries against the weather simulator."""

    def get_pattern(
        self, hemisphere: Hemisphere, seed: int, year: int, month: int, day: int
    ) -> Pattern: ...

    def get_weather(self, hour: int, pattern: Pattern) -> Weather: ...

    def get_wind_power(
        self, seed: int, year: int, month: int, day: int, hour: int, pattern: Pattern
    ) -> int: ...

    def is_special_day(
        self, hemisphere: Hemisphere, year: int, month: int, day: int
    ) -> SpecialDay: ...

    def get_snow_level(self, hemisphere: Hemisphere, month: int, day: int) -> SnowLevel: ...

    def get_cloud_level(self, hemisphere: Hemisphere, month: int, day: int) -> CloudLevel: ...

    def get_fog_level(self, hemisphere: Hemisphere, month: int, day: int) -> FogLevel: ...

    def check_water_fog(self, seed: int, year: int, month: int, day: int) -> bool: ...

    def get_rainbow_info(
        self, hemisphere: Hemisphere, seed: int, year: int, month: int, day: int, pattern: Pattern
    ) -> RainbowInfo: ...

    def is_aurora_pattern(
        self, hemisphere: Hemisphere, month: int, day: int, pattern: Pattern
    ) -> bool: ...

    def is_light_shower_pattern(self, pattern: Pattern) -> bool: ...

    def is_heavy_shower_pattern(self, pattern: Pattern) -> bool: ...

    def is_pattern_possible_at_date(
        self, hemisphere: Hemisphere, month: int, day: int, pattern: Pattern
    ) -> bool: ...

    def can_have_shooting_stars(self, hour: int, pattern: Pattern) -> bool: ...

    def query_stars(
        self, seed: int, year: int, month: int, day: int, hour: int, minute: int, pattern: Pattern
    ) -> Sequence[int]:
        """Second of each shooting star in the given minute (empty if none)."""
        ...
