"""Shared fixtures: a scripted weather simulator and a call-recording accumulator."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest

from weather_seer.accumulator import MemoryGuessData
from weather_seer.oracle.protocol import RainbowInfo
from weather_seer.reference.patterns import Pattern
from weather_seer.reference.weather import (
    CloudLevel,
    FogLevel,
    Hemisphere,
    SnowLevel,
    SpecialDay,
    Weather,
)


class FakeOracle:
    """Deterministic stand-in for the weather simulator.

    Defaults:
      - weather at ``hour`` for pattern ``p`` is ``Weather((p + hour) % 6)``
      - Fine00 is the heavy shower, Fine02/04/06 are light showers
      - Fine01/03/05 are aurora patterns
      - every pattern is possible on every date unless listed in ``impossible``
      - ``get_pattern`` picks ``Pattern(day - 1)``
      - showers have stars at 23:10 (seconds 14 and 40) and 01:05 (second 3)
    """

    def __init__(
        self,
        *,
        weather: dict[Pattern, list[Weather]] | None = None,
        light: set[Pattern] | None = None,
        heavy: set[Pattern] | None = None,
        aurora: set[Pattern] | None = None,
        impossible: set[Pattern] | None = None,
        impossible_on: dict[tuple[int, int], set[Pattern]] | None = None,
        stars: dict[tuple[int, int], tuple[int, ...]] | None = None,
    ) -> None:
        self.weather = weather or {}
        default_light = {Pattern.FINE_02, Pattern.FINE_04, Pattern.FINE_06}
        self.light = light if light is not None else default_light
        self.heavy = heavy if heavy is not None else {Pattern.FINE_00}
        default_aurora = {Pattern.FINE_01, Pattern.FINE_03, Pattern.FINE_05}
        self.aurora = aurora if aurora is not None else default_aurora
        self.impossible = impossible or set()
        self.impossible_on = impossible_on or {}
        self.stars = stars if stars is not None else {(23, 10): (14, 40), (1, 5): (3,)}
        self.feasibility_checks: list[Pattern] = []
        self.water_fog_checks = 0

    def get_pattern(
        self, hemisphere: Hemisphere, seed: int, year: int, month: int, day: int
    ) -> Pattern:
        return Pattern(day - 1)

    def get_weather(self, hour: int, pattern: Pattern) -> Weather:
        if pattern in self.weather:
            return self.weather[pattern][hour]
        return Weather((int(pattern) + hour) % 6)

    def get_wind_power(
        self, seed: int, year: int, month: int, day: int, hour: int, pattern: Pattern
    ) -> int:
        return hour % 3

    def is_special_day(self, hemisphere: Hemisphere, year: int, month: int, day: int) -> SpecialDay:
        return SpecialDay.NONE

    def get_snow_level(self, hemisphere: Hemisphere, month: int, day: int) -> SnowLevel:
        return SnowLevel.NONE

    def get_cloud_level(self, hemisphere: Hemisphere, month: int, day: int) -> CloudLevel:
        return CloudLevel.NONE

    def get_fog_level(self, hemisphere: Hemisphere, month: int, day: int) -> FogLevel:
        return FogLevel.HEAVY_AND_WATER if day == 1 else FogLevel.NONE

    def check_water_fog(self, seed: int, year: int, month: int, day: int) -> bool:
        self.water_fog_checks += 1
        return True

    def get_rainbow_info(
        self, hemisphere: Hemisphere, seed: int, year: int, month: int, day: int, pattern: Pattern
    ) -> RainbowInfo:
        if pattern == Pattern.CLOUD_FINE_00:
            return RainbowInfo(count=1, hour=10)
        if pattern == Pattern.FINE_RAIN_00:
            return RainbowInfo(count=2, hour=14)
        return RainbowInfo(count=0, hour=0)

    def is_aurora_pattern(
        self, hemisphere: Hemisphere, month: int, day: int, pattern: Pattern
    ) -> bool:
        return pattern in self.aurora

    def is_light_shower_pattern(self, pattern: Pattern) -> bool:
        return pattern in self.light

    def is_heavy_shower_pattern(self, pattern: Pattern) -> bool:
        return pattern in self.heavy

    def is_pattern_possible_at_date(
        self, hemisphere: Hemisphere, month: int, day: int, pattern: Pattern
    ) -> bool:
        self.feasibility_checks.append(pattern)
        if pattern in self.impossible:
            return False
        return pattern not in self.impossible_on.get((month, day), set())

    def can_have_shooting_stars(self, hour: int, pattern: Pattern) -> bool:
        return pattern in self.light or pattern in self.heavy

    def query_stars(
        self, seed: int, year: int, month: int, day: int, hour: int, minute: int, pattern: Pattern
    ) -> Sequence[int]:
        return self.stars.get((hour, minute), ())


class RecordingGuessData(MemoryGuessData):
    """MemoryGuessData that also keeps an ordered log of every call."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[Any, ...]] = []

    def add_pattern(self, year: int, month: int, day: int, pattern: Pattern) -> None:
        self.calls.append(("pattern", pattern))
        super().add_pattern(year, month, day, pattern)

    def add_rainbow(self, year: int, month: int, day: int, is_double: bool) -> None:
        self.calls.append(("rainbow", is_double))
        super().add_rainbow(year, month, day, is_double)

    def add_minute(
        self, year: int, month: int, day: int, hour: int, minute: int, has_star: bool
    ) -> bool:
        self.calls.append(("minute", hour, minute, has_star))
        return super().add_minute(year, month, day, hour, minute, has_star)

    def add_second(
        self, year: int, month: int, day: int, hour: int, minute: int, second: int
    ) -> None:
        self.calls.append(("second", hour, minute, second))
        super().add_second(year, month, day, hour, minute, second)

    def no_star_minutes(self) -> list[tuple[int, int]]:
        return [(c[1], c[2]) for c in self.calls if c[0] == "minute" and c[3] is False]


@pytest.fixture
def oracle() -> FakeOracle:
    return FakeOracle()


@pytest.fixture
def guess_data() -> RecordingGuessData:
    return RecordingGuessData()
