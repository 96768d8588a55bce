"""Narrow the pattern space down to what a day's evidence allows.

Every pattern ordinal is tried in ascending order against three filters,
stopping at the first that rejects it:

    1. day type    shower intensity, rainbow hour or aurora choice
    2. calendar    the simulator's feasibility check for the date
    3. weather     each recorded hour must match (when hourly weather counts)

The scan is exhaustive over a small fixed space, so results come back in
ordinal order rather than by likelihood.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from weather_seer.reference.patterns import (
    AURORA_PATTERNS,
    RAINBOW_PATTERNS_BY_HOUR,
    Pattern,
    iter_patterns,
    pattern_name,
)
from weather_seer.reference.weather import AMBIGUOUS_WEATHER_GROUPS, AmbiguousWeather, Weather
from weather_seer.schemas import DayObservation, DayType, ShowerType, WeatherTypeInfo

if TYPE_CHECKING:
    from weather_seer.oracle.protocol import WeatherOracle
    from weather_seer.reference.weather import Hemisphere

logger = logging.getLogger(__name__)


def check_type_match(actual: Weather, expected: Weather | AmbiguousWeather) -> bool:
    """Whether the simulated weather satisfies one recorded observation."""
    if isinstance(expected, AmbiguousWeather):
        return actual in AMBIGUOUS_WEATHER_GROUPS[expected]
    return actual == expected


def check_pattern_against_types(
    oracle: WeatherOracle, pattern: Pattern, types: list[WeatherTypeInfo]
) -> bool:
    """Whether ``pattern`` reproduces every recorded hour. All must hold."""
    return all(
        check_type_match(oracle.get_weather(info.hour, pattern), info.expected) for info in types
    )


def day_uses_types(day: DayObservation) -> bool:
    """Whether hourly weather observations constrain this day.

    Rainbow and aurora days are already pinned by their own evidence, and a
    heavy shower day's weather is not evidence for anything.
    """
    if day.day_type in (DayType.NO_DATA, DayType.NONE):
        return True
    return day.day_type == DayType.SHOWER and day.shower_type != ShowerType.HEAVY


def _aurora_allowed(day: DayObservation, pattern: Pattern) -> bool:
    flags = {
        Pattern.FINE_01: day.aurora_fine01,
        Pattern.FINE_03: day.aurora_fine03,
        Pattern.FINE_05: day.aurora_fine05,
    }
    return pattern in AURORA_PATTERNS and flags[pattern]


def _passes_day_type(oracle: WeatherOracle, pattern: Pattern, day: DayObservation) -> bool:
    if day.day_type == DayType.SHOWER:
        is_light = oracle.is_light_shower_pattern(pattern)
        is_heavy = oracle.is_heavy_shower_pattern(pattern)
        if is_light and day.shower_type == ShowerType.HEAVY:
            return False
        if is_heavy and day.shower_type == ShowerType.LIGHT:
            return False
        return is_light or is_heavy

    if day.day_type == DayType.RAINBOW:
        return RAINBOW_PATTERNS_BY_HOUR.get(day.rainbow_time) == pattern

    if day.day_type == DayType.AURORA:
        return _aurora_allowed(day, pattern)

    if day.day_type == DayType.NONE:
        # A heavy shower is hard to miss, so "none of the above" rules it out
        return not oracle.is_heavy_shower_pattern(pattern)

    return True


def get_possible_patterns(
    oracle: WeatherOracle, hemisphere: Hemisphere, day: DayObservation
) -> list[Pattern]:
    """Patterns consistent with everything recorded for ``day``.

    Args:
        oracle: Simulator to query.
        hemisphere: Island hemisphere, used for calendar feasibility.
        day: The recorded evidence. Not modified.

    Returns:
        Surviving patterns in ascending ordinal order (possibly empty).
    """
    uses_types = day_uses_types(day)
    results: list[Pattern] = []

    for ordinal in iter_patterns():
        pattern = Pattern(ordinal)
        if not _passes_day_type(oracle, pattern, day):
            continue
        if not oracle.is_pattern_possible_at_date(hemisphere, day.month, day.day, pattern):
            continue
        if uses_types and not check_pattern_against_types(oracle, pattern, day.types):
            continue
        results.append(pattern)

    logger.debug(
        "%04d-%02d-%02d (%s): %d possible patterns [%s]",
        day.year,
        day.month,
        day.day,
        day.day_type,
        len(results),
        ", ".join(pattern_name(p) for p in results),
    )
    return results
