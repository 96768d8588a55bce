"""Push one day's evidence into a guess accumulator.

Writes, in order: every possible pattern, the rainbow (rainbow days), then
for shower days each recorded star minute and second followed by every
minute of each no-star gap.

Nothing is rolled back on failure. A day with no possible patterns writes
nothing at all, but a star conflict inside a gap leaves everything written
before the conflicting minute in place.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from weather_seer.analysis.inference import get_possible_patterns
from weather_seer.reference.hours import from_linear_hour, to_linear_hour
from weather_seer.schemas import DayObservation, DayType, GapInfo

if TYPE_CHECKING:
    from weather_seer.accumulator import GuessData
    from weather_seer.oracle.protocol import WeatherOracle
    from weather_seer.reference.weather import Hemisphere

logger = logging.getLogger(__name__)


class PopulateErrorKind(StrEnum):
    """Why a day's evidence could not be used."""

    NO_PATTERNS = "no_patterns"
    STAR_CONFLICT = "star_conflict"


@dataclass(frozen=True)
class PopulateError:
    """A day's evidence contradicts itself.

    ``hour`` and ``minute`` locate the clash for star conflicts.
    """

    kind: PopulateErrorKind
    hour: int | None = None
    minute: int | None = None

    def __str__(self) -> str:
        if self.kind == PopulateErrorKind.STAR_CONFLICT:
            return f"gap overlaps a recorded star at {self.hour:02d}:{self.minute:02d}"
        return "no pattern matches the recorded evidence"


def iter_gap_minutes(gap: GapInfo) -> Iterator[tuple[int, int]]:
    """Yield ``(hour, minute)`` for every minute of a gap, inclusive.

    Minutes come in linear-hour order, so a gap from 22:00 to 02:30 passes
    through midnight once.
    """
    linear_hour = to_linear_hour(gap.start_hour)
    minute = gap.start_minute
    end = (to_linear_hour(gap.end_hour), gap.end_minute)

    while (linear_hour, minute) <= end:
        yield from_linear_hour(linear_hour), minute
        minute += 1
        if minute == 60:
            minute = 0
            linear_hour += 1


def populate_guess_data(
    oracle: WeatherOracle,
    hemisphere: Hemisphere,
    data: GuessData,
    day: DayObservation,
) -> PopulateError | None:
    """Record ``day``'s evidence in ``data``.

    Returns:
        None on success, otherwise the first problem found.
    """
    patterns = get_possible_patterns(oracle, hemisphere, day)
    if not patterns:
        return PopulateError(PopulateErrorKind.NO_PATTERNS)

    y, m, d = day.year, day.month, day.day
    for pattern in patterns:
        data.add_pattern(y, m, d, pattern)

    if day.day_type == DayType.RAINBOW:
        data.add_rainbow(y, m, d, day.rainbow_double)

    if day.day_type != DayType.SHOWER:
        return None

    for star in day.stars:
        if not data.add_minute(y, m, d, star.hour, star.minute, True):
            logger.warning(
                "%04d-%02d-%02d: star at %02d:%02d contradicts an earlier no-star record",
                y,
                m,
                d,
                star.hour,
                star.minute,
            )
        for second in star.known_seconds:
            data.add_second(y, m, d, star.hour, star.minute, second)

    for gap in day.gaps:
        for hour, minute in iter_gap_minutes(gap):
            if not data.add_minute(y, m, d, hour, minute, False):
                return PopulateError(PopulateErrorKind.STAR_CONFLICT, hour=hour, minute=minute)

    return None
