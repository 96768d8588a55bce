"""Evidence accumulator used by cross-day solving.

``GuessData`` is the interface the populator writes to. ``MemoryGuessData``
is an in-memory implementation that keeps every fact per date; a real
seed solver can be plugged in anywhere it is accepted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from weather_seer.reference.patterns import Pattern


class GuessData(Protocol):
    """Sink for per-date facts."""

    def add_pattern(self, year: int, month: int, day: int, pattern: Pattern) -> None: ...

    def add_rainbow(self, year: int, month: int, day: int, is_double: bool) -> None: ...

    def add_minute(
        self, year: int, month: int, day: int, hour: int, minute: int, has_star: bool
    ) -> bool:
        """Record whether a star fell in a minute.

        Returns False, recording nothing, when the opposite fact is already
        held for that exact minute.
        """
        ...

    def add_second(
        self, year: int, month: int, day: int, hour: int, minute: int, second: int
    ) -> None: ...


@dataclass
class DayFacts:
    """Facts collected for one date."""

    patterns: set[Pattern] = field(default_factory=set)
    rainbow_double: bool | None = None
    minutes: dict[tuple[int, int], bool] = field(default_factory=dict)
    seconds: dict[tuple[int, int], set[int]] = field(default_factory=dict)


class MemoryGuessData:
    """Keeps accumulated facts in dicts keyed by date."""

    def __init__(self) -> None:
        self._days: dict[date, DayFacts] = {}

    def _facts(self, year: int, month: int, day: int) -> DayFacts:
        return self._days.setdefault(date(year, month, day), DayFacts())

    def add_pattern(self, year: int, month: int, day: int, pattern: Pattern) -> None:
        self._facts(year, month, day).patterns.add(pattern)

    def add_rainbow(self, year: int, month: int, day: int, is_double: bool) -> None:
        self._facts(year, month, day).rainbow_double = is_double

    def add_minute(
        self, year: int, month: int, day: int, hour: int, minute: int, has_star: bool
    ) -> bool:
        minutes = self._facts(year, month, day).minutes
        previous = minutes.get((hour, minute))
        if previous is not None and previous != has_star:
            return False
        minutes[(hour, minute)] = has_star
        return True

    def add_second(
        self, year: int, month: int, day: int, hour: int, minute: int, second: int
    ) -> None:
        seconds = self._facts(year, month, day).seconds
        seconds.setdefault((hour, minute), set()).add(second)

    # -- read side --------------------------------------------------------

    def dates(self) -> list[date]:
        """Dates with at least one fact, in calendar order."""
        return sorted(self._days)

    def patterns_for(self, on: date) -> set[Pattern]:
        facts = self._days.get(on)
        return set(facts.patterns) if facts else set()

    def rainbow_for(self, on: date) -> bool | None:
        """True for a double rainbow, False for single, None if unrecorded."""
        facts = self._days.get(on)
        return facts.rainbow_double if facts else None

    def minute_for(self, on: date, hour: int, minute: int) -> bool | None:
        facts = self._days.get(on)
        return facts.minutes.get((hour, minute)) if facts else None

    def seconds_for(self, on: date, hour: int, minute: int) -> set[int]:
        facts = self._days.get(on)
        if not facts:
            return set()
        return set(facts.seconds.get((hour, minute), set()))

    def __len__(self) -> int:
        return len(self._days)
