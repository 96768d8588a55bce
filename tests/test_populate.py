"""Tests for pushing a day's evidence into a guess accumulator."""

from __future__ import annotations

import logging
from datetime import date

import pytest
from conftest import FakeOracle, RecordingGuessData

from weather_seer.analysis.populate import (
    PopulateError,
    PopulateErrorKind,
    iter_gap_minutes,
    populate_guess_data,
)
from weather_seer.reference.patterns import Pattern
from weather_seer.reference.weather import Hemisphere
from weather_seer.schemas import DayObservation, GapInfo

NORTH = Hemisphere.NORTHERN
DAY = date(2024, 5, 3)


def make_day(**kwargs: object) -> DayObservation:
    fields: dict[str, object] = {"year": 2024, "month": 5, "day": 3}
    fields.update(kwargs)
    return DayObservation.model_validate(fields)


def gap(start: str, end: str) -> GapInfo:
    sh, sm = (int(x) for x in start.split(":"))
    eh, em = (int(x) for x in end.split(":"))
    return GapInfo(start_hour=sh, start_minute=sm, end_hour=eh, end_minute=em)


# =============================================================================
# iter_gap_minutes
# =============================================================================


class TestIterGapMinutes:
    """Tests for walking a gap in linear-hour order."""

    def test_single_minute(self) -> None:
        assert list(iter_gap_minutes(gap("21:15", "21:15"))) == [(21, 15)]

    def test_within_one_hour(self) -> None:
        assert list(iter_gap_minutes(gap("20:58", "21:01"))) == [
            (20, 58),
            (20, 59),
            (21, 0),
            (21, 1),
        ]

    def test_crosses_midnight_once(self) -> None:
        minutes = list(iter_gap_minutes(gap("22:00", "02:30")))

        assert minutes[0] == (22, 0)
        assert minutes[-1] == (2, 30)
        assert len(minutes) == 120 + 120 + 31

        hours_in_order: list[int] = []
        for hour, _ in minutes:
            if not hours_in_order or hours_in_order[-1] != hour:
                hours_in_order.append(hour)
        assert hours_in_order == [22, 23, 0, 1, 2]

    def test_minutes_are_consecutive(self) -> None:
        minutes = list(iter_gap_minutes(gap("23:58", "00:01")))
        assert minutes == [(23, 58), (23, 59), (0, 0), (0, 1)]

    def test_end_of_linear_day(self) -> None:
        minutes = list(iter_gap_minutes(gap("18:58", "18:59")))
        assert minutes == [(18, 58), (18, 59)]


# =============================================================================
# populate_guess_data
# =============================================================================


class TestNoPatterns:
    """Over-constrained evidence fails before writing anything."""

    def test_unsatisfiable_types(self, oracle: FakeOracle, guess_data: RecordingGuessData) -> None:
        day = make_day(
            types=[{"hour": 7, "expected": "Clear"}, {"hour": 7, "expected": "Rain"}]
        )
        error = populate_guess_data(oracle, NORTH, guess_data, day)

        assert error == PopulateError(PopulateErrorKind.NO_PATTERNS)
        assert guess_data.calls == []
        assert len(guess_data) == 0

    def test_no_patterns_with_gaps_writes_nothing(
        self, guess_data: RecordingGuessData
    ) -> None:
        oracle = FakeOracle(impossible={Pattern.FINE_02, Pattern.FINE_04, Pattern.FINE_06})
        day = make_day(
            day_type="shower",
            shower_type="light",
            stars=[{"hour": 23, "minute": 10}],
            gaps=[{"start_hour": 22, "start_minute": 0, "end_hour": 22, "end_minute": 5}],
        )
        error = populate_guess_data(oracle, NORTH, guess_data, day)

        assert error is not None
        assert error.kind == PopulateErrorKind.NO_PATTERNS
        assert guess_data.calls == []


class TestPatternsAndRainbow:
    """Surviving patterns and rainbows are registered."""

    def test_patterns_in_ordinal_order(
        self, oracle: FakeOracle, guess_data: RecordingGuessData
    ) -> None:
        day = make_day(day_type="shower")
        assert populate_guess_data(oracle, NORTH, guess_data, day) is None

        registered = [c[1] for c in guess_data.calls if c[0] == "pattern"]
        assert registered == [Pattern.FINE_00, Pattern.FINE_02, Pattern.FINE_04, Pattern.FINE_06]
        assert guess_data.patterns_for(DAY) == set(registered)

    def test_rainbow_registered_with_double_flag(
        self, oracle: FakeOracle, guess_data: RecordingGuessData
    ) -> None:
        day = make_day(day_type="rainbow", rainbow_time=14, rainbow_double=True)
        assert populate_guess_data(oracle, NORTH, guess_data, day) is None

        assert guess_data.calls == [("pattern", Pattern.FINE_RAIN_00), ("rainbow", True)]
        assert guess_data.rainbow_for(DAY) is True

    def test_non_shower_day_ignores_stars_and_gaps(
        self, oracle: FakeOracle, guess_data: RecordingGuessData
    ) -> None:
        day = make_day(
            day_type="aurora",
            aurora_fine05=True,
            stars=[{"hour": 23, "minute": 10, "seconds": [5]}],
            gaps=[{"start_hour": 22, "start_minute": 0, "end_hour": 22, "end_minute": 5}],
        )
        assert populate_guess_data(oracle, NORTH, guess_data, day) is None
        assert guess_data.calls == [("pattern", Pattern.FINE_05)]


class TestStarsAndGaps:
    """Shower-day star sightings and no-star gaps."""

    def test_stars_and_known_seconds(
        self, oracle: FakeOracle, guess_data: RecordingGuessData
    ) -> None:
        day = make_day(
            day_type="shower",
            stars=[{"hour": 23, "minute": 10, "seconds": [14, 99, 40]}],
        )
        assert populate_guess_data(oracle, NORTH, guess_data, day) is None

        star_calls = [c for c in guess_data.calls if c[0] in ("minute", "second")]
        assert star_calls == [
            ("minute", 23, 10, True),
            ("second", 23, 10, 14),
            ("second", 23, 10, 40),
        ]
        assert guess_data.seconds_for(DAY, 23, 10) == {14, 40}

    def test_gap_across_midnight(
        self, oracle: FakeOracle, guess_data: RecordingGuessData
    ) -> None:
        day = make_day(
            day_type="shower",
            gaps=[{"start_hour": 22, "start_minute": 0, "end_hour": 2, "end_minute": 30}],
        )
        assert populate_guess_data(oracle, NORTH, guess_data, day) is None

        minutes = guess_data.no_star_minutes()
        assert minutes == list(iter_gap_minutes(day.gaps[0]))
        assert minutes[0] == (22, 0)
        assert minutes[-1] == (2, 30)
        assert guess_data.minute_for(DAY, 0, 0) is False
        assert guess_data.minute_for(DAY, 2, 31) is None

    def test_conflict_reports_location(
        self, oracle: FakeOracle, guess_data: RecordingGuessData
    ) -> None:
        day = make_day(
            day_type="shower",
            stars=[{"hour": 23, "minute": 10}],
            gaps=[{"start_hour": 22, "start_minute": 0, "end_hour": 23, "end_minute": 30}],
        )
        error = populate_guess_data(oracle, NORTH, guess_data, day)

        assert error == PopulateError(PopulateErrorKind.STAR_CONFLICT, hour=23, minute=10)
        assert "23:10" in str(error)

    def test_conflict_stops_the_gap(
        self, oracle: FakeOracle, guess_data: RecordingGuessData
    ) -> None:
        day = make_day(
            day_type="shower",
            stars=[{"hour": 23, "minute": 10}],
            gaps=[
                {"start_hour": 22, "start_minute": 0, "end_hour": 23, "end_minute": 30},
                {"start_hour": 1, "start_minute": 0, "end_hour": 1, "end_minute": 10},
            ],
        )
        populate_guess_data(oracle, NORTH, guess_data, day)

        minutes = guess_data.no_star_minutes()
        assert minutes[-1] == (23, 9)
        assert len(minutes) == 70
        assert guess_data.minute_for(DAY, 23, 11) is None
        assert guess_data.minute_for(DAY, 1, 0) is None

    def test_conflict_keeps_earlier_writes(
        self, oracle: FakeOracle, guess_data: RecordingGuessData
    ) -> None:
        day = make_day(
            day_type="shower",
            shower_type="heavy",
            stars=[{"hour": 23, "minute": 10, "seconds": [12]}],
            gaps=[{"start_hour": 23, "start_minute": 0, "end_hour": 23, "end_minute": 30}],
        )
        populate_guess_data(oracle, NORTH, guess_data, day)

        assert guess_data.patterns_for(DAY) == {Pattern.FINE_00}
        assert guess_data.minute_for(DAY, 23, 10) is True
        assert guess_data.seconds_for(DAY, 23, 10) == {12}
        assert guess_data.minute_for(DAY, 23, 0) is False

    def test_gap_next_to_star_is_fine(
        self, oracle: FakeOracle, guess_data: RecordingGuessData
    ) -> None:
        day = make_day(
            day_type="shower",
            stars=[{"hour": 23, "minute": 10}],
            gaps=[
                {"start_hour": 22, "start_minute": 0, "end_hour": 23, "end_minute": 9},
                {"start_hour": 23, "start_minute": 11, "end_hour": 23, "end_minute": 59},
            ],
        )
        assert populate_guess_data(oracle, NORTH, guess_data, day) is None
        assert len(guess_data.no_star_minutes()) == 70 + 49

    def test_rejected_star_is_logged_and_skipped(
        self,
        oracle: FakeOracle,
        guess_data: RecordingGuessData,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        guess_data.add_minute(2024, 5, 3, 23, 10, False)
        day = make_day(
            day_type="shower",
            stars=[{"hour": 23, "minute": 10, "seconds": [14]}],
            gaps=[{"start_hour": 1, "start_minute": 0, "end_hour": 1, "end_minute": 4}],
        )

        with caplog.at_level(logging.WARNING, logger="weather_seer.analysis.populate"):
            error = populate_guess_data(oracle, NORTH, guess_data, day)

        assert error is None
        assert "star at 23:10 contradicts" in caplog.text
        assert guess_data.minute_for(DAY, 23, 10) is False
        assert guess_data.seconds_for(DAY, 23, 10) == {14}
        assert guess_data.no_star_minutes()[1:] == [(1, 0), (1, 1), (1, 2), (1, 3), (1, 4)]
