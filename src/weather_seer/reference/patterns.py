"""Weather pattern ordinals and the lookup tables built on them."""

from __future__ import annotations

from enum import IntEnum


class Pattern(IntEnum):
    """Hidden per-day weather-generation scenario, as ordered by the simulator."""

    FINE_00 = 0
    FINE_01 = 1
    FINE_02 = 2
    FINE_03 = 3
    FINE_04 = 4
    FINE_05 = 5
    FINE_06 = 6
    CLOUD_00 = 7
    CLOUD_01 = 8
    CLOUD_02 = 9
    RAIN_00 = 10
    RAIN_01 = 11
    RAIN_02 = 12
    RAIN_03 = 13
    RAIN_04 = 14
    RAIN_05 = 15
    FINE_CLOUD_00 = 16
    FINE_CLOUD_01 = 17
    FINE_CLOUD_02 = 18
    CLOUD_FINE_00 = 19
    CLOUD_FINE_01 = 20
    CLOUD_FINE_02 = 21
    FINE_RAIN_00 = 22
    FINE_RAIN_01 = 23
    FINE_RAIN_02 = 24
    FINE_RAIN_03 = 25
    CLOUD_RAIN_00 = 26
    CLOUD_RAIN_01 = 27
    CLOUD_RAIN_02 = 28
    RAIN_CLOUD_00 = 29
    RAIN_CLOUD_01 = 30
    RAIN_CLOUD_02 = 31
    COMMUN_00 = 32
    EVENT_DAY_00 = 33


FIRST_PATTERN = Pattern.FINE_00
MAX_PATTERN = Pattern.EVENT_DAY_00

# Canonical display names, as the simulator spells them.
PATTERN_NAMES: dict[Pattern, str] = {
    Pattern.FINE_00: "Fine00",
    Pattern.FINE_01: "Fine01",
    Pattern.FINE_02: "Fine02",
    Pattern.FINE_03: "Fine03",
    Pattern.FINE_04: "Fine04",
    Pattern.FINE_05: "Fine05",
    Pattern.FINE_06: "Fine06",
    Pattern.CLOUD_00: "Cloud00",
    Pattern.CLOUD_01: "Cloud01",
    Pattern.CLOUD_02: "Cloud02",
    Pattern.RAIN_00: "Rain00",
    Pattern.RAIN_01: "Rain01",
    Pattern.RAIN_02: "Rain02",
    Pattern.RAIN_03: "Rain03",
    Pattern.RAIN_04: "Rain04",
    Pattern.RAIN_05: "Rain05",
    Pattern.FINE_CLOUD_00: "FineCloud00",
    Pattern.FINE_CLOUD_01: "FineCloud01",
    Pattern.FINE_CLOUD_02: "FineCloud02",
    Pattern.CLOUD_FINE_00: "CloudFine00",
    Pattern.CLOUD_FINE_01: "CloudFine01",
    Pattern.CLOUD_FINE_02: "CloudFine02",
    Pattern.FINE_RAIN_00: "FineRain00",
    Pattern.FINE_RAIN_01: "FineRain01",
    Pattern.FINE_RAIN_02: "FineRain02",
    Pattern.FINE_RAIN_03: "FineRain03",
    Pattern.CLOUD_RAIN_00: "CloudRain00",
    Pattern.CLOUD_RAIN_01: "CloudRain01",
    Pattern.CLOUD_RAIN_02: "CloudRain02",
    Pattern.RAIN_CLOUD_00: "RainCloud00",
    Pattern.RAIN_CLOUD_01: "RainCloud01",
    Pattern.RAIN_CLOUD_02: "RainCloud02",
    Pattern.COMMUN_00: "Commun00",
    Pattern.EVENT_DAY_00: "EventDay00",
}

_PATTERNS_BY_NAME: dict[str, Pattern] = {name: pat for pat, name in PATTERN_NAMES.items()}

# A rainbow seen at a given hour pins the day to exactly one pattern.
RAINBOW_PATTERNS_BY_HOUR: dict[int, Pattern] = {
    10: Pattern.CLOUD_FINE_00,
    12: Pattern.CLOUD_FINE_02,
    13: Pattern.CLOUD_FINE_01,
    14: Pattern.FINE_RAIN_00,
    15: Pattern.FINE_RAIN_01,
    16: Pattern.FINE_RAIN_03,
}

# The only patterns that can produce an aurora. The user picks among them.
AURORA_PATTERNS: tuple[Pattern, ...] = (Pattern.FINE_01, Pattern.FINE_03, Pattern.FINE_05)


def iter_patterns() -> range:
    """All pattern ordinals in ascending order."""
    return range(FIRST_PATTERN, MAX_PATTERN + 1)


def pattern_name(pattern: Pattern | int) -> str:
    """Display name for a pattern ordinal, e.g. ``FineRain00``."""
    return PATTERN_NAMES[Pattern(pattern)]


def parse_pattern(name: str) -> Pattern:
    """Inverse of :func:`pattern_name`.

    Raises:
        ValueError: If ``name`` is not a known pattern name.
    """
    try:
        return _PATTERNS_BY_NAME[name]
    except KeyError:
        msg = f"Unknown pattern name: {name!r}"
        raise ValueError(msg) from None
