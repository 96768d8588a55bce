"""Observable weather categories reported by the simulator.

Concrete ``Weather`` values and the ``AmbiguousWeather`` OR-groups share one
ordinal space (0-5 and 95-99) so an hourly assertion can hold either kind.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Hemisphere(StrEnum):
    """Island hemisphere; seasons and some patterns depend on it."""

    NORTHERN = "northern"
    SOUTHERN = "southern"

    @property
    def suffix(self) -> str:
        """Short label used next to seeds, ``N`` or ``S``."""
        return "N" if self is Hemisphere.NORTHERN else "S"


class Weather(IntEnum):
    """Concrete per-hour weather."""

    CLEAR = 0
    SUNNY = 1
    CLOUDY = 2
    RAIN_CLOUDS = 3
    RAIN = 4
    HEAVY_RAIN = 5


class AmbiguousWeather(IntEnum):
    """Weather the user could not pin down to one category."""

    CLEAR_OR_SUNNY = 95
    SUNNY_OR_CLOUDY = 96
    CLOUDY_OR_RAIN_CLOUDS = 97
    NO_RAIN = 98
    RAIN_OR_HEAVY_RAIN = 99


RAINY_WEATHER: frozenset[Weather] = frozenset({Weather.RAIN, Weather.HEAVY_RAIN})

AMBIGUOUS_WEATHER_GROUPS: dict[AmbiguousWeather, frozenset[Weather]] = {
    AmbiguousWeather.CLEAR_OR_SUNNY: frozenset({Weather.CLEAR, Weather.SUNNY}),
    AmbiguousWeather.SUNNY_OR_CLOUDY: frozenset({Weather.SUNNY, Weather.CLOUDY}),
    AmbiguousWeather.CLOUDY_OR_RAIN_CLOUDS: frozenset({Weather.CLOUDY, Weather.RAIN_CLOUDS}),
    AmbiguousWeather.NO_RAIN: frozenset(Weather) - RAINY_WEATHER,
    AmbiguousWeather.RAIN_OR_HEAVY_RAIN: RAINY_WEATHER,
}

# Names accepted in observation files, in the simulator's spelling.
WEATHER_NAMES: dict[str, Weather | AmbiguousWeather] = {
    "Clear": Weather.CLEAR,
    "Sunny": Weather.SUNNY,
    "Cloudy": Weather.CLOUDY,
    "RainClouds": Weather.RAIN_CLOUDS,
    "Rain": Weather.RAIN,
    "HeavyRain": Weather.HEAVY_RAIN,
    "ClearOrSunny": AmbiguousWeather.CLEAR_OR_SUNNY,
    "SunnyOrCloudy": AmbiguousWeather.SUNNY_OR_CLOUDY,
    "CloudyOrRainClouds": AmbiguousWeather.CLOUDY_OR_RAIN_CLOUDS,
    "NoRain": AmbiguousWeather.NO_RAIN,
    "RainOrHeavyRain": AmbiguousWeather.RAIN_OR_HEAVY_RAIN,
}


def parse_weather(value: str | int) -> Weather | AmbiguousWeather:
    """Read a concrete or ambiguous weather value from a name or ordinal.

    Accepts the simulator spelling (``"RainClouds"``), the enum member name
    (``"RAIN_CLOUDS"``) or the ordinal.

    Raises:
        ValueError: If the value names no weather category.
    """
    if isinstance(value, str):
        if value in WEATHER_NAMES:
            return WEATHER_NAMES[value]
        for enum_cls in (Weather, AmbiguousWeather):
            if value in enum_cls.__members__:
                return enum_cls[value]
        msg = f"Unknown weather: {value!r}"
        raise ValueError(msg)
    if value >= min(AmbiguousWeather):
        return AmbiguousWeather(value)
    return Weather(value)


class SpecialDay(IntEnum):
    """Event days whose weather the simulator overrides."""

    NONE = 0
    EASTER = 1
    FISHING_TOURNEY = 2
    BUG_OFF = 3
    COUNTDOWN = 4
    FIREWORKS = 5


class SnowLevel(IntEnum):
    NONE = 0
    LOW = 1
    FULL = 2


class CloudLevel(IntEnum):
    NONE = 0
    CUMULONIMBUS = 1
    CIRRUS = 2
    BILLOW = 3
    THIN = 4


class FogLevel(IntEnum):
    NONE = 0
    HEAVY_AND_WATER = 1
    WATER_ONLY = 2
