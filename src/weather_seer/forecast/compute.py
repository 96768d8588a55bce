"""Build forecasts by querying the simulator day by day (no I/O).

Each day costs 24 weather and wind queries, a handful of level and
classification queries, and up to 540 star queries when the pattern allows
shooting stars during the night window.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from weather_seer.forecast.models import DayForecast, MonthForecast, ShootingStar
from weather_seer.reference.calendar import month_length
from weather_seer.reference.hours import star_window_hours
from weather_seer.reference.weather import FogLevel

if TYPE_CHECKING:
    from weather_seer.oracle.protocol import WeatherOracle
    from weather_seer.reference.patterns import Pattern
    from weather_seer.reference.weather import Hemisphere

logger = logging.getLogger(__name__)


def find_shooting_stars(
    oracle: WeatherOracle, seed: int, year: int, month: int, day: int, pattern: Pattern
) -> list[ShootingStar]:
    """Scan the night window minute by minute for shooting stars."""
    stars: list[ShootingStar] = []
    for hour in star_window_hours():
        if not oracle.can_have_shooting_stars(hour, pattern):
            continue
        for minute in range(60):
            seconds = oracle.query_stars(seed, year, month, day, hour, minute, pattern)
            if seconds:
                stars.append(ShootingStar(hour=hour, minute=minute, seconds=tuple(seconds)))
    return stars


def build_day_forecast(
    oracle: WeatherOracle,
    hemisphere: Hemisphere,
    seed: int,
    year: int,
    month: int,
    day: int,
) -> DayForecast:
    """Collect every observable for one date."""
    pattern = oracle.get_pattern(hemisphere, seed, year, month, day)
    fog_level = oracle.get_fog_level(hemisphere, month, day)
    rainbow = oracle.get_rainbow_info(hemisphere, seed, year, month, day, pattern)

    return DayForecast(
        date=date(year, month, day),
        pattern=pattern,
        weather=[oracle.get_weather(hour, pattern) for hour in range(24)],
        wind_power=[
            oracle.get_wind_power(seed, year, month, day, hour, pattern) for hour in range(24)
        ],
        special_day=oracle.is_special_day(hemisphere, year, month, day),
        snow_level=oracle.get_snow_level(hemisphere, month, day),
        cloud_level=oracle.get_cloud_level(hemisphere, month, day),
        fog_level=fog_level,
        water_fog=fog_level != FogLevel.NONE and oracle.check_water_fog(seed, year, month, day),
        rainbow_count=rainbow.count,
        rainbow_hour=rainbow.hour,
        aurora=oracle.is_aurora_pattern(hemisphere, month, day, pattern),
        light_shower=oracle.is_light_shower_pattern(pattern),
        heavy_shower=oracle.is_heavy_shower_pattern(pattern),
        shooting_stars=find_shooting_stars(oracle, seed, year, month, day, pattern),
    )


def build_month_forecast(
    oracle: WeatherOracle, hemisphere: Hemisphere, seed: int, year: int, month: int
) -> MonthForecast:
    """Forecast every day of a month."""
    forecast = MonthForecast(hemisphere=hemisphere, seed=seed, year=year, month=month)
    for day in range(1, month_length(year, month) + 1):
        forecast.add_day(build_day_forecast(oracle, hemisphere, seed, year, month, day))

    logger.debug(
        "Forecast %04d-%02d (%s, seed %d): %d auroras, %d rainbows, %d showers",
        year,
        month,
        hemisphere,
        seed,
        forecast.aurora_count,
        forecast.rainbow_count,
        forecast.light_shower_count + forecast.heavy_shower_count,
    )
    return forecast


def build_year_forecast(
    oracle: WeatherOracle, hemisphere: Hemisphere, seed: int, year: int
) -> list[MonthForecast]:
    """Forecast all twelve months of a year."""
    return [build_month_forecast(oracle, hemisphere, seed, year, month) for month in range(1, 13)]
