"""JSON serialization helpers for forecast data structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from weather_seer.forecast.models import DayForecast, MonthForecast


def day_forecast_to_dict(forecast: DayForecast) -> dict[str, Any]:
    """Serialize a DayForecast to a JSON-compatible dict.

    Enum values are written by name so the file reads without this package.
    """
    return {
        "date": forecast.date.isoformat(),
        "pattern": forecast.pattern_name,
        "weather": [w.name for w in forecast.weather],
        "wind_power": list(forecast.wind_power),
        "special_day": forecast.special_day.name,
        "snow_level": forecast.snow_level.name,
        "cloud_level": forecast.cloud_level.name,
        "fog_level": forecast.fog_level.name,
        "water_fog": forecast.water_fog,
        "rainbow_count": forecast.rainbow_count,
        "rainbow_hour": forecast.rainbow_hour,
        "aurora": forecast.aurora,
        "light_shower": forecast.light_shower,
        "heavy_shower": forecast.heavy_shower,
        "shooting_stars": [
            {"hour": s.hour, "minute": s.minute, "seconds": list(s.seconds)}
            for s in forecast.shooting_stars
        ],
    }


def month_forecast_to_dict(forecast: MonthForecast) -> dict[str, Any]:
    """Serialize a MonthForecast with its counts and days."""
    return {
        "year": forecast.year,
        "month": forecast.month,
        "aurora_count": forecast.aurora_count,
        "rainbow_count": forecast.rainbow_count,
        "single_rainbow_count": forecast.single_rainbow_count,
        "double_rainbow_count": forecast.double_rainbow_count,
        "light_shower_count": forecast.light_shower_count,
        "heavy_shower_count": forecast.heavy_shower_count,
        "days": [day_forecast_to_dict(d) for d in forecast.days],
    }


def year_forecast_to_dict(months: list[MonthForecast]) -> dict[str, Any]:
    """Serialize twelve month forecasts.

    Args:
        months: Month forecasts for one hemisphere, seed and year.

    Returns:
        Dict with hemisphere, seed, year and per-month entries.
    """
    first = months[0]
    return {
        "hemisphere": str(first.hemisphere),
        "seed": first.seed,
        "year": first.year,
        "months": [month_forecast_to_dict(m) for m in months],
    }
