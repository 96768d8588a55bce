"""Calendar forecasts built from the weather simulator.

Public API:
  - models: DayForecast, MonthForecast, ShootingStar
  - compute: build_day_forecast, build_month_forecast, build_year_forecast,
             find_shooting_stars
  - navigation: ForecastCalendar
  - serialization: day_forecast_to_dict, month_forecast_to_dict,
                   year_forecast_to_dict
"""

from weather_seer.forecast.compute import (
    build_day_forecast,
    build_month_forecast,
    build_year_forecast,
    find_shooting_stars,
)
from weather_seer.forecast.models import DayForecast, MonthForecast, ShootingStar
from weather_seer.forecast.navigation import ForecastCalendar
from weather_seer.forecast.serialization import (
    day_forecast_to_dict,
    month_forecast_to_dict,
    year_forecast_to_dict,
)

__all__ = [
    "DayForecast",
    "ForecastCalendar",
    "MonthForecast",
    "ShootingStar",
    "build_day_forecast",
    "build_month_forecast",
    "build_year_forecast",
    "day_forecast_to_dict",
    "find_shooting_stars",
    "month_forecast_to_dict",
    "year_forecast_to_dict",
]
