"""
Prefect flow for building a year of forecasts.

Queries the simulator for every day of the year and writes the result to the
data store. Forecasts are deterministic, so an existing file is reused unless
``force`` is set.

Run locally:
    python -m weather_seer.flows.forecast
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any

from prefect import flow, task

from weather_seer.config import get_settings
from weather_seer.forecast import MonthForecast, build_month_forecast, year_forecast_to_dict
from weather_seer.oracle import get_oracle
from weather_seer.reference.calendar import MONTH_NAMES
from weather_seer.reference.weather import Hemisphere
from weather_seer.store import DataStore

store = DataStore(get_settings().data_dir)


@task(name="load-year-forecast")
def load_year_forecast(hemisphere: Hemisphere, seed: int, year: int) -> dict[str, Any] | None:
    """Load a previously built year forecast from the store."""
    return store.read(DataStore.forecast_path(hemisphere, seed, year))


@task(name="compute-month-forecast")
def compute_month_forecast(
    hemisphere: Hemisphere, seed: int, year: int, month: int
) -> MonthForecast:
    """Forecast one month with the configured simulator."""
    return build_month_forecast(get_oracle(), hemisphere, seed, year, month)


@task(name="save-year-forecast")
def save_year_forecast(months: list[MonthForecast]) -> Path:
    """Write twelve month forecasts as one file."""
    data = year_forecast_to_dict(months)
    return store.write(
        DataStore.forecast_path(data["hemisphere"], data["seed"], data["year"]),
        data,
        source=get_settings().oracle,
        hemisphere=data["hemisphere"],
        seed=data["seed"],
        year=data["year"],
    )


@flow(name="forecast-year", log_prints=True)
def forecast_year(
    hemisphere: Hemisphere | None = None,
    seed: int | None = None,
    year: int | None = None,
    force: bool = False,
) -> dict[str, Any]:
    """
    Build (or load) the forecast for every month of a year.

    Missing arguments fall back to the configured hemisphere and seed and to
    the current year.
    """
    settings = get_settings()
    hemisphere = hemisphere or settings.hemisphere
    seed = seed if seed is not None else settings.seed
    year = year if year is not None else date.today().year

    if not force:
        cached = load_year_forecast(hemisphere, seed, year)
        if cached is not None:
            print(f"Using stored forecast for {year} ({hemisphere.suffix}, seed {seed})")
            return cached

    months: list[MonthForecast] = []
    for month in range(1, 13):
        print(f"Forecasting {MONTH_NAMES[month]} {year}...")
        months.append(compute_month_forecast(hemisphere, seed, year, month))

    output_path = save_year_forecast(months)
    print(f"Forecast written: {output_path}")
    return year_forecast_to_dict(months)


if __name__ == "__main__":
    result = forecast_year()
    print(f"Flow complete: {len(result['months'])} months")
