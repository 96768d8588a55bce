"""Month-by-month browsing over a year of forecasts.

Changing hemisphere, seed, year or month rebuilds all twelve months. There is
no partial update and no cancellation; a rebuild is one synchronous batch of
simulator queries.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from weather_seer.config import DEFAULT_SEED
from weather_seer.forecast.compute import build_year_forecast
from weather_seer.reference.weather import Hemisphere

if TYPE_CHECKING:
    from weather_seer.forecast.models import MonthForecast
    from weather_seer.oracle.protocol import WeatherOracle


class ForecastCalendar:
    """A year of forecasts with a current month."""

    def __init__(
        self,
        oracle: WeatherOracle,
        hemisphere: Hemisphere = Hemisphere.NORTHERN,
        seed: int = DEFAULT_SEED,
        year: int | None = None,
        month: int | None = None,
    ) -> None:
        today = date.today()
        self.oracle = oracle
        self._hemisphere = hemisphere
        self._seed = seed
        self.year = year if year is not None else today.year
        self.month = month if month is not None else today.month
        self.month_forecasts: list[MonthForecast] = []
        self.regenerate()

    @property
    def hemisphere(self) -> Hemisphere:
        return self._hemisphere

    @hemisphere.setter
    def hemisphere(self, value: Hemisphere) -> None:
        self._hemisphere = value
        self.regenerate()

    @property
    def seed(self) -> int:
        return self._seed

    @seed.setter
    def seed(self, value: int) -> None:
        self._seed = value
        self.regenerate()

    @property
    def hemisphere_suffix(self) -> str:
        return self._hemisphere.suffix

    @property
    def current_month(self) -> MonthForecast:
        return self.month_forecasts[self.month - 1]

    def regenerate(self) -> None:
        """Rebuild all twelve months for the current settings."""
        self.month_forecasts = build_year_forecast(
            self.oracle, self._hemisphere, self._seed, self.year
        )

    def previous_year(self) -> None:
        self.year -= 1
        self.regenerate()

    def next_year(self) -> None:
        self.year += 1
        self.regenerate()

    def previous_month(self) -> None:
        self.month -= 1
        if self.month <= 0:
            self.month = 12
            self.year -= 1
        self.regenerate()

    def next_month(self) -> None:
        self.month += 1
        if self.month >= 13:
            self.month = 1
            self.year += 1
        self.regenerate()
