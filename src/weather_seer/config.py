"""
Application settings.

Values come from ``WEATHER_SEER_*`` environment variables or a local ``.env``
file, falling back to the defaults below.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_seer.reference.weather import Hemisphere

DEFAULT_SEED = 1856402561


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_SEER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "weather-seer"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    hemisphere: Hemisphere = Hemisphere.NORTHERN
    seed: int = Field(default=DEFAULT_SEED, ge=0, le=2**32 - 1)

    # Where to find the simulator, e.g. "meteonook_py" or "mypkg.sim:Oracle"
    oracle: str = ""

    data_dir: Path = Path("data")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()
