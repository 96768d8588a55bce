"""Weather simulator boundary.

Public API:
  - protocol: WeatherOracle, RainbowInfo
  - loader: load_oracle, get_oracle, OracleError
"""

from weather_seer.oracle.loader import OracleError, get_oracle, load_oracle
from weather_seer.oracle.protocol import RainbowInfo, WeatherOracle

__all__ = [
    "OracleError",
    "RainbowInfo",
    "WeatherOracle",
    "get_oracle",
    "load_oracle",
]
