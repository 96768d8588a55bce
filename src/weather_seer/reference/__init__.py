"""Static tables shared by inference and forecasting.

Nothing here calls the simulator: pattern ordinals and names, weather
categories, the linear-hour map and calendar helpers.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/enums
2. Re-export from this ``__init__.py``
"""

from weather_seer.reference.calendar import MONTH_NAMES as MONTH_NAMES
from weather_seer.reference.calendar import month_length as month_length
from weather_seer.reference.hours import STAR_WINDOW_HOURS as STAR_WINDOW_HOURS
from weather_seer.reference.hours import from_linear_hour as from_linear_hour
from weather_seer.reference.hours import to_linear_hour as to_linear_hour
from weather_seer.reference.patterns import AURORA_PATTERNS as AURORA_PATTERNS
from weather_seer.reference.patterns import FIRST_PATTERN as FIRST_PATTERN
from weather_seer.reference.patterns import MAX_PATTERN as MAX_PATTERN
from weather_seer.reference.patterns import RAINBOW_PATTERNS_BY_HOUR as RAINBOW_PATTERNS_BY_HOUR
from weather_seer.reference.patterns import Pattern as Pattern
from weather_seer.reference.patterns import pattern_name as pattern_name
from weather_seer.reference.weather import AmbiguousWeather as AmbiguousWeather
from weather_seer.reference.weather import CloudLevel as CloudLevel
from weather_seer.reference.weather import FogLevel as FogLevel
from weather_seer.reference.weather import Hemisphere as Hemisphere
from weather_seer.reference.weather import SnowLevel as SnowLevel
from weather_seer.reference.weather import SpecialDay as SpecialDay
from weather_seer.reference.weather import Weather as Weather
