"""Pattern inference: the domain logic layer.

Dependency rule: analysis/ reads reference tables and schemas and talks to
the simulator only through the ``WeatherOracle`` it is handed. No file I/O,
no Prefect decorators.

Modules:
  - inference: day evidence -> list of possible patterns
  - populate: possible patterns + star/gap evidence -> accumulator writes
"""

from weather_seer.analysis.inference import (
    check_pattern_against_types,
    check_type_match,
    day_uses_types,
    get_possible_patterns,
)
from weather_seer.analysis.populate import (
    PopulateError,
    PopulateErrorKind,
    iter_gap_minutes,
    populate_guess_data,
)

__all__ = [
    "PopulateError",
    "PopulateErrorKind",
    "check_pattern_against_types",
    "check_type_match",
    "day_uses_types",
    "get_possible_patterns",
    "iter_gap_minutes",
    "populate_guess_data",
]
