"""weather-seer - infer a day's hidden weather pattern from what was observed.

Architecture::

    reference/     Static tables (pattern names, weather groups, linear hours)
    schemas.py     Pydantic models for recorded day evidence
    oracle/        Weather simulator interface and loader
    analysis/      Pattern inference and accumulator population
    accumulator.py Evidence sink interface + in-memory implementation
    forecast/      Per-day simulator queries composed into month/year views
    store.py       JSON envelopes for generated forecast files
    flows/         Prefect orchestration (solve observation logs, build forecasts)

Data flow: DayObservation → analysis.inference → analysis.populate → GuessData
"""

__version__ = "0.1.0"

from weather_seer.config import Settings
from weather_seer.schemas import DayObservation, ObservationLog

__all__ = ["DayObservation", "ObservationLog", "Settings", "__version__"]
