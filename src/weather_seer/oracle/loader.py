"""Resolve the configured simulator implementation.

The ``oracle`` setting names where the simulator lives:

    package.module            module-level functions act as the oracle
    package.module:attr       an oracle object, or a class/factory to call

Usage::

    from weather_seer.oracle import get_oracle

    oracle = get_oracle()
    oracle.get_weather(12, Pattern.FINE_00)
"""

from __future__ import annotations

import importlib
import logging
from functools import lru_cache
from typing import cast

from weather_seer.config import get_settings
from weather_seer.oracle.protocol import WeatherOracle

logger = logging.getLogger(__name__)


class OracleError(RuntimeError):
    """The simulator could not be located or does not fit the interface."""


def load_oracle(target: str) -> WeatherOracle:
    """Import and return the oracle named by ``target``.

    Raises:
        OracleError: If ``target`` is empty, cannot be imported, or the
            resolved object lacks part of the ``WeatherOracle`` interface.
    """
    if not target:
        msg = "No weather oracle configured (set WEATHER_SEER_ORACLE)"
        raise OracleError(msg)

    module_name, _, attr = target.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        msg = f"Cannot import oracle module {module_name!r}: {e}"
        raise OracleError(msg) from e

    obj: object = module
    if attr:
        try:
            obj = getattr(module, attr)
        except AttributeError:
            msg = f"Module {module_name!r} has no attribute {attr!r}"
            raise OracleError(msg) from None
        # Classes pass the structural check too, so instantiate them first.
        if isinstance(obj, type) or (callable(obj) and not isinstance(obj, WeatherOracle)):
            obj = obj()

    if not isinstance(obj, WeatherOracle):
        msg = f"{target!r} does not provide the weather oracle interface"
        raise OracleError(msg)

    logger.debug("Loaded weather oracle from %s", target)
    return cast("WeatherOracle", obj)


@lru_cache(maxsize=1)
def get_oracle() -> WeatherOracle:
    """The oracle named by the current settings, loaded once."""
    return load_oracle(get_settings().oracle)
