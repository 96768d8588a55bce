"""Data store for generated forecast files.

Forecasts depend only on hemisphere, seed and year, so a file once written
never goes stale; ``exists()`` is the whole freshness check. Every JSON file
is wrapped in a metadata envelope recording how it was produced.

Layout under the base directory::

    forecasts/{hemisphere}/{seed}/{year}.json
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any


class DataStore:
    """Manages read/write of metadata-enveloped JSON files."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir
        self.forecasts = base_dir / "forecasts"

    @staticmethod
    def forecast_path(hemisphere: str, seed: int, year: int) -> Path:
        """Relative path of a year forecast file."""
        return Path("forecasts") / hemisphere / str(seed) / f"{year}.json"

    def read(self, path: Path) -> Any | None:
        """Read data payload from a metadata-enveloped JSON file.

        Returns the ``data`` field, or None if the file doesn't exist.
        """
        envelope = self.read_raw(path)
        if envelope is None:
            return None
        return envelope.get("data", envelope)

    def read_raw(self, path: Path) -> dict[str, Any] | None:
        """Read the full envelope (meta + data) from a JSON file."""
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open() as f:
            result: dict[str, Any] = json.load(f)
        return result

    def write(self, path: Path, data: Any, source: str, **params: Any) -> Path:
        """Write data wrapped in a metadata envelope.

        Args:
            path: Relative path under base_dir (e.g. ``forecasts/northern/1/2024.json``).
            data: Payload to store under the ``data`` key.
            source: What produced the data (e.g. the oracle's import path).
            **params: Extra metadata fields (hemisphere, seed, ...).

        Returns:
            Absolute path of the written file.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)

        meta: dict[str, Any] = {
            "source": source,
            "generated_at": datetime.now(UTC).isoformat(),
        }
        if params:
            meta.update(params)

        envelope = {"meta": meta, "data": data}
        with full.open("w") as f:
            json.dump(envelope, f, indent=2)

        return full

    def exists(self, path: Path) -> bool:
        return self._resolve(path).exists()

    def _resolve(self, path: Path) -> Path:
        full = self.base / path if not path.is_absolute() else path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes store base directory: {path}"
            raise ValueError(msg) from None
        return full
