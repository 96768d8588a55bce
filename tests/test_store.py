"""Tests for the DataStore module."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from weather_seer.store import DataStore


class TestDataStoreInit:
    """Test DataStore initialization."""

    def test_paths(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        assert store.base == tmp_path
        assert store.forecasts == tmp_path / "forecasts"

    def test_forecast_path(self) -> None:
        path = DataStore.forecast_path("southern", 1856402561, 2024)
        assert path == Path("forecasts/southern/1856402561/2024.json")


class TestDataStoreWrite:
    """Test writing data with metadata envelopes."""

    def test_write_creates_file(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        path = store.write(Path("forecasts/northern/1/2024.json"), {"year": 2024}, source="test")
        assert path.exists()

    def test_write_envelope_format(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("forecasts/x.json"), {"year": 2024}, source="meteonook_py")

        data = json.loads((tmp_path / "forecasts" / "x.json").read_text())
        assert data["meta"]["source"] == "meteonook_py"
        assert "generated_at" in data["meta"]
        assert data["data"] == {"year": 2024}

    def test_write_extra_params(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("forecasts/x.json"), {}, source="test", hemisphere="northern", seed=7)
        meta = json.loads((tmp_path / "forecasts" / "x.json").read_text())["meta"]
        assert meta["hemisphere"] == "northern"
        assert meta["seed"] == 7

    def test_write_creates_parent_dirs(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(DataStore.forecast_path("northern", 1, 2024), {}, source="test")
        assert (tmp_path / "forecasts" / "northern" / "1" / "2024.json").exists()


class TestDataStoreRead:
    """Test reading data from the store."""

    def test_read_returns_data_payload(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("forecasts/test.json"), {"key": "value"}, source="test")
        assert store.read(Path("forecasts/test.json")) == {"key": "value"}

    def test_read_missing_file(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        assert store.read(Path("nonexistent.json")) is None

    def test_read_raw_has_meta(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("forecasts/test.json"), [1, 2], source="test")
        raw = store.read_raw(Path("forecasts/test.json"))
        assert raw is not None
        assert raw["meta"]["source"] == "test"
        assert raw["data"] == [1, 2]

    def test_read_without_envelope(self, tmp_path: Path) -> None:
        (tmp_path / "plain.json").write_text(json.dumps({"year": 2024}))
        store = DataStore(tmp_path)
        assert store.read(Path("plain.json")) == {"year": 2024}


class TestDataStoreExists:
    def test_exists(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        path = DataStore.forecast_path("northern", 1, 2024)
        assert store.exists(path) is False
        store.write(path, {}, source="test")
        assert store.exists(path) is True


class TestDataStorePathSafety:
    def test_escape_rejected(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path / "data")
        with pytest.raises(ValueError, match="escapes"):
            store.write(Path("../outside.json"), {}, source="test")

    def test_absolute_inside_base_allowed(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(tmp_path / "forecasts" / "abs.json", {"ok": True}, source="test")
        assert store.read(tmp_path / "forecasts" / "abs.json") == {"ok": True}
