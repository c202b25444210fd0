from __future__ import annotations

import json
from pathlib import Path

import pytest

from staffing.config import Config
from staffing.storage import JsonFileStore, MemoryStore
from staffing.store import StaffingStore


def test_memory_store_get_set() -> None:
    s = MemoryStore()
    assert s.get("k") is None
    s.set("k", b"v")
    assert s.get("k") == b"v"
    assert s.keys() == ["k"]


def test_json_file_store_creates_parent_and_persists(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "state.json"
    s = JsonFileStore(path)
    assert s.get("k") is None
    s.set("k", b'{"a": 1}')
    s.set("bin", b"\xff\x00")

    again = JsonFileStore(path)
    assert again.get("k") == b'{"a": 1}'
    assert again.get("bin") == b"\xff\x00"
    doc = json.loads(path.read_text())
    assert doc["k"]["encoding"] == "utf-8"
    assert doc["bin"]["encoding"] == "base64"


def test_json_file_store_rejects_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    path.write_text("{oops")
    with pytest.raises(ValueError):
        JsonFileStore(path).get("k")


def test_store_round_trip_through_file(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    first = StaffingStore(Config(), JsonFileStore(path))
    first.set_shift_count("Server", "Fri", "dinner", "9")
    first.set_volume("150")

    second = StaffingStore(Config(), JsonFileStore(path))
    assert second.state.volume_percent == 150
    assert second.state.roles["Server"].staffing_needs == 3.0
