# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pytest

from staffing.config import Config
from staffing.storage import MemoryStore
from staffing.store import StaffingStore


# -----------------------------
# Path helpers
# -----------------------------
@pytest.fixture(scope="session")
def project_root() -> Path:
    """Repository root (where pyproject.toml lives)."""
    return Path(__file__).resolve().parents[1]


# -----------------------------
# Store helpers
# -----------------------------
@pytest.fixture
def storage() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def store(storage: MemoryStore) -> StaffingStore:
    """A fresh store over an empty in-memory backend with the default roles."""
    return StaffingStore(Config(), storage)
