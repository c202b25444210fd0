from __future__ import annotations

import base64
import json
from pathlib import Path
from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """Opaque byte store the planner persists its state into."""

    def get(self, key: str) -> Optional[bytes]: ...
    def set(self, key: str, value: bytes) -> None: ...


class MemoryStore:
    """Dict-backed store, used for embedding and in tests."""

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self._data: dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)

    def keys(self) -> list[str]:
        return list(self._data)


class JsonFileStore:
    """
    Keeps every key in a single JSON document on disk.

    Values are stored as text when they decode as UTF-8 (which every
    planner snapshot does) and as base64 otherwise, so the file stays
    readable. The document is rewritten on every `set`.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()

    def _read(self) -> dict[str, dict[str, str]]:
        if not self.path.exists():
            return {}
        try:
            doc = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in {self.path}") from exc
        if not isinstance(doc, dict):
            raise TypeError(f"State file {self.path} must contain a JSON object.")
        return doc

    def get(self, key: str) -> Optional[bytes]:
        entry = self._read().get(key)
        if entry is None:
            return None
        if entry.get("encoding") == "base64":
            return base64.b64decode(entry["value"])
        return str(entry["value"]).encode("utf-8")

    def set(self, key: str, value: bytes) -> None:
        doc = self._read()
        try:
            doc[key] = {"encoding": "utf-8", "value": value.decode("utf-8")}
        except UnicodeDecodeError:
            doc[key] = {
                "encoding": "base64",
                "value": base64.b64encode(value).decode("ascii"),
            }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(doc, indent=2), encoding="utf-8")
