from __future__ import annotations

import json
import re
from dataclasses import replace
from typing import Any, Mapping, Optional, Union

from .config import Config, cfg
from .metrics import RoleMetrics, derive_metrics, round1
from .reporting.data_models import StaffingTotals
from .roles import (
    MAX_COUNT,
    PERIODS,
    AppState,
    DaySchedule,
    RoleRecord,
    record_from_dict,
)
from .storage import KeyValueStore, MemoryStore

RawInput = Union[str, int, None]

_INT_TEXT = re.compile(r"[+-]?[0-9]+")


def parse_count(raw: RawInput) -> Optional[int]:
    """
    Parse a shift or headcount field.

    Empty input counts as 0. Returns None when the value is not an integer or
    falls outside [0, MAX_COUNT], meaning the edit should be dropped.
    """
    value = _parse_int(raw)
    if value is None or not (0 <= value <= MAX_COUNT):
        return None
    return value


def parse_volume(raw: RawInput, lo: int = 25, hi: int = 200) -> Optional[int]:
    """Parse a volume percentage; None unless it is an integer in [lo, hi]."""
    value = _parse_int(raw)
    if value is None or not (lo <= value <= hi):
        return None
    return value


def _parse_int(raw: RawInput) -> Optional[int]:
    if raw is None:
        return 0
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    if text == "":
        return 0
    if not _INT_TEXT.fullmatch(text):
        return None
    return int(text)


class StaffingStore:
    """
    Owns the planner state and the only way to change it.

    Every accepted edit runs the same pipeline: update the raw input,
    recompute the affected role(s), then write the snapshot through to the
    key-value store. Rejected edits return the state untouched.
    """

    def __init__(
        self,
        config: Config | None = None,
        storage: KeyValueStore | None = None,
    ) -> None:
        self.cfg = config or cfg
        self.cfg.validate()
        self.storage: KeyValueStore = storage if storage is not None else MemoryStore()
        self.state: AppState = self.load() or self.initialize()

    # ---------- lifecycle ----------

    def initialize(self) -> AppState:
        """Fresh state: every catalog role zeroed, volume at the default."""
        return AppState(
            roles={role: RoleRecord.empty(self.cfg.DAYS) for role in self.cfg.roles},
            volume_percent=self.cfg.DEFAULT_VOLUME,
        )

    def load(self) -> Optional[AppState]:
        """
        Read the persisted snapshot, or None when nothing has been saved.

        The current key wins over the legacy one. Loaded roles are laid over a
        freshly initialized state, so roles added to the catalog since the
        snapshot was written keep their zero defaults. Roles no longer in the
        catalog are dropped. Derived metrics are recomputed from the loaded
        inputs, the current divisors and the resolved volume.
        """
        raw = self.storage.get(self.cfg.STORAGE_KEY)
        key = self.cfg.STORAGE_KEY
        if raw is None:
            raw = self.storage.get(self.cfg.LEGACY_STORAGE_KEY)
            key = self.cfg.LEGACY_STORAGE_KEY
        if raw is None:
            return None

        try:
            doc = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ValueError(
                f"Stored snapshot under '{key}' is not valid JSON"
            ) from exc
        if not isinstance(doc, Mapping):
            raise TypeError(f"Stored snapshot under '{key}' must be a JSON object.")

        if key == self.cfg.STORAGE_KEY:
            roles_doc = doc.get("staffing") or {}
            volume = doc.get("volume", self.cfg.DEFAULT_VOLUME)
        else:
            roles_doc, volume = doc, self.cfg.DEFAULT_VOLUME

        return self._merge(roles_doc, volume)

    def _merge(self, roles_doc: Mapping[str, Any], volume: Any) -> AppState:
        if not isinstance(roles_doc, Mapping):
            raise TypeError("Stored roles must be an object of role name -> record.")
        state = self.initialize()
        parsed_volume = parse_volume(volume, self.cfg.VOLUME_MIN, self.cfg.VOLUME_MAX)
        if parsed_volume is not None:
            state.volume_percent = parsed_volume

        for role, raw in roles_doc.items():
            if role not in state.roles:
                continue
            state.roles[role] = record_from_dict(raw, self.cfg.DAYS)
            self._recompute(state, role)
        return state

    def save(self) -> None:
        payload = json.dumps(self.state.to_snapshot()).encode("utf-8")
        self.storage.set(self.cfg.STORAGE_KEY, payload)

    # ---------- mutations ----------

    def set_shift_count(
        self, role: str, day: str, period: str, raw_value: RawInput
    ) -> AppState:
        record = self._record(role)
        if day not in record.schedule:
            raise ValueError(f"Unknown day '{day}'.")
        if period not in PERIODS:
            raise ValueError(f"Unknown period '{period}'.")

        value = parse_count(raw_value)
        if value is None:
            return self.state

        cell = replace(record.schedule[day], **{period: value})
        m = self._derive(
            role, {**record.schedule, day: cell}, record.on_hand, self.state
        )
        record.schedule[day] = cell
        _apply(record, m)
        self.save()
        return self.state

    def set_on_hand(self, role: str, raw_value: RawInput) -> AppState:
        record = self._record(role)
        value = parse_count(raw_value)
        if value is None:
            return self.state

        m = self._derive(role, record.schedule, value, self.state)
        record.on_hand = value
        _apply(record, m)
        self.save()
        return self.state

    def set_volume(self, raw_percent: RawInput) -> AppState:
        value = parse_volume(raw_percent, self.cfg.VOLUME_MIN, self.cfg.VOLUME_MAX)
        if value is None:
            return self.state

        self.state.volume_percent = value
        for role in self.state.roles:
            self._recompute(self.state, role)
        self.save()
        return self.state

    # ---------- reads ----------

    def aggregate_totals(self) -> StaffingTotals:
        records = self.state.roles.values()
        return StaffingTotals(
            total_needed=round1(sum(r.staffing_needs for r in records)),
            total_on_hand=sum(r.on_hand for r in records),
            total_hiring_gap=round1(sum(r.hiring_needs for r in records)),
        )

    # ---------- helpers ----------

    def _record(self, role: str) -> RoleRecord:
        try:
            return self.state.roles[role]
        except KeyError:
            raise ValueError(f"Unknown role '{role}'.") from None

    def _derive(
        self,
        role: str,
        schedule: Mapping[str, DaySchedule],
        on_hand: int,
        state: AppState,
    ) -> RoleMetrics:
        return derive_metrics(
            schedule, on_hand, self.cfg.divisor(role), state.volume_multiplier
        )

    def _recompute(self, state: AppState, role: str) -> None:
        record = state.roles[role]
        _apply(record, self._derive(role, record.schedule, record.on_hand, state))


def _apply(record: RoleRecord, m: RoleMetrics) -> None:
    record.total_shifts = m.total_shifts
    record.staffing_needs = m.staffing_needs
    record.hiring_needs = m.hiring_needs
