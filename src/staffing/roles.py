from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

PERIODS: tuple[str, ...] = ("lunch", "dinner")

# Upper bound for any shift or headcount entry
MAX_COUNT = 10_000


@dataclass(slots=True)
class DaySchedule:
    lunch: int = 0
    dinner: int = 0

    def get(self, period: str) -> int:
        if period not in PERIODS:
            raise ValueError(f"Unknown period '{period}'.")
        return int(getattr(self, period))

    def to_dict(self) -> dict[str, int]:
        return {"lunch": self.lunch, "dinner": self.dinner}


@dataclass(slots=True)
class RoleRecord:
    """
    One staff role: its weekly shift schedule, current headcount and the
    metrics derived from them.
    """

    schedule: dict[str, DaySchedule]
    on_hand: int = 0
    total_shifts: int = 0
    staffing_needs: float = 0.0
    hiring_needs: float = 0.0

    def __repr__(self) -> str:
        return (
            f"RoleRecord(total={self.total_shifts}, on_hand={self.on_hand}, "
            f"needs={self.staffing_needs}, hiring={self.hiring_needs})"
        )

    @classmethod
    def empty(cls, days: Iterable[str]) -> RoleRecord:
        return cls(schedule={day: DaySchedule() for day in days})

    def to_dict(self) -> dict[str, Any]:
        """Serialize in the persisted (camelCase) shape."""
        return {
            "shifts": {day: s.to_dict() for day, s in self.schedule.items()},
            "onHand": self.on_hand,
            "totalShifts": self.total_shifts,
            "staffingNeeds": self.staffing_needs,
            "hiringNeeds": self.hiring_needs,
        }


def record_from_dict(raw: Mapping[str, Any], days: Iterable[str]) -> RoleRecord:
    """
    Build a RoleRecord from its persisted shape.

    Days missing from the stored schedule come back zeroed so the schedule is
    always fully populated. Stored derived fields are not read; the caller
    recomputes them from the inputs.
    """
    if not isinstance(raw, Mapping):
        raise TypeError("Each role entry must be an object/dict.")

    stored = raw.get("shifts") or {}
    if not isinstance(stored, Mapping):
        raise TypeError("'shifts' must be an object of day -> {lunch, dinner}.")

    schedule: dict[str, DaySchedule] = {}
    for day in days:
        cell = stored.get(day) or {}
        if not isinstance(cell, Mapping):
            raise TypeError(f"Shifts for '{day}' must be an object.")
        schedule[day] = DaySchedule(
            lunch=_count(cell.get("lunch", 0), f"{day}.lunch"),
            dinner=_count(cell.get("dinner", 0), f"{day}.dinner"),
        )

    return RoleRecord(
        schedule=schedule,
        on_hand=_count(raw.get("onHand", 0), "onHand"),
    )


def _count(value: Any, field_name: str) -> int:
    try:
        out = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid integer for '{field_name}': {value!r}") from exc
    if out < 0:
        raise ValueError(f"'{field_name}' must be non-negative, got {out}.")
    if out > MAX_COUNT:
        raise ValueError(f"'{field_name}' must be at most {MAX_COUNT}, got {out}.")
    return out


@dataclass
class AppState:
    """Everything the planner persists: per-role records plus the volume."""

    roles: dict[str, RoleRecord] = field(default_factory=dict)
    volume_percent: int = 100

    @property
    def volume_multiplier(self) -> float:
        return self.volume_percent / 100

    def to_snapshot(self) -> dict[str, Any]:
        return {
            "staffing": {role: rec.to_dict() for role, rec in self.roles.items()},
            "volume": self.volume_percent,
        }
