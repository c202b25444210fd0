from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Mapping

from .roles import DaySchedule


@dataclass(frozen=True)
class RoleMetrics:
    """Metrics derived from one role's schedule and headcount."""

    total_shifts: int
    staffing_needs: float
    hiring_needs: float


def round1(x: float) -> float:
    """
    Round to one decimal place, half away from zero.

    Works on the shortest decimal repr of the float, so 0.75 -> 0.8 and
    0.25 -> 0.3 regardless of the binary representation.
    """
    return float(Decimal(repr(x)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def total_shifts(schedule: Mapping[str, DaySchedule]) -> int:
    return sum(int(day.lunch) + int(day.dinner) for day in schedule.values())


def derive_metrics(
    schedule: Mapping[str, DaySchedule],
    on_hand: int,
    divisor: float,
    volume_multiplier: float = 1.0,
) -> RoleMetrics:
    """
    Derive total shifts, staffing needs and hiring needs for a role.

    The hiring gap subtracts on-hand staff from the already-rounded staffing
    need, then rounds again.
    """
    total = total_shifts(schedule)
    needs = round1(total / divisor * volume_multiplier)
    hiring = round1(max(0.0, needs - on_hand))
    return RoleMetrics(total_shifts=total, staffing_needs=needs, hiring_needs=hiring)
