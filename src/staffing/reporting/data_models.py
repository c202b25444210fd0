from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StaffingTotals:
    """Headcount totals across every role."""

    total_needed: float  # sum of staffing_needs
    total_on_hand: int
    total_hiring_gap: float  # sum of hiring_needs


@dataclass(frozen=True)
class ChartPoint:
    """One bar pair of the staffing overview chart."""

    role: str
    current: int  # on hand
    needed: float  # staffing_needs
