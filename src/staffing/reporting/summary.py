from __future__ import annotations

from datetime import date
from typing import Optional

import pandas as pd

from staffing.config import Location
from staffing.roles import PERIODS, AppState

from .data_models import StaffingTotals


def _log_print(lines: list[str], *args: object) -> None:
    text = " ".join(str(a) for a in args)
    print(text)
    lines.append(text)


def role_table(state: AppState) -> pd.DataFrame:
    """Per-role metrics, indexed by role name in catalog order."""
    df = pd.DataFrame(
        [
            {
                "role": role,
                "total_shifts": rec.total_shifts,
                "on_hand": rec.on_hand,
                "staffing_needs": rec.staffing_needs,
                "hiring_needs": rec.hiring_needs,
            }
            for role, rec in state.roles.items()
        ],
        columns=["role", "total_shifts", "on_hand", "staffing_needs", "hiring_needs"],
    )
    return df.set_index("role")


def day_grid(state: AppState, role: str) -> pd.DataFrame:
    """Lunch/dinner counts for one role: days as rows, periods as columns."""
    try:
        rec = state.roles[role]
    except KeyError:
        raise ValueError(f"Unknown role '{role}'.") from None
    return pd.DataFrame(
        {p: [rec.schedule[d].get(p) for d in rec.schedule] for p in PERIODS},
        index=pd.Index(list(rec.schedule), name="day"),
    )


def render_summary(
    state: AppState,
    totals: StaffingTotals,
    location: Location,
    role: Optional[str] = None,
    on: date | None = None,
) -> str:
    """
    Print the planner summary and return the printed text.

    Includes the location header, the per-role table, overall totals and,
    when `role` is given, that role's day-by-day grid.
    """
    lines: list[str] = []
    day = on or date.today()
    _log_print(lines, f"{location.name} ({location.code}) | {day.isoformat()}")
    _log_print(lines, f"Volume: {state.volume_percent}% of baseline")
    _log_print(lines, "")

    table = role_table(state)
    if table.empty:
        _log_print(lines, "Roles: (none)")
    else:
        _log_print(lines, table.to_string())
    _log_print(lines, "")
    _log_print(
        lines,
        f"Needed: {totals.total_needed:.1f} | On hand: {totals.total_on_hand} | "
        f"Hiring gap: {totals.total_hiring_gap:.1f}",
    )

    if role is not None:
        grid = day_grid(state, role)
        rec = state.roles[role]
        _log_print(lines, "")
        _log_print(lines, f"{role} shifts by day:")
        _log_print(lines, grid.to_string())
        _log_print(
            lines,
            f"Total shifts: {rec.total_shifts} | Staffing needs: "
            f"{rec.staffing_needs} | On hand: {rec.on_hand} | "
            f"Hiring needs: {rec.hiring_needs}",
        )
    return "\n".join(lines)
