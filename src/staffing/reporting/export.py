from __future__ import annotations

import csv
from datetime import date
from pathlib import Path

import pandas as pd

from staffing.config import Location
from staffing.roles import AppState

EXPORT_COLUMNS = [
    "Location",
    "Role",
    "Day",
    "Lunch Shifts",
    "Dinner Shifts",
    "Total Shifts",
    "Staff On Hand",
    "Staffing Needs",
    "Hiring Needs",
]


def format_number(x: float | int) -> str:
    """Plain decimal text; whole numbers drop the trailing '.0'."""
    if float(x).is_integer():
        return str(int(x))
    return repr(float(x))


def export_frame(state: AppState, location: Location) -> pd.DataFrame:
    """
    One row per (role, day), roles in catalog order and days in week order.

    The role-level columns (total shifts, on hand, needs) repeat on each of
    the role's day rows.
    """
    rows: list[dict[str, str]] = []
    for role, rec in state.roles.items():
        for day, shifts in rec.schedule.items():
            rows.append(
                {
                    "Location": location.name,
                    "Role": role,
                    "Day": day,
                    "Lunch Shifts": format_number(shifts.lunch),
                    "Dinner Shifts": format_number(shifts.dinner),
                    "Total Shifts": format_number(rec.total_shifts),
                    "Staff On Hand": format_number(rec.on_hand),
                    "Staffing Needs": format_number(rec.staffing_needs),
                    "Hiring Needs": format_number(rec.hiring_needs),
                }
            )
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def export_csv(state: AppState, location: Location) -> str:
    df = export_frame(state, location)
    return df.to_csv(index=False, lineterminator="\n", quoting=csv.QUOTE_NONE)


def export_filename(location: Location, on: date | None = None) -> str:
    day = on or date.today()
    return f"staffing-needs-{location.id}-{day.isoformat()}.csv"


def write_export(
    state: AppState,
    location: Location,
    out_dir: str | Path = "outputs",
    on: date | None = None,
) -> Path:
    """Write the CSV export under out_dir and return its path."""
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    path = out / export_filename(location, on)
    path.write_text(export_csv(state, location), encoding="utf-8")
    return path
