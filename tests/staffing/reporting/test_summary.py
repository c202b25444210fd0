from __future__ import annotations

from datetime import date

import pytest

from staffing.config import find_location
from staffing.reporting.summary import day_grid, render_summary, role_table
from staffing.store import StaffingStore


def test_role_table_follows_catalog_order(store: StaffingStore) -> None:
    store.set_shift_count("Server", "Mon", "lunch", "9")
    df = role_table(store.state)
    assert list(df.index) == list(store.state.roles)
    assert df.loc["Server", "staffing_needs"] == 2.0


def test_day_grid(store: StaffingStore) -> None:
    store.set_shift_count("Host", "Sat", "dinner", "5")
    grid = day_grid(store.state, "Host")
    assert list(grid.columns) == ["lunch", "dinner"]
    assert grid.loc["Sat", "dinner"] == 5
    with pytest.raises(ValueError):
        day_grid(store.state, "Chef")


def test_render_summary_prints_totals_and_role_grid(
    store: StaffingStore, capsys: pytest.CaptureFixture[str]
) -> None:
    store.set_shift_count("Bartender", "Mon", "lunch", "3")
    store.set_volume("150")
    text = render_summary(
        store.state,
        store.aggregate_totals(),
        find_location("GA"),
        role="Bartender",
        on=date(2024, 5, 6),
    )
    out = capsys.readouterr().out
    assert text in out
    assert "Gratiot Ave (C00954) | 2024-05-06" in text
    assert "Volume: 150% of baseline" in text
    assert "Bartender shifts by day:" in text
    assert "Needed: 1.1 | On hand: 0 | Hiring gap: 1.1" in text
