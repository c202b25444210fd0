from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg", force=True)
from staffing.reporting.plots import chart_points, show_staffing_overview
from staffing.store import StaffingStore


def test_chart_points_pair_on_hand_with_needs(store: StaffingStore) -> None:
    store.set_shift_count("Server", "Mon", "lunch", "9")
    store.set_on_hand("Server", "1")
    points = chart_points(store.state)
    assert [p.role for p in points] == list(store.state.roles)
    server = points[0]
    assert (server.current, server.needed) == (1, 2.0)


def test_staffing_overview_saves(monkeypatch, store: StaffingStore) -> None:
    saved = {}

    def fake_save(fig, name, out_dir, show):
        saved["name"] = name
        return Path(out_dir) / name

    monkeypatch.setattr("staffing.reporting.plots._save_and_show", fake_save)
    path = show_staffing_overview(store.state, out_dir="charts")
    assert saved["name"] == "staffing_overview.png"
    assert path == Path("charts") / "staffing_overview.png"


def test_staffing_overview_writes_png(tmp_path: Path, store: StaffingStore) -> None:
    path = show_staffing_overview(store.state, out_dir=tmp_path, show=False)
    assert path is not None and path.exists()


def test_staffing_overview_disabled(store: StaffingStore) -> None:
    assert show_staffing_overview(store.state, enable_plot=False) is None
