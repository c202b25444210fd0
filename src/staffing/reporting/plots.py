from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from staffing.roles import AppState

from .data_models import ChartPoint

CURRENT_COLOR = "#4CAF50"
NEEDED_COLOR = "#2196F3"


def _save_and_show(fig: plt.Figure, filename: str, out_dir: Path, show: bool) -> Path:
    """Persist the plot under out_dir and optionally show it."""
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / filename
    fig.savefig(path, dpi=fig.dpi, bbox_inches="tight")
    if show:
        plt.show()
    plt.close(fig)
    return path


def chart_points(state: AppState) -> list[ChartPoint]:
    return [
        ChartPoint(role=role, current=rec.on_hand, needed=rec.staffing_needs)
        for role, rec in state.roles.items()
    ]


def show_staffing_overview(
    state: AppState,
    out_dir: str | Path = "outputs",
    enable_plot: bool = True,
    show: bool = True,
) -> Path | None:
    """Grouped bar chart of current vs needed staff per role."""
    if not enable_plot:
        return None

    points = chart_points(state)
    if not points:
        return None

    x = np.arange(len(points))
    width = 0.4
    fig, ax = plt.subplots(figsize=(7.5, 4), dpi=150)
    ax.set_title("Staffing Overview", pad=35)
    ax.bar(
        x - width / 2,
        [p.current for p in points],
        width=width,
        color=CURRENT_COLOR,
        label="Current Staff",
        edgecolor="none",
    )
    ax.bar(
        x + width / 2,
        [p.needed for p in points],
        width=width,
        color=NEEDED_COLOR,
        label="Needed Staff",
        edgecolor="none",
    )
    ax.set_xticks(x)
    ax.set_xticklabels([p.role for p in points], rotation=30, ha="right")
    ax.set_ylabel("Staff")
    ax.set_ymargin(0.05)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.legend(
        ncol=2,
        loc="upper center",
        bbox_to_anchor=(0.5, 1.15),
        borderaxespad=0.3,
    )
    ax.grid(axis="y", alpha=0.3)
    fig.tight_layout(rect=(0, 0, 1, 0.92))
    return _save_and_show(fig, "staffing_overview.png", Path(out_dir), show)
