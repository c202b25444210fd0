from __future__ import annotations

from .data_models import ChartPoint, StaffingTotals
from .export import export_csv, export_filename, write_export
from .plots import show_staffing_overview
from .summary import render_summary

__all__ = [
    "ChartPoint",
    "StaffingTotals",
    "export_csv",
    "export_filename",
    "write_export",
    "show_staffing_overview",
    "render_summary",
]
