"""Yearly accident pipeline: file names, extracts, summaries and state maps."""

from __future__ import annotations

from fars.analysis.extract import YearExtract, extract_year, extract_years, read_year
from fars.analysis.filenames import as_int, make_filename, resolve_path
from fars.analysis.state_plot import PlotPointSet, draw_accidents, map_state, sanitize_coordinates
from fars.analysis.summarize import summarize_years, write_summary

__all__ = [
    "PlotPointSet",
    "YearExtract",
    "as_int",
    "draw_accidents",
    "extract_year",
    "extract_years",
    "make_filename",
    "map_state",
    "read_year",
    "resolve_path",
    "sanitize_coordinates",
    "summarize_years",
    "write_summary",
]
