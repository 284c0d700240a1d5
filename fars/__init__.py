"""FARS yearly accident files: monthly summaries and per-state location maps."""

from __future__ import annotations

from fars.analysis import (
    make_filename,
    map_state,
    summarize_years,
)
from fars.core.errors import FarsError, InvalidStateError, MissingFileError
from fars.io import read_accident_table

__all__ = [
    "FarsError",
    "InvalidStateError",
    "MissingFileError",
    "make_filename",
    "map_state",
    "read_accident_table",
    "summarize_years",
]
