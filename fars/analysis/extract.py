"""Per-year (MONTH, year) extracts with isolated failure handling."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from fars.analysis.filenames import resolve_path
from fars.io import read_accident_table
from fars.models.schemas import ACCIDENT_MONTHS

LOGGER = logging.getLogger(__name__)

EXTRACT_COLUMNS: tuple[str, str] = ("MONTH", "year")


@dataclass(frozen=True)
class YearExtract:
    """(MONTH, year) rows of one requested year.

    `records` is empty and `error` holds the reason when the year failed to load.
    """

    year: object
    records: pd.DataFrame
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __len__(self) -> int:
        return len(self.records)

    @classmethod
    def failed(cls, year, reason: str) -> YearExtract:
        empty = pd.DataFrame({col: pd.Series(dtype="object") for col in EXTRACT_COLUMNS})
        return cls(year=year, records=empty, error=reason)


def read_year(year, *, data_dir: Path | None = None) -> pd.DataFrame:
    """Load one year and project it to (MONTH, year). Errors propagate."""
    path = resolve_path(year, data_dir)
    table = read_accident_table(path, schema=ACCIDENT_MONTHS, normalize=True)

    out = table[["MONTH"]].copy()
    # Tag with the requested value, never the file's own YEAR column
    out["year"] = year
    return out


def extract_year(year, *, data_dir: Path | None = None) -> YearExtract:
    """Like `read_year`, but a failure becomes a warning plus an empty extract."""
    try:
        records = read_year(year, data_dir=data_dir)
    except Exception as exc:  # noqa: BLE001 - recovered per year
        LOGGER.warning("invalid year: %s (%s)", year, exc)
        return YearExtract.failed(year, str(exc))
    return YearExtract(year=year, records=records)


def extract_years(years: Iterable, *, data_dir: Path | None = None) -> list[YearExtract]:
    """One extract per requested year, in order; duplicates are read again."""
    return [extract_year(year, data_dir=data_dir) for year in years]
