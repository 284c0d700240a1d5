"""Month-by-year accident counts across several yearly files."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import pandas as pd

from fars.analysis.extract import extract_years
from fars.io import write_csv
from fars.models.schemas import YEAR_EXTRACT
from fars.models.validate import validate_df

LOGGER = logging.getLogger(__name__)


def summarize_years(years: Iterable, *, data_dir: Path | None = None) -> pd.DataFrame:
    """Count accidents per (MONTH, year) and spread years into columns.

    Returns one row per observed MONTH (ascending) and one `Int64` column per
    year that contributed rows, ordered by first appearance in `years`. A
    (month, year) pair with no accidents is `<NA>`, not 0. Years that fail to
    load are skipped with a warning (see `extract_year`). A year listed twice
    is read twice and both reads count towards its single column.
    """
    extracts = extract_years(years, data_dir=data_dir)
    frames = [e.records for e in extracts if len(e)]
    if not frames:
        LOGGER.info("No accident rows loaded for %d requested year(s)", len(extracts))
        return pd.DataFrame()

    stacked = validate_df(
        pd.concat(frames, ignore_index=True), YEAR_EXTRACT, allow_extra_columns=False
    )

    # sort=False keeps groups in first-seen order, which fixes the column order
    counts = stacked.groupby(["year", "MONTH"], sort=False).size().rename("n").reset_index()
    if counts.empty:
        # every loaded row had a missing MONTH
        LOGGER.info("No accident rows with a MONTH in %d loaded row(s)", len(stacked))
        return pd.DataFrame()
    year_order = counts["year"].drop_duplicates().tolist()

    wide = (
        counts.pivot(index="MONTH", columns="year", values="n")
        .reindex(columns=year_order)
        .sort_index()
        .astype("Int64")
        .rename_axis(columns=None)
        .reset_index()
    )

    LOGGER.info(
        "Summarized %d accidents over %d month(s) x %d year(s)",
        int(counts["n"].sum()),
        len(wide),
        len(year_order),
    )
    return wide


def write_summary(table: pd.DataFrame, path: Path) -> Path:
    """Write a summary table as CSV; absent cells are left blank."""
    out = write_csv(table, path)
    LOGGER.info("Wrote %s", out)
    return out
