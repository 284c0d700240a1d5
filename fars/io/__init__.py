"""Lightweight I/O helpers.

This module centralises:
- the yearly accident table read (`read_accident_table`) at the pipeline boundary
- small CSV/YAML helpers used for summaries and settings
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pandas as pd
import yaml

from fars.io.compressed import compression_for, require_file
from fars.models.schemas import TableSchema
from fars.models.validate import validate_df

LOGGER = logging.getLogger(__name__)

__all__ = [
    "compression_for",
    "ensure_parent_dir",
    "load_yaml",
    "read_accident_table",
    "require_file",
    "write_csv",
]


def ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def write_csv(df: pd.DataFrame, path: Path) -> Path:
    path = Path(path)
    ensure_parent_dir(path)
    df.to_csv(path, index=False)
    return path


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML mapping; an empty file gives `{}`."""
    return yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}


def read_accident_table(
    path: Path | str,
    *,
    schema: TableSchema | None = None,
    normalize: bool = False,
) -> pd.DataFrame:
    """Read one yearly accident file into a DataFrame.

    Raises `MissingFileError` when `path` does not exist. Parser errors from
    pandas propagate unchanged. Columns and row order are kept as in the file;
    dtypes are whatever pandas infers from the CSV unless `normalize` casts the
    `schema` columns to their nullable dtypes.
    """
    src = require_file(Path(path))

    # low_memory=False reads in one pass, so no chunked mixed-dtype warnings
    df = pd.read_csv(src, compression=compression_for(src), low_memory=False)
    LOGGER.debug("Read %d rows x %d cols from %s", len(df), len(df.columns), src)

    if schema is not None:
        df = validate_df(df, schema, coerce_dtypes=normalize)
    return df
