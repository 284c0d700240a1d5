from __future__ import annotations

from pathlib import Path

from fars.core.config import FILENAME_TEMPLATE


def as_int(value) -> int:
    """Truncating integer coercion (`2013.9 -> 2013`, `"2013" -> 2013`)."""
    if isinstance(value, str):
        return int(float(value.strip()))
    return int(value)


def make_filename(year) -> str:
    """File name of the yearly accident export, e.g. `accident_2013.csv.bz2`."""
    return FILENAME_TEMPLATE.format(year=as_int(year))


def resolve_path(year, data_dir: Path | None = None) -> Path:
    name = make_filename(year)
    return Path(name) if data_dir is None else Path(data_dir) / name
