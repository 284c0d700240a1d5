from __future__ import annotations

from pathlib import Path

from fars.core.errors import MissingFileError

# Only bz2 is produced by the yearly export; the rest lets pandas read plain CSVs in tests
_COMPRESSION_BY_SUFFIX: dict[str, str | None] = {
    ".bz2": "bz2",
    ".csv": None,
}


def require_file(path: Path) -> Path:
    """Return `path` if it exists as a file, else raise `MissingFileError`."""
    path = Path(path)
    if not path.is_file():
        raise MissingFileError(path)
    return path


def compression_for(path: Path) -> str | None:
    """Compression argument for `pd.read_csv` based on the file suffix.

    - `accident_2013.csv.bz2` -> "bz2"
    - `accident_2013.csv` -> None
    - anything else is left to pandas ("infer")
    """
    suffix = Path(path).suffix.lower()
    return _COMPRESSION_BY_SUFFIX.get(suffix, "infer")
