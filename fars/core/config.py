"""Project configuration (paths, file conventions, data-source constants)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field

# Yearly input files: one bz2-compressed CSV per calendar year
FILENAME_TEMPLATE: str = "accident_{year:d}.csv.bz2"

# Geocoding sentinels used by FARS for "unknown" coordinates
LONGITUDE_SENTINEL: float = 900.0
LATITUDE_SENTINEL: float = 90.0

# Point marker for accident locations (a single pixel-ish dot)
MARKER: str = "."


@dataclass(frozen=True)
class Paths:
    root: Path
    data_dir: Path  # where accident_<year>.csv.bz2 files live
    figures: Path
    summaries: Path


def get_paths(root: Path | None = None) -> Paths:
    r = Path.cwd() if root is None else Path(root).resolve()
    return Paths(
        root=r,
        data_dir=r,
        figures=r / "figures",
        summaries=r / "summaries",
    )


class FarsSettings(BaseModel):
    """Optional run settings, usually loaded from a small YAML file."""

    data_dir: Path | None = None
    # Shapefile/GeoPackage with US state polygons drawn under the accident points
    boundary_file: Path | None = None
    figure_dpi: int = Field(default=150, gt=0)
    log_level: str = "INFO"

    def resolved_data_dir(self, paths: Paths | None = None) -> Path:
        if self.data_dir is not None:
            return Path(self.data_dir)
        return (paths or get_paths()).data_dir


def load_settings(path: Path | None = None) -> FarsSettings:
    """Load `FarsSettings` from YAML; a missing `path` gives the defaults."""
    if path is None:
        return FarsSettings()

    from fars.io import load_yaml

    return FarsSettings.model_validate(load_yaml(Path(path)))


def configure_logging(level: int | str = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
