"""Per-state accident location maps."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import numpy as np
import pandas as pd

from fars.analysis.filenames import as_int, resolve_path
from fars.core.config import LATITUDE_SENTINEL, LONGITUDE_SENTINEL, FarsSettings, get_paths
from fars.core.errors import InvalidStateError
from fars.io import read_accident_table
from fars.models.schemas import ACCIDENT_LOCATIONS
from fars.vis.map_utils import MapRenderer, StateMapRenderer

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlotPointSet:
    longitude: np.ndarray
    latitude: np.ndarray
    xlim: tuple[float, float]
    ylim: tuple[float, float]

    def __len__(self) -> int:
        return len(self.longitude)

    def pairs(self) -> list[tuple[float, float]]:
        return list(zip(self.longitude.tolist(), self.latitude.tolist()))


def _extent(values: pd.Series) -> tuple[float, float]:
    valid = values.dropna()
    if valid.empty:
        return (np.nan, np.nan)
    return (float(valid.min()), float(valid.max()))


def sanitize_coordinates(subset: pd.DataFrame) -> PlotPointSet:
    """Drop FARS "unknown location" sentinels and build the point set.

    LONGITUD > 900 and LATITUDE > 90 are treated as missing. A point needs both
    coordinates; extents are taken per axis over whatever is left on that axis.
    """
    lon = pd.to_numeric(subset["LONGITUD"], errors="coerce").astype(float)
    lat = pd.to_numeric(subset["LATITUDE"], errors="coerce").astype(float)
    lon = lon.mask(lon > LONGITUDE_SENTINEL)
    lat = lat.mask(lat > LATITUDE_SENTINEL)

    keep = lon.notna() & lat.notna()
    return PlotPointSet(
        longitude=lon[keep].to_numpy(),
        latitude=lat[keep].to_numpy(),
        xlim=_extent(lon),
        ylim=_extent(lat),
    )


def draw_accidents(subset: pd.DataFrame, renderer: MapRenderer) -> PlotPointSet | None:
    """Sanitize one state's rows and hand the points to `renderer`.

    Returns None without rendering when nothing is left to plot, either because
    there are no rows or because every row has unknown coordinates.
    """
    if subset.empty:
        LOGGER.info("no accidents to plot")
        return None

    points = sanitize_coordinates(subset)
    dropped = len(subset) - len(points)
    if dropped:
        LOGGER.debug("Dropped %d row(s) with unknown coordinates", dropped)

    if not len(points):
        LOGGER.info("no accidents with known coordinates to plot")
        return None

    renderer.render(points)
    return points


def map_state(
    state_num,
    year,
    *,
    data_dir: Path | None = None,
    renderer: MapRenderer | None = None,
    settings: FarsSettings | None = None,
    out_path: Path | None = None,
) -> PlotPointSet | None:
    """Plot accident locations of one state for one year.

    Without a `renderer`, a `StateMapRenderer` is built from `settings` (its
    `boundary_file` is the state base map) and saves to `out_path`, by default
    `figures/accidents_state<code>_<year>.png` under the current directory.
    `settings.data_dir` is used when `data_dir` is not passed.

    Load and validation errors propagate: `MissingFileError` for a missing
    year, `InvalidStateError` for a state code that is not a number or is
    absent from that year.
    """
    settings = settings or FarsSettings()
    if data_dir is None:
        data_dir = settings.data_dir

    table = read_accident_table(
        resolve_path(year, data_dir), schema=ACCIDENT_LOCATIONS, normalize=True
    )
    try:
        state = as_int(state_num)
    except (TypeError, ValueError) as exc:
        raise InvalidStateError(state_num) from exc

    in_state = table["STATE"].isin([state])
    if not in_state.any():
        raise InvalidStateError(state)

    subset = table[in_state]
    LOGGER.info("State %d, year %s: %d accident(s)", state, year, len(subset))

    if renderer is None:
        if out_path is None:
            out_path = get_paths().figures / f"accidents_state{state}_{as_int(year)}.png"
        renderer = StateMapRenderer.from_settings(settings, out_path=out_path)
    return draw_accidents(subset, renderer)
