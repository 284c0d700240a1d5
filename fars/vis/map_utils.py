"""State map rendering for accident locations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

import geopandas as gpd
import matplotlib.pyplot as plt

from fars.core.config import MARKER, FarsSettings

if TYPE_CHECKING:
    from fars.analysis.state_plot import PlotPointSet

LOGGER = logging.getLogger(__name__)

CRS_WGS84 = "EPSG:4326"


class MapRenderer(Protocol):
    def render(self, points: PlotPointSet) -> None: ...


@dataclass(frozen=True)
class MapStyle:
    """Styling for the state accident map."""

    figsize: tuple[float, float] = (8.0, 8.0)
    facecolor: str = "white"

    # State outlines
    boundary_color: str = "#111827"
    boundary_linewidth: float = 0.8
    boundary_alpha: float = 0.6

    # Accident markers
    marker: str = MARKER
    marker_color: str = "#dc2626"
    marker_size: float = 4.0

    # Fraction of the data range added around the extents
    extent_padding: float = 0.02


class StateMapRenderer:
    """Draw accident points over state outlines, scaled to the points' extents.

    `boundary` is a GeoDataFrame of state polygons or a path readable by
    geopandas; without one only the points are drawn.
    """

    def __init__(
        self,
        boundary: gpd.GeoDataFrame | Path | str | None = None,
        style: MapStyle | None = None,
        *,
        out_path: Path | None = None,
        dpi: int = 150,
    ):
        self.style = style or MapStyle()
        self.boundary = self._load_boundary(boundary)
        if self.boundary is None:
            LOGGER.warning("No state boundary configured; maps will show accident points only")
        self.out_path = out_path
        self.dpi = dpi
        self.figure: plt.Figure | None = None

    @classmethod
    def from_settings(
        cls, settings: FarsSettings, *, out_path: Path | None = None, style: MapStyle | None = None
    ) -> StateMapRenderer:
        return cls(settings.boundary_file, style, out_path=out_path, dpi=settings.figure_dpi)

    @staticmethod
    def _load_boundary(boundary) -> gpd.GeoDataFrame | None:
        if boundary is None:
            return None
        if isinstance(boundary, gpd.GeoDataFrame):
            gdf = boundary
        else:
            LOGGER.debug("Loading state boundaries from %s", boundary)
            gdf = gpd.read_file(boundary)
        if gdf.crs is not None and str(gdf.crs) != CRS_WGS84:
            gdf = gdf.to_crs(CRS_WGS84)
        return gdf

    def _padded(self, lo: float, hi: float) -> tuple[float, float]:
        pad = (hi - lo) * self.style.extent_padding or self.style.extent_padding
        return lo - pad, hi + pad

    def setup_axes(self, points: PlotPointSet) -> tuple[plt.Figure, plt.Axes]:
        """Figure with state outlines and limits set to the points' extents."""
        fig, ax = plt.subplots(figsize=self.style.figsize)
        ax.set_facecolor(self.style.facecolor)

        xlim = self._padded(*points.xlim)
        ylim = self._padded(*points.ylim)

        if self.boundary is not None:
            visible = self.boundary.cx[xlim[0] : xlim[1], ylim[0] : ylim[1]]
            visible.boundary.plot(
                ax=ax,
                color=self.style.boundary_color,
                linewidth=self.style.boundary_linewidth,
                alpha=self.style.boundary_alpha,
                zorder=1,
            )

        ax.set_xlim(*xlim)
        ax.set_ylim(*ylim)
        ax.set_aspect("equal", adjustable="datalim")

        ax.set_xticks([])
        ax.set_yticks([])
        for side in ("left", "right", "top", "bottom"):
            ax.spines[side].set_visible(False)

        return fig, ax

    def close(self) -> None:
        if self.figure is not None:
            plt.close(self.figure)

    def render(self, points: PlotPointSet) -> None:
        """Draw `points`; a saved figure is closed, an unsaved one is kept on `figure`."""
        self.close()
        fig, ax = self.setup_axes(points)
        ax.scatter(
            points.longitude,
            points.latitude,
            marker=self.style.marker,
            s=self.style.marker_size,
            color=self.style.marker_color,
            zorder=2,
        )
        self.figure = fig

        if self.out_path is not None:
            out = Path(self.out_path)
            out.parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(out, dpi=self.dpi, bbox_inches="tight")
            LOGGER.info("Saved state map to %s", out)
            plt.close(fig)
