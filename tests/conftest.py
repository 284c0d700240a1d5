from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

from pathlib import Path

import pandas as pd
import pytest


class RecordingRenderer:
    """Collects every point set it is asked to draw."""

    def __init__(self) -> None:
        self.calls = []

    def render(self, points) -> None:
        self.calls.append(points)


@pytest.fixture
def write_year(tmp_path: Path):
    """Write `rows` as `accident_<year>.csv.bz2` under tmp_path and return the path."""

    def _write(year: int, rows: list[dict]) -> Path:
        path = tmp_path / f"accident_{year}.csv.bz2"
        pd.DataFrame(rows).to_csv(path, index=False, compression="bz2")
        return path

    return _write


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


def accident(month: int, state: int = 1, lon: float = -86.5, lat: float = 32.5, **extra) -> dict:
    return {"STATE": state, "MONTH": month, "LONGITUD": lon, "LATITUDE": lat, **extra}
