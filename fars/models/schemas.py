"""Schema definitions for accident table contracts.

This module contains only:
- `TableSchema` (schema metadata container)
- concrete table schemas for the yearly accident files and their projections
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, Field


class TableSchema(BaseModel):
    """A simple schema for a pandas DataFrame (column-level contract)."""

    name: str
    required_columns: tuple[str, ...] = Field(default_factory=tuple)
    optional_columns: tuple[str, ...] = Field(default_factory=tuple)
    # pandas nullable dtypes applied on load, e.g. "Int64" for FARS integer codes
    dtypes: Mapping[str, str] = Field(default_factory=dict)
    non_null: tuple[str, ...] = Field(default_factory=tuple)

    def allowed_columns(self) -> set[str]:
        return set(self.required_columns) | set(self.optional_columns)


# What the yearly extractor needs from a file
ACCIDENT_MONTHS = TableSchema(
    name="accident_months",
    required_columns=("MONTH",),
    dtypes={"MONTH": "Int64"},
)

# What the state plotter needs from a file
ACCIDENT_LOCATIONS = TableSchema(
    name="accident_locations",
    required_columns=("STATE", "LATITUDE", "LONGITUD"),
    dtypes={"STATE": "Int64", "LATITUDE": "Float64", "LONGITUD": "Float64"},
)

YEAR_EXTRACT = TableSchema(
    name="year_extract",
    required_columns=("MONTH", "year"),
    non_null=("year",),
)
