"""Pydantic schemas and dataframe validators for the accident tables.

Every load goes through a schema check at the boundary; analysis code can then
index the columns it needs without re-checking.
"""

from __future__ import annotations

from fars.models.schemas import (
    ACCIDENT_LOCATIONS,
    ACCIDENT_MONTHS,
    YEAR_EXTRACT,
    TableSchema,
)
from fars.models.validate import validate_df

__all__ = [
    "TableSchema",
    "validate_df",
    "ACCIDENT_MONTHS",
    "ACCIDENT_LOCATIONS",
    "YEAR_EXTRACT",
]
