"""Validation and dtype normalization for accident tables."""

from __future__ import annotations

import pandas as pd

from fars.models.schemas import TableSchema


def _check_columns(df: pd.DataFrame, schema: TableSchema, *, allow_extra: bool) -> None:
    missing = [c for c in schema.required_columns if c not in df.columns]
    if missing:
        raise ValueError(f"{schema.name}: missing required columns: {missing}")
    if not allow_extra:
        extra = sorted(set(map(str, df.columns)) - schema.allowed_columns())
        if extra:
            raise ValueError(f"{schema.name}: unexpected columns: {extra}")


def _normalized(df: pd.DataFrame, schema: TableSchema) -> pd.DataFrame:
    present = {col: dtype for col, dtype in schema.dtypes.items() if col in df.columns}
    if not present:
        return df
    try:
        return df.astype(present)
    except (TypeError, ValueError) as exc:
        raise TypeError(f"{schema.name}: cannot normalize {sorted(present)}: {exc}") from exc


def validate_df(
    df: pd.DataFrame,
    schema: TableSchema,
    *,
    coerce_dtypes: bool = False,
    allow_extra_columns: bool = True,
) -> pd.DataFrame:
    """Check `df` against `schema`, optionally casting to the schema dtypes.

    Without `coerce_dtypes` the frame comes back as-is; with it, a copy whose
    schema columns carry the nullable dtypes (`Int64` codes, `Float64` degrees).
    """
    _check_columns(df, schema, allow_extra=allow_extra_columns)

    out = _normalized(df, schema) if coerce_dtypes else df

    na_counts = {c: int(out[c].isna().sum()) for c in schema.non_null if c in out.columns}
    bad = {c: n for c, n in na_counts.items() if n}
    if bad:
        raise ValueError(f"{schema.name}: non-null columns contain NA values: {bad}")
    return out
