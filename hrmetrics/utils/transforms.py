"""Common data transformation utilities."""

import math
import re

import pandas as pd

type ColumnMapping = dict[str, str]

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _snake_case(name: str) -> str:
    name = _CAMEL_BOUNDARY.sub("_", name.strip())
    return name.lower().replace(" ", "_").replace("-", "_")


def normalize_columns(df: pd.DataFrame, mapping: ColumnMapping | None = None) -> pd.DataFrame:
    """Normalize column names to snake_case and apply optional mapping.

    Handles camelCase exports as well (``joinDate`` -> ``join_date``).
    """
    df = df.copy()
    df.columns = [_snake_case(str(col)) for col in df.columns]

    if mapping:
        df = df.rename(columns=mapping)

    return df


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding towards +inf."""
    return math.floor(value + 0.5)


def safe_mean(series: pd.Series) -> float:
    """Arithmetic mean of a series, 0.0 when the series is empty."""
    if series.empty:
        return 0.0
    return float(series.sum() / len(series))


def safe_ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator else 0.0
