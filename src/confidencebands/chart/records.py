"""Normalization of query result rows.

Query results arrive as a list of row mappings or as a pandas DataFrame. Both
become a list of plain dicts in the original row order. NaN/NaT turn into
None so that missing values reach the series builder as gaps, and Decimals
(SQL NUMERIC columns) turn into floats.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, Mapping, Union

import numpy as np
import pandas as pd

Rows = Union[pd.DataFrame, Iterable[Mapping[str, Any]], None]


def _clean(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, (float, np.floating)) and np.isnan(value):
        return None
    if value is pd.NaT:
        return None
    if isinstance(value, pd.Timestamp):
        # epoch milliseconds, as the host sends temporal x values
        return value.value // 1_000_000
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, Decimal):
        return None if value.is_nan() else float(value)
    return value


def normalize_rows(data: Rows) -> list[dict[str, Any]]:
    """Return query rows as a list of dicts, order preserved.

    Args:
        data: DataFrame, iterable of row mappings, or None.

    Returns:
        New list of new dicts; the input is never modified.
    """
    if data is None:
        return []
    if isinstance(data, pd.DataFrame):
        records = data.to_dict(orient="records")
    else:
        records = [row for row in data if isinstance(row, Mapping)]
    return [{str(k): _clean(v) for k, v in row.items()} for row in records]

