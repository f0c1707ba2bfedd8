"""Unit tests for normalize_rows."""

from __future__ import annotations

from decimal import Decimal

import numpy as np
import pandas as pd

from confidencebands.chart.records import normalize_rows


def test_none_is_empty():
    assert normalize_rows(None) == []


def test_row_mappings_are_copied():
    """Rows come back as new dicts; non-mapping entries are dropped."""
    rows = [{"x": 1, "y": 2.0}, "garbage", {"x": 2, "y": None}]
    result = normalize_rows(rows)
    assert result == [{"x": 1, "y": 2.0}, {"x": 2, "y": None}]
    result[0]["y"] = 99
    assert rows[0]["y"] == 2.0


def test_dataframe_values_become_plain_python():
    """NaN becomes None; numpy scalars become Python numbers."""
    df = pd.DataFrame({"x": [1, 2], "y": [1.5, np.nan]})
    result = normalize_rows(df)
    assert result == [{"x": 1, "y": 1.5}, {"x": 2, "y": None}]
    assert type(result[0]["x"]) is int


def test_timestamps_become_epoch_milliseconds():
    df = pd.DataFrame({"ds": pd.to_datetime(["1970-01-01 00:00:01", None])})
    result = normalize_rows(df)
    assert result == [{"ds": 1000}, {"ds": None}]


def test_row_order_preserved():
    df = pd.DataFrame({"x": [3, 1, 2]})
    assert [r["x"] for r in normalize_rows(df)] == [3, 1, 2]


def test_decimals_become_floats():
    """NUMERIC columns from a DB cursor become plain floats."""
    result = normalize_rows([{"lo": Decimal("1.25"), "hi": Decimal("NaN")}])
    assert result == [{"lo": 1.25, "hi": None}]
    assert type(result[0]["lo"]) is float
