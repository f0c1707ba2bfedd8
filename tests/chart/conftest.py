"""Fixtures for chart form data, query and props transform tests."""

from __future__ import annotations

import pandas as pd
import pytest


@pytest.fixture
def form_data() -> dict:
    """Host form data with two bands, a prediction and one plain metric."""
    return {
        "x_axis": "ds",
        "groupby": [],
        "y_prediction_hat": {"label": "yhat", "expressionType": "SIMPLE"},
        "metrics": ["actual"],
        "band_confidence_l1": [{"label": "l1_lo"}, {"label": "l1_hi"}],
        "band_confidence_l2": [{"label": "l2_lo"}, {"label": "l2_hi"}],
        "band_confidence_l3": [{"label": "only_one"}],
        "band_legend_l2": "Inner band",
        "color_scheme": "D3",
        "zoomable": True,
        "row_limit": 500,
    }


@pytest.fixture
def query_rows() -> list[dict]:
    """Forecast rows: level 1 straddles zero, level 2 stays positive."""
    return [
        {"ds": 1, "yhat": 5.0, "actual": 4.5, "l1_lo": -1.0, "l1_hi": 11.0, "l2_lo": 2.0, "l2_hi": 8.0},
        {"ds": 2, "yhat": 6.0, "actual": 6.5, "l1_lo": 1.0, "l1_hi": 12.0, "l2_lo": 3.0, "l2_hi": 9.0},
        {"ds": 3, "yhat": 7.0, "actual": None, "l1_lo": 2.0, "l1_hi": 13.0, "l2_lo": 4.0, "l2_hi": 10.0},
    ]


@pytest.fixture
def query_frame(query_rows) -> pd.DataFrame:
    return pd.DataFrame(query_rows)
