"""Unit tests for build_query."""

from __future__ import annotations

from confidencebands.chart.build_query import band_metrics, build_query
from confidencebands.chart.form_data import ChartFormData


def test_metrics_include_prediction_and_band_bounds(form_data):
    """Query metrics: selected metrics, prediction, then band metrics level by level."""
    (query,) = build_query(form_data)["queries"]
    labels = [m if isinstance(m, str) else m["label"] for m in query["metrics"]]
    assert labels == ["actual", "yhat", "l1_lo", "l1_hi", "l2_lo", "l2_hi", "only_one"]


def test_duplicate_metrics_are_requested_once():
    """A metric used both as a plain metric and as a bound is queried once."""
    (query,) = build_query(
        {"x_axis": "ds", "metrics": ["lo"], "band_confidence_l1": ["lo", "hi"]}
    )["queries"]
    assert query["metrics"] == ["lo", "hi"]


def test_columns_with_x_axis(form_data):
    """With an x axis the query is not a legacy timeseries query."""
    form_data["groupby"] = ["region"]
    (query,) = build_query(form_data)["queries"]
    assert query["columns"] == ["ds", "region"]
    assert query["series_columns"] == ["region"]
    assert "is_timeseries" not in query
    assert query["row_limit"] == 500


def test_without_x_axis_is_timeseries():
    """Without an x axis the query asks for the time column."""
    (query,) = build_query({"metrics": ["m"]})["queries"]
    assert query["columns"] == []
    assert query["is_timeseries"] is True


def test_accepts_chart_form_data(form_data):
    """ChartFormData and raw dicts build the same query."""
    fd = ChartFormData.from_dict(form_data)
    assert build_query(fd) == build_query(form_data)


def test_band_metrics_order():
    """band_metrics flattens level 1 first."""
    fd = ChartFormData(band_metrics=(["a", "b"], [], ["c", "d"], []))
    assert band_metrics(fd) == ["a", "b", "c", "d"]


def test_filters_pass_through():
    """adhoc_filters become query filters."""
    flt = {"clause": "WHERE", "subject": "region", "operator": "==", "comparator": "EU"}
    (query,) = build_query({"adhoc_filters": [flt]})["queries"]
    assert query["filters"] == [flt]
