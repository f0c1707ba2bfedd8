"""Unit tests for ChartFormData and convert_integer."""

from __future__ import annotations

import pytest

from confidencebands.chart.form_data import (
    DTTM_ALIAS,
    TIMESERIES_DEFAULTS,
    ChartFormData,
    convert_bool,
    convert_integer,
)


@pytest.mark.parametrize(
    "value,expected",
    [(15, 15), ("15", 15), ("15px", 15), (" -3", -3), (7.9, 7), ("abc", 0), (None, 0), ("", 0), (float("nan"), 0)],
)
def test_convert_integer(value, expected):
    """convert_integer parses a leading integer and maps anything else to 0."""
    assert convert_integer(value) == expected


def test_from_dict_empty_uses_defaults():
    """An empty form yields the time-series defaults."""
    fd = ChartFormData.from_dict({})
    assert fd.color_scheme == TIMESERIES_DEFAULTS["color_scheme"]
    assert fd.zoomable is False
    assert fd.show_legend is True
    assert fd.legend_orientation == "top"
    assert fd.row_limit == 10000
    assert fd.band_metrics == ([], [], [], [])
    assert fd.band_legends == (None, None, None, None)


def test_from_dict_none_is_empty():
    """None form data is accepted."""
    assert ChartFormData.from_dict(None) == ChartFormData()


def test_from_dict_snake_case(form_data):
    """Snake-case host keys map onto fields."""
    fd = ChartFormData.from_dict(form_data)
    assert fd.x_axis == "ds"
    assert fd.prediction_metric == {"label": "yhat", "expressionType": "SIMPLE"}
    assert fd.metrics == ["actual"]
    assert fd.band_metrics[0] == [{"label": "l1_lo"}, {"label": "l1_hi"}]
    assert fd.band_metrics[2] == [{"label": "only_one"}]
    assert fd.band_metrics[3] == []
    assert fd.band_legends == (None, "Inner band", None, None)
    assert fd.zoomable is True
    assert fd.row_limit == 500


def test_from_dict_camel_case():
    """camelCase keys (as passed to the props transform) are accepted too."""
    fd = ChartFormData.from_dict(
        {
            "xAxis": "ds",
            "yPredictionHat": "yhat",
            "bandConfidenceL2": ["a", "b"],
            "markerEnabled": True,
            "markerSize": "8",
            "legendOrientation": "right",
            "xAxisTitleMargin": "30",
        }
    )
    assert fd.x_axis == "ds"
    assert fd.prediction_metric == "yhat"
    assert fd.band_metrics[1] == ["a", "b"]
    assert fd.marker_enabled is True
    assert fd.marker_size == 8
    assert fd.legend_orientation == "right"
    assert fd.x_axis_title_margin == 30


def test_from_dict_ignores_malformed_values():
    """Non-list bands, non-string legends and non-numeric margins fall back."""
    fd = ChartFormData.from_dict(
        {"band_confidence_l1": "oops", "band_legend_l1": 5, "legend_margin": "wide", "metrics": "single"}
    )
    assert fd.band_metrics[0] == []
    assert fd.band_legends[0] is None
    assert fd.legend_margin is None
    assert fd.metrics == ["single"]


def test_round_trip(form_data):
    """to_dict output reads back to an equal ChartFormData."""
    fd = ChartFormData.from_dict(form_data)
    assert ChartFormData.from_dict(fd.to_dict()) == fd


@pytest.mark.parametrize(
    "x_axis,expected",
    [
        ("ds", "ds"),
        ({"label": "order_date", "sqlExpression": "order_date"}, "order_date"),
        ({"sqlExpression": "DATE(ts)"}, "DATE(ts)"),
        (None, DTTM_ALIAS),
        ("", DTTM_ALIAS),
    ],
)
def test_x_axis_label(x_axis, expected):
    """x_axis_label resolves physical and adhoc columns; unset means __timestamp."""
    assert ChartFormData(x_axis=x_axis).x_axis_label == expected


@pytest.mark.parametrize(
    "value,expected",
    [(True, True), (False, False), ("true", True), ("False", False), (" yes ", True), ("0", False), (1, True), (0, False)],
)
def test_convert_bool(value, expected):
    assert convert_bool(value) is expected


def test_convert_bool_unknown_uses_default():
    assert convert_bool(None, True) is True
    assert convert_bool("maybe", True) is True
    assert convert_bool("maybe") is False


def test_from_dict_string_booleans():
    """Booleans sent as strings are parsed rather than taken as truthy."""
    fd = ChartFormData.from_dict({"marker_enabled": "false", "zoomable": "true", "show_legend": "false"})
    assert fd.marker_enabled is False
    assert fd.zoomable is True
    assert fd.show_legend is False
