"""Query construction for the confidence bands chart.

The chart needs, besides the selected metrics, the prediction metric and every
band bound metric, so those are appended to the query's metric list. The x axis
(when set) and the groupby columns become the query columns.
"""

from __future__ import annotations

from typing import Any, Mapping, Union

from confidencebands.bands.metrics import unique_metrics
from confidencebands.chart.form_data import ChartFormData
from confidencebands.utils.logging import get_logger

logger = get_logger(__name__)


def band_metrics(form_data: ChartFormData) -> list[Any]:
    """All band bound metrics, level 1 first, in the order they were selected."""
    return [metric for metrics in form_data.band_metrics for metric in metrics]


def build_query(form_data: Union[ChartFormData, Mapping[str, Any]]) -> dict[str, Any]:
    """Build the host query context for one chart render.

    Args:
        form_data: ChartFormData or raw host form data.

    Returns:
        Query context dict with a single query object under ``queries``.
    """
    if not isinstance(form_data, ChartFormData):
        form_data = ChartFormData.from_dict(form_data)

    metrics = list(form_data.metrics)
    if form_data.prediction_metric is not None:
        metrics.append(form_data.prediction_metric)
    metrics = unique_metrics(metrics + band_metrics(form_data))

    columns: list[Any] = []
    if form_data.is_x_axis_set:
        columns.append(form_data.x_axis)
    columns.extend(form_data.groupby)

    query: dict[str, Any] = {
        "metrics": metrics,
        "columns": columns,
        "series_columns": list(form_data.groupby),
        "filters": list(form_data.adhoc_filters),
        "row_limit": form_data.row_limit,
    }
    if not form_data.is_x_axis_set:
        query["is_timeseries"] = True

    logger.debug(f"build_query: metrics={len(metrics)}, columns={len(columns)}")
    return {
        "form_data": form_data.to_dict(),
        "queries": [query],
    }
