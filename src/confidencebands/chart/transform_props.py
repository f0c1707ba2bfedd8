"""Props transform: query result + form data -> ECharts option.

transform_props() is called by the host once per render, after the chart data
request succeeded. It extracts the band descriptors from the form data, builds
the band and metric series from the first query result, and wraps them in an
ECharts option object together with grid padding, legend, toolbox and data
zoom settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Union

from confidencebands.bands.band_options import extract_band_descriptors
from confidencebands.bands.constants import DEFAULT_SERIES_STYLE, SeriesStyle
from confidencebands.bands.series_builder import ColorOf, build_series, to_echarts_series
from confidencebands.chart.color_scale import CategoricalColorScale
from confidencebands.chart.form_data import ChartFormData
from confidencebands.chart.layout import TIMESERIES_CONSTANTS, get_legend_props, get_padding
from confidencebands.chart.records import normalize_rows
from confidencebands.utils.logging import get_logger

logger = get_logger(__name__)

SetDataMask = Callable[[dict[str, Any]], None]

DEFAULT_GRID: dict[str, Any] = {"containLabel": True}


def _noop_set_data_mask(_mask: dict[str, Any]) -> None:
    return None


@dataclass
class ChartProps:
    """What the host hands to the props transform.

    Attributes:
        width: Chart width in pixels.
        height: Chart height in pixels.
        form_data: Control values (ChartFormData or raw host form data).
        queries_data: Query results; only the first one is used. Each has
            ``data`` (rows or DataFrame) and ``label_map``.
        filter_state: Cross-filter state; ``selected_values`` is forwarded.
        legend_state: Legend selection (series name -> visible).
        hooks: Host callbacks; ``set_data_mask`` is forwarded.
        emit_cross_filters: Whether the chart may emit cross filters.
        color_of: Color lookup for plain metrics. Defaults to a
            CategoricalColorScale over the form's color scheme.
        style: Colors and line styles of the series.
    """

    width: int = 800
    height: int = 600
    form_data: Union[ChartFormData, Mapping[str, Any], None] = None
    queries_data: list[Mapping[str, Any]] = field(default_factory=list)
    filter_state: Mapping[str, Any] = field(default_factory=dict)
    legend_state: Optional[dict[str, bool]] = None
    hooks: Mapping[str, Any] = field(default_factory=dict)
    emit_cross_filters: bool = False
    color_of: Optional[ColorOf] = None
    style: SeriesStyle = DEFAULT_SERIES_STYLE


@dataclass
class ConfidenceBandsProps:
    """Props handed to the chart widget."""

    echart_options: dict[str, Any]
    form_data: ChartFormData
    width: int
    height: int
    groupby: list[Any] = field(default_factory=list)
    label_map: dict[str, Any] = field(default_factory=dict)
    selected_values: Any = field(default_factory=list)
    emit_cross_filters: bool = False
    set_data_mask: SetDataMask = _noop_set_data_mask


def _axis(axis_type: str, title: str, margin: int) -> dict[str, Any]:
    axis: dict[str, Any] = {"type": axis_type}
    if title:
        axis.update(name=title, nameLocation="middle", nameGap=margin)
    return axis


def _data_zoom(zoomable: bool) -> list[dict[str, Any]]:
    if not zoomable:
        return []
    return [
        {
            "type": "slider",
            "start": TIMESERIES_CONSTANTS["dataZoomStart"],
            "end": TIMESERIES_CONSTANTS["dataZoomEnd"],
            "bottom": TIMESERIES_CONSTANTS["zoomBottom"],
        }
    ]


def transform_props(chart_props: ChartProps) -> ConfidenceBandsProps:
    """Transform host chart props into widget props with an ECharts option.

    Args:
        chart_props: Size, form data, query results and host hooks.

    Returns:
        ConfidenceBandsProps whose ``echart_options`` is ready for ui.echart.
    """
    form_data = chart_props.form_data
    if not isinstance(form_data, ChartFormData):
        form_data = ChartFormData.from_dict(form_data)

    query_data: Mapping[str, Any] = chart_props.queries_data[0] if chart_props.queries_data else {}
    rows = normalize_rows(query_data.get("data"))
    label_map = dict(query_data.get("label_map") or {})

    color_of = chart_props.color_of
    if color_of is None:
        color_of = CategoricalColorScale(form_data.color_scheme)

    bands = extract_band_descriptors(form_data)
    x_axis = form_data.x_axis_label
    groups = build_series(
        rows,
        x_axis,
        bands,
        form_data.prediction_metric,
        form_data.metrics,
        label_map,
        color_of,
        chart_props.style,
        marker_enabled=form_data.marker_enabled,
        marker_size=form_data.marker_size,
    )

    padding = get_padding(
        form_data.show_legend,
        form_data.legend_orientation,
        bool(form_data.y_axis_title),
        form_data.zoomable,
        form_data.legend_margin,
        bool(form_data.x_axis_title),
        form_data.y_axis_title_position,
        form_data.y_axis_title_margin,
        form_data.x_axis_title_margin,
    )

    echart_options: dict[str, Any] = {
        "grid": {**DEFAULT_GRID, **padding},
        "legend": get_legend_props(
            form_data.legend_type,
            form_data.legend_orientation,
            form_data.show_legend,
            form_data.zoomable,
            chart_props.legend_state,
        ),
        "xAxis": _axis("category", form_data.x_axis_title, form_data.x_axis_title_margin),
        "yAxis": _axis("value", form_data.y_axis_title, form_data.y_axis_title_margin),
        "series": to_echarts_series(groups),
        "toolbox": {
            "show": form_data.zoomable,
            "top": TIMESERIES_CONSTANTS["toolboxTop"],
            "right": TIMESERIES_CONSTANTS["toolboxRight"],
            "feature": {
                "dataZoom": {
                    "yAxisIndex": False,
                    "title": {"zoom": "zoom area", "back": "restore zoom"},
                },
            },
        },
        "tooltip": {"trigger": "axis"},
        "dataZoom": _data_zoom(form_data.zoomable),
    }

    logger.info(
        f"transform_props: rows={len(rows)}, x_axis={x_axis!r}, bands={len(bands)}, "
        f"series={len(echart_options['series'])}, size={chart_props.width}x{chart_props.height}"
    )

    return ConfidenceBandsProps(
        echart_options=echart_options,
        form_data=form_data,
        width=chart_props.width,
        height=chart_props.height,
        groupby=list(form_data.groupby),
        label_map=label_map,
        selected_values=chart_props.filter_state.get("selected_values") or [],
        emit_cross_filters=chart_props.emit_cross_filters,
        set_data_mask=chart_props.hooks.get("set_data_mask") or _noop_set_data_mask,
    )
