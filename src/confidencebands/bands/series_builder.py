"""Series construction for confidence band charts.

build_series() turns query rows into layer groups: two stacked area layers per
band (lower, upper) followed by one line layer for the prediction metric and
one per plain metric. Each group serializes to ECharts series dicts with
SeriesLayer.to_echarts(); flatten_series() concatenates the groups in order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Sequence

from confidencebands.bands.band_options import BandDescriptor
from confidencebands.bands.constants import DEFAULT_SERIES_STYLE, SeriesStyle
from confidencebands.bands.metrics import display_label, metric_label
from confidencebands.bands.stacking import StackStrategy, classify_bounds
from confidencebands.utils.logging import get_logger

logger = get_logger(__name__)

ColorOf = Callable[[str], Optional[str]]
Point = tuple[Any, Any]


class LayerKind(str, Enum):
    """Role of a layer in the chart."""

    BAND_LOWER = "band_lower"
    BAND_UPPER = "band_upper"
    LINE = "line"


@dataclass(frozen=True)
class LineStyle:
    """Explicit line styling (used for the prediction metric)."""

    color: str
    width: float
    type: str


@dataclass(frozen=True)
class SeriesLayer:
    """One renderable chart layer.

    Band layers carry ``group_key``, ``stack_strategy`` and ``fill_opacity``;
    line layers leave them None and are drawn without a fill.
    """

    name: str
    kind: LayerKind
    points: tuple[Point, ...]
    color: str
    line_opacity: float
    item_opacity: Optional[float] = None
    group_key: Optional[str] = None
    stack_strategy: Optional[StackStrategy] = None
    fill_opacity: Optional[float] = None
    fill_color: Optional[str] = None
    line_style: Optional[LineStyle] = None
    show_symbol: Optional[bool] = None
    symbol_size: Optional[int] = None

    @property
    def is_band(self) -> bool:
        return self.kind is not LayerKind.LINE

    def to_echarts(self) -> dict[str, Any]:
        """Serialize to an ECharts line series dict."""
        item_style: dict[str, Any] = {"color": self.color}
        if self.item_opacity is not None:
            item_style["opacity"] = self.item_opacity
        line_style: dict[str, Any] = {"opacity": self.line_opacity}
        if self.line_style is not None:
            line_style.update(
                color=self.line_style.color,
                width=self.line_style.width,
                type=self.line_style.type,
            )
        series: dict[str, Any] = {
            "name": self.name,
            "type": "line",
            "lineStyle": line_style,
            "itemStyle": item_style,
            "data": [[x, y] for x, y in self.points],
        }
        if self.is_band:
            series["stack"] = self.group_key
            series["stackStrategy"] = self.stack_strategy.value if self.stack_strategy else None
            series["areaStyle"] = {"color": self.fill_color, "opacity": self.fill_opacity}
        if self.show_symbol is not None:
            series["showSymbol"] = self.show_symbol
        if self.symbol_size is not None:
            series["symbolSize"] = self.symbol_size
        return series


def _band_layers(
    rows: Sequence[Mapping[str, Any]],
    x_axis_key: str,
    band: BandDescriptor,
    style: SeriesStyle,
) -> list[SeriesLayer]:
    """Lower and upper layers for one band."""
    result = classify_bounds(band, rows, x_axis_key)
    effective = result.band

    def _layer(kind: LayerKind, opacity: float, idx: int) -> SeriesLayer:
        return SeriesLayer(
            name=effective.name,
            kind=kind,
            points=tuple((bound[0], bound[idx]) for bound in result.bounds),
            color=style.band_item_color,
            item_opacity=style.band_item_opacity,
            line_opacity=style.band_line_opacity,
            group_key=effective.group_key,
            stack_strategy=result.stack_strategy,
            fill_opacity=opacity,
            fill_color=style.band_color,
        )

    return [
        _layer(LayerKind.BAND_LOWER, effective.opacity_lower, 1),
        _layer(LayerKind.BAND_UPPER, effective.opacity_upper, 2),
    ]


def _line_layer(
    rows: Sequence[Mapping[str, Any]],
    x_axis_key: str,
    metric: Any,
    label_map: Optional[Mapping[str, Any]],
    color: str,
    style: SeriesStyle,
    *,
    line_style: Optional[LineStyle] = None,
    marker_enabled: Optional[bool] = None,
    marker_size: Optional[int] = None,
) -> SeriesLayer:
    label = metric_label(metric)
    points = tuple((row.get(x_axis_key), row.get(label) if label is not None else None) for row in rows)
    return SeriesLayer(
        name=display_label(label_map, label) or "",
        kind=LayerKind.LINE,
        points=points,
        color=color,
        line_opacity=style.metric_line_opacity,
        line_style=line_style,
        show_symbol=marker_enabled,
        symbol_size=marker_size if marker_enabled else None,
    )


def build_series(
    rows: Sequence[Mapping[str, Any]],
    x_axis_key: str,
    bands: Sequence[BandDescriptor],
    prediction_metric: Any,
    plain_metrics: Optional[Sequence[Any]],
    label_map: Optional[Mapping[str, Any]],
    color_of: Optional[ColorOf],
    style: SeriesStyle = DEFAULT_SERIES_STYLE,
    *,
    marker_enabled: Optional[bool] = None,
    marker_size: Optional[int] = None,
) -> list[list[SeriesLayer]]:
    """Build the layer groups of a confidence band chart.

    Args:
        rows: Query rows in x-axis order.
        x_axis_key: Column holding the x value.
        bands: Band descriptors in level order.
        prediction_metric: Metric drawn as the dashed prediction line, or None.
        plain_metrics: Other metrics drawn as solid lines.
        label_map: Column key -> display name (str or list whose first item is used).
        color_of: Color lookup keyed by metric label; None or a None result
            falls back to ``style.default_metric_color``.
        style: Colors and line styles.
        marker_enabled: If set, toggles point symbols on metric lines.
        marker_size: Symbol size used when markers are enabled.

    Returns:
        One group per band (lower, upper) then one single-layer group per metric.
    """
    groups: list[list[SeriesLayer]] = [_band_layers(rows, x_axis_key, band, style) for band in bands]

    prediction_line = LineStyle(
        color=style.prediction_color,
        width=style.prediction_line_width,
        type=style.prediction_line_type,
    )
    if prediction_metric is not None:
        groups.append(
            [
                _line_layer(
                    rows, x_axis_key, prediction_metric, label_map, style.prediction_color, style,
                    line_style=prediction_line,
                    marker_enabled=marker_enabled,
                    marker_size=marker_size,
                )
            ]
        )

    for metric in plain_metrics or []:
        label = metric_label(metric)
        color = color_of(label) if color_of is not None and label is not None else None
        groups.append(
            [
                _line_layer(
                    rows, x_axis_key, metric, label_map, color or style.default_metric_color, style,
                    marker_enabled=marker_enabled,
                    marker_size=marker_size,
                )
            ]
        )

    logger.debug(
        f"build_series: rows={len(rows)}, bands={len(bands)}, "
        f"prediction={metric_label(prediction_metric)!r}, metrics={len(plain_metrics or [])}, "
        f"groups={len(groups)}"
    )
    return groups


def flatten_series(groups: Sequence[Sequence[SeriesLayer]]) -> list[SeriesLayer]:
    """Concatenate layer groups in order."""
    return [layer for group in groups for layer in group]


def to_echarts_series(groups: Sequence[Sequence[SeriesLayer]]) -> list[dict[str, Any]]:
    """Flatten layer groups and serialize each layer for ECharts."""
    return [layer.to_echarts() for layer in flatten_series(groups)]
