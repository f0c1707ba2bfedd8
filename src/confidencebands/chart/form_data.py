"""Form data for the confidence bands chart.

ChartFormData holds the chart's control values (query selection, band metric
groups, legend and axis options). from_dict() reads host form data in either
snake_case or camelCase and falls back to TIMESERIES_DEFAULTS for anything
missing, so a partially filled form always yields a usable configuration.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from confidencebands.bands.constants import BAND_LEVELS
from confidencebands.utils.logging import get_logger

logger = get_logger(__name__)

DTTM_ALIAS = "__timestamp"

# Defaults shared with the host's time-series charts
TIMESERIES_DEFAULTS: dict[str, Any] = {
    "color_scheme": "Plotly",
    "marker_enabled": False,
    "marker_size": 6,
    "zoomable": False,
    "show_legend": True,
    "legend_type": "scroll",
    "legend_orientation": "top",
    "legend_margin": None,
    "x_axis_title": "",
    "y_axis_title": "",
    "x_axis_title_margin": 15,
    "y_axis_title_margin": 15,
    "y_axis_title_position": "Top",
    "row_limit": 10000,
}

_INT_PREFIX = re.compile(r"\s*([-+]?\d+)")


def convert_integer(value: Any) -> int:
    """Convert a control value to int; unparsable values become 0.

    Strings are parsed from their leading integer (``"15px"`` -> 15).
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value == value else 0
    if isinstance(value, str):
        match = _INT_PREFIX.match(value)
        if match:
            return int(match.group(1))
    return 0


_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "off", ""})


def convert_bool(value: Any, default: bool = False) -> bool:
    """Convert a control value to bool.

    Strings are parsed (``"false"`` -> False); unrecognized strings give ``default``.
    """
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        logger.debug(f"ignoring non-boolean control value {value!r}")
        return default
    if value is None:
        return default
    return bool(value)


def _camel(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _get(data: Mapping[str, Any], key: str, default: Any = None) -> Any:
    """Look up ``key`` as snake_case, then camelCase."""
    if key in data and data[key] is not None:
        return data[key]
    camel = _camel(key)
    if camel in data and data[camel] is not None:
        return data[camel]
    return default


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


@dataclass
class ChartFormData:
    """Control values of a confidence bands chart.

    ``band_metrics`` and ``band_legends`` are indexed by ``level - 1``.
    """

    x_axis: Any = None                       # column name or adhoc column mapping
    groupby: list[Any] = field(default_factory=list)
    prediction_metric: Any = None            # the y_prediction_hat control
    metrics: list[Any] = field(default_factory=list)
    band_metrics: tuple[list[Any], ...] = field(default_factory=lambda: tuple([] for _ in BAND_LEVELS))
    band_legends: tuple[Optional[str], ...] = field(default_factory=lambda: tuple(None for _ in BAND_LEVELS))
    adhoc_filters: list[Any] = field(default_factory=list)
    color_scheme: str = TIMESERIES_DEFAULTS["color_scheme"]
    marker_enabled: bool = TIMESERIES_DEFAULTS["marker_enabled"]
    marker_size: int = TIMESERIES_DEFAULTS["marker_size"]
    zoomable: bool = TIMESERIES_DEFAULTS["zoomable"]
    show_legend: bool = TIMESERIES_DEFAULTS["show_legend"]
    legend_type: str = TIMESERIES_DEFAULTS["legend_type"]
    legend_orientation: str = TIMESERIES_DEFAULTS["legend_orientation"]
    legend_margin: Optional[int] = TIMESERIES_DEFAULTS["legend_margin"]
    x_axis_title: str = TIMESERIES_DEFAULTS["x_axis_title"]
    y_axis_title: str = TIMESERIES_DEFAULTS["y_axis_title"]
    x_axis_title_margin: int = TIMESERIES_DEFAULTS["x_axis_title_margin"]
    y_axis_title_margin: int = TIMESERIES_DEFAULTS["y_axis_title_margin"]
    y_axis_title_position: str = TIMESERIES_DEFAULTS["y_axis_title_position"]
    row_limit: int = TIMESERIES_DEFAULTS["row_limit"]

    @property
    def x_axis_label(self) -> str:
        """Column key of the x axis in query rows (``__timestamp`` when unset)."""
        x_axis = self.x_axis
        if isinstance(x_axis, Mapping):
            x_axis = x_axis.get("label") or x_axis.get("sqlExpression")
        if isinstance(x_axis, str) and x_axis:
            return x_axis
        return DTTM_ALIAS

    @property
    def is_x_axis_set(self) -> bool:
        return bool(self.x_axis)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to snake_case host form data."""
        data: dict[str, Any] = {
            "x_axis": self.x_axis,
            "groupby": list(self.groupby),
            "y_prediction_hat": self.prediction_metric,
            "metrics": list(self.metrics),
            "adhoc_filters": list(self.adhoc_filters),
            "color_scheme": self.color_scheme,
            "marker_enabled": self.marker_enabled,
            "marker_size": self.marker_size,
            "zoomable": self.zoomable,
            "show_legend": self.show_legend,
            "legend_type": self.legend_type,
            "legend_orientation": self.legend_orientation,
            "legend_margin": self.legend_margin,
            "x_axis_title": self.x_axis_title,
            "y_axis_title": self.y_axis_title,
            "x_axis_title_margin": self.x_axis_title_margin,
            "y_axis_title_margin": self.y_axis_title_margin,
            "y_axis_title_position": self.y_axis_title_position,
            "row_limit": self.row_limit,
        }
        for level in BAND_LEVELS:
            data[level.form_key] = list(self.band_metrics[level.level - 1])
            data[level.legend_key] = self.band_legends[level.level - 1]
        return data

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ChartFormData":
        """Deserialize from host form data (snake_case or camelCase keys).

        Args:
            data: Form data mapping; None is treated as empty.

        Returns:
            ChartFormData with defaults for missing or null values.
        """
        data = data or {}
        band_metrics = []
        band_legends = []
        for level in BAND_LEVELS:
            metrics = _get(data, level.form_key)
            band_metrics.append(_as_list(metrics) if isinstance(metrics, (list, tuple)) else [])
            legend = _get(data, level.legend_key)
            band_legends.append(legend if isinstance(legend, str) else None)

        legend_margin = _get(data, "legend_margin")
        if legend_margin is not None and not isinstance(legend_margin, (int, float)):
            logger.debug(f"ignoring non-numeric legend_margin={legend_margin!r}")
            legend_margin = None

        return cls(
            x_axis=_get(data, "x_axis"),
            groupby=_as_list(_get(data, "groupby")),
            prediction_metric=_get(data, "y_prediction_hat"),
            metrics=_as_list(_get(data, "metrics")),
            band_metrics=tuple(band_metrics),
            band_legends=tuple(band_legends),
            adhoc_filters=_as_list(_get(data, "adhoc_filters")),
            color_scheme=str(_get(data, "color_scheme", TIMESERIES_DEFAULTS["color_scheme"])),
            marker_enabled=convert_bool(_get(data, "marker_enabled"), TIMESERIES_DEFAULTS["marker_enabled"]),
            marker_size=convert_integer(_get(data, "marker_size", TIMESERIES_DEFAULTS["marker_size"])),
            zoomable=convert_bool(_get(data, "zoomable"), TIMESERIES_DEFAULTS["zoomable"]),
            show_legend=convert_bool(_get(data, "show_legend"), TIMESERIES_DEFAULTS["show_legend"]),
            legend_type=str(_get(data, "legend_type", TIMESERIES_DEFAULTS["legend_type"])),
            legend_orientation=str(_get(data, "legend_orientation", TIMESERIES_DEFAULTS["legend_orientation"])),
            legend_margin=legend_margin,
            x_axis_title=str(_get(data, "x_axis_title", TIMESERIES_DEFAULTS["x_axis_title"])),
            y_axis_title=str(_get(data, "y_axis_title", TIMESERIES_DEFAULTS["y_axis_title"])),
            x_axis_title_margin=convert_integer(
                _get(data, "x_axis_title_margin", TIMESERIES_DEFAULTS["x_axis_title_margin"])
            ),
            y_axis_title_margin=convert_integer(
                _get(data, "y_axis_title_margin", TIMESERIES_DEFAULTS["y_axis_title_margin"])
            ),
            y_axis_title_position=str(
                _get(data, "y_axis_title_position", TIMESERIES_DEFAULTS["y_axis_title_position"])
            ),
            row_limit=convert_integer(_get(data, "row_limit", TIMESERIES_DEFAULTS["row_limit"])),
        )
