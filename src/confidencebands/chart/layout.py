"""Grid padding and legend options for the ECharts option object."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union

TIMESERIES_CONSTANTS: dict[str, int] = {
    "gridOffsetRight": 20,
    "gridOffsetLeft": 20,
    "gridOffsetTop": 20,
    "gridOffsetBottom": 20,
    "gridOffsetBottomZoomable": 80,
    "legendRightTopOffset": 30,
    "legendTopRightOffset": 55,
    "zoomBottom": 30,
    "toolboxTop": 0,
    "toolboxRight": 5,
    "dataZoomStart": 0,
    "dataZoomEnd": 100,
    "yAxisLabelTopOffset": 20,
    "extraControlsOffset": 22,
}


class LegendOrientation(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class LegendType(str, Enum):
    SCROLL = "scroll"
    PLAIN = "plain"


# Space reserved for the legend on each side
DEFAULT_LEGEND_PADDING: dict[LegendOrientation, int] = {
    LegendOrientation.TOP: 20,
    LegendOrientation.BOTTOM: 30,
    LegendOrientation.LEFT: 160,
    LegendOrientation.RIGHT: 160,
}


def _orientation(value: Union[str, LegendOrientation, None]) -> LegendOrientation:
    if isinstance(value, LegendOrientation):
        return value
    try:
        return LegendOrientation(str(value).lower())
    except ValueError:
        return LegendOrientation.TOP


def get_chart_padding(
    show_legend: bool,
    orientation: Union[str, LegendOrientation, None],
    margin: Optional[Union[int, float, str]] = None,
    padding: Optional[dict[str, float]] = None,
) -> dict[str, float]:
    """Add the legend's space to ``padding`` on the side the legend sits on."""
    orient = _orientation(orientation)
    if not show_legend:
        legend_margin: float = 0
    elif margin is None or isinstance(margin, str):
        legend_margin = DEFAULT_LEGEND_PADDING[orient]
    else:
        legend_margin = margin

    padding = padding or {}
    return {
        "left": padding.get("left", 0) + (legend_margin if orient is LegendOrientation.LEFT else 0),
        "right": padding.get("right", 0) + (legend_margin if orient is LegendOrientation.RIGHT else 0),
        "top": padding.get("top", 0) + (legend_margin if orient is LegendOrientation.TOP else 0),
        "bottom": padding.get("bottom", 0) + (legend_margin if orient is LegendOrientation.BOTTOM else 0),
    }


def get_padding(
    show_legend: bool,
    legend_orientation: Union[str, LegendOrientation, None],
    add_y_axis_title_offset: bool,
    zoomable: bool,
    legend_margin: Optional[Union[int, float, str]] = None,
    add_x_axis_title_offset: bool = False,
    y_axis_title_position: Optional[str] = None,
    y_axis_title_margin: int = 0,
    x_axis_title_margin: int = 0,
) -> dict[str, float]:
    """Grid padding for a time-series chart.

    Args:
        show_legend: Whether the legend is shown.
        legend_orientation: Side the legend sits on.
        add_y_axis_title_offset: Reserve room above the plot for a y-axis title.
        zoomable: Reserve room below the plot for the data-zoom slider.
        legend_margin: Explicit legend space; None uses the default per side.
        add_x_axis_title_offset: Reserve ``x_axis_title_margin`` below the plot.
        y_axis_title_position: "Top" or "Left".
        y_axis_title_margin: Room for the y-axis title.
        x_axis_title_margin: Room for the x-axis title.

    Returns:
        Dict with ``left``, ``right``, ``top`` and ``bottom`` pixel offsets.
    """
    c = TIMESERIES_CONSTANTS
    y_axis_offset = c["yAxisLabelTopOffset"] if add_y_axis_title_offset else 0
    x_axis_offset = x_axis_title_margin if add_x_axis_title_offset else 0

    if y_axis_title_position == "Top":
        top = c["gridOffsetTop"] + y_axis_title_margin
    else:
        top = c["gridOffsetTop"] + y_axis_offset
    bottom = (c["gridOffsetBottomZoomable"] if zoomable else c["gridOffsetBottom"]) + x_axis_offset
    left = c["gridOffsetLeft"] + (y_axis_title_margin if y_axis_title_position == "Left" else 0)
    right = (
        0
        if show_legend and _orientation(legend_orientation) is LegendOrientation.RIGHT
        else c["gridOffsetRight"]
    )
    return get_chart_padding(
        show_legend,
        legend_orientation,
        legend_margin,
        {"top": top, "bottom": bottom, "left": left, "right": right},
    )


def get_legend_props(
    legend_type: Union[str, LegendType],
    legend_orientation: Union[str, LegendOrientation, None],
    show_legend: bool,
    zoomable: bool = False,
    legend_state: Optional[dict[str, bool]] = None,
) -> dict[str, Any]:
    """ECharts ``legend`` option for the given legend controls."""
    orient = _orientation(legend_orientation)
    legend: dict[str, Any] = {
        "orient": "vertical" if orient in (LegendOrientation.LEFT, LegendOrientation.RIGHT) else "horizontal",
        "show": show_legend,
        "type": LegendType(legend_type).value if legend_type in ("scroll", "plain") else LegendType.SCROLL.value,
        "selector": ["all", "inverse"],
    }
    if legend_state is not None:
        legend["selected"] = dict(legend_state)

    if orient is LegendOrientation.LEFT:
        legend["left"] = 0
    elif orient is LegendOrientation.RIGHT:
        legend["right"] = 0
        legend["top"] = TIMESERIES_CONSTANTS["legendRightTopOffset"] if zoomable else 0
    elif orient is LegendOrientation.BOTTOM:
        legend["bottom"] = 0
    else:
        legend["top"] = 0
        legend["right"] = TIMESERIES_CONSTANTS["legendTopRightOffset"] if zoomable else 0
    return legend
