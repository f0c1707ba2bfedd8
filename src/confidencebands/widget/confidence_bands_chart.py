"""NiceGUI widget that renders a confidence bands ECharts option.

The widget owns one ui.echart element. Hovering a series reports its name
through ``on_focused_series``; leaving it reports None.
"""

from __future__ import annotations

import copy
from typing import Any, Callable, Optional

from nicegui import ui
from nicegui.events import GenericEventArguments

from confidencebands.chart.transform_props import ConfidenceBandsProps
from confidencebands.utils.logging import get_logger

logger = get_logger(__name__)

OnFocusedSeries = Callable[[Optional[str]], None]


def _safe_call(func: Callable, *args, **kwargs) -> None:
    """Call ``func``, ignoring only 'client deleted' RuntimeErrors."""
    try:
        func(*args, **kwargs)
    except RuntimeError as e:
        if "deleted" not in str(e).lower():
            raise


class ConfidenceBandsChart:
    """Confidence bands chart backed by ui.echart.

    Call render() once inside the target container, then update_options()
    whenever the props transform produced new props.
    """

    def __init__(
        self,
        props: ConfidenceBandsProps,
        *,
        on_focused_series: Optional[OnFocusedSeries] = None,
    ) -> None:
        self._props = props
        self._on_focused_series = on_focused_series
        self._chart: Optional[ui.echart] = None
        self._focused: Optional[str] = None

    @property
    def props(self) -> ConfidenceBandsProps:
        return self._props

    @property
    def focused_series(self) -> Optional[str]:
        """Name of the series under the pointer, or None."""
        return self._focused

    def _options(self) -> dict[str, Any]:
        # ui.echart keeps a reference; never hand it the props' own dict
        return copy.deepcopy(self._props.echart_options)

    def render(self) -> None:
        """Create the ui.echart element inside the current container."""
        self._chart = ui.echart(self._options()).style(
            f"height: {self._props.height}px; width: {self._props.width}px"
        )
        self._chart.on("chart:mouseover", self._on_mouseover)
        self._chart.on("chart:mouseout", self._on_mouseout)
        logger.debug(f"rendered chart with {len(self._props.echart_options.get('series', []))} series")

    def update_options(self, props: ConfidenceBandsProps) -> None:
        """Replace the chart's props and push the new option to the client."""
        self._props = props
        if self._chart is None:
            return
        options = self._chart.options
        options.clear()
        options.update(self._options())
        _safe_call(self._chart.update)

    def _set_focused(self, name: Optional[str]) -> None:
        self._focused = name
        if self._on_focused_series is not None:
            self._on_focused_series(name)

    def _on_mouseover(self, e: GenericEventArguments) -> None:
        args = e.args if isinstance(e.args, dict) else {}
        self._set_focused(args.get("seriesName"))

    def _on_mouseout(self, _e: GenericEventArguments) -> None:
        self._set_focused(None)
