"""Plugin registration for the confidence bands chart.

A host discovers charts through a ChartPluginRegistry. ConfidenceBandsChartPlugin
bundles the chart metadata with its query builder and props transform; the
NiceGUI widget class is loaded lazily so that registering the plugin never
imports the UI toolkit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from confidencebands.chart.build_query import build_query
from confidencebands.chart.transform_props import transform_props
from confidencebands.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PLUGIN_KEY = "confidence_bands"


@dataclass(frozen=True)
class ChartMetadata:
    """Static description of a chart type shown in the host's chart picker."""

    name: str
    description: str = ""
    category: str = "Evolution"
    tags: tuple[str, ...] = ()
    thumbnail: Optional[str] = None


CONFIDENCE_BANDS_METADATA = ChartMetadata(
    name="Confidence Bands",
    description=(
        "Time-series line chart of a prediction with up to four shaded "
        "confidence bands, each drawn between a lower and an upper bound metric."
    ),
    category="Evolution",
    tags=("ECharts", "Time", "Forecast", "Predictive", "Line"),
)


def _load_widget() -> type:
    from confidencebands.widget.confidence_bands_chart import ConfidenceBandsChart

    return ConfidenceBandsChart


@dataclass(frozen=True)
class ConfidenceBandsChartPlugin:
    """Everything a host needs to offer and render the chart."""

    metadata: ChartMetadata = CONFIDENCE_BANDS_METADATA
    build_query: Callable[..., dict[str, Any]] = build_query
    transform_props: Callable[..., Any] = transform_props
    load_chart: Callable[[], type] = _load_widget


@dataclass
class ChartPluginRegistry:
    """Key -> plugin mapping used by a host to look up chart types."""

    _plugins: dict[str, ConfidenceBandsChartPlugin] = field(default_factory=dict)

    def register(self, key: str, plugin: ConfidenceBandsChartPlugin) -> None:
        """Register ``plugin`` under ``key``.

        Raises:
            ValueError: If ``key`` is empty or already registered.
        """
        if not key:
            raise ValueError("Plugin key must be a non-empty string.")
        if key in self._plugins:
            raise ValueError(f"A chart plugin is already registered under {key!r}.")
        self._plugins[key] = plugin
        logger.info(f"registered chart plugin {key!r} ({plugin.metadata.name})")

    def get(self, key: str) -> ConfidenceBandsChartPlugin:
        """Return the plugin registered under ``key``.

        Raises:
            ValueError: If nothing is registered under ``key``.
        """
        try:
            return self._plugins[key]
        except KeyError:
            raise ValueError(f"Unknown chart plugin {key!r}; registered: {sorted(self._plugins)}") from None

    def unregister(self, key: str) -> None:
        self._plugins.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._plugins)

    def __contains__(self, key: object) -> bool:
        return key in self._plugins


DEFAULT_REGISTRY = ChartPluginRegistry()


def register_plugin(
    key: str = DEFAULT_PLUGIN_KEY,
    registry: Optional[ChartPluginRegistry] = None,
) -> ConfidenceBandsChartPlugin:
    """Register the confidence bands plugin and return it.

    Args:
        key: Registry key of the chart type.
        registry: Target registry; defaults to DEFAULT_REGISTRY.
    """
    registry = registry if registry is not None else DEFAULT_REGISTRY
    plugin = ConfidenceBandsChartPlugin()
    registry.register(key, plugin)
    return plugin
