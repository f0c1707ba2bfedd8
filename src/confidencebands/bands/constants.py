"""Fixed band levels and series styling for confidence band charts.

Band levels are ordered from the widest (least confident) to the narrowest
band. Each level has a stable stacking group key, a default legend name, and a
fill opacity that grows inward so overlapping bands darken toward the center.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BandLevel:
    """Static definition of one confidence band level.

    Attributes:
        level: 1-based level number (1..4).
        group_key: Stacking group shared by the level's lower and upper layers.
        default_name: Legend name used when no override is given.
        opacity: Default fill opacity for both the lower and upper layers.
    """

    level: int
    group_key: str
    default_name: str
    opacity: float

    @property
    def form_key(self) -> str:
        """Snake-case form-data key holding the level's metrics."""
        return f"band_confidence_l{self.level}"

    @property
    def legend_key(self) -> str:
        """Snake-case form-data key holding the level's legend override."""
        return f"band_legend_l{self.level}"


BAND_LEVELS: tuple[BandLevel, ...] = (
    BandLevel(1, "bandConfidenceL1", "Bound L1 (95%)", 0.05),
    BandLevel(2, "bandConfidenceL2", "Bound L2 (85%)", 0.07),
    BandLevel(3, "bandConfidenceL3", "Bound L3 (75%)", 0.10),
    BandLevel(4, "bandConfidenceL4", "Bound L4 (65%)", 0.20),
)

# A band needs a lower and an upper bound
MIN_BAND_METRICS = 2


@dataclass(frozen=True)
class SeriesStyle:
    """Colors and line styles applied by the series builder.

    Attributes:
        band_color: Fill color of every band area (lower and upper layers).
        band_item_color: Item (symbol/tooltip) color of band layers.
        band_item_opacity: Item opacity of band layers.
        band_line_opacity: Line opacity of band layers (0 hides the outline).
        prediction_color: Line color of the prediction metric.
        prediction_line_width: Line width of the prediction metric.
        prediction_line_type: ECharts line type of the prediction metric.
        default_metric_color: Fallback color when the color scale has none.
        metric_line_opacity: Line opacity of prediction and plain metrics.
    """

    band_color: str = "#ff0000"
    band_item_color: str = "#ff0000"
    band_item_opacity: float = 0.6
    band_line_opacity: float = 0.0
    prediction_color: str = "#2C3227"
    prediction_line_width: float = 1.5
    prediction_line_type: str = "dashed"
    default_metric_color: str = "#FFFFFF"
    metric_line_opacity: float = 1.0


DEFAULT_SERIES_STYLE = SeriesStyle()
