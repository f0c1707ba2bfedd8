"""Band descriptors: which metrics form each confidence band level.

extract_band_descriptors() turns chart configuration into a dense, ordered list
of BandDescriptor, one per level that has at least a lower and an upper metric.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Union

from confidencebands.bands.constants import BAND_LEVELS, MIN_BAND_METRICS, BandLevel
from confidencebands.bands.metrics import metric_labels

DisplayNameOverrides = Union[Sequence[Optional[str]], Mapping[int, Optional[str]], None]


@dataclass(frozen=True)
class BandDescriptor:
    """One confidence band level ready for series construction.

    Attributes:
        name: Legend name of the band.
        group_key: Stacking group; lower and upper layers share it.
        opacity_lower: Fill opacity of the lower layer.
        opacity_upper: Fill opacity of the upper layer.
        metric_labels: Columns holding the bound values (at least two).
    """

    name: str
    group_key: str
    opacity_lower: float
    opacity_upper: float
    metric_labels: tuple[Optional[str], ...]


def _camel_key(level: BandLevel) -> str:
    return f"bandConfidenceL{level.level}"


def _band_metrics(config: Any, level: BandLevel) -> Any:
    """Raw metric list bound to ``level``; None when the config has none."""
    if config is None:
        return None
    band_metrics = getattr(config, "band_metrics", None)
    if band_metrics is not None:
        config = band_metrics
    if isinstance(config, Mapping):
        value = config.get(level.form_key)
        if value is None:
            value = config.get(_camel_key(level))
        return value
    if isinstance(config, (list, tuple)):
        idx = level.level - 1
        return config[idx] if idx < len(config) else None
    return None


def _override_name(overrides: DisplayNameOverrides, level: BandLevel) -> Optional[str]:
    """Non-blank override for ``level`` or None."""
    if overrides is None:
        return None
    if isinstance(overrides, Mapping):
        value = overrides.get(level.level)
    elif isinstance(overrides, (list, tuple)):
        idx = level.level - 1
        value = overrides[idx] if idx < len(overrides) else None
    else:
        return None
    if isinstance(value, str) and value.strip():
        return value
    return None


def extract_band_descriptors(
    config: Any,
    display_name_overrides: DisplayNameOverrides = None,
) -> list[BandDescriptor]:
    """Build band descriptors for every level with at least two metrics.

    Args:
        config: ChartFormData, a mapping keyed ``band_confidence_l<k>`` (or
            ``bandConfidenceL<k>``), or a sequence of up to four metric lists.
        display_name_overrides: Legend names per level, as a sequence indexed by
            ``level - 1`` or a mapping keyed by level. Blank names are ignored.

    Returns:
        Descriptors in level order. Levels with fewer than two metrics leave no gap.
    """
    if display_name_overrides is None:
        display_name_overrides = getattr(config, "band_legends", None)

    descriptors: list[BandDescriptor] = []
    for level in BAND_LEVELS:
        labels = metric_labels(_band_metrics(config, level))
        if len(labels) < MIN_BAND_METRICS:
            continue
        descriptors.append(
            BandDescriptor(
                name=_override_name(display_name_overrides, level) or level.default_name,
                group_key=level.group_key,
                opacity_lower=level.opacity,
                opacity_upper=level.opacity,
                metric_labels=tuple(labels),
            )
        )
    return descriptors
