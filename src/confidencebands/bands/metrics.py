"""Helpers for metric descriptors and label maps.

Metrics arrive either as saved-metric names (plain strings) or as adhoc metric
mappings that carry a ``label`` key. Label maps map a column key to its display
name, either directly or as a list whose first element is the display name.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional


def metric_label(metric: Any) -> Optional[str]:
    """Return the column label a metric is stored under, or None."""
    if metric is None:
        return None
    if isinstance(metric, str):
        return metric
    if isinstance(metric, Mapping):
        label = metric.get("label")
    else:
        label = getattr(metric, "label", None)
    return label if isinstance(label, str) else None


def metric_labels(metrics: Any) -> list[Optional[str]]:
    """Labels of a metric list, in order. Anything that is not a list yields []."""
    if not isinstance(metrics, (list, tuple)):
        return []
    return [metric_label(m) for m in metrics]


def display_label(label_map: Optional[Mapping[str, Any]], key: Optional[str]) -> Optional[str]:
    """Preferred display name for ``key``; falls back to ``key`` itself."""
    if not label_map or key is None:
        return key
    entry = label_map.get(key)
    if isinstance(entry, (list, tuple)):
        entry = entry[0] if entry else None
    if isinstance(entry, str) and entry:
        return entry
    return key


def unique_metrics(metrics: Iterable[Any]) -> list[Any]:
    """Metrics with a usable label, deduplicated by label (first occurrence wins)."""
    seen: set[str] = set()
    out: list[Any] = []
    for m in metrics:
        label = metric_label(m)
        if label and label not in seen:
            seen.add(label)
            out.append(m)
    return out
