"""Categorical color assignment for metric lines.

CategoricalColorScale hands out colors from a Plotly qualitative palette in
first-come order and remembers every assignment, so a label keeps its color
for the lifetime of the scale. Instances are the default ``color_of``
capability used by the props transform.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from plotly.colors import qualitative

from confidencebands.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_COLOR_SCHEME = "Plotly"

# Scheme names offered to the color_scheme control
COLOR_SCHEME_OPTIONS: List[Dict[str, str]] = [
    {"label": "Plotly", "value": "Plotly"},
    {"label": "D3", "value": "D3"},
    {"label": "G10", "value": "G10"},
    {"label": "T10", "value": "T10"},
    {"label": "Safe", "value": "Safe"},
    {"label": "Vivid", "value": "Vivid"},
    {"label": "Dark 24", "value": "Dark24"},
    {"label": "Light 24", "value": "Light24"},
]


def get_scheme_colors(scheme: Optional[str]) -> List[str]:
    """Colors of a Plotly qualitative palette; unknown names fall back to the default."""
    colors = getattr(qualitative, scheme, None) if scheme else None
    if not isinstance(colors, list) or not colors:
        if scheme and scheme != DEFAULT_COLOR_SCHEME:
            logger.warning(f"unknown color scheme {scheme!r}, using {DEFAULT_COLOR_SCHEME!r}")
        colors = getattr(qualitative, DEFAULT_COLOR_SCHEME)
    return list(colors)


class CategoricalColorScale:
    """Memoized label -> color lookup over a qualitative palette.

    Attributes:
        scheme: Name of the Plotly qualitative palette.
        forced_colors: Fixed label -> color assignments that bypass the palette.
    """

    def __init__(
        self,
        scheme: Optional[str] = DEFAULT_COLOR_SCHEME,
        *,
        forced_colors: Optional[Dict[str, str]] = None,
    ) -> None:
        self.scheme = scheme or DEFAULT_COLOR_SCHEME
        self.colors = get_scheme_colors(self.scheme)
        self.forced_colors = dict(forced_colors or {})
        self._assigned: Dict[str, str] = {}

    def get_color(self, label: Optional[str]) -> Optional[str]:
        """Color for ``label``; None for an empty label."""
        if not label:
            return None
        if label in self.forced_colors:
            return self.forced_colors[label]
        color = self._assigned.get(label)
        if color is None:
            color = self.colors[len(self._assigned) % len(self.colors)]
            self._assigned[label] = color
        return color

    def __call__(self, label: Optional[str]) -> Optional[str]:
        return self.get_color(label)

    @property
    def assigned(self) -> Dict[str, str]:
        """Copy of the palette assignments made so far."""
        return dict(self._assigned)
