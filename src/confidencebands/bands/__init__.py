"""Confidence band extraction, stacking classification and series construction."""

from confidencebands.bands.band_options import BandDescriptor, extract_band_descriptors
from confidencebands.bands.constants import BAND_LEVELS, DEFAULT_SERIES_STYLE, BandLevel, SeriesStyle
from confidencebands.bands.series_builder import (
    LayerKind,
    LineStyle,
    SeriesLayer,
    build_series,
    flatten_series,
    to_echarts_series,
)
from confidencebands.bands.stacking import BoundsClassification, StackStrategy, classify_bounds, sort_bounds

__all__ = [
    "BAND_LEVELS",
    "DEFAULT_SERIES_STYLE",
    "BandDescriptor",
    "BandLevel",
    "BoundsClassification",
    "LayerKind",
    "LineStyle",
    "SeriesLayer",
    "SeriesStyle",
    "StackStrategy",
    "build_series",
    "classify_bounds",
    "extract_band_descriptors",
    "flatten_series",
    "sort_bounds",
    "to_echarts_series",
]
