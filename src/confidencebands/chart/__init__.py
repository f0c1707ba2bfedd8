"""Chart plumbing: form data, query building, props transform and layout."""

from confidencebands.chart.build_query import build_query
from confidencebands.chart.color_scale import CategoricalColorScale
from confidencebands.chart.form_data import ChartFormData
from confidencebands.chart.transform_props import ChartProps, ConfidenceBandsProps, transform_props

__all__ = [
    "CategoricalColorScale",
    "ChartFormData",
    "ChartProps",
    "ConfidenceBandsProps",
    "build_query",
    "transform_props",
]
