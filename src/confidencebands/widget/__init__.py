"""NiceGUI widget for the confidence bands chart."""

from confidencebands.widget.confidence_bands_chart import ConfidenceBandsChart, OnFocusedSeries

__all__ = [
    "ConfidenceBandsChart",
    "OnFocusedSeries",
]
