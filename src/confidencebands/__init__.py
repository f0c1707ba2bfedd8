"""
confidencebands: a confidence bands time-series chart plugin.

This package provides:
- extract_band_descriptors / build_series: band extraction and the stacked
  series construction with sign-based stacking classification
- build_query / transform_props: the host-facing query and props transforms
- ConfidenceBandsChartPlugin / register_plugin: plugin registration
- Logging utilities for library and application use

For logging configuration in standalone scripts:
    ```python
    from confidencebands.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```

The NiceGUI widget lives in ``confidencebands.widget`` and is not imported here.
"""

import logging

from confidencebands.utils.logging import configure_logging, get_logger

from confidencebands.bands import (
    BandDescriptor,
    SeriesLayer,
    StackStrategy,
    build_series,
    extract_band_descriptors,
    flatten_series,
)
from confidencebands.chart import ChartFormData, ChartProps, build_query, transform_props
from confidencebands.plugin import ConfidenceBandsChartPlugin, register_plugin

# NullHandler so records don't reach root until a host configures logging
_logger = logging.getLogger("confidencebands")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "BandDescriptor",
    "ChartFormData",
    "ChartProps",
    "ConfidenceBandsChartPlugin",
    "SeriesLayer",
    "StackStrategy",
    "build_query",
    "build_series",
    "configure_logging",
    "extract_band_descriptors",
    "flatten_series",
    "get_logger",
    "register_plugin",
    "transform_props",
]

__version__ = "0.1.0"
