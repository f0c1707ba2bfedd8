"""Fixtures for band extraction and series builder tests."""

from __future__ import annotations

import pytest

from confidencebands.bands.band_options import BandDescriptor


@pytest.fixture
def band() -> BandDescriptor:
    """Level-1 style band over columns lo/hi."""
    return BandDescriptor(
        name="Bound L1 (95%)",
        group_key="bandConfidenceL1",
        opacity_lower=0.05,
        opacity_upper=0.05,
        metric_labels=("lo", "hi"),
    )


@pytest.fixture
def negative_rows() -> list[dict]:
    return [{"x": 1, "lo": -5, "hi": -1}, {"x": 2, "lo": -3, "hi": -2}]


@pytest.fixture
def positive_rows() -> list[dict]:
    return [{"x": 1, "lo": 2, "hi": 5}, {"x": 2, "lo": 1, "hi": 3}]


@pytest.fixture
def mixed_rows() -> list[dict]:
    return [{"x": 1, "lo": -2, "hi": 3}, {"x": 2, "lo": 1, "hi": 4}]
