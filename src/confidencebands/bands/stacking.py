"""Stacking strategy classification for confidence bands.

The renderer draws a band as two stacked areas in the same stack group: the
lower layer and the upper layer. How the two layers have to be stacked depends
on the sign of the lower bounds across the whole row set:

    Lower bounds      | Strategy  | Treatment
    ==================================================================
    all <= 0          | samesign  | both layers filled, values as-is
    ------------------------------------------------------------------
    all >= 0          | positive  | lower layer transparent,
                      |           | upper = upper - lower
    ------------------------------------------------------------------
    mixed signs       | all       | lower layer transparent,
                      |           | upper = upper - lower

A lowest bound of exactly 0 (or a missing one) keeps both the "all <= 0" and
the "all >= 0" framing alive. When both survive, the positive rule wins.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, Optional, Sequence

import numpy as np

from confidencebands.bands.band_options import BandDescriptor
from confidencebands.utils.logging import get_logger

logger = get_logger(__name__)

# (x, lower, upper)
BoundRow = tuple[Any, Any, Any]


class StackStrategy(str, Enum):
    """ECharts ``stackStrategy`` tag for a band's stack group."""

    SAME_SIGN = "samesign"
    POSITIVE = "positive"
    MIXED = "all"


@dataclass(frozen=True)
class BoundsClassification:
    """Result of classifying one band over a row set.

    Attributes:
        band: Descriptor with effective opacities (lower zeroed when needed).
        stack_strategy: Strategy tag for both of the band's layers.
        bounds: One ``(x, lower, upper)`` per row; upper is a delta unless SAME_SIGN.
    """

    band: BandDescriptor
    stack_strategy: StackStrategy
    bounds: tuple[BoundRow, ...]


def as_number(value: Any) -> Optional[float]:
    """Return ``value`` as a float, or None when it is missing or not numeric.

    Accepts Python and numpy numbers, Decimals (SQL NUMERIC columns) and
    numeric strings. NaN and bools are treated as missing.
    """
    if value is None or isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, Decimal) and value.is_nan():
        return None
    if isinstance(value, (numbers.Real, np.number, Decimal)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number):
        return None
    return number


def _sort_key(value: Any) -> tuple[int, float]:
    number = as_number(value)
    if number is None:
        return (1, 0.0)
    return (0, number)


def sort_bounds(values: Sequence[Any]) -> list[Any]:
    """Sort bound values numerically ascending; missing values go last.

    The original values are returned, only their order changes.
    """
    return sorted(values, key=_sort_key)


def _delta(lower: Any, upper: Any) -> Optional[float]:
    lo = as_number(lower)
    hi = as_number(upper)
    if lo is None or hi is None:
        return None
    if isinstance(lower, numbers.Real) and isinstance(upper, numbers.Real):
        # keep ints as ints
        return upper - lower
    if isinstance(lower, Decimal) and isinstance(upper, Decimal):
        return upper - lower
    return hi - lo


def classify_bounds(
    band: BandDescriptor,
    rows: Sequence[Mapping[str, Any]],
    x_axis_key: str,
) -> BoundsClassification:
    """Read, sort and classify the bounds of ``band`` over ``rows``.

    Args:
        band: Descriptor whose ``metric_labels`` name the bound columns.
        rows: Query rows in x-axis order.
        x_axis_key: Column holding the x value.

    Returns:
        BoundsClassification with a new descriptor; ``band`` is left untouched.
    """
    all_negative = True
    all_positive = True
    bounds: list[BoundRow] = []
    for row in rows:
        values = sort_bounds([row.get(label) if label is not None else None for label in band.metric_labels])
        lowest = as_number(values[0]) if values else None
        if lowest is not None:
            if lowest > 0:
                all_negative = False
            if lowest < 0:
                all_positive = False
        lower = values[0] if len(values) > 0 else None
        upper = values[1] if len(values) > 1 else None
        bounds.append((row.get(x_axis_key), lower, upper))

    strategy = StackStrategy.SAME_SIGN
    if all_positive:
        strategy = StackStrategy.POSITIVE
    elif not all_negative:
        strategy = StackStrategy.MIXED

    if strategy is not StackStrategy.SAME_SIGN:
        band = replace(band, opacity_lower=0.0)
        bounds = [(x, lower, _delta(lower, upper)) for x, lower, upper in bounds]

    logger.debug(
        f"band {band.name!r} ({band.group_key}): rows={len(bounds)}, "
        f"all_negative={all_negative}, all_positive={all_positive}, strategy={strategy.value}"
    )
    return BoundsClassification(band=band, stack_strategy=strategy, bounds=tuple(bounds))
