"""Descriptive statistics over record sequences."""

import math
from collections.abc import Sequence

import numpy as np

from happinessstory.models import METRIC_FIELDS, Record


def field_values(records: Sequence[Record], field: str) -> np.ndarray:
    """Return a float array of `field` across `records`.

    Raises:
        ValueError: If `field` is not a numeric record attribute.
    """
    if field not in METRIC_FIELDS:
        raise ValueError(f"Unknown metric field: {field!r}")
    return np.array([getattr(r, field) for r in records], dtype=float)


def pearson_correlation(records: Sequence[Record], field_x: str, field_y: str) -> float:
    """Pearson's r between two fields using the sum-based formula.

    r = (nΣxy − ΣxΣy) / sqrt((nΣx² − (Σx)²)(nΣy² − (Σy)²))

    Returns 0.0 for an empty sequence or when either series is constant,
    instead of NaN.

    Args:
        records: Records to correlate over.
        field_x: First field selector (e.g. "gdp_per_capita").
        field_y: Second field selector (e.g. "score").

    Returns:
        Correlation coefficient in [-1, 1].
    """
    x = field_values(records, field_x)
    y = field_values(records, field_y)
    n = len(x)
    if n == 0:
        return 0.0
    # Constant series: the denominator is zero in exact arithmetic, but float
    # rounding can leave a tiny residue, so test the spread directly.
    if np.ptp(x) == 0 or np.ptp(y) == 0:
        return 0.0

    sum_x = float(x.sum())
    sum_y = float(y.sum())
    sum_xy = float((x * y).sum())
    sum_x2 = float((x * x).sum())
    sum_y2 = float((y * y).sum())

    numerator = n * sum_xy - sum_x * sum_y
    variance_product = (n * sum_x2 - sum_x**2) * (n * sum_y2 - sum_y**2)
    if variance_product <= 0:
        return 0.0
    return numerator / math.sqrt(variance_product)


def group_mean(records: Sequence[Record], field: str) -> float:
    """Mean of `field` over `records`.

    Raises:
        ValueError: On an empty sequence or unknown field.
    """
    values = field_values(records, field)
    if len(values) == 0:
        raise ValueError(f"Cannot average {field!r} over an empty group")
    return float(values.mean())
