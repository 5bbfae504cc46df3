"""Domain service - trend and volatility estimators over a bucketed series."""

from typing import Sequence

import numpy as np


def trend(values: Sequence[float]) -> float:
    """
    Ordinary least-squares slope of ``values`` against their index.

    A single outlier can dominate the slope; no robust fitting is applied.
    Fewer than two values yield 0.
    """
    n = len(values)
    if n < 2:
        return 0.0

    y = np.asarray(values, dtype=float)
    x = np.arange(n, dtype=float)

    numerator = n * np.sum(x * y) - np.sum(x) * np.sum(y)
    denominator = n * np.sum(x * x) - np.sum(x) ** 2
    return float(numerator / denominator)


def volatility(values: Sequence[float]) -> float:
    """Population standard deviation of ``values`` (0 for fewer than two)."""
    if len(values) < 2:
        return 0.0
    return float(np.std(np.asarray(values, dtype=float)))
