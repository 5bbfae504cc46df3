"""
Domain service - Sales forecaster

Moving average plus linear trend, with a confidence band sized from the
historical volatility and widening with the square root of the horizon.
The output repeats the tail of the history so that a chart can draw one
continuous line across the history/forecast boundary.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Union

import numpy as np

from src.domain.entities.sales import (
    BucketedSeries,
    ForecastPoint,
    Granularity,
    HistoricalPoint,
    ProjectedPoint,
)
from src.domain.services.period_stepper import get_period_stepper
from src.domain.services.statistics import trend, volatility

MINIMUM_BUCKETS = 5
MAX_WINDOW_SIZE = 7
HISTORY_CONTEXT_SIZE = 14
# Two-tailed z-score for a 95% interval.
CONFIDENCE_Z_SCORE = 1.96


def _round2(value: float) -> float:
    # Ties round away from zero, as the dashboard formats money.
    return float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def forecast(
    series: BucketedSeries,
    horizon_periods: int,
    granularity: Union[Granularity, str],
) -> List[ForecastPoint]:
    """
    Project ``horizon_periods`` periods past the end of ``series``.

    Args:
        series: Bucketed history, ascending by bucket key
        horizon_periods: Number of future periods to forecast
        granularity: Granularity the series was bucketed with

    Returns:
        Up to 14 historical points followed by one projected point per
        future period. Empty when the series has fewer than 5 buckets.
    """
    if len(series) < MINIMUM_BUCKETS:
        return []

    stepper = get_period_stepper(granularity)
    values = [period.value for period in series]

    window_size = min(MAX_WINDOW_SIZE, len(values) // 2)
    recent_average = float(np.mean(values[-window_size:]))
    slope = trend(values)
    spread = volatility(values)

    points: List[ForecastPoint] = [
        HistoricalPoint(period_label=period.bucket_key, value=period.value)
        for period in series[-HISTORY_CONTEXT_SIZE:]
    ]

    last_key = series[-1].bucket_key
    for step in range(1, horizon_periods + 1):
        point_forecast = max(0.0, recent_average + slope * step)
        interval = spread * CONFIDENCE_Z_SCORE * math.sqrt(step)
        # lower_bound is not clamped at zero.
        points.append(
            ProjectedPoint(
                period_label=stepper.advance(last_key, step),
                forecast=_round2(point_forecast),
                lower_bound=_round2(point_forecast - interval),
                upper_bound=_round2(point_forecast + interval),
            )
        )

    return points
