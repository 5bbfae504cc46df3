"""Domain service - headline figures for a forecast."""

from __future__ import annotations

from typing import Optional, Sequence

from src.domain.entities.sales import (
    BucketedSeries,
    ForecastPoint,
    ForecastSummary,
    ProjectedPoint,
)

CONFIDENCE_LEVEL = 95


def summarize_forecast(
    series: BucketedSeries, points: Sequence[ForecastPoint]
) -> Optional[ForecastSummary]:
    """
    Compare the projected total against the same number of past periods.

    Returns ``None`` when ``points`` holds no projection.
    """
    projected = [point for point in points if isinstance(point, ProjectedPoint)]
    if not projected or not series:
        return None

    projected_total = sum(point.forecast for point in projected)
    comparison_size = min(len(projected), len(series))
    comparison_total = sum(period.value for period in series[-comparison_size:])

    change_percentage = 0.0
    if comparison_total:
        change_percentage = (
            (projected_total - comparison_total) / comparison_total * 100
        )

    return ForecastSummary(
        projected_total=round(projected_total, 2),
        comparison_total=round(comparison_total, 2),
        change_percentage=round(change_percentage, 1),
        confidence_level=CONFIDENCE_LEVEL,
    )
