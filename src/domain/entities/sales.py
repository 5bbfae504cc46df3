"""Domain entities for sales observations and forecasts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Union


class Granularity(str, Enum):
    """Calendar width of a bucket."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class ForecastMetric(str, Enum):
    """Quantity being forecast."""

    REVENUE = "revenue"
    ORDERS = "orders"


@dataclass(frozen=True, slots=True)
class Observation:
    """One dated numeric value, e.g. an order's revenue or a count of 1."""

    timestamp: datetime
    value: float


@dataclass(frozen=True, slots=True)
class BucketedPeriod:
    """Sum of all observations falling into one calendar period."""

    bucket_key: str
    value: float


@dataclass(frozen=True, slots=True)
class HistoricalPoint:
    """Observed bucket repeated in the forecast output for chart continuity."""

    period_label: str
    value: float


@dataclass(frozen=True, slots=True)
class ProjectedPoint:
    """Forecast for a period after the last observed bucket."""

    period_label: str
    forecast: float
    lower_bound: float
    upper_bound: float


ForecastPoint = Union[HistoricalPoint, ProjectedPoint]
BucketedSeries = List[BucketedPeriod]


@dataclass(frozen=True, slots=True)
class ForecastSummary:
    """Headline figures shown next to the forecast chart."""

    projected_total: float
    comparison_total: float
    change_percentage: float
    confidence_level: int
