"""
Domain Entities Package

Value objects for orders, sales observations, forecasts and service health.
"""

from .errors import (
    DomainError,
    InvalidObservationError,
    RecordStoreError,
    UnsupportedGranularityError,
)
from .health import (
    ApplicationInfo,
    DependencyStatus,
    RecordStoreInfo,
    ServiceStatus,
    SystemHealth,
)
from .order import OrderRecord
from .sales import (
    BucketedPeriod,
    BucketedSeries,
    ForecastMetric,
    ForecastPoint,
    ForecastSummary,
    Granularity,
    HistoricalPoint,
    Observation,
    ProjectedPoint,
)

__all__ = [
    "DomainError",
    "InvalidObservationError",
    "RecordStoreError",
    "UnsupportedGranularityError",
    "ApplicationInfo",
    "DependencyStatus",
    "RecordStoreInfo",
    "ServiceStatus",
    "SystemHealth",
    "OrderRecord",
    "BucketedPeriod",
    "BucketedSeries",
    "ForecastMetric",
    "ForecastPoint",
    "ForecastSummary",
    "Granularity",
    "HistoricalPoint",
    "Observation",
    "ProjectedPoint",
]
