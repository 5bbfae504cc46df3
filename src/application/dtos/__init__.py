"""
DTOs Package - Application Layer

Data Transfer Objects exchanged between the application layer and the
presentation layer.
"""

from .forecast_dto import (
    BucketedPeriodDTO,
    ForecastSummaryDTO,
    HistoricalPointDTO,
    ProjectedPointDTO,
    SalesForecastRequestDTO,
    SalesForecastResponseDTO,
)
from .health_dto import (
    ApplicationInfoDTO,
    DependencyStatusDTO,
    RecordStoreInfoDTO,
    SystemHealthDTO,
)

__all__ = [
    "BucketedPeriodDTO",
    "ForecastSummaryDTO",
    "HistoricalPointDTO",
    "ProjectedPointDTO",
    "SalesForecastRequestDTO",
    "SalesForecastResponseDTO",
    "SystemHealthDTO",
    "DependencyStatusDTO",
    "RecordStoreInfoDTO",
    "ApplicationInfoDTO",
]
