"""
Use Cases Package - Application Layer

Use cases orchestrate repositories and domain services to serve one
request of the presentation layer.
"""

from .health_use_cases import GetApplicationInfoUseCase, GetHealthStatusUseCase
from .sales_forecast_use_case import (
    ForecastRequestError,
    GenerateSalesForecastUseCase,
    SalesForecastDependencyError,
    SalesForecastError,
)

__all__ = [
    "GenerateSalesForecastUseCase",
    "SalesForecastError",
    "ForecastRequestError",
    "SalesForecastDependencyError",
    "GetHealthStatusUseCase",
    "GetApplicationInfoUseCase",
]
