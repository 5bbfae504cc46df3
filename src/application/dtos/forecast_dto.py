"""
Application DTOs - Sales forecast

Request and response payloads for the sales forecast use case. Forecast
points are serialised as a tagged union so that a chart can plot
``actual``/``forecast`` for history and ``forecast`` with bounds for
projections.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator

from src.domain.entities.sales import (
    BucketedPeriod,
    ForecastMetric,
    ForecastPoint,
    ForecastSummary,
    Granularity,
    HistoricalPoint,
    ProjectedPoint,
)


class SalesForecastRequestDTO(BaseModel):
    """Parameters selected by the user on the forecast dashboard."""

    metric: ForecastMetric = Field(
        default=ForecastMetric.REVENUE,
        description="Forecast order revenue or order count",
    )
    granularity: Granularity = Field(
        default=Granularity.DAILY, description="Calendar width of each period"
    )
    horizon: int = Field(
        default=30,
        ge=1,
        le=365,
        description="Number of future periods to forecast (7, 14, 30 or 90 in the UI)",
    )
    start: Optional[datetime] = Field(
        default=None, description="Only use orders created at or after this instant"
    )
    end: Optional[datetime] = Field(
        default=None, description="Only use orders created at or before this instant"
    )

    @model_validator(mode="after")
    def _check_range(self) -> "SalesForecastRequestDTO":
        if self.start and self.end and self.start > self.end:
            raise ValueError("start must not be after end")
        return self


class BucketedPeriodDTO(BaseModel):
    bucket_key: str
    value: float

    @classmethod
    def from_domain(cls, period: BucketedPeriod) -> "BucketedPeriodDTO":
        return cls(bucket_key=period.bucket_key, value=period.value)


class HistoricalPointDTO(BaseModel):
    """Observed period; ``actual`` and ``forecast`` are equal."""

    kind: Literal["historical"] = "historical"
    period_label: str
    actual: float
    forecast: float

    @classmethod
    def from_domain(cls, point: HistoricalPoint) -> "HistoricalPointDTO":
        return cls(
            period_label=point.period_label, actual=point.value, forecast=point.value
        )


class ProjectedPointDTO(BaseModel):
    """Future period with its confidence band."""

    kind: Literal["projected"] = "projected"
    period_label: str
    forecast: float
    lower_bound: float
    upper_bound: float

    @classmethod
    def from_domain(cls, point: ProjectedPoint) -> "ProjectedPointDTO":
        return cls(
            period_label=point.period_label,
            forecast=point.forecast,
            lower_bound=point.lower_bound,
            upper_bound=point.upper_bound,
        )


ForecastPointDTO = Annotated[
    Union[HistoricalPointDTO, ProjectedPointDTO], Field(discriminator="kind")
]


def forecast_point_to_dto(point: ForecastPoint) -> ForecastPointDTO:
    if isinstance(point, ProjectedPoint):
        return ProjectedPointDTO.from_domain(point)
    return HistoricalPointDTO.from_domain(point)


class ForecastSummaryDTO(BaseModel):
    projected_total: float = Field(description="Sum of the projected periods")
    comparison_total: float = Field(
        description="Sum of the same number of most recent observed periods"
    )
    change_percentage: float = Field(
        description="Relative change of the projection against the comparison"
    )
    confidence_level: int = Field(description="Confidence level of the bounds (%)")

    @classmethod
    def from_domain(cls, summary: ForecastSummary) -> "ForecastSummaryDTO":
        return cls(
            projected_total=summary.projected_total,
            comparison_total=summary.comparison_total,
            change_percentage=summary.change_percentage,
            confidence_level=summary.confidence_level,
        )


class SalesForecastResponseDTO(BaseModel):
    """DTO returned by the sales forecast endpoint."""

    business_id: str
    metric: ForecastMetric
    granularity: Granularity
    horizon: int
    generated_at: datetime
    bucket_count: int = Field(description="Number of observed periods")
    minimum_buckets: int = Field(
        description="Observed periods required before a forecast is produced"
    )
    has_sufficient_data: bool
    history: List[BucketedPeriodDTO] = Field(default_factory=list)
    points: List[ForecastPointDTO] = Field(default_factory=list)
    summary: Optional[ForecastSummaryDTO] = None
    skipped_observations: int = Field(
        default=0, description="Order rows rejected as invalid observations"
    )
