"""
Application Use Case - Sales forecast

Builds the sales forecast shown on a business dashboard:
  * Reads the business's orders from the record store
  * Turns each order into an observation for the selected metric
  * Drops malformed rows, buckets the rest and projects the series
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Sequence, Tuple

import structlog

from src.application.dtos.forecast_dto import (
    BucketedPeriodDTO,
    ForecastSummaryDTO,
    SalesForecastRequestDTO,
    SalesForecastResponseDTO,
    forecast_point_to_dto,
)
from src.domain.entities.errors import InvalidObservationError, RecordStoreError
from src.domain.entities.order import OrderRecord
from src.domain.entities.sales import ForecastMetric, Observation
from src.domain.repositories.order_repository import IOrderRepository
from src.domain.services.bucketing import bucket
from src.domain.services.forecast_summary import summarize_forecast
from src.domain.services.forecaster import MINIMUM_BUCKETS, forecast
from src.domain.services.observation_validator import validate_observation

logger = structlog.get_logger(__name__)


class SalesForecastError(Exception):
    """Base exception for sales forecast failures."""

    pass


class ForecastRequestError(SalesForecastError):
    """Raised when the forecast parameters are not acceptable."""

    pass


class SalesForecastDependencyError(SalesForecastError):
    """Raised when the order record store cannot be read."""

    pass


class GenerateSalesForecastUseCase:
    """Forecasts revenue or order volume for one business."""

    def __init__(self, order_repository: IOrderRepository, max_horizon: int = 365):
        self.order_repository = order_repository
        self.max_horizon = max_horizon

    async def execute(
        self, business_id: str, request: SalesForecastRequestDTO
    ) -> SalesForecastResponseDTO:
        if not business_id or not business_id.strip():
            raise ForecastRequestError("A business id is required to forecast sales")
        if request.horizon > self.max_horizon:
            raise ForecastRequestError(
                f"Horizon must not exceed {self.max_horizon} periods"
            )

        logger.info(
            "sales_forecast.start",
            business_id=business_id,
            metric=request.metric.value,
            granularity=request.granularity.value,
            horizon=request.horizon,
        )

        orders = await self._load_orders(business_id, request)
        observations, skipped = self._to_observations(orders, request.metric)

        series = bucket(observations, request.granularity)
        points = forecast(series, request.horizon, request.granularity)
        summary = summarize_forecast(series, points)

        has_sufficient_data = len(series) >= MINIMUM_BUCKETS
        if not has_sufficient_data:
            logger.info(
                "sales_forecast.insufficient_data",
                business_id=business_id,
                bucket_count=len(series),
                minimum_buckets=MINIMUM_BUCKETS,
            )

        response = SalesForecastResponseDTO(
            business_id=business_id,
            metric=request.metric,
            granularity=request.granularity,
            horizon=request.horizon,
            generated_at=datetime.now(timezone.utc),
            bucket_count=len(series),
            minimum_buckets=MINIMUM_BUCKETS,
            has_sufficient_data=has_sufficient_data,
            history=[BucketedPeriodDTO.from_domain(period) for period in series],
            points=[forecast_point_to_dto(point) for point in points],
            summary=ForecastSummaryDTO.from_domain(summary) if summary else None,
            skipped_observations=skipped,
        )

        logger.info(
            "sales_forecast.completed",
            business_id=business_id,
            bucket_count=len(series),
            points=len(points),
            skipped_observations=skipped,
        )
        return response

    async def _load_orders(
        self, business_id: str, request: SalesForecastRequestDTO
    ) -> List[OrderRecord]:
        try:
            return await self.order_repository.find_by_business(
                business_id, start=request.start, end=request.end
            )
        except RecordStoreError as exc:
            logger.error(
                "sales_forecast.orders_unavailable",
                business_id=business_id,
                error=exc.message,
                details=exc.details,
            )
            raise SalesForecastDependencyError(
                f"Orders for business {business_id} could not be loaded"
            ) from exc

    def _to_observations(
        self, orders: Sequence[OrderRecord], metric: ForecastMetric
    ) -> Tuple[List[Observation], int]:
        observations: List[Observation] = []
        skipped = 0
        for order in orders:
            if metric is ForecastMetric.ORDERS:
                raw_value = 1
            else:
                raw_value = order.total_amount if order.total_amount is not None else 0
            try:
                observations.append(validate_observation(order.created_at, raw_value))
            except InvalidObservationError as exc:
                skipped += 1
                logger.warning(
                    "sales_forecast.invalid_observation",
                    order_id=order.id,
                    reason=exc.message,
                    details=exc.details,
                )
        return observations, skipped
