"""
Presentation Layer - Sales forecast controller

Exposes the sales forecast of a business for the dashboard chart.
"""

from datetime import datetime
from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.encoders import jsonable_encoder
from pydantic import ValidationError

from src.application.dtos.forecast_dto import (
    SalesForecastRequestDTO,
    SalesForecastResponseDTO,
)
from src.application.use_cases.sales_forecast_use_case import (
    ForecastRequestError,
    GenerateSalesForecastUseCase,
    SalesForecastDependencyError,
)
from src.domain.entities.sales import ForecastMetric, Granularity
from src.main.container import AppContainer
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/businesses", tags=["Sales forecast"])


@router.get(
    "/{business_id}/sales-forecast",
    response_model=SalesForecastResponseDTO,
    summary="Forecast revenue or order volume for a business",
    description="""
    Buckets the business's orders per day, week or month, then projects the
    series with a moving average plus linear trend and a 95% confidence band.
    Fewer than five observed periods yield an empty point list with
    `has_sufficient_data` set to false.
    """,
)
@inject
async def get_sales_forecast(
    business_id: str,
    metric: ForecastMetric = Query(default=ForecastMetric.REVENUE),
    granularity: Granularity = Query(default=Granularity.DAILY),
    horizon: int = Query(
        default=30, ge=1, le=365, description="Number of future periods"
    ),
    start: Optional[datetime] = Query(
        default=None, description="Start timestamp filter (ISO8601)"
    ),
    end: Optional[datetime] = Query(
        default=None, description="End timestamp filter (ISO8601)"
    ),
    forecast_use_case: GenerateSalesForecastUseCase = Depends(
        Provide[AppContainer.generate_sales_forecast_use_case]
    ),
) -> SalesForecastResponseDTO:
    try:
        request = SalesForecastRequestDTO(
            metric=metric,
            granularity=granularity,
            horizon=horizon,
            start=start,
            end=end,
        )
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=jsonable_encoder(
                exc.errors(
                    include_url=False, include_context=False, include_input=False
                )
            ),
        )

    try:
        return await forecast_use_case.execute(business_id, request)
    except ForecastRequestError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except SalesForecastDependencyError as exc:
        raise HTTPException(status_code=502, detail=str(exc))
    except Exception as exc:
        logger.error(
            "sales_forecast.unexpected_error",
            business_id=business_id,
            error=str(exc),
            exc_info=exc,
        )
        raise HTTPException(status_code=500, detail="Internal server error")
