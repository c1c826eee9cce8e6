"""
Metric history and predictive analytics API routes.

Records KRI measurements and incidents, and forecasts their trends.
"""

import logging
from dataclasses import asdict
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from src.application.dtos.predictive_analytics_dto import (
    ForecastSeriesRequest,
    PredictiveAnalyticsRequest,
    RecordIncidentRequest,
    RecordKriMeasurementRequest,
    SeriesPointDTO,
)
from src.application.use_cases.generate_predictive_analytics import (
    MAX_LOOKBACK_DAYS,
    ForecastSeriesUseCase,
    GeneratePredictiveAnalyticsUseCase,
)
from src.application.use_cases.record_metric_history import (
    RecordIncidentUseCase,
    RecordKriMeasurementUseCase,
)
from src.infrastructure.api.dependencies import (
    get_forecast_series_use_case,
    get_generate_predictive_analytics_use_case,
    get_record_incident_use_case,
    get_record_kri_measurement_use_case,
)
from src.infrastructure.api.middleware.auth import verify_api_key
from src.infrastructure.api.schemas.error_schema import ProblemDetails
from src.infrastructure.api.schemas.predictive_analytics_schema import (
    ForecastSeriesApiRequest,
    IncidentApiResponse,
    KriMeasurementApiResponse,
    MetricForecastApiModel,
    PredictiveAnalyticsApiResponse,
    RecordIncidentApiRequest,
    RecordKriMeasurementApiRequest,
)
from src.infrastructure.observability.metrics import record_forecasts_generated

logger = logging.getLogger(__name__)

# Organization-scoped routes, mounted under /organizations
router = APIRouter()

# Stateless forecasting, mounted at the API root
forecast_router = APIRouter()


@router.post(
    "/{org_id}/kri-measurements",
    response_model=KriMeasurementApiResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record KRI measurement",
    responses={
        400: {"model": ProblemDetails, "description": "Invalid measurement"},
        401: {"model": ProblemDetails, "description": "Missing or invalid API key"},
        429: {"model": ProblemDetails, "description": "Rate limit exceeded"},
    },
)
async def record_kri_measurement(
    request: RecordKriMeasurementApiRequest,
    org_id: UUID = Path(..., description="Organization UUID"),
    use_case: RecordKriMeasurementUseCase = Depends(get_record_kri_measurement_use_case),
    current_user: str = Depends(verify_api_key),
) -> KriMeasurementApiResponse:
    try:
        result = await use_case.execute(
            RecordKriMeasurementRequest(
                org_id=org_id,
                kri_name=request.kri_name,
                measurement_date=request.measurement_date,
                actual_value=request.actual_value,
                threshold_breached=request.threshold_breached,
            )
        )
        return KriMeasurementApiResponse(**asdict(result))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.post(
    "/{org_id}/incidents",
    response_model=IncidentApiResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record incident",
    responses={
        400: {"model": ProblemDetails, "description": "Invalid incident"},
        401: {"model": ProblemDetails, "description": "Missing or invalid API key"},
        429: {"model": ProblemDetails, "description": "Rate limit exceeded"},
    },
)
async def record_incident(
    request: RecordIncidentApiRequest,
    org_id: UUID = Path(..., description="Organization UUID"),
    use_case: RecordIncidentUseCase = Depends(get_record_incident_use_case),
    current_user: str = Depends(verify_api_key),
) -> IncidentApiResponse:
    try:
        result = await use_case.execute(
            RecordIncidentRequest(
                org_id=org_id,
                title=request.title,
                category=request.category,
                severity=request.severity,
                reported_at=request.reported_at,
            )
        )
        return IncidentApiResponse(**asdict(result))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.get(
    "/{org_id}/analytics/predictive",
    response_model=PredictiveAnalyticsApiResponse,
    status_code=status.HTTP_200_OK,
    summary="Predictive analytics",
    description="KRI trend forecasts, next-month incident forecasts, and a predicted risk score",
    responses={
        400: {"model": ProblemDetails, "description": "Invalid lookback window"},
        401: {"model": ProblemDetails, "description": "Missing or invalid API key"},
        429: {"model": ProblemDetails, "description": "Rate limit exceeded"},
        500: {"model": ProblemDetails, "description": "Internal server error"},
    },
)
async def predictive_analytics(
    org_id: UUID = Path(..., description="Organization UUID"),
    lookback_days: int | None = Query(
        None,
        ge=1,
        le=MAX_LOOKBACK_DAYS,
        description="History window in days (default 90)",
    ),
    use_case: GeneratePredictiveAnalyticsUseCase = Depends(
        get_generate_predictive_analytics_use_case
    ),
    current_user: str = Depends(verify_api_key),
) -> PredictiveAnalyticsApiResponse:
    try:
        result = await use_case.execute(
            PredictiveAnalyticsRequest(org_id=org_id, lookback_days=lookback_days)
        )
        record_forecasts_generated("kri", len(result.kri_forecasts))
        record_forecasts_generated("incident", len(result.incident_forecasts))
        return PredictiveAnalyticsApiResponse(**asdict(result))

    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Error generating analytics for org {org_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred while generating analytics",
        ) from e


@forecast_router.post(
    "/analytics/forecast",
    response_model=MetricForecastApiModel,
    status_code=status.HTTP_200_OK,
    summary="Forecast a metric series",
    description="Fit a linear trend to the supplied points and project it 30 and 90 steps ahead",
    responses={
        400: {"model": ProblemDetails, "description": "Invalid series"},
        401: {"model": ProblemDetails, "description": "Missing or invalid API key"},
        429: {"model": ProblemDetails, "description": "Rate limit exceeded"},
    },
)
async def forecast_series(
    request: ForecastSeriesApiRequest,
    use_case: ForecastSeriesUseCase = Depends(get_forecast_series_use_case),
    current_user: str = Depends(verify_api_key),
) -> MetricForecastApiModel:
    try:
        result = await use_case.execute(
            ForecastSeriesRequest(
                metric=request.metric,
                points=[
                    SeriesPointDTO(observed_on=p.observed_on, value=p.value)
                    for p in request.points
                ],
            )
        )
        record_forecasts_generated("series")
        return MetricForecastApiModel(**asdict(result))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
