"""Use cases for predictive analytics.

Generates trend forecasts for KRIs and incident volumes from the
organization's recent history, and forecasts caller-supplied series.
"""

import logging
from datetime import datetime, timedelta, timezone

from src.application.dtos.predictive_analytics_dto import (
    ForecastSeriesRequest,
    IncidentForecastDTO,
    MetricForecastDTO,
    PredictiveAnalyticsRequest,
    PredictiveAnalyticsResponse,
)
from src.domain.entities.metric_history import MetricForecast, MetricObservation
from src.domain.repositories.metric_history_repository import (
    MetricHistoryRepositoryInterface,
)
from src.domain.services.forecast_calculator import ForecastCalculator
from src.domain.services.predictive_analytics_service import (
    PredictiveAnalyticsService,
)

logger = logging.getLogger(__name__)

DEFAULT_LOOKBACK_DAYS = 90
MAX_LOOKBACK_DAYS = 730


class GeneratePredictiveAnalyticsUseCase:
    """Forecast KRIs, incident volumes, and overall risk for an organization.

    Pipeline:
    1. Resolve the lookback window (default 90 days)
    2. Load KRI measurements and incidents inside the window
    3. Delegate to PredictiveAnalyticsService
    """

    def __init__(
        self,
        metric_history_repository: MetricHistoryRepositoryInterface,
        analytics_service: PredictiveAnalyticsService,
        default_lookback_days: int = DEFAULT_LOOKBACK_DAYS,
    ):
        self._metric_repo = metric_history_repository
        self._analytics_service = analytics_service
        self._default_lookback_days = default_lookback_days

    async def execute(
        self, request: PredictiveAnalyticsRequest
    ) -> PredictiveAnalyticsResponse:
        """Generate predictive analytics.

        Args:
            request: Organization and optional lookback override

        Returns:
            PredictiveAnalyticsResponse (empty forecasts when there is no history)

        Raises:
            ValueError: If lookback_days is outside 1-730
        """
        lookback_days = request.lookback_days or self._default_lookback_days
        if not (1 <= lookback_days <= MAX_LOOKBACK_DAYS):
            raise ValueError(
                f"lookback_days must be between 1 and {MAX_LOOKBACK_DAYS}, got: {lookback_days}"
            )

        since = datetime.now(timezone.utc) - timedelta(days=lookback_days)
        measurements = await self._metric_repo.list_kri_measurements(
            request.org_id, since.date()
        )
        incidents = await self._metric_repo.list_incidents(request.org_id, since)

        analytics = self._analytics_service.build(measurements, incidents)
        logger.info(
            f"Predictive analytics for org {request.org_id}: "
            f"{len(measurements)} measurements, {len(incidents)} incidents, "
            f"risk score {analytics.risk_score_prediction}"
        )

        return PredictiveAnalyticsResponse(
            org_id=str(request.org_id),
            lookback_days=lookback_days,
            kri_forecasts=[metric_forecast_to_dto(f) for f in analytics.kri_forecasts],
            incident_forecasts=[
                IncidentForecastDTO(
                    category=f.category,
                    current_monthly=f.current_monthly,
                    predicted_next_month=f.predicted_next_month,
                    risk_level=f.risk_level.value,
                )
                for f in analytics.incident_forecasts
            ],
            risk_score_prediction=analytics.risk_score_prediction,
            generated_at=analytics.generated_at.isoformat(),
        )


class ForecastSeriesUseCase:
    """Stateless forecast of a caller-supplied metric series."""

    def __init__(self, forecast_calculator: ForecastCalculator):
        self._forecast_calculator = forecast_calculator

    async def execute(self, request: ForecastSeriesRequest) -> MetricForecastDTO:
        """Forecast the series.

        Raises:
            ValueError: If the metric name is empty
        """
        if not request.metric or not request.metric.strip():
            raise ValueError("metric cannot be empty")

        forecast = self._forecast_calculator.forecast_metric(
            request.metric,
            [MetricObservation(observed_on=p.observed_on, value=p.value) for p in request.points],
        )
        return metric_forecast_to_dto(forecast)


def metric_forecast_to_dto(forecast: MetricForecast) -> MetricForecastDTO:
    """Convert a MetricForecast to its response DTO."""
    return MetricForecastDTO(
        metric=forecast.metric,
        current_value=forecast.current_value,
        predicted_30_days=forecast.predicted_30_days,
        predicted_90_days=forecast.predicted_90_days,
        trend=forecast.trend.value,
        slope=forecast.slope,
        confidence=forecast.confidence,
        sample_count=forecast.sample_count,
    )
