"""Use cases for appending historical risk metrics.

KRI measurements and incidents feed the predictive analytics forecasts.
"""

import logging
from datetime import datetime, timezone

from src.application.dtos.predictive_analytics_dto import (
    IncidentDTO,
    KriMeasurementDTO,
    RecordIncidentRequest,
    RecordKriMeasurementRequest,
)
from src.domain.entities.failure_simulation import Severity
from src.domain.entities.metric_history import (
    IncidentRecord,
    KriMeasurement,
    ThresholdBreach,
)
from src.domain.repositories.metric_history_repository import (
    MetricHistoryRepositoryInterface,
)

logger = logging.getLogger(__name__)


class RecordKriMeasurementUseCase:
    """Append a KRI measurement."""

    def __init__(self, metric_history_repository: MetricHistoryRepositoryInterface):
        self._metric_repo = metric_history_repository

    async def execute(self, request: RecordKriMeasurementRequest) -> KriMeasurementDTO:
        measurement = KriMeasurement(
            org_id=request.org_id,
            kri_name=request.kri_name,
            measurement_date=request.measurement_date,
            actual_value=request.actual_value,
            threshold_breached=ThresholdBreach(request.threshold_breached),
        )

        created = await self._metric_repo.add_kri_measurement(measurement)
        if created.is_breach:
            logger.warning(
                f"KRI {created.kri_name} breached {created.threshold_breached.value} "
                f"threshold on {created.measurement_date}"
            )

        return KriMeasurementDTO(
            id=str(created.id),
            kri_name=created.kri_name,
            measurement_date=created.measurement_date.isoformat(),
            actual_value=created.actual_value,
            threshold_breached=created.threshold_breached.value,
        )


class RecordIncidentUseCase:
    """Append an incident record."""

    def __init__(self, metric_history_repository: MetricHistoryRepositoryInterface):
        self._metric_repo = metric_history_repository

    async def execute(self, request: RecordIncidentRequest) -> IncidentDTO:
        incident = IncidentRecord(
            org_id=request.org_id,
            title=request.title,
            category=request.category,
            severity=Severity(request.severity),
            reported_at=request.reported_at or datetime.now(timezone.utc),
        )

        created = await self._metric_repo.add_incident(incident)
        logger.info(f"Recorded {created.severity.value} incident {created.id}")

        return IncidentDTO(
            id=str(created.id),
            title=created.title,
            category=created.category,
            severity=created.severity.value,
            reported_at=created.reported_at.isoformat(),
        )
