"""Historical metric repository implementation using PostgreSQL.

Stores KRI measurements and incident logs, both append-only.
"""

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.failure_simulation import Severity
from src.domain.entities.metric_history import (
    IncidentRecord,
    KriMeasurement,
    ThresholdBreach,
)
from src.domain.repositories.metric_history_repository import (
    MetricHistoryRepositoryInterface,
)
from src.infrastructure.database.models import IncidentLogModel, KriMeasurementModel


class MetricHistoryRepository(MetricHistoryRepositoryInterface):
    """PostgreSQL implementation of MetricHistoryRepositoryInterface."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_kri_measurements(
        self, org_id: UUID, since: date
    ) -> list[KriMeasurement]:
        stmt = (
            select(KriMeasurementModel)
            .where(
                KriMeasurementModel.org_id == org_id,
                KriMeasurementModel.measurement_date >= since,
            )
            .order_by(KriMeasurementModel.measurement_date, KriMeasurementModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._measurement_to_entity(m) for m in result.scalars().all()]

    async def list_incidents(self, org_id: UUID, since: datetime) -> list[IncidentRecord]:
        stmt = (
            select(IncidentLogModel)
            .where(
                IncidentLogModel.org_id == org_id,
                IncidentLogModel.reported_at >= since,
            )
            .order_by(IncidentLogModel.reported_at)
        )
        result = await self._session.execute(stmt)
        return [self._incident_to_entity(m) for m in result.scalars().all()]

    async def add_kri_measurement(self, measurement: KriMeasurement) -> KriMeasurement:
        model = KriMeasurementModel(
            id=measurement.id,
            org_id=measurement.org_id,
            kri_name=measurement.kri_name,
            measurement_date=measurement.measurement_date,
            actual_value=measurement.actual_value,
            threshold_breached=measurement.threshold_breached.value,
            created_at=measurement.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)

        return self._measurement_to_entity(model)

    async def add_incident(self, incident: IncidentRecord) -> IncidentRecord:
        model = IncidentLogModel(
            id=incident.id,
            org_id=incident.org_id,
            title=incident.title,
            category=incident.category,
            severity=incident.severity.value,
            reported_at=incident.reported_at,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)

        return self._incident_to_entity(model)

    @staticmethod
    def _measurement_to_entity(model: KriMeasurementModel) -> KriMeasurement:
        return KriMeasurement(
            id=model.id,
            org_id=model.org_id,
            kri_name=model.kri_name,
            measurement_date=model.measurement_date,
            actual_value=model.actual_value,
            threshold_breached=ThresholdBreach(model.threshold_breached),
            created_at=model.created_at,
        )

    @staticmethod
    def _incident_to_entity(model: IncidentLogModel) -> IncidentRecord:
        return IncidentRecord(
            id=model.id,
            org_id=model.org_id,
            title=model.title,
            category=model.category,
            severity=Severity(model.severity),
            reported_at=model.reported_at,
        )
