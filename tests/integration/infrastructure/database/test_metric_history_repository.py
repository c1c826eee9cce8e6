"""Integration tests for MetricHistoryRepository."""

from datetime import date, datetime, timezone
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.failure_simulation import Severity
from src.domain.entities.metric_history import (
    IncidentRecord,
    KriMeasurement,
    ThresholdBreach,
)
from src.infrastructure.database.repositories.metric_history_repository import (
    MetricHistoryRepository,
)


@pytest.mark.integration
class TestMetricHistoryRepository:
    """Integration tests for MetricHistoryRepository."""

    @pytest.fixture
    def repository(self, db_session: AsyncSession) -> MetricHistoryRepository:
        return MetricHistoryRepository(db_session)

    async def test_kri_measurements_since_date_in_order(
        self, repository: MetricHistoryRepository
    ):
        """Test measurements are filtered by date and returned oldest first."""
        org_id = uuid4()
        for day, value in ((20, 3.0), (5, 1.0), (10, 2.0)):
            await repository.add_kri_measurement(
                KriMeasurement(
                    org_id=org_id,
                    kri_name="failed_logins",
                    measurement_date=date(2026, 3, day),
                    actual_value=value,
                    threshold_breached=ThresholdBreach.WARNING if value > 2 else ThresholdBreach.NONE,
                )
            )

        measurements = await repository.list_kri_measurements(org_id, date(2026, 3, 10))

        assert [m.actual_value for m in measurements] == [2.0, 3.0]
        assert measurements[1].threshold_breached == ThresholdBreach.WARNING
        assert await repository.list_kri_measurements(uuid4(), date(2026, 1, 1)) == []

    async def test_incidents_since_timestamp(self, repository: MetricHistoryRepository):
        """Test incidents are filtered by report time."""
        org_id = uuid4()
        await repository.add_incident(
            IncidentRecord(
                org_id=org_id,
                title="Old phishing wave",
                category="cyber",
                reported_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
            )
        )
        await repository.add_incident(
            IncidentRecord(
                org_id=org_id,
                title="Ransomware",
                category="cyber",
                severity=Severity.CRITICAL,
                reported_at=datetime(2026, 3, 1, tzinfo=timezone.utc),
            )
        )

        incidents = await repository.list_incidents(
            org_id, datetime(2026, 2, 1, tzinfo=timezone.utc)
        )

        assert [i.title for i in incidents] == ["Ransomware"]
        assert incidents[0].severity == Severity.CRITICAL
