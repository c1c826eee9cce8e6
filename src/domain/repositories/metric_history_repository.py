"""Historical metric repository interface module.

This module defines the abstract interface for the KRI measurement and
incident history consumed by predictive analytics.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from src.domain.entities.metric_history import IncidentRecord, KriMeasurement


class MetricHistoryRepositoryInterface(ABC):
    """Repository interface for historical risk metrics."""

    @abstractmethod
    async def list_kri_measurements(
        self, org_id: UUID, since: date
    ) -> list["KriMeasurement"]:
        """List KRI measurements taken on or after a date.

        Args:
            org_id: Owning organization
            since: Earliest measurement date to include

        Returns:
            List of KriMeasurement entities ordered by measurement_date ascending
        """
        pass

    @abstractmethod
    async def list_incidents(
        self, org_id: UUID, since: datetime
    ) -> list["IncidentRecord"]:
        """List incidents reported at or after a timestamp.

        Args:
            org_id: Owning organization
            since: Earliest report time to include

        Returns:
            List of IncidentRecord entities ordered by reported_at ascending
        """
        pass

    @abstractmethod
    async def add_kri_measurement(self, measurement: "KriMeasurement") -> "KriMeasurement":
        """Append a KRI measurement."""
        pass

    @abstractmethod
    async def add_incident(self, incident: "IncidentRecord") -> "IncidentRecord":
        """Append an incident record."""
        pass
