"""Dependency risk repository interface module."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from src.domain.entities.dependency_risk import DependencyRisk


class DependencyRiskRepositoryInterface(ABC):
    """Repository interface for dependency risk assessments."""

    @abstractmethod
    async def list_by_org(
        self, org_id: UUID, dependency_id: UUID | None = None
    ) -> list["DependencyRisk"]:
        """List risk assessments, optionally for a single dependency.

        Args:
            org_id: Owning organization
            dependency_id: Optional dependency filter

        Returns:
            List of DependencyRisk entities, highest risk score first
        """
        pass

    @abstractmethod
    async def create(self, risk: "DependencyRisk") -> "DependencyRisk":
        """Record a new risk assessment."""
        pass
