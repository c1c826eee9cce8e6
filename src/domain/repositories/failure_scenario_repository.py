"""Failure scenario repository interface module.

This module defines the abstract interface for FailureScenario operations.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from src.domain.entities.failure_scenario import FailureScenario


class FailureScenarioRepositoryInterface(ABC):
    """Repository interface for FailureScenario persistence."""

    @abstractmethod
    async def get_by_id(self, org_id: UUID, scenario_id: UUID) -> "FailureScenario | None":
        """Get scenario by UUID within an organization.

        Args:
            org_id: Owning organization
            scenario_id: Internal UUID of the scenario

        Returns:
            FailureScenario entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_org(self, org_id: UUID) -> list["FailureScenario"]:
        """List an organization's scenarios, newest first."""
        pass

    @abstractmethod
    async def create(self, scenario: "FailureScenario") -> "FailureScenario":
        """Create a new scenario."""
        pass

    @abstractmethod
    async def save_simulation_results(
        self, scenario: "FailureScenario"
    ) -> "FailureScenario":
        """Persist the scenario's simulation_results and last_simulated_at.

        The previous results are overwritten.

        Args:
            scenario: Scenario carrying the new simulation result

        Returns:
            Updated FailureScenario entity

        Raises:
            ValueError: If scenario does not exist
        """
        pass
