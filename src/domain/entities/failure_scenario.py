"""FailureScenario entity module.

This module defines the FailureScenario entity: a named what-if case whose
most recent simulation run is cached on the scenario itself.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4

from src.domain.entities.failure_simulation import Severity, SimulationResult


class ScenarioType(str, Enum):
    """Category of failure scenario."""

    OPERATIONAL = "operational"
    CYBER = "cyber"
    NATURAL_DISASTER = "natural_disaster"
    VENDOR_FAILURE = "vendor_failure"
    DATA_BREACH = "data_breach"


@dataclass
class FailureScenario:
    """A named what-if case triggered by the failure of one dependency.

    Domain invariants:
    - name must be non-empty
    - estimated_duration_hours must be positive when set

    Attributes:
        org_id: Owning organization
        name: Scenario name
        trigger_dependency_id: Dependency that fails first
        scenario_type: Scenario category
        severity_level: Severity at the trigger
        description: Free-text description
        estimated_duration_hours: Expected outage duration
        business_impact_description: Expected business impact
        simulation_results: Most recent simulation run (overwritten on re-run)
        last_simulated_at: When the most recent run completed
        id: Internal UUID identifier
        created_at: Timestamp when scenario was created
        updated_at: Timestamp when scenario was last updated
    """

    org_id: UUID
    name: str
    trigger_dependency_id: UUID
    scenario_type: ScenarioType = ScenarioType.OPERATIONAL
    severity_level: Severity = Severity.MEDIUM
    description: str | None = None
    estimated_duration_hours: float | None = None
    business_impact_description: str | None = None
    simulation_results: SimulationResult | None = None
    last_simulated_at: datetime | None = None

    # Audit fields
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        """Validate domain invariants after initialization."""
        if not self.name or not self.name.strip():
            raise ValueError("name cannot be empty")
        if self.estimated_duration_hours is not None and self.estimated_duration_hours <= 0:
            raise ValueError(
                f"estimated_duration_hours must be positive, "
                f"got: {self.estimated_duration_hours}"
            )

    def record_simulation(self, result: SimulationResult) -> None:
        """Replace the cached simulation result with a new run.

        Args:
            result: Result of the run that just completed

        Raises:
            ValueError: If the result was produced for a different trigger
        """
        if result.trigger_dependency_id != self.trigger_dependency_id:
            raise ValueError(
                "Simulation result trigger does not match scenario trigger"
            )
        self.simulation_results = result
        self.last_simulated_at = result.simulation_timestamp
        self.updated_at = datetime.now(timezone.utc)

    @property
    def has_been_simulated(self) -> bool:
        return self.simulation_results is not None
