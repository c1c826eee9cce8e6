"""Failure scenario and simulation DTOs."""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass
class CreateFailureScenarioRequest:
    """Request to define a failure scenario.

    Attributes:
        org_id: Owning organization
        name: Scenario name
        trigger_dependency_id: Dependency that fails first
        scenario_type: operational/cyber/natural_disaster/vendor_failure/data_breach
        severity_level: low/medium/high/critical
        description: Free-text description
        estimated_duration_hours: Expected outage duration
        business_impact_description: Expected business impact
    """

    org_id: UUID
    name: str
    trigger_dependency_id: UUID
    scenario_type: str = "operational"
    severity_level: str = "medium"
    description: str | None = None
    estimated_duration_hours: float | None = None
    business_impact_description: str | None = None


@dataclass
class RunFailureSimulationRequest:
    """Request to simulate a stored scenario."""

    org_id: UUID
    scenario_id: UUID


@dataclass
class PropagationStepDTO:
    """One affected dependency on the propagation timeline."""

    dependency_id: str
    dependency_name: str
    affected_at_minutes: float
    severity: str
    estimated_downtime_hours: float


@dataclass
class SimulationResultDTO:
    """Result of a failure simulation run.

    Attributes:
        trigger_dependency_id: Dependency that failed first
        initial_severity: Severity the run started at
        propagation_path: Affected dependencies in visitation order
        total_affected_dependencies: Count of affected dependencies
        estimated_total_downtime_hours: Sum of per-dependency downtime
        critical_path: Affected dependencies still at critical severity
        recovery_sequence: Affected dependencies ordered by time of impact
        simulation_timestamp: ISO 8601 completion time
    """

    trigger_dependency_id: str
    initial_severity: str
    propagation_path: list[PropagationStepDTO] = field(default_factory=list)
    total_affected_dependencies: int = 0
    estimated_total_downtime_hours: float = 0.0
    critical_path: list[PropagationStepDTO] = field(default_factory=list)
    recovery_sequence: list[PropagationStepDTO] = field(default_factory=list)
    simulation_timestamp: str = ""


@dataclass
class FailureScenarioDTO:
    """Failure scenario in a response."""

    id: str
    name: str
    trigger_dependency_id: str
    scenario_type: str
    severity_level: str
    description: str | None
    estimated_duration_hours: float | None
    business_impact_description: str | None
    simulation_results: SimulationResultDTO | None = None
    last_simulated_at: str | None = None
