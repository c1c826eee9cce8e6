"""Use cases for defining and reading failure scenarios."""

import logging
from uuid import UUID

from src.application.dtos.failure_scenario_dto import (
    CreateFailureScenarioRequest,
    FailureScenarioDTO,
    PropagationStepDTO,
    SimulationResultDTO,
)
from src.domain.entities.failure_scenario import FailureScenario, ScenarioType
from src.domain.entities.failure_simulation import (
    PropagationRecord,
    Severity,
    SimulationResult,
)
from src.domain.repositories.dependency_repository import (
    DependencyRepositoryInterface,
)
from src.domain.repositories.failure_scenario_repository import (
    FailureScenarioRepositoryInterface,
)

logger = logging.getLogger(__name__)


class CreateFailureScenarioUseCase:
    """Define a what-if failure scenario for an organization."""

    def __init__(
        self,
        scenario_repository: FailureScenarioRepositoryInterface,
        dependency_repository: DependencyRepositoryInterface,
    ):
        self._scenario_repo = scenario_repository
        self._dependency_repo = dependency_repository

    async def execute(self, request: CreateFailureScenarioRequest) -> FailureScenarioDTO:
        """Create the scenario.

        Args:
            request: Scenario definition

        Returns:
            The created scenario (not yet simulated)

        Raises:
            ValueError: If the trigger dependency is not in the organization,
                or a field is invalid
        """
        trigger = await self._dependency_repo.get_by_id(
            request.org_id, request.trigger_dependency_id
        )
        if trigger is None:
            raise ValueError(
                f"Trigger dependency {request.trigger_dependency_id} not found "
                f"in organization {request.org_id}"
            )

        scenario = FailureScenario(
            org_id=request.org_id,
            name=request.name,
            trigger_dependency_id=request.trigger_dependency_id,
            scenario_type=ScenarioType(request.scenario_type),
            severity_level=Severity(request.severity_level),
            description=request.description,
            estimated_duration_hours=request.estimated_duration_hours,
            business_impact_description=request.business_impact_description,
        )

        created = await self._scenario_repo.create(scenario)
        logger.info(f"Created failure scenario {created.id} triggered by {trigger.name}")
        return scenario_to_dto(created)


class GetFailureScenarioUseCase:
    """Fetch a scenario together with its most recent simulation result."""

    def __init__(self, scenario_repository: FailureScenarioRepositoryInterface):
        self._scenario_repo = scenario_repository

    async def execute(self, org_id: UUID, scenario_id: UUID) -> FailureScenarioDTO | None:
        scenario = await self._scenario_repo.get_by_id(org_id, scenario_id)
        if scenario is None:
            return None
        return scenario_to_dto(scenario)


class ListFailureScenariosUseCase:
    """List an organization's failure scenarios."""

    def __init__(self, scenario_repository: FailureScenarioRepositoryInterface):
        self._scenario_repo = scenario_repository

    async def execute(self, org_id: UUID) -> list[FailureScenarioDTO]:
        scenarios = await self._scenario_repo.list_by_org(org_id)
        return [scenario_to_dto(s) for s in scenarios]


def _step_to_dto(record: PropagationRecord) -> PropagationStepDTO:
    return PropagationStepDTO(
        dependency_id=str(record.dependency_id),
        dependency_name=record.dependency_name,
        affected_at_minutes=record.affected_at_minutes,
        severity=record.severity.value,
        estimated_downtime_hours=record.estimated_downtime_hours,
    )


def simulation_result_to_dto(result: SimulationResult) -> SimulationResultDTO:
    """Convert a SimulationResult to its response DTO."""
    return SimulationResultDTO(
        trigger_dependency_id=str(result.trigger_dependency_id),
        initial_severity=result.initial_severity.value,
        propagation_path=[_step_to_dto(r) for r in result.propagation_path],
        total_affected_dependencies=result.total_affected_dependencies,
        estimated_total_downtime_hours=result.estimated_total_downtime_hours,
        critical_path=[_step_to_dto(r) for r in result.critical_path],
        recovery_sequence=[_step_to_dto(r) for r in result.recovery_sequence],
        simulation_timestamp=result.simulation_timestamp.isoformat(),
    )


def scenario_to_dto(scenario: FailureScenario) -> FailureScenarioDTO:
    """Convert a FailureScenario entity to its response DTO."""
    return FailureScenarioDTO(
        id=str(scenario.id),
        name=scenario.name,
        trigger_dependency_id=str(scenario.trigger_dependency_id),
        scenario_type=scenario.scenario_type.value,
        severity_level=scenario.severity_level.value,
        description=scenario.description,
        estimated_duration_hours=scenario.estimated_duration_hours,
        business_impact_description=scenario.business_impact_description,
        simulation_results=(
            simulation_result_to_dto(scenario.simulation_results)
            if scenario.simulation_results
            else None
        ),
        last_simulated_at=(
            scenario.last_simulated_at.isoformat() if scenario.last_simulated_at else None
        ),
    )
