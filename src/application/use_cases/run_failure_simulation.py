"""Use case for running a failure propagation simulation.

Orchestrates the simulation workflow:
1. Load the scenario (None if missing)
2. Load the organization's full dependency graph
3. Run the FailurePropagationSimulator from the scenario trigger
4. Store the result on the scenario, replacing any previous run
5. Return the result
"""

import logging

from src.application.dtos.failure_scenario_dto import (
    RunFailureSimulationRequest,
    SimulationResultDTO,
)
from src.application.use_cases.manage_failure_scenarios import (
    simulation_result_to_dto,
)
from src.domain.repositories.dependency_repository import (
    DependencyRepositoryInterface,
)
from src.domain.repositories.failure_scenario_repository import (
    FailureScenarioRepositoryInterface,
)
from src.domain.repositories.relationship_repository import (
    RelationshipRepositoryInterface,
)
from src.domain.services.failure_propagation_simulator import (
    FailurePropagationSimulator,
)

logger = logging.getLogger(__name__)


class RunFailureSimulationUseCase:
    """Simulate a stored failure scenario against the current dependency map."""

    def __init__(
        self,
        scenario_repository: FailureScenarioRepositoryInterface,
        dependency_repository: DependencyRepositoryInterface,
        relationship_repository: RelationshipRepositoryInterface,
        simulator: FailurePropagationSimulator,
    ):
        self._scenario_repo = scenario_repository
        self._dependency_repo = dependency_repository
        self._relationship_repo = relationship_repository
        self._simulator = simulator

    async def execute(
        self, request: RunFailureSimulationRequest
    ) -> SimulationResultDTO | None:
        """Execute the simulation.

        Args:
            request: Scenario to simulate

        Returns:
            SimulationResultDTO or None if the scenario is not found

        Raises:
            SimulationValidationError: If a relationship carries invalid data
            DependencyNotFoundError: If the trigger or a reached dependency
                no longer exists (strict mode)
            GraphTooLargeError: If the run exceeds the iteration ceilings
        """
        scenario = await self._scenario_repo.get_by_id(request.org_id, request.scenario_id)
        if scenario is None:
            return None

        dependencies = await self._dependency_repo.list_by_org(request.org_id)
        relationships = await self._relationship_repo.list_by_org(request.org_id)

        result = self._simulator.simulate(
            trigger_id=scenario.trigger_dependency_id,
            relationships=relationships,
            dependencies=dependencies,
            severity=scenario.severity_level,
        )

        scenario.record_simulation(result)
        await self._scenario_repo.save_simulation_results(scenario)

        logger.info(
            f"Simulated scenario {scenario.id}: {result.total_affected_dependencies} "
            f"dependencies affected, {result.estimated_total_downtime_hours}h downtime"
        )
        return simulation_result_to_dto(result)
