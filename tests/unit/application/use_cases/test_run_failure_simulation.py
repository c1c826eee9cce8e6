"""Unit tests for RunFailureSimulationUseCase."""

import pytest
from uuid import uuid4
from unittest.mock import AsyncMock

from src.application.dtos.failure_scenario_dto import RunFailureSimulationRequest
from src.application.use_cases.run_failure_simulation import RunFailureSimulationUseCase
from src.domain.entities.dependency import Dependency, DependencyType
from src.domain.entities.dependency_relationship import DependencyRelationship
from src.domain.entities.failure_scenario import FailureScenario
from src.domain.entities.failure_simulation import Severity
from src.domain.services.failure_propagation_simulator import (
    DependencyNotFoundError,
    FailurePropagationSimulator,
)


class TestRunFailureSimulationUseCase:
    """Test RunFailureSimulationUseCase."""

    @pytest.fixture
    def org_id(self):
        return uuid4()

    @pytest.fixture
    def dependencies(self, org_id):
        return [
            Dependency(
                org_id=org_id,
                name=name,
                dependency_type=DependencyType.SYSTEM,
                maximum_tolerable_downtime_hours=mtd,
            )
            for name, mtd in (("Data centre", 12.0), ("Core banking", 4.0))
        ]

    @pytest.fixture
    def scenario(self, org_id, dependencies):
        return FailureScenario(
            org_id=org_id,
            name="Data centre power loss",
            trigger_dependency_id=dependencies[0].id,
            severity_level=Severity.CRITICAL,
        )

    @pytest.fixture
    def mock_scenario_repo(self, scenario):
        repo = AsyncMock()
        repo.get_by_id.return_value = scenario
        repo.save_simulation_results.side_effect = lambda s: s
        return repo

    @pytest.fixture
    def mock_dependency_repo(self, dependencies):
        repo = AsyncMock()
        repo.list_by_org.return_value = dependencies
        return repo

    @pytest.fixture
    def mock_relationship_repo(self, org_id, dependencies):
        repo = AsyncMock()
        repo.list_by_org.return_value = [
            DependencyRelationship(
                org_id=org_id,
                source_dependency_id=dependencies[0].id,
                target_dependency_id=dependencies[1].id,
                failure_propagation_likelihood=1.0,
                propagation_delay_minutes=30,
            )
        ]
        return repo

    @pytest.fixture
    def use_case(self, mock_scenario_repo, mock_dependency_repo, mock_relationship_repo):
        return RunFailureSimulationUseCase(
            scenario_repository=mock_scenario_repo,
            dependency_repository=mock_dependency_repo,
            relationship_repository=mock_relationship_repo,
            simulator=FailurePropagationSimulator(random_source=lambda: 0.0),
        )

    @pytest.mark.asyncio
    async def test_simulation_result_is_returned_and_stored(
        self, use_case, mock_scenario_repo, scenario, org_id, dependencies
    ):
        # Act
        result = await use_case.execute(
            RunFailureSimulationRequest(org_id=org_id, scenario_id=scenario.id)
        )

        # Assert
        assert result.trigger_dependency_id == str(dependencies[0].id)
        assert result.initial_severity == "critical"
        assert result.total_affected_dependencies == 2
        assert result.estimated_total_downtime_hours == 16.0
        assert [s.dependency_name for s in result.propagation_path] == [
            "Data centre",
            "Core banking",
        ]
        assert result.propagation_path[1].affected_at_minutes == 30
        assert len(result.critical_path) == 2

        mock_scenario_repo.save_simulation_results.assert_awaited_once_with(scenario)
        assert scenario.has_been_simulated
        assert scenario.simulation_results.total_affected_dependencies == 2

    @pytest.mark.asyncio
    async def test_missing_scenario_returns_none(
        self, use_case, mock_scenario_repo, mock_dependency_repo, org_id
    ):
        mock_scenario_repo.get_by_id.return_value = None

        result = await use_case.execute(
            RunFailureSimulationRequest(org_id=org_id, scenario_id=uuid4())
        )

        assert result is None
        mock_dependency_repo.list_by_org.assert_not_called()

    @pytest.mark.asyncio
    async def test_deleted_trigger_raises_and_nothing_is_stored(
        self, use_case, mock_scenario_repo, mock_dependency_repo, scenario, org_id
    ):
        mock_dependency_repo.list_by_org.return_value = []

        with pytest.raises(DependencyNotFoundError):
            await use_case.execute(
                RunFailureSimulationRequest(org_id=org_id, scenario_id=scenario.id)
            )

        mock_scenario_repo.save_simulation_results.assert_not_called()
