"""Unit tests for GetDependencyMapSummaryUseCase."""

import pytest
from uuid import uuid4
from unittest.mock import AsyncMock

from src.application.use_cases.get_dependency_map_summary import (
    GetDependencyMapSummaryUseCase,
)
from src.domain.entities.dependency import Criticality, Dependency, DependencyType
from src.domain.services.dependency_map_summary_service import (
    DependencyMapSummaryService,
)


class TestGetDependencyMapSummaryUseCase:
    """Test GetDependencyMapSummaryUseCase."""

    @pytest.mark.asyncio
    async def test_summary_for_org(self):
        # Arrange
        org_id = uuid4()
        spof = Dependency(
            org_id=org_id,
            name="Mainframe",
            dependency_type=DependencyType.SYSTEM,
            criticality=Criticality.CRITICAL,
        )
        dependency_repo = AsyncMock()
        dependency_repo.list_by_org.return_value = [spof]
        empty_repo = AsyncMock()
        empty_repo.list_by_org.return_value = []

        use_case = GetDependencyMapSummaryUseCase(
            dependency_repository=dependency_repo,
            relationship_repository=empty_repo,
            risk_repository=empty_repo,
            scenario_repository=empty_repo,
            summary_service=DependencyMapSummaryService(),
        )

        # Act
        result = await use_case.execute(org_id)

        # Assert
        assert result.org_id == str(org_id)
        assert result.total_dependencies == 1
        assert result.critical_dependencies == 1
        assert result.single_points_of_failure == [str(spof.id)]
        dependency_repo.list_by_org.assert_awaited_once_with(org_id)
