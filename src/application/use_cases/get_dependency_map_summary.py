"""Use case for the dependency map summary."""

from uuid import UUID

from src.application.dtos.dependency_risk_dto import DependencyMapSummaryDTO
from src.domain.repositories.dependency_repository import (
    DependencyRepositoryInterface,
)
from src.domain.repositories.dependency_risk_repository import (
    DependencyRiskRepositoryInterface,
)
from src.domain.repositories.failure_scenario_repository import (
    FailureScenarioRepositoryInterface,
)
from src.domain.repositories.relationship_repository import (
    RelationshipRepositoryInterface,
)
from src.domain.services.dependency_map_summary_service import (
    DependencyMapSummaryService,
)


class GetDependencyMapSummaryUseCase:
    """Headline counts over an organization's dependency map."""

    def __init__(
        self,
        dependency_repository: DependencyRepositoryInterface,
        relationship_repository: RelationshipRepositoryInterface,
        risk_repository: DependencyRiskRepositoryInterface,
        scenario_repository: FailureScenarioRepositoryInterface,
        summary_service: DependencyMapSummaryService,
    ):
        self._dependency_repo = dependency_repository
        self._relationship_repo = relationship_repository
        self._risk_repo = risk_repository
        self._scenario_repo = scenario_repository
        self._summary_service = summary_service

    async def execute(self, org_id: UUID) -> DependencyMapSummaryDTO:
        summary = self._summary_service.summarize(
            dependencies=await self._dependency_repo.list_by_org(org_id),
            relationships=await self._relationship_repo.list_by_org(org_id),
            risks=await self._risk_repo.list_by_org(org_id),
            scenarios=await self._scenario_repo.list_by_org(org_id),
        )

        return DependencyMapSummaryDTO(
            org_id=str(org_id),
            total_dependencies=summary.total_dependencies,
            critical_dependencies=summary.critical_dependencies,
            high_risk_dependencies=summary.high_risk_dependencies,
            total_relationships=summary.total_relationships,
            critical_connections=summary.critical_connections,
            total_scenarios=summary.total_scenarios,
            single_points_of_failure=[str(i) for i in summary.single_points_of_failure],
        )
