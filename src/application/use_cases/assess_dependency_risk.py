"""Use cases for dependency risk assessments."""

import logging
from datetime import datetime, timezone
from uuid import UUID

from src.application.dtos.dependency_risk_dto import (
    AssessDependencyRiskRequest,
    DependencyRiskDTO,
)
from src.domain.entities.dependency_risk import DependencyRisk, RiskCategory
from src.domain.repositories.dependency_repository import (
    DependencyRepositoryInterface,
)
from src.domain.repositories.dependency_risk_repository import (
    DependencyRiskRepositoryInterface,
)

logger = logging.getLogger(__name__)


class AssessDependencyRiskUseCase:
    """Record a likelihood x impact risk assessment for a dependency."""

    def __init__(
        self,
        risk_repository: DependencyRiskRepositoryInterface,
        dependency_repository: DependencyRepositoryInterface,
    ):
        self._risk_repo = risk_repository
        self._dependency_repo = dependency_repository

    async def execute(self, request: AssessDependencyRiskRequest) -> DependencyRiskDTO:
        """Record the assessment.

        Raises:
            ValueError: If the dependency is not in the organization or a
                score is outside 1-5
        """
        dependency = await self._dependency_repo.get_by_id(
            request.org_id, request.dependency_id
        )
        if dependency is None:
            raise ValueError(
                f"Dependency {request.dependency_id} not found in organization {request.org_id}"
            )

        risk = DependencyRisk(
            org_id=request.org_id,
            dependency_id=request.dependency_id,
            risk_category=RiskCategory(request.risk_category),
            likelihood_score=request.likelihood_score,
            impact_score=request.impact_score,
            mitigation_strategy=request.mitigation_strategy,
            contingency_plan=request.contingency_plan,
            assessor_name=request.assessor_name,
            last_assessment_date=(
                request.last_assessment_date or datetime.now(timezone.utc).date()
            ),
            next_assessment_date=request.next_assessment_date,
        )

        created = await self._risk_repo.create(risk)
        logger.info(
            f"Assessed {created.risk_category.value} risk for {dependency.name}: "
            f"{created.risk_rating.value} ({created.risk_score})"
        )
        return risk_to_dto(created)


class ListDependencyRisksUseCase:
    """List risk assessments, highest score first."""

    def __init__(self, risk_repository: DependencyRiskRepositoryInterface):
        self._risk_repo = risk_repository

    async def execute(
        self, org_id: UUID, dependency_id: UUID | None = None
    ) -> list[DependencyRiskDTO]:
        risks = await self._risk_repo.list_by_org(org_id, dependency_id=dependency_id)
        return [risk_to_dto(r) for r in risks]


def risk_to_dto(risk: DependencyRisk) -> DependencyRiskDTO:
    """Convert a DependencyRisk entity to its response DTO."""
    return DependencyRiskDTO(
        id=str(risk.id),
        dependency_id=str(risk.dependency_id),
        risk_category=risk.risk_category.value,
        likelihood_score=risk.likelihood_score,
        impact_score=risk.impact_score,
        risk_score=risk.risk_score,
        risk_rating=risk.risk_rating.value,
        mitigation_strategy=risk.mitigation_strategy,
        contingency_plan=risk.contingency_plan,
        assessor_name=risk.assessor_name,
        last_assessment_date=risk.last_assessment_date.isoformat(),
        next_assessment_date=(
            risk.next_assessment_date.isoformat() if risk.next_assessment_date else None
        ),
    )
