"""Dependency risk repository implementation using PostgreSQL."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.dependency_risk import DependencyRisk, RiskCategory
from src.domain.repositories.dependency_risk_repository import (
    DependencyRiskRepositoryInterface,
)
from src.infrastructure.database.models import DependencyRiskModel


class DependencyRiskRepository(DependencyRiskRepositoryInterface):
    """PostgreSQL implementation of DependencyRiskRepositoryInterface."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_by_org(
        self, org_id: UUID, dependency_id: UUID | None = None
    ) -> list[DependencyRisk]:
        stmt = select(DependencyRiskModel).where(DependencyRiskModel.org_id == org_id)
        if dependency_id is not None:
            stmt = stmt.where(DependencyRiskModel.dependency_id == dependency_id)
        stmt = stmt.order_by(
            (DependencyRiskModel.likelihood_score * DependencyRiskModel.impact_score).desc(),
            DependencyRiskModel.last_assessment_date.desc(),
        )

        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def create(self, risk: DependencyRisk) -> DependencyRisk:
        model = self._to_model(risk)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)

        return self._to_entity(model)

    def _to_entity(self, model: DependencyRiskModel) -> DependencyRisk:
        """Convert SQLAlchemy model to domain entity."""
        return DependencyRisk(
            id=model.id,
            org_id=model.org_id,
            dependency_id=model.dependency_id,
            risk_category=RiskCategory(model.risk_category),
            likelihood_score=model.likelihood_score,
            impact_score=model.impact_score,
            mitigation_strategy=model.mitigation_strategy,
            contingency_plan=model.contingency_plan,
            assessor_name=model.assessor_name,
            last_assessment_date=model.last_assessment_date,
            next_assessment_date=model.next_assessment_date,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: DependencyRisk) -> DependencyRiskModel:
        """Convert domain entity to SQLAlchemy model."""
        return DependencyRiskModel(
            id=entity.id,
            org_id=entity.org_id,
            dependency_id=entity.dependency_id,
            risk_category=entity.risk_category.value,
            likelihood_score=entity.likelihood_score,
            impact_score=entity.impact_score,
            mitigation_strategy=entity.mitigation_strategy,
            contingency_plan=entity.contingency_plan,
            assessor_name=entity.assessor_name,
            last_assessment_date=entity.last_assessment_date,
            next_assessment_date=entity.next_assessment_date,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
