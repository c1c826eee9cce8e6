"""Dependency relationship repository implementation using PostgreSQL."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.dependency_relationship import (
    DependencyRelationship,
    RelationshipStrength,
    RelationshipType,
)
from src.domain.repositories.relationship_repository import (
    RelationshipRepositoryInterface,
)
from src.infrastructure.database.models import DependencyRelationshipModel


class RelationshipRepository(RelationshipRepositoryInterface):
    """PostgreSQL implementation of RelationshipRepositoryInterface.

    Duplicate (source, target, relationship_type) edges raise
    sqlalchemy.exc.IntegrityError on flush.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(
        self, org_id: UUID, relationship_id: UUID
    ) -> DependencyRelationship | None:
        stmt = select(DependencyRelationshipModel).where(
            DependencyRelationshipModel.org_id == org_id,
            DependencyRelationshipModel.id == relationship_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        return self._to_entity(model) if model else None

    async def list_by_org(self, org_id: UUID) -> list[DependencyRelationship]:
        stmt = (
            select(DependencyRelationshipModel)
            .where(DependencyRelationshipModel.org_id == org_id)
            .order_by(DependencyRelationshipModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def create(self, relationship: DependencyRelationship) -> DependencyRelationship:
        model = self._to_model(relationship)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)

        return self._to_entity(model)

    async def delete(self, org_id: UUID, relationship_id: UUID) -> bool:
        stmt = (
            delete(DependencyRelationshipModel)
            .where(
                DependencyRelationshipModel.org_id == org_id,
                DependencyRelationshipModel.id == relationship_id,
            )
            .returning(DependencyRelationshipModel.id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    def _to_entity(self, model: DependencyRelationshipModel) -> DependencyRelationship:
        """Convert SQLAlchemy model to domain entity."""
        return DependencyRelationship(
            id=model.id,
            org_id=model.org_id,
            source_dependency_id=model.source_dependency_id,
            target_dependency_id=model.target_dependency_id,
            relationship_type=RelationshipType(model.relationship_type),
            relationship_strength=RelationshipStrength(model.relationship_strength),
            failure_propagation_likelihood=model.failure_propagation_likelihood,
            propagation_delay_minutes=model.propagation_delay_minutes,
            description=model.description,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: DependencyRelationship) -> DependencyRelationshipModel:
        """Convert domain entity to SQLAlchemy model."""
        return DependencyRelationshipModel(
            id=entity.id,
            org_id=entity.org_id,
            source_dependency_id=entity.source_dependency_id,
            target_dependency_id=entity.target_dependency_id,
            relationship_type=entity.relationship_type.value,
            relationship_strength=entity.relationship_strength.value,
            failure_propagation_likelihood=entity.failure_propagation_likelihood,
            propagation_delay_minutes=entity.propagation_delay_minutes,
            description=entity.description,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
