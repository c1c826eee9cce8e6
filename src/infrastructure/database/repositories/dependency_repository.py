"""Dependency repository implementation using PostgreSQL.

This module implements the DependencyRepositoryInterface using SQLAlchemy
and AsyncPG for PostgreSQL database operations.
"""

from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.dependency import (
    Criticality,
    Dependency,
    DependencyStatus,
    DependencyType,
    MonitoringStatus,
    RedundancyLevel,
)
from src.domain.repositories.dependency_repository import (
    DependencyRepositoryInterface,
)
from src.infrastructure.database.models import DependencyModel


class DependencyRepository(DependencyRepositoryInterface):
    """PostgreSQL implementation of DependencyRepositoryInterface.

    This repository handles mapping between domain Dependency entities
    and DependencyModel SQLAlchemy models.
    """

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session
        """
        self._session = session

    async def get_by_id(self, org_id: UUID, dependency_id: UUID) -> Dependency | None:
        stmt = select(DependencyModel).where(
            DependencyModel.org_id == org_id,
            DependencyModel.id == dependency_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        return self._to_entity(model) if model else None

    async def list_by_org(
        self, org_id: UUID, business_function_id: UUID | None = None
    ) -> list[Dependency]:
        stmt = select(DependencyModel).where(DependencyModel.org_id == org_id)
        if business_function_id is not None:
            stmt = stmt.where(DependencyModel.business_function_id == business_function_id)
        stmt = stmt.order_by(DependencyModel.name)

        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def create(self, dependency: Dependency) -> Dependency:
        model = self._to_model(dependency)
        self._session.add(model)
        await self._session.flush()  # Flush to surface constraint violations
        await self._session.refresh(model)

        return self._to_entity(model)

    async def update(self, dependency: Dependency) -> Dependency:
        """Update existing dependency.

        Raises:
            ValueError: If dependency does not exist
        """
        existing = await self.get_by_id(dependency.org_id, dependency.id)
        if not existing:
            raise ValueError(f"Dependency with id '{dependency.id}' does not exist")

        stmt = (
            update(DependencyModel)
            .where(DependencyModel.id == dependency.id)
            .values(
                name=dependency.name,
                dependency_type=dependency.dependency_type.value,
                criticality=dependency.criticality.value,
                business_function_id=dependency.business_function_id,
                status=dependency.status.value,
                maximum_tolerable_downtime_hours=dependency.maximum_tolerable_downtime_hours,
                recovery_time_objective_hours=dependency.recovery_time_objective_hours,
                redundancy_level=dependency.redundancy_level.value,
                monitoring_status=dependency.monitoring_status.value,
                description=dependency.description,
                geographic_location=dependency.geographic_location,
                sla_requirements=dependency.sla_requirements,
                updated_at=dependency.updated_at,
            )
            .returning(DependencyModel)
        )

        result = await self._session.execute(stmt)
        return self._to_entity(result.scalar_one())

    def _to_entity(self, model: DependencyModel) -> Dependency:
        """Convert SQLAlchemy model to domain entity."""
        return Dependency(
            id=model.id,
            org_id=model.org_id,
            name=model.name,
            dependency_type=DependencyType(model.dependency_type),
            criticality=Criticality(model.criticality),
            business_function_id=model.business_function_id,
            status=DependencyStatus(model.status),
            maximum_tolerable_downtime_hours=model.maximum_tolerable_downtime_hours,
            recovery_time_objective_hours=model.recovery_time_objective_hours,
            redundancy_level=RedundancyLevel(model.redundancy_level),
            monitoring_status=MonitoringStatus(model.monitoring_status),
            description=model.description,
            geographic_location=model.geographic_location,
            sla_requirements=model.sla_requirements,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Dependency) -> DependencyModel:
        """Convert domain entity to SQLAlchemy model."""
        return DependencyModel(
            id=entity.id,
            org_id=entity.org_id,
            name=entity.name,
            dependency_type=entity.dependency_type.value,
            criticality=entity.criticality.value,
            business_function_id=entity.business_function_id,
            status=entity.status.value,
            maximum_tolerable_downtime_hours=entity.maximum_tolerable_downtime_hours,
            recovery_time_objective_hours=entity.recovery_time_objective_hours,
            redundancy_level=entity.redundancy_level.value,
            monitoring_status=entity.monitoring_status.value,
            description=entity.description,
            geographic_location=entity.geographic_location,
            sla_requirements=entity.sla_requirements,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
