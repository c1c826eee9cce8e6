"""Use cases for registering and maintaining dependencies.

Dependencies are the nodes of an organization's operational dependency map.
"""

import logging
from uuid import UUID

from src.application.dtos.dependency_dto import (
    DependencyDTO,
    RegisterDependencyRequest,
    UpdateDependencyRequest,
)
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

logger = logging.getLogger(__name__)


def dependency_to_dto(dependency: Dependency) -> DependencyDTO:
    """Convert a Dependency entity to its response DTO."""
    return DependencyDTO(
        id=str(dependency.id),
        org_id=str(dependency.org_id),
        name=dependency.name,
        dependency_type=dependency.dependency_type.value,
        criticality=dependency.criticality.value,
        status=dependency.status.value,
        business_function_id=(
            str(dependency.business_function_id)
            if dependency.business_function_id
            else None
        ),
        maximum_tolerable_downtime_hours=dependency.maximum_tolerable_downtime_hours,
        recovery_time_objective_hours=dependency.recovery_time_objective_hours,
        redundancy_level=dependency.redundancy_level.value,
        monitoring_status=dependency.monitoring_status.value,
        description=dependency.description,
        geographic_location=dependency.geographic_location,
        sla_requirements=dependency.sla_requirements,
        is_single_point_of_failure=dependency.is_single_point_of_failure,
    )


class RegisterDependencyUseCase:
    """Register a new dependency for an organization."""

    def __init__(self, dependency_repository: DependencyRepositoryInterface):
        self._dependency_repo = dependency_repository

    async def execute(self, request: RegisterDependencyRequest) -> DependencyDTO:
        """Create the dependency.

        Args:
            request: Registration request

        Returns:
            The created dependency

        Raises:
            ValueError: If an enum value is unknown or an invariant is violated
        """
        dependency = Dependency(
            org_id=request.org_id,
            name=request.name,
            dependency_type=DependencyType(request.dependency_type),
            criticality=Criticality(request.criticality),
            business_function_id=request.business_function_id,
            maximum_tolerable_downtime_hours=request.maximum_tolerable_downtime_hours,
            recovery_time_objective_hours=request.recovery_time_objective_hours,
            redundancy_level=RedundancyLevel(request.redundancy_level),
            monitoring_status=MonitoringStatus(request.monitoring_status),
            description=request.description,
            geographic_location=request.geographic_location,
            sla_requirements=request.sla_requirements,
        )

        created = await self._dependency_repo.create(dependency)
        logger.info(f"Registered dependency {created.id} ({created.name}) for org {created.org_id}")
        return dependency_to_dto(created)


class GetDependencyUseCase:
    """Fetch a single dependency."""

    def __init__(self, dependency_repository: DependencyRepositoryInterface):
        self._dependency_repo = dependency_repository

    async def execute(self, org_id: UUID, dependency_id: UUID) -> DependencyDTO | None:
        dependency = await self._dependency_repo.get_by_id(org_id, dependency_id)
        if dependency is None:
            return None
        return dependency_to_dto(dependency)


class UpdateDependencyUseCase:
    """Update a dependency's status and resilience attributes."""

    def __init__(self, dependency_repository: DependencyRepositoryInterface):
        self._dependency_repo = dependency_repository

    async def execute(self, request: UpdateDependencyRequest) -> DependencyDTO | None:
        """Apply the update.

        Args:
            request: Update request; None fields are left unchanged

        Returns:
            The updated dependency, or None if it does not exist

        Raises:
            ValueError: If an enum value is unknown or an invariant is violated
        """
        dependency = await self._dependency_repo.get_by_id(
            request.org_id, request.dependency_id
        )
        if dependency is None:
            return None

        dependency.update_resilience(
            status=DependencyStatus(request.status) if request.status else None,
            maximum_tolerable_downtime_hours=request.maximum_tolerable_downtime_hours,
            recovery_time_objective_hours=request.recovery_time_objective_hours,
            redundancy_level=(
                RedundancyLevel(request.redundancy_level)
                if request.redundancy_level
                else None
            ),
            monitoring_status=(
                MonitoringStatus(request.monitoring_status)
                if request.monitoring_status
                else None
            ),
        )

        updated = await self._dependency_repo.update(dependency)
        return dependency_to_dto(updated)


class ListDependenciesUseCase:
    """List an organization's dependencies."""

    def __init__(self, dependency_repository: DependencyRepositoryInterface):
        self._dependency_repo = dependency_repository

    async def execute(
        self, org_id: UUID, business_function_id: UUID | None = None
    ) -> list[DependencyDTO]:
        dependencies = await self._dependency_repo.list_by_org(
            org_id, business_function_id=business_function_id
        )
        return [dependency_to_dto(d) for d in dependencies]
