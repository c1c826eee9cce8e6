"""Use cases for mapping relationships between dependencies.

Relationships are the directed edges failures propagate along.
"""

import logging
from uuid import UUID

from src.application.dtos.dependency_dto import (
    CreateRelationshipRequest,
    RelationshipDTO,
)
from src.domain.entities.dependency_relationship import (
    DependencyRelationship,
    RelationshipStrength,
    RelationshipType,
)
from src.domain.repositories.dependency_repository import (
    DependencyRepositoryInterface,
)
from src.domain.repositories.relationship_repository import (
    RelationshipRepositoryInterface,
)

logger = logging.getLogger(__name__)


class CreateRelationshipUseCase:
    """Map a directed relationship between two dependencies of an organization."""

    def __init__(
        self,
        dependency_repository: DependencyRepositoryInterface,
        relationship_repository: RelationshipRepositoryInterface,
    ):
        self._dependency_repo = dependency_repository
        self._relationship_repo = relationship_repository

    async def execute(self, request: CreateRelationshipRequest) -> RelationshipDTO:
        """Create the relationship.

        Args:
            request: Relationship to map

        Returns:
            The created relationship

        Raises:
            ValueError: If either endpoint is not a dependency of the
                organization, or the edge violates an invariant
        """
        for dependency_id in (request.source_dependency_id, request.target_dependency_id):
            if await self._dependency_repo.get_by_id(request.org_id, dependency_id) is None:
                raise ValueError(
                    f"Dependency {dependency_id} not found in organization {request.org_id}"
                )

        relationship = DependencyRelationship(
            org_id=request.org_id,
            source_dependency_id=request.source_dependency_id,
            target_dependency_id=request.target_dependency_id,
            relationship_type=RelationshipType(request.relationship_type),
            relationship_strength=RelationshipStrength(request.relationship_strength),
            failure_propagation_likelihood=request.failure_propagation_likelihood,
            propagation_delay_minutes=request.propagation_delay_minutes,
            description=request.description,
        )

        created = await self._relationship_repo.create(relationship)
        logger.info(
            f"Mapped relationship {created.source_dependency_id} -> "
            f"{created.target_dependency_id} ({created.relationship_type.value})"
        )
        return relationship_to_dto(created)


class ListRelationshipsUseCase:
    """List every relationship in an organization's dependency map."""

    def __init__(self, relationship_repository: RelationshipRepositoryInterface):
        self._relationship_repo = relationship_repository

    async def execute(self, org_id: UUID) -> list[RelationshipDTO]:
        relationships = await self._relationship_repo.list_by_org(org_id)
        return [relationship_to_dto(r) for r in relationships]


class DeleteRelationshipUseCase:
    """Remove a relationship from the dependency map."""

    def __init__(self, relationship_repository: RelationshipRepositoryInterface):
        self._relationship_repo = relationship_repository

    async def execute(self, org_id: UUID, relationship_id: UUID) -> bool:
        """Delete the relationship.

        Returns:
            True if deleted, False if it did not exist
        """
        deleted = await self._relationship_repo.delete(org_id, relationship_id)
        if deleted:
            logger.info(f"Deleted relationship {relationship_id}")
        return deleted


def relationship_to_dto(relationship: DependencyRelationship) -> RelationshipDTO:
    """Convert a DependencyRelationship entity to its response DTO."""
    return RelationshipDTO(
        id=str(relationship.id),
        source_dependency_id=str(relationship.source_dependency_id),
        target_dependency_id=str(relationship.target_dependency_id),
        relationship_type=relationship.relationship_type.value,
        relationship_strength=relationship.relationship_strength.value,
        failure_propagation_likelihood=relationship.failure_propagation_likelihood,
        propagation_delay_minutes=relationship.propagation_delay_minutes,
        description=relationship.description,
    )
