"""Dependency relationship repository interface module.

This module defines the abstract interface for DependencyRelationship operations.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from src.domain.entities.dependency_relationship import DependencyRelationship


class RelationshipRepositoryInterface(ABC):
    """Repository interface for the edges of the dependency graph."""

    @abstractmethod
    async def get_by_id(
        self, org_id: UUID, relationship_id: UUID
    ) -> "DependencyRelationship | None":
        """Get relationship by UUID within an organization."""
        pass

    @abstractmethod
    async def list_by_org(self, org_id: UUID) -> list["DependencyRelationship"]:
        """List every relationship of an organization's dependency map.

        Args:
            org_id: Owning organization

        Returns:
            List of DependencyRelationship entities, newest first
        """
        pass

    @abstractmethod
    async def create(
        self, relationship: "DependencyRelationship"
    ) -> "DependencyRelationship":
        """Create a new relationship.

        The same (source, target, relationship_type) edge may exist only once;
        implementations surface a duplicate as their storage integrity error.
        """
        pass

    @abstractmethod
    async def delete(self, org_id: UUID, relationship_id: UUID) -> bool:
        """Delete a relationship.

        Returns:
            True if a relationship was deleted, False if none existed
        """
        pass
