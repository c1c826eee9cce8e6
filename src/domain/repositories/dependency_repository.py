"""Dependency repository interface module.

This module defines the abstract interface for Dependency entity operations.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from src.domain.entities.dependency import Dependency


class DependencyRepositoryInterface(ABC):
    """Repository interface for Dependency entity operations.

    All queries are scoped to an organization. Implementations should
    handle database-specific details while maintaining these signatures.
    """

    @abstractmethod
    async def get_by_id(self, org_id: UUID, dependency_id: UUID) -> "Dependency | None":
        """Get dependency by UUID within an organization.

        Args:
            org_id: Owning organization
            dependency_id: Internal UUID of the dependency

        Returns:
            Dependency entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_org(
        self, org_id: UUID, business_function_id: UUID | None = None
    ) -> list["Dependency"]:
        """List an organization's dependencies ordered by name.

        Args:
            org_id: Owning organization
            business_function_id: Optional business function filter

        Returns:
            List of Dependency entities
        """
        pass

    @abstractmethod
    async def create(self, dependency: "Dependency") -> "Dependency":
        """Create a new dependency.

        Args:
            dependency: Dependency entity to create

        Returns:
            Created Dependency entity with populated audit fields
        """
        pass

    @abstractmethod
    async def update(self, dependency: "Dependency") -> "Dependency":
        """Update an existing dependency.

        Args:
            dependency: Dependency entity with updated fields

        Returns:
            Updated Dependency entity

        Raises:
            ValueError: If dependency does not exist
        """
        pass
