"""Integration tests for DependencyRepository.

This module tests the DependencyRepository implementation against
a real PostgreSQL database.
"""

from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.dependency import (
    Criticality,
    Dependency,
    DependencyStatus,
    DependencyType,
    RedundancyLevel,
)
from src.infrastructure.database.repositories.dependency_repository import (
    DependencyRepository,
)


@pytest.mark.integration
class TestDependencyRepository:
    """Integration tests for DependencyRepository."""

    @pytest.fixture
    def repository(self, db_session: AsyncSession) -> DependencyRepository:
        """Create DependencyRepository instance for testing.

        Args:
            db_session: Database session fixture

        Returns:
            DependencyRepository instance
        """
        return DependencyRepository(db_session)

    async def test_create_and_get_dependency(self, repository: DependencyRepository):
        """Test creating a dependency and reading it back."""
        org_id = uuid4()
        dependency = Dependency(
            org_id=org_id,
            name="Payments gateway",
            dependency_type=DependencyType.VENDOR,
            criticality=Criticality.CRITICAL,
            maximum_tolerable_downtime_hours=4.0,
            recovery_time_objective_hours=2.0,
            sla_requirements="99.95% monthly",
        )

        created = await repository.create(dependency)
        fetched = await repository.get_by_id(org_id, created.id)

        assert fetched is not None
        assert fetched.name == "Payments gateway"
        assert fetched.dependency_type == DependencyType.VENDOR
        assert fetched.criticality == Criticality.CRITICAL
        assert fetched.maximum_tolerable_downtime_hours == 4.0
        assert fetched.recovery_time_objective_hours == 2.0
        assert fetched.status == DependencyStatus.OPERATIONAL
        assert fetched.is_single_point_of_failure is True

    async def test_get_by_id_is_scoped_to_org(self, repository: DependencyRepository):
        """Test a dependency is invisible to other organizations."""
        created = await repository.create(
            Dependency(org_id=uuid4(), name="HR system", dependency_type=DependencyType.SYSTEM)
        )

        assert await repository.get_by_id(uuid4(), created.id) is None

    async def test_list_by_org_filters_business_function(
        self, repository: DependencyRepository
    ):
        """Test listing by organization with a business function filter."""
        org_id = uuid4()
        business_function_id = uuid4()
        await repository.create(
            Dependency(
                org_id=org_id,
                name="Settlement engine",
                dependency_type=DependencyType.SYSTEM,
                business_function_id=business_function_id,
            )
        )
        await repository.create(
            Dependency(org_id=org_id, name="Canteen vendor", dependency_type=DependencyType.VENDOR)
        )
        await repository.create(
            Dependency(org_id=uuid4(), name="Other org", dependency_type=DependencyType.DATA)
        )

        everything = await repository.list_by_org(org_id)
        filtered = await repository.list_by_org(
            org_id, business_function_id=business_function_id
        )

        assert [d.name for d in everything] == ["Canteen vendor", "Settlement engine"]
        assert [d.name for d in filtered] == ["Settlement engine"]

    async def test_update_dependency(self, repository: DependencyRepository):
        """Test updating status and resilience attributes."""
        org_id = uuid4()
        created = await repository.create(
            Dependency(org_id=org_id, name="Core ledger", dependency_type=DependencyType.SYSTEM)
        )
        created.update_resilience(
            status=DependencyStatus.DEGRADED,
            redundancy_level=RedundancyLevel.FULL,
        )

        updated = await repository.update(created)

        assert updated.status == DependencyStatus.DEGRADED
        assert updated.redundancy_level == RedundancyLevel.FULL

    async def test_update_nonexistent_dependency_raises(
        self, repository: DependencyRepository
    ):
        """Test updating a dependency that was never stored."""
        dependency = Dependency(
            org_id=uuid4(), name="Ghost", dependency_type=DependencyType.STAFF
        )

        with pytest.raises(ValueError, match="does not exist"):
            await repository.update(dependency)
