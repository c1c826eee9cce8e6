"""Integration tests for RelationshipRepository."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.dependency import Dependency, DependencyType
from src.domain.entities.dependency_relationship import (
    DependencyRelationship,
    RelationshipType,
)
from src.infrastructure.database.repositories.dependency_repository import (
    DependencyRepository,
)
from src.infrastructure.database.repositories.relationship_repository import (
    RelationshipRepository,
)


@pytest.mark.integration
class TestRelationshipRepository:
    """Integration tests for RelationshipRepository."""

    @pytest.fixture
    def repository(self, db_session: AsyncSession) -> RelationshipRepository:
        return RelationshipRepository(db_session)

    @pytest.fixture
    def org_id(self):
        return uuid4()

    @pytest.fixture
    async def endpoints(
        self, db_session: AsyncSession, org_id
    ) -> tuple[Dependency, Dependency]:
        """Create the source and target dependencies of an edge."""
        dependency_repo = DependencyRepository(db_session)
        source = await dependency_repo.create(
            Dependency(org_id=org_id, name="Data centre", dependency_type=DependencyType.LOCATION)
        )
        target = await dependency_repo.create(
            Dependency(org_id=org_id, name="Core banking", dependency_type=DependencyType.SYSTEM)
        )
        return source, target

    async def test_create_and_list(self, repository: RelationshipRepository, endpoints, org_id):
        """Test creating an edge and listing it back."""
        source, target = endpoints

        created = await repository.create(
            DependencyRelationship(
                org_id=org_id,
                source_dependency_id=source.id,
                target_dependency_id=target.id,
                failure_propagation_likelihood=0.9,
                propagation_delay_minutes=10,
            )
        )
        listed = await repository.list_by_org(org_id)

        assert [r.id for r in listed] == [created.id]
        assert listed[0].failure_propagation_likelihood == 0.9
        assert listed[0].propagation_delay_minutes == 10
        assert listed[0].relationship_type == RelationshipType.DEPENDS_ON

    async def test_unset_likelihood_and_delay_stay_null(
        self, repository: RelationshipRepository, endpoints, org_id
    ):
        """Test unset propagation parameters round-trip as None."""
        source, target = endpoints

        created = await repository.create(
            DependencyRelationship(
                org_id=org_id,
                source_dependency_id=source.id,
                target_dependency_id=target.id,
            )
        )
        fetched = await repository.get_by_id(org_id, created.id)

        assert fetched.failure_propagation_likelihood is None
        assert fetched.propagation_delay_minutes is None

    async def test_duplicate_edge_raises_integrity_error(
        self, repository: RelationshipRepository, endpoints, org_id
    ):
        """Test the same (source, target, type) edge may exist only once."""
        source, target = endpoints
        await repository.create(
            DependencyRelationship(
                org_id=org_id, source_dependency_id=source.id, target_dependency_id=target.id
            )
        )

        with pytest.raises(IntegrityError):
            await repository.create(
                DependencyRelationship(
                    org_id=org_id,
                    source_dependency_id=source.id,
                    target_dependency_id=target.id,
                )
            )

    async def test_same_pair_with_different_type_is_allowed(
        self, repository: RelationshipRepository, endpoints, org_id
    ):
        """Test parallel edges of different types between the same pair."""
        source, target = endpoints
        for relationship_type in (RelationshipType.DEPENDS_ON, RelationshipType.FEEDS_INTO):
            await repository.create(
                DependencyRelationship(
                    org_id=org_id,
                    source_dependency_id=source.id,
                    target_dependency_id=target.id,
                    relationship_type=relationship_type,
                )
            )

        assert len(await repository.list_by_org(org_id)) == 2

    async def test_delete(self, repository: RelationshipRepository, endpoints, org_id):
        """Test deleting an edge reports whether anything was removed."""
        source, target = endpoints
        created = await repository.create(
            DependencyRelationship(
                org_id=org_id, source_dependency_id=source.id, target_dependency_id=target.id
            )
        )

        assert await repository.delete(uuid4(), created.id) is False
        assert await repository.delete(org_id, created.id) is True
        assert await repository.delete(org_id, created.id) is False
        assert await repository.list_by_org(org_id) == []
