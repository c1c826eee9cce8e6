"""Integration tests for DependencyRiskRepository."""

from datetime import date
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.dependency import Dependency, DependencyType
from src.domain.entities.dependency_risk import DependencyRisk, RiskCategory, RiskRating
from src.infrastructure.database.repositories.dependency_repository import (
    DependencyRepository,
)
from src.infrastructure.database.repositories.dependency_risk_repository import (
    DependencyRiskRepository,
)


@pytest.mark.integration
class TestDependencyRiskRepository:
    """Integration tests for DependencyRiskRepository."""

    @pytest.fixture
    def repository(self, db_session: AsyncSession) -> DependencyRiskRepository:
        return DependencyRiskRepository(db_session)

    async def test_list_orders_by_risk_score(
        self, repository: DependencyRiskRepository, db_session: AsyncSession
    ):
        """Test risks are listed highest score first and can be filtered."""
        org_id = uuid4()
        dependency_repo = DependencyRepository(db_session)
        vendor = await dependency_repo.create(
            Dependency(org_id=org_id, name="Cloud host", dependency_type=DependencyType.VENDOR)
        )
        staff = await dependency_repo.create(
            Dependency(org_id=org_id, name="DBA team", dependency_type=DependencyType.STAFF)
        )

        for dependency, likelihood, impact in ((staff, 2, 2), (vendor, 4, 5), (vendor, 3, 3)):
            await repository.create(
                DependencyRisk(
                    org_id=org_id,
                    dependency_id=dependency.id,
                    risk_category=RiskCategory.OPERATIONAL,
                    likelihood_score=likelihood,
                    impact_score=impact,
                    last_assessment_date=date(2026, 1, 15),
                )
            )

        everything = await repository.list_by_org(org_id)
        vendor_only = await repository.list_by_org(org_id, dependency_id=vendor.id)

        assert [r.risk_score for r in everything] == [20, 9, 4]
        assert everything[0].risk_rating == RiskRating.CRITICAL
        assert everything[0].last_assessment_date == date(2026, 1, 15)
        assert [r.risk_score for r in vendor_only] == [20, 9]
