"""Unit tests for risk assessment use cases."""

from datetime import date, datetime, timezone

import pytest
from uuid import uuid4
from unittest.mock import AsyncMock

from src.application.dtos.dependency_risk_dto import AssessDependencyRiskRequest
from src.application.use_cases.assess_dependency_risk import AssessDependencyRiskUseCase
from src.domain.entities.dependency import Dependency, DependencyType


class TestAssessDependencyRiskUseCase:
    """Test AssessDependencyRiskUseCase."""

    @pytest.fixture
    def org_id(self):
        return uuid4()

    @pytest.fixture
    def mock_dependency_repo(self, org_id):
        repo = AsyncMock()
        repo.get_by_id.return_value = Dependency(
            org_id=org_id, name="Cloud provider", dependency_type=DependencyType.VENDOR
        )
        return repo

    @pytest.fixture
    def mock_risk_repo(self):
        repo = AsyncMock()
        repo.create.side_effect = lambda risk: risk
        return repo

    @pytest.fixture
    def use_case(self, mock_risk_repo, mock_dependency_repo):
        return AssessDependencyRiskUseCase(
            risk_repository=mock_risk_repo,
            dependency_repository=mock_dependency_repo,
        )

    @pytest.mark.asyncio
    async def test_assessment_is_rated(self, use_case, org_id):
        result = await use_case.execute(
            AssessDependencyRiskRequest(
                org_id=org_id,
                dependency_id=uuid4(),
                risk_category="operational",
                likelihood_score=4,
                impact_score=5,
                last_assessment_date=date(2026, 3, 1),
                next_assessment_date=date(2026, 6, 1),
            )
        )

        assert result.risk_score == 20
        assert result.risk_rating == "critical"
        assert result.last_assessment_date == "2026-03-01"
        assert result.next_assessment_date == "2026-06-01"

    @pytest.mark.asyncio
    async def test_assessment_date_defaults_to_today(self, use_case, org_id):
        result = await use_case.execute(
            AssessDependencyRiskRequest(
                org_id=org_id,
                dependency_id=uuid4(),
                risk_category="compliance",
                likelihood_score=1,
                impact_score=1,
            )
        )

        assert result.last_assessment_date == datetime.now(timezone.utc).date().isoformat()
        assert result.risk_rating == "very_low"

    @pytest.mark.asyncio
    async def test_unknown_dependency_raises(
        self, use_case, mock_dependency_repo, mock_risk_repo, org_id
    ):
        mock_dependency_repo.get_by_id.return_value = None

        with pytest.raises(ValueError, match="not found in organization"):
            await use_case.execute(
                AssessDependencyRiskRequest(
                    org_id=org_id,
                    dependency_id=uuid4(),
                    risk_category="operational",
                    likelihood_score=3,
                    impact_score=3,
                )
            )

        mock_risk_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_out_of_range_score_raises(self, use_case, org_id):
        with pytest.raises(ValueError, match="between 1 and 5"):
            await use_case.execute(
                AssessDependencyRiskRequest(
                    org_id=org_id,
                    dependency_id=uuid4(),
                    risk_category="operational",
                    likelihood_score=0,
                    impact_score=3,
                )
            )
