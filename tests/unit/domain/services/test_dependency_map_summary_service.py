"""Unit tests for DependencyMapSummaryService."""

from uuid import uuid4

from src.domain.entities.dependency import (
    Criticality,
    Dependency,
    DependencyType,
    RedundancyLevel,
)
from src.domain.entities.dependency_relationship import (
    DependencyRelationship,
    RelationshipStrength,
)
from src.domain.entities.dependency_risk import DependencyRisk, RiskCategory
from src.domain.entities.failure_scenario import FailureScenario
from src.domain.services.dependency_map_summary_service import (
    DependencyMapSummaryService,
)

ORG_ID = uuid4()


class TestDependencyMapSummaryService:
    """Test dependency map aggregates."""

    def test_empty_map(self):
        summary = DependencyMapSummaryService().summarize([], [], [], [])

        assert summary.total_dependencies == 0
        assert summary.single_points_of_failure == []

    def test_counts(self):
        spof = Dependency(
            org_id=ORG_ID,
            name="Mainframe",
            dependency_type=DependencyType.SYSTEM,
            criticality=Criticality.CRITICAL,
        )
        redundant = Dependency(
            org_id=ORG_ID,
            name="Card processor",
            dependency_type=DependencyType.VENDOR,
            criticality=Criticality.CRITICAL,
            redundancy_level=RedundancyLevel.FULL,
        )
        minor = Dependency(
            org_id=ORG_ID, name="Office", dependency_type=DependencyType.LOCATION
        )
        relationships = [
            DependencyRelationship(
                org_id=ORG_ID,
                source_dependency_id=spof.id,
                target_dependency_id=redundant.id,
                relationship_strength=RelationshipStrength.CRITICAL,
            ),
            DependencyRelationship(
                org_id=ORG_ID,
                source_dependency_id=minor.id,
                target_dependency_id=spof.id,
            ),
        ]
        risks = [
            DependencyRisk(ORG_ID, spof.id, RiskCategory.OPERATIONAL, 5, 5),
            DependencyRisk(ORG_ID, spof.id, RiskCategory.FINANCIAL, 4, 4),
            DependencyRisk(ORG_ID, minor.id, RiskCategory.OPERATIONAL, 1, 2),
        ]
        scenarios = [FailureScenario(ORG_ID, "Mainframe down", spof.id)]

        summary = DependencyMapSummaryService().summarize(
            [spof, redundant, minor], relationships, risks, scenarios
        )

        assert summary.total_dependencies == 3
        assert summary.critical_dependencies == 2
        assert summary.high_risk_dependencies == 1
        assert summary.total_relationships == 2
        assert summary.critical_connections == 1
        assert summary.total_scenarios == 1
        assert summary.single_points_of_failure == [spof.id]
