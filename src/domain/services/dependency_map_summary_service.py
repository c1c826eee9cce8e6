"""Dependency map summary service.

Aggregates headline counts over an organization's dependency map.
"""

from dataclasses import dataclass, field
from typing import Sequence
from uuid import UUID

from src.domain.entities.dependency import Criticality, Dependency
from src.domain.entities.dependency_relationship import (
    DependencyRelationship,
    RelationshipStrength,
)
from src.domain.entities.dependency_risk import DependencyRisk
from src.domain.entities.failure_scenario import FailureScenario


@dataclass
class DependencyMapSummary:
    """Headline metrics for a dependency map.

    Attributes:
        total_dependencies: Registered dependencies
        critical_dependencies: Dependencies with critical criticality
        high_risk_dependencies: Dependencies with a high or critical risk rating
        total_relationships: Mapped relationships
        critical_connections: Relationships with critical strength
        total_scenarios: Failure scenarios defined
        single_points_of_failure: Critical dependencies with no redundancy
    """

    total_dependencies: int = 0
    critical_dependencies: int = 0
    high_risk_dependencies: int = 0
    total_relationships: int = 0
    critical_connections: int = 0
    total_scenarios: int = 0
    single_points_of_failure: list[UUID] = field(default_factory=list)


class DependencyMapSummaryService:
    """Computes a DependencyMapSummary from already-loaded records."""

    def summarize(
        self,
        dependencies: Sequence[Dependency],
        relationships: Sequence[DependencyRelationship],
        risks: Sequence[DependencyRisk],
        scenarios: Sequence[FailureScenario],
    ) -> DependencyMapSummary:
        # A dependency counts once even with several high-risk assessments
        high_risk_ids = {r.dependency_id for r in risks if r.is_high_risk}

        return DependencyMapSummary(
            total_dependencies=len(dependencies),
            critical_dependencies=sum(
                1 for d in dependencies if d.criticality == Criticality.CRITICAL
            ),
            high_risk_dependencies=len(high_risk_ids),
            total_relationships=len(relationships),
            critical_connections=sum(
                1
                for r in relationships
                if r.relationship_strength == RelationshipStrength.CRITICAL
            ),
            total_scenarios=len(scenarios),
            single_points_of_failure=[
                d.id for d in dependencies if d.is_single_point_of_failure
            ],
        )
