"""Dependency risk assessment and dependency map DTOs."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID


@dataclass
class AssessDependencyRiskRequest:
    """Request to record a risk assessment against a dependency.

    Attributes:
        org_id: Owning organization
        dependency_id: Assessed dependency
        risk_category: operational/financial/reputational/compliance/strategic
        likelihood_score: 1-5
        impact_score: 1-5
        mitigation_strategy: Planned mitigation
        contingency_plan: Fallback plan
        assessor_name: Who assessed the risk
        last_assessment_date: Assessment date (None = today)
        next_assessment_date: Next review date
    """

    org_id: UUID
    dependency_id: UUID
    risk_category: str
    likelihood_score: int
    impact_score: int
    mitigation_strategy: str | None = None
    contingency_plan: str | None = None
    assessor_name: str | None = None
    last_assessment_date: date | None = None
    next_assessment_date: date | None = None


@dataclass
class DependencyRiskDTO:
    """Risk assessment in a response."""

    id: str
    dependency_id: str
    risk_category: str
    likelihood_score: int
    impact_score: int
    risk_score: int
    risk_rating: str
    mitigation_strategy: str | None
    contingency_plan: str | None
    assessor_name: str | None
    last_assessment_date: str
    next_assessment_date: str | None


@dataclass
class DependencyMapSummaryDTO:
    """Headline metrics of an organization's dependency map."""

    org_id: str
    total_dependencies: int = 0
    critical_dependencies: int = 0
    high_risk_dependencies: int = 0
    total_relationships: int = 0
    critical_connections: int = 0
    total_scenarios: int = 0
    single_points_of_failure: list[str] = field(default_factory=list)
