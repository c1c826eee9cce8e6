"""
Pydantic schemas for dependency risk and dependency map summary endpoints.
"""

from datetime import date

from pydantic import BaseModel, Field

RISK_CATEGORY_PATTERN = "^(operational|financial|reputational|compliance|strategic)$"


class AssessDependencyRiskApiRequest(BaseModel):
    """Request to record a risk assessment against a dependency."""

    dependency_id: str
    risk_category: str = Field(..., pattern=RISK_CATEGORY_PATTERN)
    likelihood_score: int = Field(..., ge=1, le=5)
    impact_score: int = Field(..., ge=1, le=5)
    mitigation_strategy: str | None = None
    contingency_plan: str | None = None
    assessor_name: str | None = None
    last_assessment_date: date | None = Field(
        None, description="Assessment date (defaults to today)"
    )
    next_assessment_date: date | None = None


class DependencyRiskApiResponse(BaseModel):
    """A dependency risk assessment."""

    id: str
    dependency_id: str
    risk_category: str
    likelihood_score: int
    impact_score: int
    risk_score: int = Field(..., description="likelihood_score * impact_score")
    risk_rating: str = Field(
        ..., description="very_low, low, medium, high, or critical"
    )
    mitigation_strategy: str | None
    contingency_plan: str | None
    assessor_name: str | None
    last_assessment_date: str
    next_assessment_date: str | None


class DependencyRiskListApiResponse(BaseModel):
    """Risk assessments, highest risk score first."""

    risks: list[DependencyRiskApiResponse]
    total: int


class DependencyMapSummaryApiResponse(BaseModel):
    """Headline metrics of an organization's dependency map."""

    org_id: str
    total_dependencies: int
    critical_dependencies: int
    high_risk_dependencies: int
    total_relationships: int
    critical_connections: int
    total_scenarios: int
    single_points_of_failure: list[str] = Field(
        ..., description="IDs of critical dependencies without redundancy"
    )
