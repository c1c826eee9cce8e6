"""DependencyRisk entity module.

This module defines the risk assessment recorded against a dependency. The
risk rating is derived from likelihood and impact scores and is never set
directly.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class RiskCategory(str, Enum):
    """Category of dependency risk."""

    OPERATIONAL = "operational"
    FINANCIAL = "financial"
    REPUTATIONAL = "reputational"
    COMPLIANCE = "compliance"
    STRATEGIC = "strategic"


class RiskRating(str, Enum):
    """Risk rating derived from likelihood x impact."""

    VERY_LOW = "very_low"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


# (minimum likelihood x impact score, rating), highest first
RISK_RATING_THRESHOLDS: tuple[tuple[int, RiskRating], ...] = (
    (20, RiskRating.CRITICAL),
    (12, RiskRating.HIGH),
    (6, RiskRating.MEDIUM),
    (3, RiskRating.LOW),
)

MIN_SCORE = 1
MAX_SCORE = 5


def rate_risk(likelihood_score: int, impact_score: int) -> RiskRating:
    """Derive a risk rating from 1-5 likelihood and impact scores.

    Args:
        likelihood_score: Likelihood on a 1-5 scale
        impact_score: Impact on a 1-5 scale

    Returns:
        RiskRating for the combined score

    Raises:
        ValueError: If either score is outside 1-5
    """
    for name, score in (("likelihood_score", likelihood_score), ("impact_score", impact_score)):
        if not (MIN_SCORE <= score <= MAX_SCORE):
            raise ValueError(
                f"{name} must be between {MIN_SCORE} and {MAX_SCORE}, got: {score}"
            )

    combined = likelihood_score * impact_score
    for threshold, rating in RISK_RATING_THRESHOLDS:
        if combined >= threshold:
            return rating
    return RiskRating.VERY_LOW


@dataclass
class DependencyRisk:
    """A risk assessment recorded against a dependency.

    Attributes:
        org_id: Owning organization
        dependency_id: Assessed dependency
        risk_category: Category of risk
        likelihood_score: Likelihood on a 1-5 scale
        impact_score: Impact on a 1-5 scale
        mitigation_strategy: Planned mitigation
        contingency_plan: Fallback if the risk materializes
        assessor_name: Who performed the assessment
        last_assessment_date: Date of this assessment
        next_assessment_date: When the dependency is due for reassessment
        id: Internal UUID identifier
        created_at: Timestamp when assessment was recorded
        updated_at: Timestamp when assessment was last updated
    """

    org_id: UUID
    dependency_id: UUID
    risk_category: RiskCategory
    likelihood_score: int
    impact_score: int
    mitigation_strategy: str | None = None
    contingency_plan: str | None = None
    assessor_name: str | None = None
    last_assessment_date: date = field(
        default_factory=lambda: datetime.now(timezone.utc).date()
    )
    next_assessment_date: date | None = None

    # Audit fields
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        """Validate domain invariants after initialization."""
        # Raises on out-of-range scores
        rate_risk(self.likelihood_score, self.impact_score)

        if (
            self.next_assessment_date is not None
            and self.next_assessment_date < self.last_assessment_date
        ):
            raise ValueError("next_assessment_date cannot precede last_assessment_date")

    @property
    def risk_score(self) -> int:
        return self.likelihood_score * self.impact_score

    @property
    def risk_rating(self) -> RiskRating:
        return rate_risk(self.likelihood_score, self.impact_score)

    @property
    def is_high_risk(self) -> bool:
        """Whether the rating is high or critical."""
        return self.risk_rating in (RiskRating.HIGH, RiskRating.CRITICAL)
