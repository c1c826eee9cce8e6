"""DependencyRelationship entity module.

This module defines the DependencyRelationship entity representing directed
edges between dependencies in the operational dependency graph.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class RelationshipType(str, Enum):
    """How the source dependency relates to the target."""

    DEPENDS_ON = "depends_on"
    SUPPORTS = "supports"
    FEEDS_INTO = "feeds_into"
    BACKED_BY = "backed_by"
    REDUNDANT_WITH = "redundant_with"


class RelationshipStrength(str, Enum):
    """Strength of the coupling between two dependencies."""

    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    CRITICAL = "critical"


@dataclass
class DependencyRelationship:
    """Represents a directed edge from a source dependency to a target dependency.

    Domain invariants:
    - failure_propagation_likelihood must be a probability in [0.0, 1.0]
    - propagation_delay_minutes must be non-negative
    - self-loops are not allowed (source != target)

    Attributes:
        org_id: Owning organization
        source_dependency_id: UUID of the dependency whose failure propagates
        target_dependency_id: UUID of the dependency that feels the effect
        relationship_type: Kind of relationship
        relationship_strength: Coupling strength
        failure_propagation_likelihood: Probability a source failure causes a
            target failure (None = unspecified, simulator default applies)
        propagation_delay_minutes: Minutes before the effect reaches the target
            (None = immediate)
        description: Free-text description
        id: Internal UUID identifier
        created_at: Timestamp when relationship was mapped
        updated_at: Timestamp when relationship was last edited
    """

    org_id: UUID
    source_dependency_id: UUID
    target_dependency_id: UUID
    relationship_type: RelationshipType = RelationshipType.DEPENDS_ON
    relationship_strength: RelationshipStrength = RelationshipStrength.MEDIUM
    failure_propagation_likelihood: float | None = None
    propagation_delay_minutes: float | None = None
    description: str | None = None

    # Audit fields
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        """Validate domain invariants after initialization."""
        likelihood = self.failure_propagation_likelihood
        if likelihood is not None and not (
            math.isfinite(likelihood) and 0.0 <= likelihood <= 1.0
        ):
            raise ValueError(
                f"failure_propagation_likelihood must be between 0.0 and 1.0, "
                f"got: {likelihood}"
            )

        delay = self.propagation_delay_minutes
        if delay is not None and not (math.isfinite(delay) and delay >= 0):
            raise ValueError(
                f"propagation_delay_minutes must be non-negative, got: {delay}"
            )

        if self.source_dependency_id == self.target_dependency_id:
            raise ValueError(
                "Self-loops not allowed (source_dependency_id == target_dependency_id)"
            )
