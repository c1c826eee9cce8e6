"""Unit tests for DependencyRelationship entity."""

import math

import pytest
from uuid import uuid4

from src.domain.entities.dependency_relationship import (
    DependencyRelationship,
    RelationshipStrength,
    RelationshipType,
)


class TestDependencyRelationship:
    """Test cases for DependencyRelationship entity."""

    def test_create_with_defaults(self):
        relationship = DependencyRelationship(
            org_id=uuid4(),
            source_dependency_id=uuid4(),
            target_dependency_id=uuid4(),
        )

        assert relationship.relationship_type == RelationshipType.DEPENDS_ON
        assert relationship.relationship_strength == RelationshipStrength.MEDIUM
        assert relationship.failure_propagation_likelihood is None
        assert relationship.propagation_delay_minutes is None

    @pytest.mark.parametrize("likelihood", [0.0, 0.5, 1.0])
    def test_valid_likelihood_bounds(self, likelihood):
        relationship = DependencyRelationship(
            org_id=uuid4(),
            source_dependency_id=uuid4(),
            target_dependency_id=uuid4(),
            failure_propagation_likelihood=likelihood,
        )
        assert relationship.failure_propagation_likelihood == likelihood

    @pytest.mark.parametrize("likelihood", [-0.1, 1.01, math.nan, math.inf])
    def test_invalid_likelihood_raises(self, likelihood):
        """Test that likelihood outside [0, 1] is rejected, not clamped."""
        with pytest.raises(ValueError, match="failure_propagation_likelihood"):
            DependencyRelationship(
                org_id=uuid4(),
                source_dependency_id=uuid4(),
                target_dependency_id=uuid4(),
                failure_propagation_likelihood=likelihood,
            )

    @pytest.mark.parametrize("delay", [-5, math.nan])
    def test_invalid_delay_raises(self, delay):
        with pytest.raises(ValueError, match="propagation_delay_minutes"):
            DependencyRelationship(
                org_id=uuid4(),
                source_dependency_id=uuid4(),
                target_dependency_id=uuid4(),
                propagation_delay_minutes=delay,
            )

    def test_self_loop_raises(self):
        dependency_id = uuid4()
        with pytest.raises(ValueError, match="Self-loops not allowed"):
            DependencyRelationship(
                org_id=uuid4(),
                source_dependency_id=dependency_id,
                target_dependency_id=dependency_id,
            )
