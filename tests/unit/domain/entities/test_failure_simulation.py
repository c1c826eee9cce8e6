"""Unit tests for failure simulation entities."""

from datetime import datetime, timezone

import pytest
from uuid import uuid4

from src.domain.entities.failure_simulation import (
    DEFAULT_SEVERITY_MULTIPLIERS,
    PropagationRecord,
    Severity,
    SeverityPolicy,
    SimulationResult,
)


def make_record(minutes: float, severity: Severity, downtime: float = 1.0) -> PropagationRecord:
    return PropagationRecord(
        dependency_id=uuid4(),
        dependency_name=f"dep-{minutes}",
        affected_at_minutes=minutes,
        severity=severity,
        estimated_downtime_hours=downtime,
    )


class TestSeverity:
    """Test cases for Severity ordering."""

    def test_rank_order(self):
        assert [s.rank for s in (Severity.LOW, Severity.MEDIUM, Severity.HIGH, Severity.CRITICAL)] == [
            0,
            1,
            2,
            3,
        ]

    def test_step_down(self):
        assert Severity.CRITICAL.step_down() == Severity.HIGH
        assert Severity.HIGH.step_down() == Severity.MEDIUM
        assert Severity.MEDIUM.step_down() == Severity.LOW

    def test_step_down_floors_at_low(self):
        assert Severity.LOW.step_down() == Severity.LOW


class TestSeverityPolicy:
    """Test cases for SeverityPolicy."""

    def test_default_multipliers(self):
        policy = SeverityPolicy()

        assert policy.multiplier_for(Severity.LOW) == 0.3
        assert policy.multiplier_for(Severity.MEDIUM) == 0.6
        assert policy.multiplier_for(Severity.HIGH) == 0.8
        assert policy.multiplier_for(Severity.CRITICAL) == 1.0
        assert policy.decay_probability == 0.3

    def test_missing_severity_raises(self):
        with pytest.raises(ValueError, match="multipliers missing severities"):
            SeverityPolicy(multipliers={Severity.CRITICAL: 1.0})

    def test_out_of_range_multiplier_raises(self):
        multipliers = dict(DEFAULT_SEVERITY_MULTIPLIERS)
        multipliers[Severity.HIGH] = 1.5

        with pytest.raises(ValueError, match="multiplier for high"):
            SeverityPolicy(multipliers=multipliers)

    def test_out_of_range_decay_raises(self):
        with pytest.raises(ValueError, match="decay_probability"):
            SeverityPolicy(decay_probability=-0.1)


class TestSimulationResult:
    """Test cases for SimulationResult aggregates."""

    def test_empty_result(self):
        result = SimulationResult(trigger_dependency_id=uuid4(), initial_severity=Severity.HIGH)

        assert result.total_affected_dependencies == 0
        assert result.estimated_total_downtime_hours == 0
        assert result.critical_path == []
        assert result.recovery_sequence == []

    def test_aggregates(self):
        path = [
            make_record(0, Severity.CRITICAL, downtime=4.0),
            make_record(30, Severity.HIGH, downtime=2.5),
            make_record(10, Severity.CRITICAL, downtime=1.0),
        ]
        result = SimulationResult(
            trigger_dependency_id=path[0].dependency_id,
            initial_severity=Severity.CRITICAL,
            propagation_path=path,
        )

        assert result.total_affected_dependencies == 3
        assert result.estimated_total_downtime_hours == 7.5
        assert result.critical_path == [path[0], path[2]]
        assert result.recovery_sequence == [path[0], path[2], path[1]]

    def test_recovery_sequence_is_stable_for_ties(self):
        """Test that equal impact times keep visitation order."""
        path = [
            make_record(0, Severity.MEDIUM),
            make_record(15, Severity.MEDIUM),
            make_record(15, Severity.LOW),
        ]
        result = SimulationResult(
            trigger_dependency_id=path[0].dependency_id,
            initial_severity=Severity.MEDIUM,
            propagation_path=path,
        )

        assert result.recovery_sequence == path

    def test_dict_form_preserves_path(self):
        """Test that the stored dict form rebuilds an equal result."""
        path = [make_record(0, Severity.HIGH, 3.0), make_record(5, Severity.MEDIUM, 1.0)]
        result = SimulationResult(
            trigger_dependency_id=path[0].dependency_id,
            initial_severity=Severity.HIGH,
            propagation_path=path,
            simulation_timestamp=datetime(2026, 3, 2, 9, 30, tzinfo=timezone.utc),
        )

        data = result.to_dict()
        restored = SimulationResult.from_dict(data)

        assert data["total_affected_dependencies"] == 2
        assert data["estimated_total_downtime_hours"] == 4.0
        assert data["propagation_path"][1]["severity"] == "medium"
        assert restored.propagation_path == result.propagation_path
        assert restored.simulation_timestamp == result.simulation_timestamp
