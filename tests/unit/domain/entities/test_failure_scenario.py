"""Unit tests for FailureScenario entity."""

import pytest
from uuid import uuid4

from src.domain.entities.failure_scenario import FailureScenario, ScenarioType
from src.domain.entities.failure_simulation import Severity, SimulationResult


class TestFailureScenario:
    """Test cases for FailureScenario entity."""

    def test_create_with_defaults(self):
        scenario = FailureScenario(
            org_id=uuid4(), name="Vendor outage", trigger_dependency_id=uuid4()
        )

        assert scenario.scenario_type == ScenarioType.OPERATIONAL
        assert scenario.severity_level == Severity.MEDIUM
        assert not scenario.has_been_simulated
        assert scenario.last_simulated_at is None

    def test_empty_name_raises(self):
        with pytest.raises(ValueError, match="name cannot be empty"):
            FailureScenario(org_id=uuid4(), name="", trigger_dependency_id=uuid4())

    def test_non_positive_duration_raises(self):
        with pytest.raises(ValueError, match="estimated_duration_hours must be positive"):
            FailureScenario(
                org_id=uuid4(),
                name="Outage",
                trigger_dependency_id=uuid4(),
                estimated_duration_hours=0,
            )

    def test_record_simulation_overwrites_previous_result(self):
        """Test that each run replaces the cached result."""
        trigger_id = uuid4()
        scenario = FailureScenario(org_id=uuid4(), name="Outage", trigger_dependency_id=trigger_id)
        first = SimulationResult(trigger_dependency_id=trigger_id, initial_severity=Severity.MEDIUM)
        second = SimulationResult(trigger_dependency_id=trigger_id, initial_severity=Severity.MEDIUM)

        scenario.record_simulation(first)
        scenario.record_simulation(second)

        assert scenario.has_been_simulated
        assert scenario.simulation_results is second
        assert scenario.last_simulated_at == second.simulation_timestamp

    def test_record_simulation_for_other_trigger_raises(self):
        scenario = FailureScenario(org_id=uuid4(), name="Outage", trigger_dependency_id=uuid4())
        result = SimulationResult(trigger_dependency_id=uuid4(), initial_severity=Severity.LOW)

        with pytest.raises(ValueError, match="does not match scenario trigger"):
            scenario.record_simulation(result)
