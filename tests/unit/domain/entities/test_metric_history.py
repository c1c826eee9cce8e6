"""Unit tests for metric history entities."""

from datetime import date

import pytest
from uuid import uuid4

from src.domain.entities.metric_history import (
    IncidentRecord,
    KriMeasurement,
    MetricObservation,
    ThresholdBreach,
)


class TestKriMeasurement:
    """Test cases for KriMeasurement entity."""

    def test_breach_flags(self):
        def measure(breach):
            return KriMeasurement(
                org_id=uuid4(),
                kri_name="failed_logins",
                measurement_date=date(2026, 3, 1),
                actual_value=12,
                threshold_breached=breach,
            )

        assert not measure(ThresholdBreach.NONE).is_breach
        assert measure(ThresholdBreach.WARNING).is_breach
        assert measure(ThresholdBreach.CRITICAL).is_breach

    def test_empty_name_raises(self):
        with pytest.raises(ValueError, match="kri_name cannot be empty"):
            KriMeasurement(
                org_id=uuid4(),
                kri_name=" ",
                measurement_date=date(2026, 3, 1),
                actual_value=1,
            )

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_value_raises(self, value):
        with pytest.raises(ValueError, match="actual_value must be finite"):
            KriMeasurement(
                org_id=uuid4(),
                kri_name="failed_logins",
                measurement_date=date(2026, 3, 1),
                actual_value=value,
            )


class TestMetricObservation:
    """Test cases for MetricObservation value object."""

    def test_non_finite_value_raises(self):
        with pytest.raises(ValueError, match="must be finite"):
            MetricObservation(observed_on=date(2026, 3, 1), value=float("nan"))


class TestIncidentRecord:
    """Test cases for IncidentRecord entity."""

    def test_defaults(self):
        incident = IncidentRecord(org_id=uuid4(), title="Payment delays")

        assert incident.category is None
        assert incident.severity.value == "medium"
        assert incident.reported_at.tzinfo is not None

    def test_empty_title_raises(self):
        with pytest.raises(ValueError, match="title cannot be empty"):
            IncidentRecord(org_id=uuid4(), title="")
