"""Domain entities for historical risk metrics and forecasts.

KRI measurements and incident records are the historical series consumed by
the forecasting services; the forecast types are their outputs.
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from uuid import UUID, uuid4

from src.domain.entities.failure_simulation import Severity


class ThresholdBreach(str, Enum):
    """Which KRI threshold, if any, a measurement breached."""

    NONE = "none"
    WARNING = "warning"
    CRITICAL = "critical"


class Trend(str, Enum):
    """Direction of a fitted trend line."""

    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


@dataclass
class KriMeasurement:
    """A single measurement of a Key Risk Indicator.

    Attributes:
        org_id: Owning organization
        kri_name: Name of the measured KRI
        measurement_date: Date the value was measured
        actual_value: Measured value
        threshold_breached: Threshold breached by this measurement
        id: Internal UUID identifier
        created_at: Timestamp when measurement was recorded
    """

    org_id: UUID
    kri_name: str
    measurement_date: date
    actual_value: float
    threshold_breached: ThresholdBreach = ThresholdBreach.NONE

    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        """Validate domain invariants after initialization."""
        if not self.kri_name or not self.kri_name.strip():
            raise ValueError("kri_name cannot be empty")
        if not math.isfinite(self.actual_value):
            raise ValueError(f"actual_value must be finite, got: {self.actual_value}")

    @property
    def is_breach(self) -> bool:
        return self.threshold_breached != ThresholdBreach.NONE


@dataclass
class IncidentRecord:
    """A reported operational incident.

    Attributes:
        org_id: Owning organization
        title: Short incident title
        category: Incident category (e.g., "cyber", "vendor")
        severity: Incident severity
        reported_at: When the incident was reported
        id: Internal UUID identifier
    """

    org_id: UUID
    title: str
    category: str | None = None
    severity: Severity = Severity.MEDIUM
    reported_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    id: UUID = field(default_factory=uuid4)

    def __post_init__(self):
        """Validate domain invariants after initialization."""
        if not self.title or not self.title.strip():
            raise ValueError("title cannot be empty")


@dataclass(frozen=True)
class MetricObservation:
    """A (date, value) point of a metric series."""

    observed_on: date
    value: float

    def __post_init__(self):
        if not math.isfinite(self.value):
            raise ValueError(f"Observation value must be finite, got: {self.value}")


@dataclass
class MetricForecast:
    """Linear-trend forecast of a metric series.

    Attributes:
        metric: Metric name
        current_value: Most recent observed value
        predicted_30_days: Point forecast 30 steps ahead (floored at 0)
        predicted_90_days: Point forecast 90 steps ahead (floored at 0)
        trend: Direction of the fitted slope
        slope: Fitted change per step
        confidence: Rough usefulness signal in [0, 0.9], not a probability
        sample_count: Number of observations used
    """

    metric: str
    current_value: float
    predicted_30_days: float
    predicted_90_days: float
    trend: Trend
    slope: float
    confidence: float
    sample_count: int


@dataclass
class IncidentForecast:
    """Next-month incident forecast for one incident category."""

    category: str
    current_monthly: int
    predicted_next_month: int
    risk_level: Severity


@dataclass
class PredictiveAnalytics:
    """Combined KRI forecasts, incident forecasts, and a predicted risk score.

    Attributes:
        kri_forecasts: One forecast per KRI
        incident_forecasts: One forecast per incident category
        risk_score_prediction: Overall risk score, 0-100 (higher = more risk)
        generated_at: When the analytics were computed
    """

    kri_forecasts: list[MetricForecast] = field(default_factory=list)
    incident_forecasts: list[IncidentForecast] = field(default_factory=list)
    risk_score_prediction: int = 0
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
