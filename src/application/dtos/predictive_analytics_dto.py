"""Predictive analytics DTOs.

This module defines data transfer objects for recording historical risk
metrics and returning forecasts computed from them.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID


@dataclass
class RecordKriMeasurementRequest:
    """Request to record a KRI measurement."""

    org_id: UUID
    kri_name: str
    measurement_date: date
    actual_value: float
    threshold_breached: str = "none"


@dataclass
class KriMeasurementDTO:
    """KRI measurement in a response."""

    id: str
    kri_name: str
    measurement_date: str
    actual_value: float
    threshold_breached: str


@dataclass
class RecordIncidentRequest:
    """Request to record an incident."""

    org_id: UUID
    title: str
    category: str | None = None
    severity: str = "medium"
    reported_at: datetime | None = None


@dataclass
class IncidentDTO:
    """Incident in a response."""

    id: str
    title: str
    category: str | None
    severity: str
    reported_at: str


@dataclass
class MetricForecastDTO:
    """Trend forecast of one metric series.

    Attributes:
        metric: Metric name
        current_value: Most recent observed value
        predicted_30_days: Forecast at the short horizon
        predicted_90_days: Forecast at the long horizon
        trend: increasing/decreasing/stable
        slope: Fitted change per step
        confidence: Heuristic usefulness signal in [0, 0.9]
        sample_count: Observations used
    """

    metric: str
    current_value: float
    predicted_30_days: float
    predicted_90_days: float
    trend: str
    slope: float
    confidence: float
    sample_count: int


@dataclass
class IncidentForecastDTO:
    """Next-month incident forecast for one category."""

    category: str
    current_monthly: int
    predicted_next_month: int
    risk_level: str


@dataclass
class PredictiveAnalyticsRequest:
    """Request for predictive analytics over an organization's history.

    Attributes:
        org_id: Owning organization
        lookback_days: History window (None = configured default)
    """

    org_id: UUID
    lookback_days: int | None = None


@dataclass
class PredictiveAnalyticsResponse:
    """KRI forecasts, incident forecasts, and predicted risk score."""

    org_id: str
    lookback_days: int
    kri_forecasts: list[MetricForecastDTO] = field(default_factory=list)
    incident_forecasts: list[IncidentForecastDTO] = field(default_factory=list)
    risk_score_prediction: int = 0
    generated_at: str = ""


@dataclass
class SeriesPointDTO:
    """A (date, value) point supplied by the caller."""

    observed_on: date
    value: float


@dataclass
class ForecastSeriesRequest:
    """Request to forecast a caller-supplied series."""

    metric: str
    points: list[SeriesPointDTO] = field(default_factory=list)
