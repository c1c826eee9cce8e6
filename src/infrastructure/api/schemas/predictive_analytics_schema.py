"""
Pydantic schemas for metric history and predictive analytics endpoints.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

SEVERITY_PATTERN = "^(low|medium|high|critical)$"
BREACH_PATTERN = "^(none|warning|critical)$"


class RecordKriMeasurementApiRequest(BaseModel):
    """Request to record a key risk indicator measurement."""

    kri_name: str = Field(..., min_length=1, max_length=255)
    measurement_date: date
    actual_value: float = Field(..., allow_inf_nan=False)
    threshold_breached: str = Field("none", pattern=BREACH_PATTERN)


class KriMeasurementApiResponse(BaseModel):
    """A recorded KRI measurement."""

    id: str
    kri_name: str
    measurement_date: str
    actual_value: float
    threshold_breached: str


class RecordIncidentApiRequest(BaseModel):
    """Request to record an incident."""

    title: str = Field(..., min_length=1, max_length=255)
    category: str | None = Field(None, max_length=100)
    severity: str = Field("medium", pattern=SEVERITY_PATTERN)
    reported_at: datetime | None = Field(
        None, description="When the incident was reported (defaults to now)"
    )


class IncidentApiResponse(BaseModel):
    """A recorded incident."""

    id: str
    title: str
    category: str | None
    severity: str
    reported_at: str


class MetricForecastApiModel(BaseModel):
    """Linear trend forecast of one metric series."""

    metric: str
    current_value: float
    predicted_30_days: float
    predicted_90_days: float
    trend: str = Field(..., description="increasing, decreasing, or stable")
    slope: float
    confidence: float = Field(..., ge=0.0, le=1.0)
    sample_count: int


class IncidentForecastApiModel(BaseModel):
    """Next-month incident forecast for one category."""

    category: str
    current_monthly: int
    predicted_next_month: int
    risk_level: str


class PredictiveAnalyticsApiResponse(BaseModel):
    """KRI forecasts, incident forecasts, and predicted risk score."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "org_id": "3f2c9a54-8b0e-4d16-9c1e-5a7b2d4e6f10",
                "lookback_days": 90,
                "kri_forecasts": [
                    {
                        "metric": "failed_logins",
                        "current_value": 42.0,
                        "predicted_30_days": 58.5,
                        "predicted_90_days": 91.5,
                        "trend": "increasing",
                        "slope": 0.55,
                        "confidence": 0.9,
                        "sample_count": 30,
                    }
                ],
                "incident_forecasts": [
                    {
                        "category": "security",
                        "current_monthly": 4,
                        "predicted_next_month": 5,
                        "risk_level": "medium",
                    }
                ],
                "risk_score_prediction": 38,
                "generated_at": "2026-03-02T09:30:00+00:00",
            }
        }
    )

    org_id: str
    lookback_days: int
    kri_forecasts: list[MetricForecastApiModel]
    incident_forecasts: list[IncidentForecastApiModel]
    risk_score_prediction: int = Field(..., ge=0, le=100)
    generated_at: str


class SeriesPointApiModel(BaseModel):
    """A dated observation."""

    observed_on: date
    value: float = Field(..., allow_inf_nan=False)


class ForecastSeriesApiRequest(BaseModel):
    """Request to forecast an ad-hoc metric series."""

    metric: str = Field(..., min_length=1, max_length=255)
    points: list[SeriesPointApiModel] = Field(
        default_factory=list, description="Observations in any order"
    )
