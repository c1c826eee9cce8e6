"""Predictive analytics over KRI measurements and incident history.

Combines per-KRI trend forecasts with per-category incident forecasts and an
overall predicted risk score.
"""

from collections.abc import Sequence

from src.domain.entities.failure_simulation import Severity
from src.domain.entities.metric_history import (
    IncidentForecast,
    IncidentRecord,
    KriMeasurement,
    PredictiveAnalytics,
)
from src.domain.services.forecast_calculator import ForecastCalculator

UNCATEGORIZED = "other"

# Risk score components: (points per item, cap)
KRI_BREACH_POINTS = (10, 50)
INCIDENT_POINTS = (2, 30)
CRITICAL_INCIDENT_POINTS = (5, 20)
MAX_RISK_SCORE = 100


class PredictiveAnalyticsService:
    """Builds predictive analytics from historical metric data."""

    def __init__(self, forecast_calculator: ForecastCalculator):
        self._forecast_calculator = forecast_calculator

    def build(
        self,
        measurements: Sequence[KriMeasurement],
        incidents: Sequence[IncidentRecord],
    ) -> PredictiveAnalytics:
        """Compute KRI forecasts, incident forecasts, and the risk score.

        Args:
            measurements: KRI measurements within the lookback window
            incidents: Incidents reported within the lookback window

        Returns:
            PredictiveAnalytics for the window
        """
        return PredictiveAnalytics(
            kri_forecasts=self._forecast_calculator.forecast_kris(measurements),
            incident_forecasts=self.forecast_incidents(incidents),
            risk_score_prediction=self.predict_risk_score(measurements, incidents),
        )

    def forecast_incidents(
        self, incidents: Sequence[IncidentRecord]
    ) -> list[IncidentForecast]:
        """Forecast next month's incident count per category.

        Assumes a 10% month-over-month increase, rounded up.
        """
        grouped: dict[str, list[IncidentRecord]] = {}
        for incident in incidents:
            category = (incident.category or "").strip() or UNCATEGORIZED
            grouped.setdefault(category, []).append(incident)

        forecasts = []
        for category, records in sorted(grouped.items()):
            count = len(records)
            critical = sum(1 for r in records if r.severity == Severity.CRITICAL)
            forecasts.append(
                IncidentForecast(
                    category=category,
                    current_monthly=count,
                    # ceil(count * 1.1) without float error
                    predicted_next_month=-(-count * 11 // 10),
                    risk_level=self._incident_risk_level(count, critical),
                )
            )
        return forecasts

    @staticmethod
    def predict_risk_score(
        measurements: Sequence[KriMeasurement],
        incidents: Sequence[IncidentRecord],
    ) -> int:
        """Overall risk score out of 100 (higher = more risk)."""
        breaches = sum(1 for m in measurements if m.is_breach)
        critical = sum(1 for i in incidents if i.severity == Severity.CRITICAL)

        score = (
            min(KRI_BREACH_POINTS[1], breaches * KRI_BREACH_POINTS[0])
            + min(INCIDENT_POINTS[1], len(incidents) * INCIDENT_POINTS[0])
            + min(CRITICAL_INCIDENT_POINTS[1], critical * CRITICAL_INCIDENT_POINTS[0])
        )
        return min(MAX_RISK_SCORE, score)

    @staticmethod
    def _incident_risk_level(count: int, critical_count: int) -> Severity:
        if critical_count > 2:
            return Severity.CRITICAL
        if count > 5:
            return Severity.HIGH
        if count > 2:
            return Severity.MEDIUM
        return Severity.LOW
