"""Linear-trend forecast calculator for historical metric series.

Fits an ordinary least-squares line over (index, value) and extrapolates it
to short-horizon point forecasts. Samples are treated as evenly spaced: the
regressor is the position in the date-sorted series, not elapsed time.
"""

import math
from collections.abc import Iterable, Sequence

from src.domain.entities.metric_history import (
    KriMeasurement,
    MetricForecast,
    MetricObservation,
    Trend,
)


class ForecastCalculator:
    """Produces 30/90-step point forecasts from a metric series.

    The confidence value is min(max_confidence, n / confidence_sample_size):
    a heuristic usefulness signal that grows with sample count, not a
    statistical confidence interval.
    """

    def __init__(
        self,
        short_horizon: int = 30,
        long_horizon: int = 90,
        max_confidence: float = 0.9,
        confidence_sample_size: int = 10,
    ):
        if short_horizon < 1 or long_horizon < 1:
            raise ValueError("forecast horizons must be at least 1 step")
        if confidence_sample_size < 1:
            raise ValueError("confidence_sample_size must be at least 1")

        self._short_horizon = short_horizon
        self._long_horizon = long_horizon
        self._max_confidence = max_confidence
        self._confidence_sample_size = confidence_sample_size

    @staticmethod
    def calculate_slope(values: Sequence[float]) -> float:
        """OLS slope of values against their index.

        Args:
            values: Series values in time order

        Returns:
            Change per step (0.0 for fewer than 2 points)
        """
        n = len(values)
        if n < 2:
            return 0.0

        # Centered x makes paired terms cancel exactly, so a constant series
        # has a slope of exactly 0.0.
        mean_x = (n - 1) / 2
        numerator = math.fsum((i - mean_x) * v for i, v in enumerate(values))
        denominator = n * (n * n - 1) / 12

        return numerator / denominator

    def forecast_metric(
        self, metric: str, observations: Iterable[MetricObservation]
    ) -> MetricForecast:
        """Forecast a single metric series.

        Args:
            metric: Metric name
            observations: (date, value) points in any order

        Returns:
            MetricForecast with floored point forecasts and trend label
        """
        ordered = sorted(observations, key=lambda o: o.observed_on)
        values = [o.value for o in ordered]

        slope = self.calculate_slope(values)
        current = values[-1] if values else 0.0

        return MetricForecast(
            metric=metric,
            current_value=current,
            predicted_30_days=max(0.0, current + slope * self._short_horizon),
            predicted_90_days=max(0.0, current + slope * self._long_horizon),
            trend=self._trend_for(slope),
            slope=slope,
            confidence=min(self._max_confidence, len(values) / self._confidence_sample_size),
            sample_count=len(values),
        )

    def forecast_kris(self, measurements: Iterable[KriMeasurement]) -> list[MetricForecast]:
        """Forecast every KRI present in a batch of measurements.

        Args:
            measurements: KRI measurements, possibly for several KRIs

        Returns:
            One forecast per KRI name, ordered by name
        """
        grouped: dict[str, list[MetricObservation]] = {}
        for m in measurements:
            grouped.setdefault(m.kri_name, []).append(
                MetricObservation(observed_on=m.measurement_date, value=m.actual_value)
            )

        return [
            self.forecast_metric(name, observations)
            for name, observations in sorted(grouped.items())
        ]

    @staticmethod
    def _trend_for(slope: float) -> Trend:
        if slope > 0:
            return Trend.INCREASING
        if slope < 0:
            return Trend.DECREASING
        return Trend.STABLE
