"""Unit tests for ForecastCalculator."""

from datetime import date, timedelta

import pytest
from uuid import uuid4

from src.domain.entities.metric_history import (
    KriMeasurement,
    MetricObservation,
    Trend,
)
from src.domain.services.forecast_calculator import ForecastCalculator

START = date(2026, 1, 1)


def series(*values: float) -> list[MetricObservation]:
    return [
        MetricObservation(observed_on=START + timedelta(days=i), value=v)
        for i, v in enumerate(values)
    ]


class TestCalculateSlope:
    """Test the least-squares slope over the series index."""

    def test_fewer_than_two_points_is_flat(self):
        assert ForecastCalculator.calculate_slope([]) == 0.0
        assert ForecastCalculator.calculate_slope([42.0]) == 0.0

    def test_perfect_line(self):
        assert ForecastCalculator.calculate_slope([1, 3, 5, 7]) == pytest.approx(2.0)

    def test_constant_series(self):
        assert ForecastCalculator.calculate_slope([4, 4, 4]) == pytest.approx(0.0)

    @pytest.mark.parametrize("value", [0.1, 0.3, 1.7, 3.3])
    @pytest.mark.parametrize("n", [2, 7, 13, 29])
    def test_constant_fractional_series_is_exactly_flat(self, value, n):
        assert ForecastCalculator.calculate_slope([value] * n) == 0.0

    def test_noisy_series(self):
        # x = 0..3, y = 1, 2, 2, 4 -> slope 0.9
        assert ForecastCalculator.calculate_slope([1, 2, 2, 4]) == pytest.approx(0.9)


class TestForecastMetric:
    """Test single-series forecasts."""

    @pytest.fixture
    def calculator(self):
        return ForecastCalculator()

    def test_increasing_series(self, calculator):
        forecast = calculator.forecast_metric("open_findings", series(10, 12, 14, 16))

        assert forecast.metric == "open_findings"
        assert forecast.current_value == 16
        assert forecast.slope == pytest.approx(2.0)
        assert forecast.predicted_30_days == pytest.approx(76.0)
        assert forecast.predicted_90_days == pytest.approx(196.0)
        assert forecast.trend == Trend.INCREASING
        assert forecast.sample_count == 4
        assert forecast.confidence == pytest.approx(0.4)

    def test_decreasing_series_is_floored_at_zero(self, calculator):
        forecast = calculator.forecast_metric("overdue_reviews", series(20, 15, 10))

        assert forecast.trend == Trend.DECREASING
        assert forecast.predicted_30_days == 0.0
        assert forecast.predicted_90_days == 0.0

    def test_observations_are_sorted_by_date(self, calculator):
        """Test that unordered input is forecast in date order."""
        observations = list(reversed(series(1, 2, 3)))

        forecast = calculator.forecast_metric("kri", observations)

        assert forecast.current_value == 3
        assert forecast.slope == pytest.approx(1.0)

    def test_single_observation_is_stable(self, calculator):
        forecast = calculator.forecast_metric("kri", series(7))

        assert forecast.trend == Trend.STABLE
        assert forecast.predicted_30_days == 7
        assert forecast.predicted_90_days == 7
        assert forecast.confidence == pytest.approx(0.1)

    def test_constant_fractional_series_is_stable(self, calculator):
        forecast = calculator.forecast_metric("kri", series(*[0.1] * 7))

        assert forecast.slope == 0.0
        assert forecast.trend == Trend.STABLE
        assert forecast.predicted_30_days == pytest.approx(0.1)

    def test_empty_series(self, calculator):
        forecast = calculator.forecast_metric("kri", [])

        assert forecast.current_value == 0.0
        assert forecast.trend == Trend.STABLE
        assert forecast.confidence == 0.0
        assert forecast.sample_count == 0

    def test_confidence_is_capped(self, calculator):
        forecast = calculator.forecast_metric("kri", series(*range(25)))

        assert forecast.confidence == pytest.approx(0.9)

    def test_custom_horizons(self):
        calculator = ForecastCalculator(short_horizon=7, long_horizon=14)

        forecast = calculator.forecast_metric("kri", series(0, 1, 2))

        assert forecast.predicted_30_days == pytest.approx(9.0)
        assert forecast.predicted_90_days == pytest.approx(16.0)

    @pytest.mark.parametrize(
        "kwargs",
        [{"short_horizon": 0}, {"long_horizon": -1}, {"confidence_sample_size": 0}],
    )
    def test_invalid_configuration_raises(self, kwargs):
        with pytest.raises(ValueError):
            ForecastCalculator(**kwargs)


class TestForecastKris:
    """Test grouping of KRI measurements."""

    def test_one_forecast_per_kri_ordered_by_name(self):
        org_id = uuid4()
        measurements = [
            KriMeasurement(org_id, "vendor_sla_misses", START, 3),
            KriMeasurement(org_id, "failed_logins", START, 40),
            KriMeasurement(org_id, "failed_logins", START + timedelta(days=1), 50),
        ]

        forecasts = ForecastCalculator().forecast_kris(measurements)

        assert [f.metric for f in forecasts] == ["failed_logins", "vendor_sla_misses"]
        assert forecasts[0].current_value == 50
        assert forecasts[0].trend == Trend.INCREASING
        assert forecasts[1].sample_count == 1

    def test_no_measurements(self):
        assert ForecastCalculator().forecast_kris([]) == []
