"""Domain services - Business logic that doesn't fit in entities."""

from src.domain.services.dependency_map_summary_service import (
    DependencyMapSummary,
    DependencyMapSummaryService,
)
from src.domain.services.failure_propagation_simulator import (
    DependencyNotFoundError,
    FailurePropagationSimulator,
    GraphTooLargeError,
    SimulationError,
    SimulationValidationError,
)
from src.domain.services.forecast_calculator import ForecastCalculator
from src.domain.services.predictive_analytics_service import (
    PredictiveAnalyticsService,
)

__all__ = [
    "FailurePropagationSimulator",
    "SimulationError",
    "SimulationValidationError",
    "DependencyNotFoundError",
    "GraphTooLargeError",
    "ForecastCalculator",
    "PredictiveAnalyticsService",
    "DependencyMapSummaryService",
    "DependencyMapSummary",
]
