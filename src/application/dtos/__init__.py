"""Application layer DTOs.

This package contains data transfer objects (DTOs) for the application layer.
Uses dataclasses (not Pydantic) per Clean Architecture principles.
"""

from src.application.dtos.dependency_dto import (
    CreateRelationshipRequest,
    DependencyDTO,
    RegisterDependencyRequest,
    RelationshipDTO,
    UpdateDependencyRequest,
)
from src.application.dtos.dependency_risk_dto import (
    AssessDependencyRiskRequest,
    DependencyMapSummaryDTO,
    DependencyRiskDTO,
)
from src.application.dtos.failure_scenario_dto import (
    CreateFailureScenarioRequest,
    FailureScenarioDTO,
    PropagationStepDTO,
    RunFailureSimulationRequest,
    SimulationResultDTO,
)
from src.application.dtos.predictive_analytics_dto import (
    ForecastSeriesRequest,
    IncidentDTO,
    IncidentForecastDTO,
    KriMeasurementDTO,
    MetricForecastDTO,
    PredictiveAnalyticsRequest,
    PredictiveAnalyticsResponse,
    RecordIncidentRequest,
    RecordKriMeasurementRequest,
    SeriesPointDTO,
)

__all__ = [
    # Dependencies
    "RegisterDependencyRequest",
    "UpdateDependencyRequest",
    "DependencyDTO",
    "CreateRelationshipRequest",
    "RelationshipDTO",
    # Scenarios
    "CreateFailureScenarioRequest",
    "RunFailureSimulationRequest",
    "FailureScenarioDTO",
    "PropagationStepDTO",
    "SimulationResultDTO",
    # Risk
    "AssessDependencyRiskRequest",
    "DependencyRiskDTO",
    "DependencyMapSummaryDTO",
    # Analytics
    "RecordKriMeasurementRequest",
    "KriMeasurementDTO",
    "RecordIncidentRequest",
    "IncidentDTO",
    "MetricForecastDTO",
    "IncidentForecastDTO",
    "PredictiveAnalyticsRequest",
    "PredictiveAnalyticsResponse",
    "SeriesPointDTO",
    "ForecastSeriesRequest",
]
