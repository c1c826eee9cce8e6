"""Domain entities - Core business objects."""

from src.domain.entities.dependency import (
    Criticality,
    Dependency,
    DependencyStatus,
    DependencyType,
    MonitoringStatus,
    RedundancyLevel,
)
from src.domain.entities.dependency_relationship import (
    DependencyRelationship,
    RelationshipStrength,
    RelationshipType,
)
from src.domain.entities.dependency_risk import (
    DependencyRisk,
    RiskCategory,
    RiskRating,
    rate_risk,
)
from src.domain.entities.failure_scenario import FailureScenario, ScenarioType
from src.domain.entities.failure_simulation import (
    PropagationRecord,
    Severity,
    SeverityPolicy,
    SimulationResult,
)
from src.domain.entities.metric_history import (
    IncidentForecast,
    IncidentRecord,
    KriMeasurement,
    MetricForecast,
    MetricObservation,
    PredictiveAnalytics,
    ThresholdBreach,
    Trend,
)

__all__ = [
    # Dependency entity
    "Dependency",
    "DependencyType",
    "Criticality",
    "DependencyStatus",
    "RedundancyLevel",
    "MonitoringStatus",
    # DependencyRelationship entity
    "DependencyRelationship",
    "RelationshipType",
    "RelationshipStrength",
    # DependencyRisk entity
    "DependencyRisk",
    "RiskCategory",
    "RiskRating",
    "rate_risk",
    # FailureScenario entity
    "FailureScenario",
    "ScenarioType",
    # Simulation
    "Severity",
    "SeverityPolicy",
    "PropagationRecord",
    "SimulationResult",
    # Metric history and forecasts
    "KriMeasurement",
    "IncidentRecord",
    "ThresholdBreach",
    "Trend",
    "MetricObservation",
    "MetricForecast",
    "IncidentForecast",
    "PredictiveAnalytics",
]
