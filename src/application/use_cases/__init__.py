"""Use cases - Application-specific business rules.

This package contains use cases that orchestrate domain logic
and implement application-specific workflows.
"""

from src.application.use_cases.assess_dependency_risk import (
    AssessDependencyRiskUseCase,
    ListDependencyRisksUseCase,
)
from src.application.use_cases.generate_predictive_analytics import (
    ForecastSeriesUseCase,
    GeneratePredictiveAnalyticsUseCase,
)
from src.application.use_cases.get_dependency_map_summary import (
    GetDependencyMapSummaryUseCase,
)
from src.application.use_cases.manage_dependencies import (
    GetDependencyUseCase,
    ListDependenciesUseCase,
    RegisterDependencyUseCase,
    UpdateDependencyUseCase,
)
from src.application.use_cases.manage_failure_scenarios import (
    CreateFailureScenarioUseCase,
    GetFailureScenarioUseCase,
    ListFailureScenariosUseCase,
)
from src.application.use_cases.map_dependency_relationships import (
    CreateRelationshipUseCase,
    DeleteRelationshipUseCase,
    ListRelationshipsUseCase,
)
from src.application.use_cases.record_metric_history import (
    RecordIncidentUseCase,
    RecordKriMeasurementUseCase,
)
from src.application.use_cases.run_failure_simulation import (
    RunFailureSimulationUseCase,
)

__all__ = [
    "RegisterDependencyUseCase",
    "GetDependencyUseCase",
    "UpdateDependencyUseCase",
    "ListDependenciesUseCase",
    "CreateRelationshipUseCase",
    "ListRelationshipsUseCase",
    "DeleteRelationshipUseCase",
    "CreateFailureScenarioUseCase",
    "GetFailureScenarioUseCase",
    "ListFailureScenariosUseCase",
    "RunFailureSimulationUseCase",
    "AssessDependencyRiskUseCase",
    "ListDependencyRisksUseCase",
    "GetDependencyMapSummaryUseCase",
    "RecordKriMeasurementUseCase",
    "RecordIncidentUseCase",
    "GeneratePredictiveAnalyticsUseCase",
    "ForecastSeriesUseCase",
]
