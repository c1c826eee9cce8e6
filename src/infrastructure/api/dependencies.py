"""
Dependency injection for FastAPI routes.

Provides factory functions for creating use cases with their required dependencies.
Uses FastAPI's Depends() for dependency injection. All repositories of one
request share the request-scoped session.
"""

import random

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

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
from src.domain.entities.failure_simulation import Severity, SeverityPolicy
from src.domain.services.dependency_map_summary_service import (
    DependencyMapSummaryService,
)
from src.domain.services.failure_propagation_simulator import (
    FailurePropagationSimulator,
)
from src.domain.services.forecast_calculator import ForecastCalculator
from src.domain.services.predictive_analytics_service import (
    PredictiveAnalyticsService,
)
from src.infrastructure.config import get_settings
from src.infrastructure.database.repositories.dependency_repository import (
    DependencyRepository,
)
from src.infrastructure.database.repositories.dependency_risk_repository import (
    DependencyRiskRepository,
)
from src.infrastructure.database.repositories.failure_scenario_repository import (
    FailureScenarioRepository,
)
from src.infrastructure.database.repositories.metric_history_repository import (
    MetricHistoryRepository,
)
from src.infrastructure.database.repositories.relationship_repository import (
    RelationshipRepository,
)
from src.infrastructure.database.session import get_async_session


# Repository factories


async def get_dependency_repository(
    session: AsyncSession = Depends(get_async_session),
) -> DependencyRepository:
    """Get DependencyRepository instance."""
    return DependencyRepository(session)


async def get_relationship_repository(
    session: AsyncSession = Depends(get_async_session),
) -> RelationshipRepository:
    """Get RelationshipRepository instance."""
    return RelationshipRepository(session)


async def get_failure_scenario_repository(
    session: AsyncSession = Depends(get_async_session),
) -> FailureScenarioRepository:
    """Get FailureScenarioRepository instance."""
    return FailureScenarioRepository(session)


async def get_dependency_risk_repository(
    session: AsyncSession = Depends(get_async_session),
) -> DependencyRiskRepository:
    """Get DependencyRiskRepository instance."""
    return DependencyRiskRepository(session)


async def get_metric_history_repository(
    session: AsyncSession = Depends(get_async_session),
) -> MetricHistoryRepository:
    """Get MetricHistoryRepository instance."""
    return MetricHistoryRepository(session)


# Domain service factories


def get_failure_propagation_simulator() -> FailurePropagationSimulator:
    """Build a simulator from SIMULATION_* settings.

    A configured random_seed gives every run its own identically seeded
    generator, so the same graph always produces the same result.
    """
    config = get_settings().simulation

    random_source = None
    if config.random_seed is not None:
        random_source = random.Random(config.random_seed).random

    policy = SeverityPolicy(
        multipliers={Severity(k): v for k, v in config.severity_multipliers.items()},
        decay_probability=config.severity_decay_probability,
    )

    return FailurePropagationSimulator(
        policy=policy,
        random_source=random_source,
        max_visited=config.max_visited_dependencies,
        max_queue_operations=config.max_queue_operations,
        strict=config.strict_missing_dependencies,
        default_propagation_likelihood=config.default_propagation_likelihood,
        default_downtime_hours=config.default_downtime_hours,
    )


def get_forecast_calculator() -> ForecastCalculator:
    """Build a ForecastCalculator from FORECAST_* settings."""
    config = get_settings().forecast
    return ForecastCalculator(
        short_horizon=config.short_horizon_days,
        long_horizon=config.long_horizon_days,
        max_confidence=config.max_confidence,
        confidence_sample_size=config.confidence_sample_size,
    )


def get_predictive_analytics_service(
    forecast_calculator: ForecastCalculator = Depends(get_forecast_calculator),
) -> PredictiveAnalyticsService:
    """Get PredictiveAnalyticsService instance."""
    return PredictiveAnalyticsService(forecast_calculator)


def get_dependency_map_summary_service() -> DependencyMapSummaryService:
    """Get DependencyMapSummaryService instance."""
    return DependencyMapSummaryService()


# Use case factories: dependencies and relationships


async def get_register_dependency_use_case(
    dependency_repo: DependencyRepository = Depends(get_dependency_repository),
) -> RegisterDependencyUseCase:
    return RegisterDependencyUseCase(dependency_repository=dependency_repo)


async def get_get_dependency_use_case(
    dependency_repo: DependencyRepository = Depends(get_dependency_repository),
) -> GetDependencyUseCase:
    return GetDependencyUseCase(dependency_repository=dependency_repo)


async def get_update_dependency_use_case(
    dependency_repo: DependencyRepository = Depends(get_dependency_repository),
) -> UpdateDependencyUseCase:
    return UpdateDependencyUseCase(dependency_repository=dependency_repo)


async def get_list_dependencies_use_case(
    dependency_repo: DependencyRepository = Depends(get_dependency_repository),
) -> ListDependenciesUseCase:
    return ListDependenciesUseCase(dependency_repository=dependency_repo)


async def get_create_relationship_use_case(
    dependency_repo: DependencyRepository = Depends(get_dependency_repository),
    relationship_repo: RelationshipRepository = Depends(get_relationship_repository),
) -> CreateRelationshipUseCase:
    return CreateRelationshipUseCase(
        dependency_repository=dependency_repo,
        relationship_repository=relationship_repo,
    )


async def get_list_relationships_use_case(
    relationship_repo: RelationshipRepository = Depends(get_relationship_repository),
) -> ListRelationshipsUseCase:
    return ListRelationshipsUseCase(relationship_repository=relationship_repo)


async def get_delete_relationship_use_case(
    relationship_repo: RelationshipRepository = Depends(get_relationship_repository),
) -> DeleteRelationshipUseCase:
    return DeleteRelationshipUseCase(relationship_repository=relationship_repo)


# Use case factories: scenarios and simulation


async def get_create_failure_scenario_use_case(
    scenario_repo: FailureScenarioRepository = Depends(get_failure_scenario_repository),
    dependency_repo: DependencyRepository = Depends(get_dependency_repository),
) -> CreateFailureScenarioUseCase:
    return CreateFailureScenarioUseCase(
        scenario_repository=scenario_repo,
        dependency_repository=dependency_repo,
    )


async def get_get_failure_scenario_use_case(
    scenario_repo: FailureScenarioRepository = Depends(get_failure_scenario_repository),
) -> GetFailureScenarioUseCase:
    return GetFailureScenarioUseCase(scenario_repository=scenario_repo)


async def get_list_failure_scenarios_use_case(
    scenario_repo: FailureScenarioRepository = Depends(get_failure_scenario_repository),
) -> ListFailureScenariosUseCase:
    return ListFailureScenariosUseCase(scenario_repository=scenario_repo)


async def get_run_failure_simulation_use_case(
    scenario_repo: FailureScenarioRepository = Depends(get_failure_scenario_repository),
    dependency_repo: DependencyRepository = Depends(get_dependency_repository),
    relationship_repo: RelationshipRepository = Depends(get_relationship_repository),
    simulator: FailurePropagationSimulator = Depends(get_failure_propagation_simulator),
) -> RunFailureSimulationUseCase:
    """Get RunFailureSimulationUseCase instance."""
    return RunFailureSimulationUseCase(
        scenario_repository=scenario_repo,
        dependency_repository=dependency_repo,
        relationship_repository=relationship_repo,
        simulator=simulator,
    )


# Use case factories: risk and summary


async def get_assess_dependency_risk_use_case(
    risk_repo: DependencyRiskRepository = Depends(get_dependency_risk_repository),
    dependency_repo: DependencyRepository = Depends(get_dependency_repository),
) -> AssessDependencyRiskUseCase:
    return AssessDependencyRiskUseCase(
        risk_repository=risk_repo,
        dependency_repository=dependency_repo,
    )


async def get_list_dependency_risks_use_case(
    risk_repo: DependencyRiskRepository = Depends(get_dependency_risk_repository),
) -> ListDependencyRisksUseCase:
    return ListDependencyRisksUseCase(risk_repository=risk_repo)


async def get_dependency_map_summary_use_case(
    dependency_repo: DependencyRepository = Depends(get_dependency_repository),
    relationship_repo: RelationshipRepository = Depends(get_relationship_repository),
    risk_repo: DependencyRiskRepository = Depends(get_dependency_risk_repository),
    scenario_repo: FailureScenarioRepository = Depends(get_failure_scenario_repository),
    summary_service: DependencyMapSummaryService = Depends(
        get_dependency_map_summary_service
    ),
) -> GetDependencyMapSummaryUseCase:
    """Get GetDependencyMapSummaryUseCase instance."""
    return GetDependencyMapSummaryUseCase(
        dependency_repository=dependency_repo,
        relationship_repository=relationship_repo,
        risk_repository=risk_repo,
        scenario_repository=scenario_repo,
        summary_service=summary_service,
    )


# Use case factories: analytics


async def get_record_kri_measurement_use_case(
    metric_repo: MetricHistoryRepository = Depends(get_metric_history_repository),
) -> RecordKriMeasurementUseCase:
    return RecordKriMeasurementUseCase(metric_history_repository=metric_repo)


async def get_record_incident_use_case(
    metric_repo: MetricHistoryRepository = Depends(get_metric_history_repository),
) -> RecordIncidentUseCase:
    return RecordIncidentUseCase(metric_history_repository=metric_repo)


async def get_generate_predictive_analytics_use_case(
    metric_repo: MetricHistoryRepository = Depends(get_metric_history_repository),
    analytics_service: PredictiveAnalyticsService = Depends(
        get_predictive_analytics_service
    ),
) -> GeneratePredictiveAnalyticsUseCase:
    """Get GeneratePredictiveAnalyticsUseCase instance."""
    return GeneratePredictiveAnalyticsUseCase(
        metric_history_repository=metric_repo,
        analytics_service=analytics_service,
        default_lookback_days=get_settings().forecast.lookback_days,
    )


async def get_forecast_series_use_case(
    forecast_calculator: ForecastCalculator = Depends(get_forecast_calculator),
) -> ForecastSeriesUseCase:
    return ForecastSeriesUseCase(forecast_calculator=forecast_calculator)
