"""Repository interfaces - Abstract data access contracts."""

from src.domain.repositories.dependency_repository import (
    DependencyRepositoryInterface,
)
from src.domain.repositories.dependency_risk_repository import (
    DependencyRiskRepositoryInterface,
)
from src.domain.repositories.failure_scenario_repository import (
    FailureScenarioRepositoryInterface,
)
from src.domain.repositories.metric_history_repository import (
    MetricHistoryRepositoryInterface,
)
from src.domain.repositories.relationship_repository import (
    RelationshipRepositoryInterface,
)

__all__ = [
    "DependencyRepositoryInterface",
    "RelationshipRepositoryInterface",
    "FailureScenarioRepositoryInterface",
    "DependencyRiskRepositoryInterface",
    "MetricHistoryRepositoryInterface",
]
