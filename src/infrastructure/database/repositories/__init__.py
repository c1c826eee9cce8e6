"""Repository implementations module.

This module exports all repository implementations.
"""

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

__all__ = [
    "DependencyRepository",
    "RelationshipRepository",
    "FailureScenarioRepository",
    "DependencyRiskRepository",
    "MetricHistoryRepository",
]
