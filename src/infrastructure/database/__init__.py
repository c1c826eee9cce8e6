"""Database infrastructure.

This package contains:
- SQLAlchemy models
- Repository implementations
- Database configuration and session management
"""

from src.infrastructure.database.models import (
    ApiKeyModel,
    Base,
    DependencyModel,
    DependencyRelationshipModel,
    DependencyRiskModel,
    FailureScenarioModel,
    IncidentLogModel,
    KriMeasurementModel,
)

__all__ = [
    "Base",
    "DependencyModel",
    "DependencyRelationshipModel",
    "FailureScenarioModel",
    "DependencyRiskModel",
    "KriMeasurementModel",
    "IncidentLogModel",
    "ApiKeyModel",
]
