"""Infrastructure configuration module.

Centralized configuration management using Pydantic Settings.
"""

from src.infrastructure.config.settings import (
    ForecastSettings,
    Settings,
    SimulationSettings,
    get_settings,
)

__all__ = [
    "Settings",
    "SimulationSettings",
    "ForecastSettings",
    "get_settings",
]
