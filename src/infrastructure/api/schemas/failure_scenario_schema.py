"""
Pydantic schemas for failure scenario and simulation API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field

SCENARIO_TYPE_PATTERN = "^(operational|cyber|natural_disaster|vendor_failure|data_breach)$"
SEVERITY_PATTERN = "^(low|medium|high|critical)$"


class CreateFailureScenarioApiRequest(BaseModel):
    """Request to define a failure scenario."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Primary data centre power loss",
                "trigger_dependency_id": "0d9a6c1e-3f1b-4b8a-9d55-2b0c8f6a1e01",
                "scenario_type": "natural_disaster",
                "severity_level": "critical",
                "estimated_duration_hours": 12,
            }
        }
    )

    name: str = Field(..., min_length=1, max_length=255)
    trigger_dependency_id: str = Field(..., description="Dependency that fails first")
    scenario_type: str = Field("operational", pattern=SCENARIO_TYPE_PATTERN)
    severity_level: str = Field("medium", pattern=SEVERITY_PATTERN)
    description: str | None = None
    estimated_duration_hours: float | None = Field(None, gt=0)
    business_impact_description: str | None = None


class PropagationStepApiModel(BaseModel):
    """One affected dependency on the propagation timeline."""

    dependency_id: str
    dependency_name: str
    affected_at_minutes: float = Field(
        ..., description="Minutes after the trigger failure"
    )
    severity: str
    estimated_downtime_hours: float


class SimulationResultApiResponse(BaseModel):
    """Result of a failure propagation simulation."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "trigger_dependency_id": "0d9a6c1e-3f1b-4b8a-9d55-2b0c8f6a1e01",
                "initial_severity": "critical",
                "propagation_path": [
                    {
                        "dependency_id": "0d9a6c1e-3f1b-4b8a-9d55-2b0c8f6a1e01",
                        "dependency_name": "Core banking platform",
                        "affected_at_minutes": 0,
                        "severity": "critical",
                        "estimated_downtime_hours": 8.0,
                    },
                    {
                        "dependency_id": "7c41e2aa-51d4-4f5f-8f0e-0a9c3c1d2b02",
                        "dependency_name": "Payments gateway",
                        "affected_at_minutes": 15,
                        "severity": "critical",
                        "estimated_downtime_hours": 4.0,
                    },
                ],
                "total_affected_dependencies": 2,
                "estimated_total_downtime_hours": 12.0,
                "critical_path": [],
                "recovery_sequence": [],
                "simulation_timestamp": "2026-03-02T09:30:00+00:00",
            }
        }
    )

    trigger_dependency_id: str
    initial_severity: str
    propagation_path: list[PropagationStepApiModel] = Field(
        ..., description="Affected dependencies in visitation order"
    )
    total_affected_dependencies: int
    estimated_total_downtime_hours: float
    critical_path: list[PropagationStepApiModel] = Field(
        ..., description="Affected dependencies still at critical severity"
    )
    recovery_sequence: list[PropagationStepApiModel] = Field(
        ..., description="Affected dependencies ordered by time of impact"
    )
    simulation_timestamp: str


class FailureScenarioApiResponse(BaseModel):
    """A failure scenario with its most recent simulation, if any."""

    id: str
    name: str
    trigger_dependency_id: str
    scenario_type: str
    severity_level: str
    description: str | None
    estimated_duration_hours: float | None
    business_impact_description: str | None
    simulation_results: SimulationResultApiResponse | None = None
    last_simulated_at: str | None = None


class FailureScenarioListApiResponse(BaseModel):
    """Failure scenarios of an organization."""

    scenarios: list[FailureScenarioApiResponse]
    total: int
