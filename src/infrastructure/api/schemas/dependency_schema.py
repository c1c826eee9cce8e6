"""
Pydantic schemas for dependency and relationship API endpoints.

These schemas define the API request/response contracts and provide validation.
They are separate from application layer DTOs (which use dataclasses).
"""

from pydantic import BaseModel, ConfigDict, Field

DEPENDENCY_TYPE_PATTERN = "^(vendor|system|staff|data|location)$"
CRITICALITY_PATTERN = "^(critical|high|medium|low)$"
STATUS_PATTERN = "^(operational|degraded|failed|maintenance)$"
REDUNDANCY_PATTERN = "^(none|basic|full|distributed)$"
MONITORING_PATTERN = "^(monitored|partially_monitored|not_monitored|unknown)$"
RELATIONSHIP_TYPE_PATTERN = "^(depends_on|supports|feeds_into|backed_by|redundant_with)$"
STRENGTH_PATTERN = "^(weak|medium|strong|critical)$"


# ============================================================================
# Dependency Schemas
# ============================================================================


class RegisterDependencyApiRequest(BaseModel):
    """Request to register a dependency in the organization's map."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Core banking platform",
                "dependency_type": "system",
                "criticality": "critical",
                "maximum_tolerable_downtime_hours": 4,
                "recovery_time_objective_hours": 2,
                "redundancy_level": "basic",
                "monitoring_status": "monitored",
                "geographic_location": "eu-west-1",
            }
        }
    )

    name: str = Field(..., min_length=1, max_length=255, description="Dependency name")
    dependency_type: str = Field(
        ...,
        pattern=DEPENDENCY_TYPE_PATTERN,
        description="vendor, system, staff, data, or location",
    )
    criticality: str = Field("medium", pattern=CRITICALITY_PATTERN)
    business_function_id: str | None = Field(
        None, description="UUID of the supported business function"
    )
    maximum_tolerable_downtime_hours: float | None = Field(
        None, gt=0, description="Maximum tolerable downtime (MTD) in hours"
    )
    recovery_time_objective_hours: float | None = Field(
        None, gt=0, description="Recovery time objective (RTO) in hours"
    )
    redundancy_level: str = Field("none", pattern=REDUNDANCY_PATTERN)
    monitoring_status: str = Field("unknown", pattern=MONITORING_PATTERN)
    description: str | None = None
    geographic_location: str | None = None
    sla_requirements: str | None = None


class UpdateDependencyApiRequest(BaseModel):
    """Partial update of a dependency's status and resilience attributes."""

    status: str | None = Field(None, pattern=STATUS_PATTERN)
    maximum_tolerable_downtime_hours: float | None = Field(None, gt=0)
    recovery_time_objective_hours: float | None = Field(None, gt=0)
    redundancy_level: str | None = Field(None, pattern=REDUNDANCY_PATTERN)
    monitoring_status: str | None = Field(None, pattern=MONITORING_PATTERN)


class DependencyApiResponse(BaseModel):
    """A dependency."""

    id: str
    org_id: str
    name: str
    dependency_type: str
    criticality: str
    status: str
    business_function_id: str | None
    maximum_tolerable_downtime_hours: float | None
    recovery_time_objective_hours: float | None
    redundancy_level: str
    monitoring_status: str
    description: str | None
    geographic_location: str | None
    sla_requirements: str | None
    is_single_point_of_failure: bool = Field(
        ..., description="Critical dependency with no redundancy"
    )


class DependencyListApiResponse(BaseModel):
    """Dependencies of an organization."""

    dependencies: list[DependencyApiResponse]
    total: int


# ============================================================================
# Relationship Schemas
# ============================================================================


class CreateRelationshipApiRequest(BaseModel):
    """Request to map a directed edge: failure of source may affect target."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "source_dependency_id": "0d9a6c1e-3f1b-4b8a-9d55-2b0c8f6a1e01",
                "target_dependency_id": "7c41e2aa-51d4-4f5f-8f0e-0a9c3c1d2b02",
                "relationship_type": "depends_on",
                "relationship_strength": "strong",
                "failure_propagation_likelihood": 0.8,
                "propagation_delay_minutes": 15,
            }
        }
    )

    source_dependency_id: str = Field(..., description="Dependency whose failure propagates")
    target_dependency_id: str = Field(..., description="Dependency affected by the source")
    relationship_type: str = Field("depends_on", pattern=RELATIONSHIP_TYPE_PATTERN)
    relationship_strength: str = Field("medium", pattern=STRENGTH_PATTERN)
    failure_propagation_likelihood: float | None = Field(
        None,
        ge=0.0,
        le=1.0,
        description="Probability that a source failure propagates (default 0.5)",
    )
    propagation_delay_minutes: float | None = Field(
        None, ge=0, description="Delay before the target is affected (default 0)"
    )
    description: str | None = None


class RelationshipApiResponse(BaseModel):
    """A dependency relationship."""

    id: str
    source_dependency_id: str
    target_dependency_id: str
    relationship_type: str
    relationship_strength: str
    failure_propagation_likelihood: float | None
    propagation_delay_minutes: float | None
    description: str | None


class RelationshipListApiResponse(BaseModel):
    """Relationships of an organization's dependency map."""

    relationships: list[RelationshipApiResponse]
    total: int
