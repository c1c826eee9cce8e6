"""Dependency and relationship DTOs.

This module defines data transfer objects for registering dependencies and
mapping the relationships between them.
Uses dataclasses for application layer.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class RegisterDependencyRequest:
    """Request to register a dependency.

    Attributes:
        org_id: Owning organization
        name: Dependency name
        dependency_type: vendor/system/staff/data/location
        criticality: critical/high/medium/low
        business_function_id: Supported business function
        maximum_tolerable_downtime_hours: MTD in hours
        recovery_time_objective_hours: RTO in hours
        redundancy_level: none/basic/full/distributed
        monitoring_status: Monitoring coverage
        description: Free-text description
        geographic_location: Location of the dependency
        sla_requirements: SLA text
    """

    org_id: UUID
    name: str
    dependency_type: str
    criticality: str = "medium"
    business_function_id: UUID | None = None
    maximum_tolerable_downtime_hours: float | None = None
    recovery_time_objective_hours: float | None = None
    redundancy_level: str = "none"
    monitoring_status: str = "unknown"
    description: str | None = None
    geographic_location: str | None = None
    sla_requirements: str | None = None


@dataclass
class UpdateDependencyRequest:
    """Request to update a dependency's status and resilience attributes.

    Fields left as None are not changed.
    """

    org_id: UUID
    dependency_id: UUID
    status: str | None = None
    maximum_tolerable_downtime_hours: float | None = None
    recovery_time_objective_hours: float | None = None
    redundancy_level: str | None = None
    monitoring_status: str | None = None


@dataclass
class DependencyDTO:
    """Dependency in a response."""

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
    is_single_point_of_failure: bool


@dataclass
class CreateRelationshipRequest:
    """Request to map a directed relationship between two dependencies.

    Attributes:
        org_id: Owning organization
        source_dependency_id: Dependency whose failure propagates
        target_dependency_id: Dependency affected by the source
        relationship_type: depends_on/supports/feeds_into/backed_by/redundant_with
        relationship_strength: weak/medium/strong/critical
        failure_propagation_likelihood: Probability in [0, 1] (None = default)
        propagation_delay_minutes: Delay before impact (None = immediate)
        description: Free-text description
    """

    org_id: UUID
    source_dependency_id: UUID
    target_dependency_id: UUID
    relationship_type: str = "depends_on"
    relationship_strength: str = "medium"
    failure_propagation_likelihood: float | None = None
    propagation_delay_minutes: float | None = None
    description: str | None = None


@dataclass
class RelationshipDTO:
    """Relationship in a response."""

    id: str
    source_dependency_id: str
    target_dependency_id: str
    relationship_type: str
    relationship_strength: str
    failure_propagation_likelihood: float | None
    propagation_delay_minutes: float | None
    description: str | None
