"""Dependency entity module.

This module defines the Dependency entity representing an operational
building block (vendor, system, staff, data, location) an organization relies on.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class DependencyType(str, Enum):
    """Kind of operational dependency."""

    VENDOR = "vendor"
    SYSTEM = "system"
    STAFF = "staff"
    DATA = "data"
    LOCATION = "location"


class Criticality(str, Enum):
    """Dependency criticality tiers."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class DependencyStatus(str, Enum):
    """Current operational status of a dependency."""

    OPERATIONAL = "operational"
    DEGRADED = "degraded"
    FAILED = "failed"
    MAINTENANCE = "maintenance"


class RedundancyLevel(str, Enum):
    """How much redundancy backs a dependency."""

    NONE = "none"
    BASIC = "basic"
    FULL = "full"
    DISTRIBUTED = "distributed"


class MonitoringStatus(str, Enum):
    """Monitoring coverage of a dependency."""

    MONITORED = "monitored"
    PARTIALLY_MONITORED = "partially_monitored"
    NOT_MONITORED = "not_monitored"
    UNKNOWN = "unknown"


@dataclass
class Dependency:
    """Represents one operational dependency of an organization.

    Domain invariants:
    - name must be non-empty
    - maximum_tolerable_downtime_hours and recovery_time_objective_hours
      must be positive when set
    - recovery_time_objective_hours cannot exceed the maximum tolerable downtime

    Attributes:
        org_id: Owning organization
        name: Human-readable name (e.g., "Core Banking Platform")
        dependency_type: Kind of dependency
        criticality: Criticality tier
        business_function_id: Business function this dependency supports
        status: Current operational status
        maximum_tolerable_downtime_hours: MTD in hours
        recovery_time_objective_hours: RTO in hours
        redundancy_level: Redundancy backing this dependency
        monitoring_status: Monitoring coverage
        description: Free-text description
        geographic_location: Where the dependency is located
        sla_requirements: Contracted or internal SLA text
        id: Internal UUID identifier
        created_at: Timestamp when dependency was registered
        updated_at: Timestamp when dependency was last updated
    """

    org_id: UUID
    name: str
    dependency_type: DependencyType
    criticality: Criticality = Criticality.MEDIUM
    business_function_id: UUID | None = None
    status: DependencyStatus = DependencyStatus.OPERATIONAL
    maximum_tolerable_downtime_hours: float | None = None
    recovery_time_objective_hours: float | None = None
    redundancy_level: RedundancyLevel = RedundancyLevel.NONE
    monitoring_status: MonitoringStatus = MonitoringStatus.UNKNOWN
    description: str | None = None
    geographic_location: str | None = None
    sla_requirements: str | None = None

    # Audit fields
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        """Validate domain invariants after initialization."""
        if not self.name or not self.name.strip():
            raise ValueError("name cannot be empty")
        self._validate_resilience()

    def _validate_resilience(self) -> None:
        mtd = self.maximum_tolerable_downtime_hours
        rto = self.recovery_time_objective_hours

        if mtd is not None and mtd <= 0:
            raise ValueError(
                f"maximum_tolerable_downtime_hours must be positive, got: {mtd}"
            )
        if rto is not None and rto <= 0:
            raise ValueError(
                f"recovery_time_objective_hours must be positive, got: {rto}"
            )
        if mtd is not None and rto is not None and rto > mtd:
            raise ValueError(
                f"recovery_time_objective_hours ({rto}) cannot exceed "
                f"maximum_tolerable_downtime_hours ({mtd})"
            )

    def update_resilience(
        self,
        status: DependencyStatus | None = None,
        maximum_tolerable_downtime_hours: float | None = None,
        recovery_time_objective_hours: float | None = None,
        redundancy_level: RedundancyLevel | None = None,
        monitoring_status: MonitoringStatus | None = None,
    ) -> None:
        """Update status and resilience attributes.

        Only the arguments that are not None are applied.

        Raises:
            ValueError: If the resulting attributes violate an invariant
        """
        previous = (
            self.maximum_tolerable_downtime_hours,
            self.recovery_time_objective_hours,
        )
        if maximum_tolerable_downtime_hours is not None:
            self.maximum_tolerable_downtime_hours = maximum_tolerable_downtime_hours
        if recovery_time_objective_hours is not None:
            self.recovery_time_objective_hours = recovery_time_objective_hours

        try:
            self._validate_resilience()
        except ValueError:
            (
                self.maximum_tolerable_downtime_hours,
                self.recovery_time_objective_hours,
            ) = previous
            raise

        if status is not None:
            self.status = status
        if redundancy_level is not None:
            self.redundancy_level = redundancy_level
        if monitoring_status is not None:
            self.monitoring_status = monitoring_status
        self.updated_at = datetime.now(timezone.utc)

    @property
    def is_single_point_of_failure(self) -> bool:
        """Critical dependency with no redundancy behind it."""
        return (
            self.criticality == Criticality.CRITICAL
            and self.redundancy_level == RedundancyLevel.NONE
        )
