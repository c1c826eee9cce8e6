"""Domain entities for failure propagation simulation.

This module defines the severity scale, the severity policy consumed by the
simulator, and the transient result of a single simulation run.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import UUID


class Severity(str, Enum):
    """Failure severity, ordered from least to most severe."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        """Position on the severity scale (low = 0, critical = 3)."""
        return _SEVERITY_ORDER.index(self)

    def step_down(self) -> "Severity":
        """Return the next lower severity, flooring at LOW."""
        return _SEVERITY_ORDER[max(0, self.rank - 1)]


_SEVERITY_ORDER = (Severity.LOW, Severity.MEDIUM, Severity.HIGH, Severity.CRITICAL)


DEFAULT_SEVERITY_MULTIPLIERS: dict[Severity, float] = {
    Severity.LOW: 0.3,
    Severity.MEDIUM: 0.6,
    Severity.HIGH: 0.8,
    Severity.CRITICAL: 1.0,
}


@dataclass(frozen=True)
class SeverityPolicy:
    """Propagation policy applied by the failure simulator.

    Attributes:
        multipliers: Scale applied to an edge's propagation likelihood,
            keyed by the severity the scenario starts at
        decay_probability: Chance that a propagated failure steps down one
            severity level (never applied to critical)
    """

    multipliers: dict[Severity, float] = field(
        default_factory=lambda: dict(DEFAULT_SEVERITY_MULTIPLIERS)
    )
    decay_probability: float = 0.3

    def __post_init__(self):
        """Validate policy values."""
        missing = [s.value for s in Severity if s not in self.multipliers]
        if missing:
            raise ValueError(f"multipliers missing severities: {missing}")

        for severity, multiplier in self.multipliers.items():
            if not (0.0 <= multiplier <= 1.0):
                raise ValueError(
                    f"multiplier for {severity.value} must be in [0.0, 1.0], "
                    f"got: {multiplier}"
                )

        if not (0.0 <= self.decay_probability <= 1.0):
            raise ValueError(
                f"decay_probability must be in [0.0, 1.0], "
                f"got: {self.decay_probability}"
            )

    def multiplier_for(self, severity: Severity) -> float:
        """Return the likelihood multiplier for a severity."""
        return self.multipliers[severity]


@dataclass
class PropagationRecord:
    """One dependency affected during a simulation run.

    Attributes:
        dependency_id: UUID of the affected dependency
        dependency_name: Name of the affected dependency
        affected_at_minutes: Minutes after the trigger failure when impact is felt
        severity: Severity at this dependency
        estimated_downtime_hours: Expected downtime of this dependency
    """

    dependency_id: UUID
    dependency_name: str
    affected_at_minutes: float
    severity: Severity
    estimated_downtime_hours: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "dependency_id": str(self.dependency_id),
            "dependency_name": self.dependency_name,
            "affected_at_minutes": self.affected_at_minutes,
            "severity": self.severity.value,
            "estimated_downtime_hours": self.estimated_downtime_hours,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PropagationRecord":
        return cls(
            dependency_id=UUID(str(data["dependency_id"])),
            dependency_name=data["dependency_name"],
            affected_at_minutes=data["affected_at_minutes"],
            severity=Severity(data["severity"]),
            estimated_downtime_hours=data["estimated_downtime_hours"],
        )


@dataclass
class SimulationResult:
    """Outcome of a single failure propagation run.

    Attributes:
        trigger_dependency_id: Dependency that failed first
        initial_severity: Severity the run started at
        propagation_path: Affected dependencies in visitation (BFS) order
        simulation_timestamp: Wall-clock time the run completed
    """

    trigger_dependency_id: UUID
    initial_severity: Severity
    propagation_path: list[PropagationRecord] = field(default_factory=list)
    simulation_timestamp: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @property
    def total_affected_dependencies(self) -> int:
        """Number of dependencies affected, trigger included."""
        return len(self.propagation_path)

    @property
    def estimated_total_downtime_hours(self) -> float:
        """Sum of estimated downtime across affected dependencies."""
        return sum(r.estimated_downtime_hours for r in self.propagation_path)

    @property
    def critical_path(self) -> list[PropagationRecord]:
        """Affected dependencies still at critical severity."""
        return [r for r in self.propagation_path if r.severity == Severity.CRITICAL]

    @property
    def recovery_sequence(self) -> list[PropagationRecord]:
        """Affected dependencies ordered by time of impact (stable)."""
        return sorted(self.propagation_path, key=lambda r: r.affected_at_minutes)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict (stored on the scenario)."""
        return {
            "trigger_dependency_id": str(self.trigger_dependency_id),
            "initial_severity": self.initial_severity.value,
            "propagation_path": [r.to_dict() for r in self.propagation_path],
            "total_affected_dependencies": self.total_affected_dependencies,
            "estimated_total_downtime_hours": self.estimated_total_downtime_hours,
            "critical_path": [r.to_dict() for r in self.critical_path],
            "recovery_sequence": [r.to_dict() for r in self.recovery_sequence],
            "simulation_timestamp": self.simulation_timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SimulationResult":
        """Rebuild a result from its stored dict form.

        Aggregates are derived from the path, so only the path is read back.
        """
        return cls(
            trigger_dependency_id=UUID(str(data["trigger_dependency_id"])),
            initial_severity=Severity(data["initial_severity"]),
            propagation_path=[
                PropagationRecord.from_dict(r) for r in data.get("propagation_path", [])
            ],
            simulation_timestamp=datetime.fromisoformat(data["simulation_timestamp"]),
        )
