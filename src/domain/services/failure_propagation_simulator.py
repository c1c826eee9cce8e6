"""Failure propagation simulation service.

Walks the directed dependency graph breadth-first from a failing dependency,
deciding stochastically whether the failure cascades along each edge, and
produces the timeline of affected dependencies.
"""

import logging
import math
import random
from collections import deque
from collections.abc import Callable, Iterable
from uuid import UUID

from src.domain.entities.dependency import Dependency
from src.domain.entities.dependency_relationship import DependencyRelationship
from src.domain.entities.failure_simulation import (
    PropagationRecord,
    Severity,
    SeverityPolicy,
    SimulationResult,
)

logger = logging.getLogger(__name__)

RandomSource = Callable[[], float]


class SimulationError(Exception):
    """Base exception for failure simulation errors."""

    pass


class SimulationValidationError(SimulationError, ValueError):
    """Raised when relationship data cannot be simulated (bad probability or delay)."""

    pass


class DependencyNotFoundError(SimulationError):
    """Raised when a dependency reached by the simulation is not in the supplied set."""

    def __init__(self, dependency_id: UUID):
        self.dependency_id = dependency_id
        super().__init__(f"Dependency '{dependency_id}' not found in supplied dependencies")


class GraphTooLargeError(SimulationError):
    """Raised when a run exceeds the configured iteration ceilings."""

    pass


class FailurePropagationSimulator:
    """Simulates how a failure cascades through the dependency graph.

    Algorithm (breadth-first, FIFO queue):
    1. Start from the trigger at time 0 with the scenario severity
    2. Visit each dependency at most once, recording time and severity
    3. For each outgoing edge to an unvisited dependency, propagate with
       probability likelihood x multiplier(initial severity)
    4. A propagated failure arrives after the edge delay and may step down
       one severity level (critical never decays)

    The run is stochastic. Inject a seeded random source for reproducibility.
    """

    def __init__(
        self,
        policy: SeverityPolicy | None = None,
        random_source: RandomSource | None = None,
        max_visited: int = 10_000,
        max_queue_operations: int = 100_000,
        strict: bool = True,
        default_propagation_likelihood: float = 0.5,
        default_downtime_hours: float = 1.0,
    ):
        """Initialize the simulator.

        Args:
            policy: Severity multipliers and decay probability
            random_source: Callable returning floats in [0, 1)
            max_visited: Maximum dependencies a single run may visit
            max_queue_operations: Maximum queue pops a single run may perform
            strict: Raise DependencyNotFoundError for unknown dependency ids
                instead of skipping them
            default_propagation_likelihood: Likelihood used for edges that
                leave it unspecified
            default_downtime_hours: Downtime used for dependencies without a
                maximum tolerable downtime
        """
        if max_visited < 1 or max_queue_operations < 1:
            raise ValueError("iteration ceilings must be at least 1")
        if not (0.0 <= default_propagation_likelihood <= 1.0):
            raise ValueError(
                f"default_propagation_likelihood must be in [0.0, 1.0], "
                f"got: {default_propagation_likelihood}"
            )

        self._policy = policy or SeverityPolicy()
        self._random = random_source or random.random
        self._max_visited = max_visited
        self._max_queue_operations = max_queue_operations
        self._strict = strict
        self._default_likelihood = default_propagation_likelihood
        self._default_downtime_hours = default_downtime_hours

    def simulate(
        self,
        trigger_id: UUID,
        relationships: Iterable[DependencyRelationship],
        dependencies: Iterable[Dependency],
        severity: Severity,
    ) -> SimulationResult:
        """Simulate failure propagation from a trigger dependency.

        Args:
            trigger_id: Dependency that fails first
            relationships: Full set of directed edges available for traversal
            dependencies: Full set of dependency records (names, downtime)
            severity: Severity at the trigger

        Returns:
            SimulationResult with the propagation path and aggregates

        Raises:
            SimulationValidationError: If any edge has an invalid likelihood or delay
            DependencyNotFoundError: In strict mode, if a reached id is unknown
            GraphTooLargeError: If the iteration ceilings are exceeded
        """
        relationships = list(relationships)
        self._validate_relationships(relationships)

        by_id = {d.id: d for d in dependencies}
        outgoing: dict[UUID, list[DependencyRelationship]] = {}
        for rel in relationships:
            outgoing.setdefault(rel.source_dependency_id, []).append(rel)

        multiplier = self._policy.multiplier_for(severity)

        visited: set[UUID] = set()
        path: list[PropagationRecord] = []
        queue: deque[tuple[UUID, float, Severity]] = deque([(trigger_id, 0.0, severity)])
        queue_operations = 0

        while queue:
            queue_operations += 1
            if queue_operations > self._max_queue_operations:
                raise GraphTooLargeError(
                    f"Simulation exceeded {self._max_queue_operations} queue operations"
                )

            current_id, current_time, current_severity = queue.popleft()
            if current_id in visited:
                continue

            visited.add(current_id)
            if len(visited) > self._max_visited:
                raise GraphTooLargeError(
                    f"Simulation exceeded {self._max_visited} visited dependencies"
                )

            dependency = by_id.get(current_id)
            if dependency is None:
                if self._strict:
                    raise DependencyNotFoundError(current_id)
                logger.debug("Skipping unknown dependency %s", current_id)
                continue

            path.append(
                PropagationRecord(
                    dependency_id=current_id,
                    dependency_name=dependency.name,
                    affected_at_minutes=current_time,
                    severity=current_severity,
                    estimated_downtime_hours=self._downtime_for(dependency),
                )
            )

            for edge in outgoing.get(current_id, []):
                target_id = edge.target_dependency_id
                if target_id in visited:
                    continue

                likelihood = edge.failure_propagation_likelihood
                if likelihood is None:
                    likelihood = self._default_likelihood

                if self._random() >= likelihood * multiplier:
                    continue

                arrival = current_time + (edge.propagation_delay_minutes or 0.0)
                queue.append(
                    (target_id, arrival, self._propagated_severity(current_severity))
                )

        result = SimulationResult(
            trigger_dependency_id=trigger_id,
            initial_severity=severity,
            propagation_path=path,
        )

        logger.info(
            "Failure simulation completed: trigger=%s severity=%s affected=%d",
            trigger_id,
            severity.value,
            result.total_affected_dependencies,
        )
        return result

    def _propagated_severity(self, current: Severity) -> Severity:
        """Severity carried to the next dependency (may decay one level)."""
        if current == Severity.CRITICAL:
            return current
        if self._random() < self._policy.decay_probability:
            return current.step_down()
        return current

    def _downtime_for(self, dependency: Dependency) -> float:
        if dependency.maximum_tolerable_downtime_hours is None:
            return self._default_downtime_hours
        return dependency.maximum_tolerable_downtime_hours

    @staticmethod
    def _validate_relationships(relationships: list[DependencyRelationship]) -> None:
        """Reject edges whose likelihood or delay would produce a misleading timeline."""
        for rel in relationships:
            likelihood = rel.failure_propagation_likelihood
            if likelihood is not None and not (
                isinstance(likelihood, (int, float))
                and not isinstance(likelihood, bool)
                and math.isfinite(likelihood)
                and 0.0 <= likelihood <= 1.0
            ):
                raise SimulationValidationError(
                    f"Relationship {rel.id} has invalid failure_propagation_likelihood "
                    f"{likelihood!r}; expected a probability in [0.0, 1.0]"
                )

            delay = rel.propagation_delay_minutes
            if delay is not None and not (
                isinstance(delay, (int, float))
                and not isinstance(delay, bool)
                and math.isfinite(delay)
                and delay >= 0
            ):
                raise SimulationValidationError(
                    f"Relationship {rel.id} has invalid propagation_delay_minutes "
                    f"{delay!r}; expected a non-negative number"
                )
