"""Prometheus metrics instrumentation.

Defines and exports Prometheus metrics for monitoring the application.
Avoids high cardinality by omitting organization and dependency ids from labels.
"""

from prometheus_client import Counter, Histogram
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

# HTTP Request Metrics
http_requests_total = Counter(
    name="dependency_resilience_http_requests_total",
    documentation="Total number of HTTP requests",
    labelnames=["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    name="dependency_resilience_http_request_duration_seconds",
    documentation="HTTP request duration in seconds",
    labelnames=["method", "endpoint", "status_code"],
    buckets=(
        0.005,  # 5ms
        0.01,  # 10ms
        0.025,  # 25ms
        0.05,  # 50ms
        0.1,  # 100ms
        0.25,  # 250ms
        0.5,  # 500ms
        1.0,  # 1s
        2.5,  # 2.5s
        5.0,  # 5s
        10.0,  # 10s
    ),
)

# Failure Simulation Metrics
failure_simulations_total = Counter(
    name="dependency_resilience_failure_simulations_total",
    documentation="Total number of failure propagation simulation runs",
    labelnames=["severity", "outcome"],  # outcome: success, invalid, not_found, too_large
)

failure_simulation_duration_seconds = Histogram(
    name="dependency_resilience_failure_simulation_duration_seconds",
    documentation="Failure propagation simulation duration in seconds",
    labelnames=["severity"],
    buckets=(
        0.001,  # 1ms
        0.005,  # 5ms
        0.01,  # 10ms
        0.025,  # 25ms
        0.05,  # 50ms
        0.1,  # 100ms
        0.25,  # 250ms
        0.5,  # 500ms
        1.0,  # 1s
        2.5,  # 2.5s
    ),
)

simulation_affected_dependencies = Histogram(
    name="dependency_resilience_simulation_affected_dependencies",
    documentation="Number of dependencies affected per simulation run",
    buckets=(1, 2, 5, 10, 25, 50, 100, 250, 1000),
)

# Analytics Metrics
forecasts_generated_total = Counter(
    name="dependency_resilience_forecasts_generated_total",
    documentation="Total number of forecasts generated",
    labelnames=["kind"],  # kri, incident, series
)

risk_assessments_total = Counter(
    name="dependency_resilience_risk_assessments_total",
    documentation="Total number of dependency risk assessments recorded",
    labelnames=["risk_rating"],
)

# Rate Limiting Metrics
rate_limit_exceeded_total = Counter(
    name="dependency_resilience_rate_limit_exceeded_total",
    documentation="Total number of requests rejected due to rate limiting",
    labelnames=["endpoint"],
)


def get_metrics_content() -> tuple[bytes, str]:
    """Generate Prometheus metrics in exposition format.

    Returns:
        Tuple of (metrics_bytes, content_type)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


def record_http_request(
    method: str,
    endpoint: str,
    status_code: int,
    duration: float,
) -> None:
    """Record HTTP request metrics.

    Args:
        method: HTTP method (GET, POST, etc.)
        endpoint: API endpoint path
        status_code: HTTP status code
        duration: Request duration in seconds
    """
    http_requests_total.labels(
        method=method,
        endpoint=endpoint,
        status_code=str(status_code),
    ).inc()

    http_request_duration_seconds.labels(
        method=method,
        endpoint=endpoint,
        status_code=str(status_code),
    ).observe(duration)


def record_failure_simulation(
    severity: str,
    outcome: str,
    duration: float,
    affected_dependencies: int | None = None,
) -> None:
    """Record failure simulation metrics.

    Args:
        severity: Initial scenario severity
        outcome: success, invalid, not_found, or too_large
        duration: Simulation duration in seconds
        affected_dependencies: Affected count (successful runs only)
    """
    failure_simulations_total.labels(severity=severity, outcome=outcome).inc()
    failure_simulation_duration_seconds.labels(severity=severity).observe(duration)
    if affected_dependencies is not None:
        simulation_affected_dependencies.observe(affected_dependencies)


def record_forecasts_generated(kind: str, count: int = 1) -> None:
    """Record generated forecasts.

    Args:
        kind: Forecast kind (kri, incident, series)
        count: Number of forecasts generated
    """
    forecasts_generated_total.labels(kind=kind).inc(count)


def record_risk_assessment(risk_rating: str) -> None:
    """Record a dependency risk assessment by rating."""
    risk_assessments_total.labels(risk_rating=risk_rating).inc()


def record_rate_limit_exceeded(endpoint: str) -> None:
    """Record rate limit exceeded event.

    Args:
        endpoint: Endpoint that was rate limited
    """
    rate_limit_exceeded_total.labels(endpoint=endpoint).inc()
