"""OpenTelemetry tracing for the dependency resilience API.

Spans are exported over OTLP. SQLAlchemy is instrumented globally at
startup; FastAPI is instrumented per application instance. Simulation
routes open their own spans through get_tracer().
"""

import logging

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

from src.infrastructure.config import get_settings

logger = logging.getLogger(__name__)

SERVICE_VERSION = "0.1.0"


def _build_resource() -> Resource:
    settings = get_settings()
    return Resource.create(
        {
            "service.name": settings.observability.service_name,
            "service.version": SERVICE_VERSION,
            "deployment.environment": settings.environment,
        }
    )


def setup_tracing() -> TracerProvider:
    """Install the global tracer provider.

    The provider samples by trace id ratio and ships spans to the
    configured OTLP collector. A collector that cannot be configured
    leaves tracing local only; the API still starts.

    Returns:
        The installed TracerProvider

    Note:
        Call instrument_fastapi_app() once the app object exists.
    """
    otel_config = get_settings().observability

    provider = TracerProvider(
        resource=_build_resource(),
        sampler=TraceIdRatioBased(otel_config.trace_sample_rate),
    )

    try:
        exporter = OTLPSpanExporter(
            endpoint=otel_config.exporter_otlp_endpoint,
            insecure=True,  # TLS is terminated by the collector sidecar
        )
        provider.add_span_processor(BatchSpanProcessor(exporter))
        logger.info(
            "Span export enabled",
            extra={
                "service_name": otel_config.service_name,
                "otlp_endpoint": otel_config.exporter_otlp_endpoint,
                "sample_rate": otel_config.trace_sample_rate,
            },
        )
    except Exception as e:
        logger.warning(
            "OTLP exporter unavailable, spans will not leave the process",
            extra={"error": str(e)},
        )

    trace.set_tracer_provider(provider)

    try:
        SQLAlchemyInstrumentor().instrument()
    except Exception as e:
        logger.warning(
            "SQLAlchemy instrumentation failed",
            extra={"error": str(e)},
        )

    return provider


def instrument_fastapi_app(app) -> None:
    """Attach request spans to a FastAPI application."""
    try:
        FastAPIInstrumentor.instrument_app(app)
    except Exception as e:
        logger.warning(
            "FastAPI instrumentation failed",
            extra={"error": str(e)},
        )


def get_tracer(name: str):
    """Return a tracer for manual spans.

    Example:
        >>> tracer = get_tracer(__name__)
        >>> with tracer.start_as_current_span("failure_simulation") as span:
        ...     span.set_attribute("simulation.severity", "high")
    """
    return trace.get_tracer(name)
