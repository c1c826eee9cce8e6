"""Structured logging for the dependency resilience API.

Events are rendered by structlog and carry the service name, the
environment and, inside a span, the OpenTelemetry trace and span ids.
Credentials (API keys, key hashes, bearer tokens) are masked before
rendering.
"""

import logging
import sys
from typing import Any

import structlog
from opentelemetry import trace

from src.infrastructure.config import get_settings

SENSITIVE_KEYS = frozenset(
    {
        "api_key",
        "apikey",
        "key_hash",
        "token",
        "password",
        "secret",
        "authorization",
        "auth",
        "x-api-key",
    }
)

_MASK_PREFIX_LENGTH = 4


def configure_logging() -> None:
    """Route stdlib and structlog output through one processor chain.

    Domain and application modules log with logging.getLogger; API
    middleware uses get_logger(). Both end up on stdout at the
    configured level, as JSON or as console output.
    """
    settings = get_settings()
    otel_config = settings.observability

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, otel_config.log_level.upper()),
    )

    service_context = {
        "service": otel_config.service_name,
        "environment": settings.environment,
    }

    def _add_service_context(
        logger: logging.Logger,
        method_name: str,
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        for key, value in service_context.items():
            event_dict.setdefault(key, value)
        return event_dict

    renderer = (
        structlog.processors.JSONRenderer()
        if otel_config.log_json_format
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _add_service_context,
            _add_trace_context,
            _filter_sensitive_data,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _add_trace_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Stamp trace_id and span_id when a valid span is active."""
    span_context = trace.get_current_span().get_span_context()
    if span_context.is_valid:
        event_dict["trace_id"] = format(span_context.trace_id, "032x")
        event_dict["span_id"] = format(span_context.span_id, "016x")
    return event_dict


def _mask(key: Any, value: Any) -> Any:
    if not (isinstance(key, str) and key.lower() in SENSITIVE_KEYS):
        return value
    if isinstance(value, str) and len(value) > _MASK_PREFIX_LENGTH:
        hidden = len(value) - _MASK_PREFIX_LENGTH
        return value[:_MASK_PREFIX_LENGTH] + "*" * hidden
    return "***REDACTED***"


def _filter_sensitive_data(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Mask sensitive values in log events, including nested dicts.

    Strings longer than 4 characters keep their first 4 characters;
    any other value under a sensitive key is replaced entirely.
    """
    return {
        key: _mask(
            key,
            _filter_sensitive_data(logger, method_name, value)
            if isinstance(value, dict)
            else value,
        )
        for key, value in event_dict.items()
    }


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a structlog logger.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Simulation completed", scenario_id="...", affected=4)
    """
    return structlog.get_logger(name)
