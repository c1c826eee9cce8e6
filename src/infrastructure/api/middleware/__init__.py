"""API middleware components.

This module contains middleware for authentication, rate limiting,
error handling, and other cross-cutting concerns.
"""

from .auth import verify_api_key
from .error_handler import ErrorHandlerMiddleware
from .logging_middleware import LoggingMiddleware
from .metrics_middleware import MetricsMiddleware
from .rate_limit import RateLimitMiddleware

__all__ = [
    "verify_api_key",
    "ErrorHandlerMiddleware",
    "LoggingMiddleware",
    "MetricsMiddleware",
    "RateLimitMiddleware",
]
