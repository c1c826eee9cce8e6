"""Metrics middleware for recording HTTP request metrics.

Records Prometheus metrics for all HTTP requests including duration,
status codes, and endpoints.
"""

import re
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from src.infrastructure.observability.metrics import record_http_request

UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE
)


class MetricsMiddleware(BaseHTTPMiddleware):
    """Middleware to record HTTP request metrics.

    Labels: method, endpoint, status_code. Organization, dependency and
    scenario ids are collapsed to placeholders to keep cardinality bounded.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        start_time = time.perf_counter()

        response = await call_next(request)

        record_http_request(
            method=request.method,
            endpoint=self._normalize_endpoint(request),
            status_code=response.status_code,
            duration=time.perf_counter() - start_time,
        )

        return response

    def _normalize_endpoint(self, request: Request) -> str:
        """Normalize endpoint path for metrics.

        Examples:
            /api/v1/organizations/{uuid}/scenarios/{uuid}/simulate
                -> /api/v1/organizations/{org_id}/scenarios/{scenario_id}/simulate
        """
        # Matched FastAPI route template, when routing has already run
        route = request.scope.get("route")
        if route is not None and hasattr(route, "path"):
            return route.path

        return UUID_PATTERN.sub("{id}", request.url.path)
