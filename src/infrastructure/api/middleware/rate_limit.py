"""Rate limiting middleware using token bucket algorithm.

Implements per-client rate limiting with separate budgets for simulation
runs, writes, and queries. Uses in-memory storage (per process).
"""

import re
import time
from collections import defaultdict
from dataclasses import dataclass, field

from fastapi import Request, status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from src.infrastructure.api.schemas.error_schema import ProblemDetails
from src.infrastructure.config.settings import RateLimitSettings
from src.infrastructure.observability.metrics import record_rate_limit_exceeded


@dataclass
class TokenBucket:
    """Token bucket for rate limiting.

    Implements a simple token bucket algorithm with refill rate.
    """

    capacity: int
    refill_rate: float  # tokens per second
    tokens: float = field(init=False)
    last_refill: float = field(init=False)

    def __post_init__(self) -> None:
        self.tokens = float(self.capacity)
        self.last_refill = time.monotonic()

    def consume(self, tokens: int = 1) -> bool:
        """Attempt to consume tokens from bucket.

        Returns:
            True if tokens were consumed, False if insufficient tokens
        """
        self._refill()

        if self.tokens >= tokens:
            self.tokens -= tokens
            return True
        return False

    def _refill(self) -> None:
        now = time.monotonic()
        elapsed = now - self.last_refill
        self.tokens = min(self.capacity, self.tokens + elapsed * self.refill_rate)
        self.last_refill = now

    def time_until_available(self, tokens: int = 1) -> float:
        """Seconds until requested tokens are available (0 if already available)."""
        self._refill()
        if self.tokens >= tokens:
            return 0.0
        return (tokens - self.tokens) / self.refill_rate


WINDOW_SECONDS = 60

SIMULATE_PATH = re.compile(r"^/api/v1/organizations/[^/]+/scenarios/[^/]+/simulate$")
WRITE_METHODS = {"POST", "PUT", "PATCH", "DELETE"}

# Exclude health checks and docs from rate limiting
EXCLUDED_PATHS = {
    "/api/v1/health",
    "/api/v1/health/ready",
    "/api/v1/metrics",
    "/docs",
    "/redoc",
    "/openapi.json",
}


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Middleware for rate limiting API requests.

    Uses token bucket algorithm with per-client tracking. Clients are
    identified by their bearer token fingerprint when present, falling back
    to the client IP.
    """

    def __init__(self, app, limits: dict[str, int] | None = None):
        """Initialize rate limiter with in-memory storage.

        Args:
            app: ASGI application
            limits: Requests per minute keyed by "simulation", "write" and
                "query" (defaults to RATE_LIMIT_* settings)
        """
        super().__init__(app)
        if limits is None:
            config = RateLimitSettings()
            limits = {
                "simulation": config.simulation,
                "write": config.write,
                "query": config.query,
            }
        self.limits = limits
        # client_id -> endpoint category -> TokenBucket
        self.buckets: dict[str, dict[str, TokenBucket]] = defaultdict(dict)

    async def dispatch(self, request: Request, call_next):
        """Apply rate limiting to request.

        Returns:
            Response or 429 Problem Details if rate limit exceeded
        """
        if request.url.path in EXCLUDED_PATHS:
            return await call_next(request)

        client_id = self._client_id(request)
        category = self._get_endpoint_category(request)
        requests_per_window = self.limits[category]

        if category not in self.buckets[client_id]:
            self.buckets[client_id][category] = TokenBucket(
                capacity=requests_per_window,
                refill_rate=requests_per_window / WINDOW_SECONDS,
            )
        bucket = self.buckets[client_id][category]

        if not bucket.consume():
            retry_after = int(bucket.time_until_available()) + 1
            record_rate_limit_exceeded(endpoint=category)

            problem = ProblemDetails(
                type="https://httpstatuses.com/429",
                title="Too Many Requests",
                status=status.HTTP_429_TOO_MANY_REQUESTS,
                detail=f"Rate limit exceeded. Try again in {retry_after} seconds.",
                instance=request.url.path,
                retry_after_seconds=retry_after,
            )
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content=problem.model_dump(exclude_none=True),
                headers={
                    "Content-Type": "application/problem+json",
                    "X-RateLimit-Limit": str(requests_per_window),
                    "X-RateLimit-Remaining": "0",
                    "X-RateLimit-Reset": str(int(time.time()) + retry_after),
                    "Retry-After": str(retry_after),
                },
            )

        response = await call_next(request)

        response.headers["X-RateLimit-Limit"] = str(requests_per_window)
        response.headers["X-RateLimit-Remaining"] = str(int(bucket.tokens))
        response.headers["X-RateLimit-Reset"] = str(int(time.time() + WINDOW_SECONDS))

        return response

    @staticmethod
    def _client_id(request: Request) -> str:
        auth_header = request.headers.get("Authorization")
        if auth_header:
            # Never keep the raw key in memory as a dict key
            return f"key:{hash(auth_header)}"
        if request.client:
            return f"ip:{request.client.host}"
        return "anonymous"

    @staticmethod
    def _get_endpoint_category(request: Request) -> str:
        """Classify a request as simulation, write, or query."""
        if request.method == "POST" and SIMULATE_PATH.match(request.url.path):
            return "simulation"
        if request.method in WRITE_METHODS:
            return "write"
        return "query"
