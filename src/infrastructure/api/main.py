"""
FastAPI application for the dependency resilience service.

Wires the organization-scoped routers (dependency map, failure
scenarios, risk register, predictive analytics), the middleware chain
and the RFC 7807 exception handlers.
"""

import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import HTTPException, RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.infrastructure.database.config import dispose_db, init_db
from src.infrastructure.observability import (
    configure_logging,
    instrument_fastapi_app,
    setup_tracing,
)

from .middleware.error_handler import ErrorHandlerMiddleware
from .middleware.logging_middleware import LoggingMiddleware
from .middleware.metrics_middleware import MetricsMiddleware
from .middleware.rate_limit import RateLimitMiddleware
from .routes import analytics, dependencies, health, relationships, risks, scenarios
from .schemas.error_schema import ProblemDetails, status_text

API_TITLE = "Dependency Resilience API"
API_VERSION = "0.1.0"
API_PREFIX = "/api/v1"
ORG_PREFIX = f"{API_PREFIX}/organizations"

ORGANIZATION_ROUTERS = (
    (dependencies.router, "Dependencies"),
    (relationships.router, "Relationships"),
    (scenarios.router, "Failure Scenarios"),
    (risks.router, "Risk"),
    (analytics.router, "Predictive Analytics"),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Set up logging, tracing and the connection pool; close the pool on exit."""
    configure_logging()
    setup_tracing()
    await init_db()
    instrument_fastapi_app(app)

    yield

    await dispose_db()


def _problem_response(request: Request, status_code: int, detail: str) -> JSONResponse:
    correlation_id = getattr(request.state, "correlation_id", None) or str(uuid.uuid4())

    problem = ProblemDetails(
        type="about:blank",
        title=status_text(status_code),
        status=status_code,
        detail=detail,
        instance=request.url.path,
        correlation_id=correlation_id,
    )

    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers={
            "Content-Type": "application/problem+json",
            "X-Correlation-ID": correlation_id,
        },
    )


def create_app() -> FastAPI:
    """Build the application with every router and middleware attached."""
    app = FastAPI(
        title=API_TITLE,
        description=(
            "Maps an organization's operational dependencies, simulates how a "
            "failure cascades through them, and forecasts key risk indicators."
        ),
        version=API_VERSION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,  # wildcard origins forbid credentials
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Last added runs first: errors wrap metrics wrap logging wrap rate limiting.
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RateLimitMiddleware)

    app.include_router(health.router, prefix=API_PREFIX)
    for router, tag in ORGANIZATION_ROUTERS:
        app.include_router(router, prefix=ORG_PREFIX, tags=[tag])
    app.include_router(
        analytics.forecast_router, prefix=API_PREFIX, tags=["Predictive Analytics"]
    )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        response = _problem_response(request, exc.status_code, detail)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return _problem_response(
            request,
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            f"Validation failed: {exc.errors()}",
        )

    @app.get("/", status_code=status.HTTP_200_OK)
    async def root():
        return {
            "name": API_TITLE,
            "version": API_VERSION,
            "status": "operational",
            "docs": "/docs",
        }

    return app


app = create_app()
