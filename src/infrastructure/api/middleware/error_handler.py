"""Global error handling middleware.

Converts unhandled exceptions to RFC 7807 Problem Details format for
consistent error responses. Includes correlation IDs for request tracing.
"""

import logging
import uuid

from fastapi import Request, status
from fastapi.exceptions import HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, OperationalError
from starlette.middleware.base import BaseHTTPMiddleware

from src.domain.services.failure_propagation_simulator import (
    DependencyNotFoundError,
    GraphTooLargeError,
)
from src.infrastructure.api.schemas.error_schema import ProblemDetails, status_text

logger = logging.getLogger(__name__)

# (exception type, status code, fixed detail or None to use str(exc)), first match wins
EXCEPTION_STATUS_MAP: tuple[tuple[type[Exception], int, str | None], ...] = (
    (DependencyNotFoundError, status.HTTP_404_NOT_FOUND, None),
    (GraphTooLargeError, status.HTTP_422_UNPROCESSABLE_ENTITY, None),
    (ValueError, status.HTTP_400_BAD_REQUEST, None),
    (IntegrityError, status.HTTP_409_CONFLICT, "Resource conflict or constraint violation"),
    (OperationalError, status.HTTP_503_SERVICE_UNAVAILABLE, "Database is temporarily unavailable"),
)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Middleware to handle all exceptions and return RFC 7807 Problem Details."""

    async def dispatch(self, request: Request, call_next):
        """Catch all exceptions and convert to Problem Details format.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler in chain

        Returns:
            Response with Problem Details format on error
        """
        correlation_id = str(uuid.uuid4())
        request.state.correlation_id = correlation_id

        try:
            response = await call_next(request)
            response.headers["X-Correlation-ID"] = correlation_id
            return response

        except Exception as exc:
            logger.error(
                f"Request failed with correlation_id={correlation_id}",
                exc_info=exc,
                extra={
                    "correlation_id": correlation_id,
                    "path": request.url.path,
                    "method": request.method,
                },
            )

            problem = self._exception_to_problem(exc, request, correlation_id)
            return self._create_response(problem)

    def _exception_to_problem(
        self, exc: Exception, request: Request, correlation_id: str
    ) -> ProblemDetails:
        """Convert exception to RFC 7807 Problem Details.

        Args:
            exc: Exception that was raised
            request: Request that caused the exception
            correlation_id: Correlation ID for tracing

        Returns:
            ProblemDetails object
        """
        if isinstance(exc, HTTPException):
            return ProblemDetails(
                type="about:blank",
                title=status_text(exc.status_code),
                status=exc.status_code,
                detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
                instance=request.url.path,
                correlation_id=correlation_id,
            )

        for exc_type, status_code, detail in EXCEPTION_STATUS_MAP:
            if isinstance(exc, exc_type):
                return ProblemDetails(
                    type=f"https://httpstatuses.com/{status_code}",
                    title=status_text(status_code),
                    status=status_code,
                    detail=detail or str(exc),
                    instance=request.url.path,
                    correlation_id=correlation_id,
                )

        return ProblemDetails(
            type="https://httpstatuses.com/500",
            title="Internal Server Error",
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred",
            instance=request.url.path,
            correlation_id=correlation_id,
        )

    def _create_response(self, problem: ProblemDetails) -> JSONResponse:
        return JSONResponse(
            status_code=problem.status,
            content=problem.model_dump(exclude_none=True),
            headers={
                "Content-Type": "application/problem+json",
                "X-Correlation-ID": problem.correlation_id or "",
            },
        )
