"""
RFC 7807 Problem Details error response schemas.

Implements standard error response format for the API.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

STATUS_TEXTS = {
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    409: "Conflict",
    422: "Unprocessable Entity",
    429: "Too Many Requests",
    500: "Internal Server Error",
    503: "Service Unavailable",
}


def status_text(status_code: int) -> str:
    """Human-readable title for an HTTP status code."""
    return STATUS_TEXTS.get(status_code, "Error")


class ProblemDetails(BaseModel):
    """
    RFC 7807 Problem Details for HTTP APIs.

    Standard error response format that provides machine-readable details
    about errors in a consistent structure.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "type": "https://httpstatuses.com/404",
                    "title": "Not Found",
                    "status": 404,
                    "detail": "Dependency '9b1d…' not found in supplied dependencies",
                    "instance": "/api/v1/organizations/3f2c…/scenarios/77aa…/simulate",
                },
                {
                    "type": "https://httpstatuses.com/422",
                    "title": "Unprocessable Entity",
                    "status": 422,
                    "detail": "Simulation exceeded 10000 visited dependencies",
                    "instance": "/api/v1/organizations/3f2c…/scenarios/77aa…/simulate",
                },
                {
                    "type": "https://httpstatuses.com/429",
                    "title": "Too Many Requests",
                    "status": 429,
                    "detail": "Rate limit exceeded. Try again in 12 seconds.",
                    "instance": "/api/v1/organizations/3f2c…/scenarios/77aa…/simulate",
                    "retry_after_seconds": 12,
                },
            ]
        }
    )

    type: str = Field(
        ...,
        description="URI reference that identifies the problem type",
    )
    title: str = Field(..., description="Short, human-readable summary of the problem")
    status: int = Field(..., description="HTTP status code", ge=100, le=599)
    detail: str = Field(
        ..., description="Human-readable explanation specific to this occurrence"
    )
    instance: str = Field(
        ..., description="URI reference that identifies the specific occurrence"
    )
    correlation_id: str | None = Field(
        None, description="Correlation ID for request tracing"
    )
    retry_after_seconds: int | None = Field(
        None,
        description="Seconds to wait before retrying (for 429 responses)",
        ge=0,
    )
    field: str | None = Field(
        None, description="Field name that caused the error (for validation errors)"
    )
    value: Any | None = Field(
        None, description="Invalid value that caused the error (for validation errors)"
    )
