"""Authentication dependency for API key verification.

Implements Bearer token authentication using bcrypt-hashed API keys.
Health check and documentation endpoints are exempt.
"""

from datetime import datetime, timezone
from uuid import UUID

import bcrypt
from fastapi import Depends, HTTPException, Request, status
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.database.models import ApiKeyModel
from src.infrastructure.database.session import get_async_session

# Endpoints that don't require authentication
EXCLUDED_PATHS = {
    "/api/v1/health",
    "/api/v1/health/ready",
    "/docs",
    "/redoc",
    "/openapi.json",
}


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def verify_api_key(
    request: Request,
    session: AsyncSession = Depends(get_async_session),
) -> str:
    """Verify API key from Authorization header.

    Uses the request-scoped session, so the last_used_at update commits
    together with the request's own writes.

    Args:
        request: FastAPI request object
        session: Request-scoped database session

    Returns:
        API key name (client identifier) if valid

    Raises:
        HTTPException: 401 if API key is missing, invalid, or revoked
    """
    if request.url.path in EXCLUDED_PATHS:
        return "health-check"

    auth_header = request.headers.get("Authorization")
    if not auth_header:
        raise _unauthorized("Missing Authorization header")

    parts = auth_header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise _unauthorized("Invalid Authorization header format. Expected: Bearer <token>")

    api_key_name = await _verify_key_in_db(session, parts[1])
    request.state.client_id = api_key_name
    return api_key_name


async def _verify_key_in_db(session: AsyncSession, provided_key: str) -> str:
    """Verify provided key against bcrypt hashes of active keys.

    Raises:
        HTTPException: 401 if key is invalid or revoked
    """
    stmt = select(ApiKeyModel).where(ApiKeyModel.is_active.is_(True))
    result = await session.execute(stmt)

    for api_key in result.scalars().all():
        if bcrypt.checkpw(provided_key.encode("utf-8"), api_key.key_hash.encode("utf-8")):
            await _update_last_used(session, api_key.id)
            return api_key.name

    raise _unauthorized("Invalid or revoked API key")


async def _update_last_used(session: AsyncSession, api_key_id: UUID) -> None:
    stmt = (
        update(ApiKeyModel)
        .where(ApiKeyModel.id == api_key_id)
        .values(last_used_at=datetime.now(timezone.utc))
    )
    await session.execute(stmt)
