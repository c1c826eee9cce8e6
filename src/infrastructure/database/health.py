"""Database health check module."""

import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from src.infrastructure.database.config import get_engine

logger = logging.getLogger(__name__)


async def check_database_health(engine: AsyncEngine | None = None) -> bool:
    """Check database connectivity with a SELECT 1 round trip.

    Args:
        engine: AsyncEngine to use (defaults to global engine)

    Returns:
        True if database is healthy, False otherwise
    """
    if engine is None:
        try:
            engine = get_engine()
        except RuntimeError:
            logger.warning("Database health check skipped: engine not initialized")
            return False

    try:
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            return result.scalar() == 1
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Database health check failed", extra={"error": str(e)})
        return False
