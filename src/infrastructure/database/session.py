"""Database session management for FastAPI dependency injection."""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.database.config import get_session_factory


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a request-scoped session.

    One session spans a whole request, so a use case that touches several
    repositories commits or rolls back as a unit.

    Yields:
        AsyncSession instance

    Raises:
        RuntimeError: If database has not been initialized
    """
    session_factory = get_session_factory()

    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
