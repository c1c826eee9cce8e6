"""Fixtures for repository tests against a disposable PostgreSQL container."""

from collections.abc import AsyncGenerator

import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from testcontainers.postgres import PostgresContainer

from src.infrastructure.database.config import create_async_session_factory
from src.infrastructure.database.models import Base

# Child tables first so foreign keys never block the wipe.
TABLES_IN_DELETE_ORDER = (
    "dependency_risks",
    "failure_scenarios",
    "dependency_relationships",
    "dependencies",
    "kri_measurements",
    "incident_logs",
    "api_keys",
)

# The container lives for the whole session; engines and sessions are
# per test because pytest-asyncio gives every test its own event loop.
_containers: dict[str, PostgresContainer] = {}


@pytest.fixture(scope="session")
def postgres_container():
    """Start (once) and yield the PostgreSQL 16 testcontainer."""
    if "postgres" not in _containers:
        container = PostgresContainer("postgres:16-alpine")
        container.start()
        _containers["postgres"] = container

    yield _containers["postgres"]


@pytest.fixture(scope="session")
def database_url(postgres_container: PostgresContainer) -> str:
    """Container connection URL rewritten for the asyncpg driver."""
    url = postgres_container.get_connection_url()
    for prefix in ("postgresql+psycopg2://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+asyncpg://" + url[len(prefix):]
    return url


@pytest.fixture
async def db_engine(database_url: str) -> AsyncGenerator[AsyncEngine, None]:
    """Engine bound to the current test's event loop, with the schema created."""
    engine = create_async_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=0,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Session whose writes are visible to the next statement in the test."""
    session_factory = create_async_session_factory(db_engine)

    async with session_factory() as session:
        yield session


@pytest.fixture(autouse=True)
async def clean_db(db_session: AsyncSession) -> None:
    """Start every test from empty tables."""
    for table in TABLES_IN_DELETE_ORDER:
        await db_session.execute(text(f"DELETE FROM {table}"))
    await db_session.commit()
