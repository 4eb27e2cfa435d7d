"""
Pytest fixtures for persistence integration tests.

Each test gets a fresh in-memory SQLite database with the schema created.
"""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from ecobazaar.infrastructure.persistence.sqlalchemy.models import Base


@pytest_asyncio.fixture(scope="function")
async def async_engine():
    # StaticPool keeps the single in-memory database alive across sessions
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def session_maker(async_engine):
    return async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest_asyncio.fixture(scope="function")
async def async_session(session_maker):
    """Provide an isolated session; uncommitted work is rolled back."""
    async with session_maker() as session:
        yield session
        await session.rollback()
