"""Pytest fixtures for API integration tests.

Each test gets its own SQLite database file, so tests never share state
and never touch a configured database.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from ecobazaar.infrastructure.persistence.sqlalchemy.models import Base
from ecobazaar.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from ecobazaar.presentation.api.app import AUTH_PREFIX, create_app
from ecobazaar.presentation.api.config import get_api_settings
from ecobazaar.presentation.api.dependencies import get_db_session
from ecobazaar_config.settings import Settings

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"
FRONTEND_ORIGIN = "http://localhost:5173"


@pytest.fixture
def auth_prefix() -> str:
    """Get the auth prefix for building URLs."""
    return AUTH_PREFIX


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'ecobazaar-test.db'}"


@pytest.fixture
def api_settings(database_url) -> Settings:
    """Test API settings with debug enabled and cheap hashing."""
    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        database_url_override=database_url,
        api_host="127.0.0.1",
        api_port=8080,
        api_debug=True,
        api_cors_origins=FRONTEND_ORIGIN,
        bcrypt_rounds=4,
    )


def _run(coro):
    """Run a coroutine in a fresh event loop.

    TestClient drives the app on its own loop, so setup and teardown
    must not reuse one.
    """
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


@pytest.fixture
def async_engine(database_url):
    # NullPool: connections are never carried across event loops
    engine = create_async_engine(database_url, poolclass=NullPool)

    async def _setup():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    _run(_setup())
    yield engine
    _run(engine.dispose())


@pytest.fixture
def session_maker(async_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def test_client(api_settings, session_maker):
    """Create a test client bound to the per-test database.

    The lifespan is not entered, so the globally configured engine is
    never created.
    """
    app = create_app(settings=api_settings)

    async def override_get_db_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_api_settings] = lambda: api_settings

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def user_count(session_maker):
    """Return a callable that counts rows in the users table."""

    async def _count() -> int:
        async with session_maker() as session:
            return await UserRepositorySQLAlchemy(session).count()

    return lambda: _run(_count())


@pytest.fixture
def registered_user_data() -> dict:
    return {
        "email": "api-test-user@example.com",
        "password": "SecurePassword123!",
    }


@pytest.fixture
def auth_headers(test_client, registered_user_data, auth_prefix) -> dict:
    """Get auth headers for a registered user."""
    response = test_client.post(f"{auth_prefix}/signup", json=registered_user_data)
    assert response.status_code == 200, (
        f"Signup failed: {response.status_code} - {response.text}"
    )

    response = test_client.post(f"{auth_prefix}/login", json=registered_user_data)
    assert response.status_code == 200, (
        f"Login failed: {response.status_code} - {response.text}"
    )

    return {"Authorization": f"Bearer {response.text}"}
