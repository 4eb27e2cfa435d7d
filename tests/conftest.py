"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (mocks, no database)
    └── integration/       # Tests against an aiosqlite database
        ├── api/           # Endpoint tests through FastAPI's TestClient
        └── persistence/   # Repository tests
"""

import os

import pytest

# Settings require a JWT secret; provide one before any settings are loaded
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only")
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite+aiosqlite:///:memory:")

from ecobazaar_config import clear_settings_cache  # NOQA: E402


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that verify database/persistence behavior",
    )


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Ensure every test session starts from freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
