"""Unit tests for Settings."""

import pytest
from pydantic import SecretStr, ValidationError

from ecobazaar_config import Settings, clear_settings_cache, get_settings


def _settings(**overrides) -> Settings:
    return Settings(jwt_secret_key=SecretStr("unit-test-secret"), **overrides)


class TestDatabaseUrl:
    def test_override_wins(self):
        settings = _settings(database_url_override="sqlite+aiosqlite:///x.db")

        assert settings.database_url == "sqlite+aiosqlite:///x.db"

    def test_postgres_url_from_parts(self):
        settings = _settings(
            database_url_override=None,
            postgres_host="db",
            postgres_port=6543,
            postgres_user="shop",
            postgres_password=SecretStr("s3cret"),
            postgres_db="bazaar",
        )

        assert settings.database_url == (
            "postgresql+asyncpg://shop:s3cret@db:6543/bazaar"
        )


class TestCorsOrigins:
    def test_default_is_frontend_dev_server(self):
        assert _settings().cors_origins == ["http://localhost:5173"]

    def test_comma_separated(self):
        settings = _settings(api_cors_origins="https://a.example, https://b.example")

        assert settings.cors_origins == ["https://a.example", "https://b.example"]

    def test_list_input_is_joined(self):
        settings = _settings(api_cors_origins=["https://a.example", "https://b.example"])

        assert settings.api_cors_origins == "https://a.example,https://b.example"


class TestDefaults:
    def test_auth_defaults(self):
        settings = _settings()

        assert settings.jwt_token_expire_hours == 24
        assert settings.password_min_length == 1
        assert settings.bcrypt_rounds == 12


class TestLoading:
    def test_secret_is_required(self, monkeypatch):
        monkeypatch.delenv("JWT_SECRET_KEY", raising=False)

        with pytest.raises(ValidationError):
            Settings()  # type: ignore[call-arg]

    def test_secret_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET_KEY", "from-env")
        clear_settings_cache()
        try:
            assert get_settings().jwt_secret_key.get_secret_value() == "from-env"
        finally:
            clear_settings_cache()

    def test_get_settings_is_cached(self):
        clear_settings_cache()

        assert get_settings() is get_settings()
