"""EcoBazaar runtime configuration.

Every setting is read from the process environment first. Missing values
fall back to a dotenv file and then to the defaults declared on
``Settings``. The dotenv file is the first one that exists out of:

- the path named by ``ECOBAZAAR_ENV_FILE`` (relative paths resolve
  against the project root)
- ``config/.env.dev``
- ``config/.env``
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "ECOBAZAAR_ENV_FILE"
ENV_FILE_CANDIDATES = (".env.dev", ".env")

# A directory containing any of these is treated as the project root
_ROOT_MARKERS = ("config", "pyproject.toml")
_CONTAINER_ROOT = Path("/app")


def _find_project_root() -> Path:
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if candidate == _CONTAINER_ROOT:
            return candidate
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return here.parents[1]


def get_config_dir() -> Path:
    """Directory holding the dotenv files."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    for name in ENV_FILE_CANDIDATES:
        path = get_config_dir() / name
        if path.exists():
            return path
    return None


class Settings(BaseSettings):
    """Typed view over the environment.

    ``JWT_SECRET_KEY`` has no default, so constructing settings without
    it fails fast with a validation error.
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    jwt_secret_key: SecretStr
    jwt_token_expire_hours: int = 24

    app_name: str = "EcoBazaar"
    log_level: str = "INFO"

    # DATABASE_URL_OVERRIDE takes precedence over the POSTGRES_* parts
    database_url_override: str | None = None
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr | None = None
    postgres_db: str = "ecobazaar"

    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_debug: bool = False
    api_cors_origins: str = "http://localhost:5173"

    password_min_length: int = 1
    bcrypt_rounds: int = 12

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, value: Any) -> str:
        if isinstance(value, (list, tuple)):
            return ",".join(str(item) for item in value)
        return str(value) if value else ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """SQLAlchemy async URL for the configured database."""
        if self.database_url_override:
            return self.database_url_override

        secret = self.postgres_password
        password = secret.get_secret_value() if secret else ""
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        """Allowed CORS origins as a list."""
        return [
            origin.strip()
            for origin in self.api_cors_origins.split(",")
            if origin.strip()
        ]


@lru_cache()
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()  # type: ignore[call-arg]  # values come from the environment


def clear_settings_cache() -> None:
    """Force the next ``get_settings()`` call to reload."""
    get_settings.cache_clear()
