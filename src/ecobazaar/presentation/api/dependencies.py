"""Request-scoped dependencies for the auth API.

The engine and session maker are process-wide singletons; every request
gets its own ``AsyncSession``. Services are built per request from the
current settings so tests can swap them through ``dependency_overrides``.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ecobazaar.application.services import AuthenticationService
from ecobazaar.domain.user import User
from ecobazaar.infrastructure.persistence.sqlalchemy.models import Base
from ecobazaar.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from ecobazaar.presentation.api.config import get_api_settings
from ecobazaar_auth import InvalidTokenError, JWTService, PasswordHashingService
from ecobazaar_config.settings import Settings

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


# --- database ----------------------------------------------------------------


@lru_cache()
def get_database_url() -> str:
    """Configured database URL; creates the parent folder of a SQLite file."""
    url = get_api_settings().database_url
    if url.startswith("sqlite") and ":memory:" not in url:
        Path(url.split("///", 1)[-1]).parent.mkdir(parents=True, exist_ok=True)
    return url


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    return create_async_engine(get_database_url(), echo=False, pool_pre_ping=True)


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(get_engine(), class_=AsyncSession, expire_on_commit=False)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """One session per request. Committing is left to the route."""
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """Create missing tables. Existing tables are left untouched."""
    target = engine or get_engine()
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Schema ready (%s)", ", ".join(sorted(Base.metadata.tables)))


# --- services ----------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        token_expire_hours=settings.jwt_token_expire_hours,
    )


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    return PasswordHashingService(
        rounds=settings.bcrypt_rounds,
        min_length=settings.password_min_length,
    )


JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]
PasswordServiceDep = Annotated[PasswordHashingService, Depends(get_password_service)]


def get_authentication_service(
    session: DBSession,
    jwt_service: JWTServiceDep,
    password_service: PasswordServiceDep,
) -> AuthenticationService:
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# --- current user --------------------------------------------------------------


async def get_current_user(
    session: DBSession,
    jwt_service: JWTServiceDep,
    credentials: Annotated[
        HTTPAuthorizationCredentials | None,
        Depends(bearer_scheme),
    ],
) -> User:
    """Resolve the Bearer token to a stored user, or answer 401."""
    if credentials is None:
        raise _unauthorized("Authentication required")

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Rejected bearer token: %s", e.message)
        raise _unauthorized("Invalid or expired token") from e

    user = await UserRepositorySQLAlchemy(session).find_by_email(payload.subject)
    if user is None:
        logger.warning("Token subject has no account: %s", payload.subject)
        raise _unauthorized("User not found")
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
