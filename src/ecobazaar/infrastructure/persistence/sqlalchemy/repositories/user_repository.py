"""Users table access through an async SQLAlchemy session."""

import logging
from typing import Union
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ecobazaar.domain.shared.time import as_utc
from ecobazaar.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserRepository,
)
from ecobazaar.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


def _is_unique_violation(error: IntegrityError) -> bool:
    # SQLite: "UNIQUE constraint failed", PostgreSQL: "duplicate key ... unique"
    return "unique" in str(error.orig).lower()


class UserRepositorySQLAlchemy(UserRepository):
    """
    ``UserRepository`` backed by the ``users`` table.

    ``save`` only flushes; the caller owns the transaction and decides
    whether to commit or roll back.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        row = await self._session.get(UserModel, user_id)
        return self._to_domain(row) if row is not None else None

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        # Exact, case-sensitive match
        value = email.value if isinstance(email, Email) else email
        result = await self._session.execute(
            select(UserModel).where(UserModel.email == value),
        )
        row = result.scalar_one_or_none()
        return self._to_domain(row) if row is not None else None

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        return await self.find_by_email(email) is not None

    async def save(self, user: User) -> None:
        row = await self._session.get(UserModel, user.id)
        if row is None:
            self._session.add(self._to_model(user))
            logger.debug("Inserting user %s <%s>", user.id, user.email)
        else:
            row.email = user.email
            row.password_hash = user.password_hash
            row.role = user.role.value
            row.updated_at = user.updated_at
            logger.debug("Updating user %s", user.id)

        try:
            await self._session.flush()
        except IntegrityError as e:
            if _is_unique_violation(e):
                raise EmailAlreadyExistsError(user.email) from e
            raise

    async def count(self) -> int:
        result = await self._session.execute(
            select(func.count()).select_from(UserModel),
        )
        return result.scalar_one()

    @staticmethod
    def _to_domain(row: UserModel) -> User:
        return User.reconstitute(
            id=row.id,
            email=row.email,
            password_hash=row.password_hash,
            role=row.role,
            created_at=as_utc(row.created_at),
            updated_at=as_utc(row.updated_at),
        )

    @staticmethod
    def _to_model(user: User) -> UserModel:
        return UserModel(
            id=user.id,
            email=user.email,
            password_hash=user.password_hash,
            role=user.role.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
