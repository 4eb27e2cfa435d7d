"""``users`` table."""

from uuid import UUID

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from ecobazaar.domain.user import UserRole
from ecobazaar.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class UserModel(Base, TimestampMixin):
    """Row form of the ``User`` aggregate.

    The unique index on ``email`` settles concurrent signups for the
    same address: only one insert can succeed.
    """

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    # Stored as typed; comparisons are case-sensitive
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(
        String(20),
        default=UserRole.USER.value,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<UserModel {self.email} ({self.role})>"
