"""Declarative base and the audit-timestamp mixin for EcoBazaar tables."""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from ecobazaar.domain.shared.time import utc_now


class Base(DeclarativeBase):
    pass


def _utc_column(**extra) -> Mapped[datetime]:
    return mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
        **extra,
    )


class TimestampMixin:
    """``created_at`` is set on insert; ``updated_at`` on every write."""

    created_at: Mapped[datetime] = _utc_column()
    updated_at: Mapped[datetime] = _utc_column(onupdate=utc_now)
