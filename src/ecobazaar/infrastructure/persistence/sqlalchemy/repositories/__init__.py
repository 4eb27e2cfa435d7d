"""SQLAlchemy repository implementations."""

from ecobazaar.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # NOQA: E501
    UserRepositorySQLAlchemy,
)

__all__ = [
    "UserRepositorySQLAlchemy",
]
