"""Storage port for ``User`` aggregates."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from ecobazaar.domain.user.aggregates.user import User
from ecobazaar.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Async persistence for users, keyed by id and by exact email."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        ...

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Case-sensitive lookup; ``None`` when nobody uses the address."""

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        ...

    @abstractmethod
    async def save(self, user: User) -> None:
        """Insert a new user or update an existing one (matched by id).

        Raises
        ------
        EmailAlreadyExistsError
            When another user already holds the email.
        """

    @abstractmethod
    async def count(self) -> int:
        ...
