"""The registered account."""

from datetime import datetime
from typing import Optional, Union
from uuid import UUID, uuid4

from ecobazaar.domain.shared.time import utc_now
from ecobazaar.domain.user.value_objects import Email, UserRole

EmailLike = Union[str, Email]
RoleLike = Optional[Union[str, UserRole]]


class User:
    """
    An account: email, bcrypt password hash and role.

    The email is the natural key used for login and as the token
    subject; ``id`` is the surrogate key. Plaintext passwords never
    reach this class.
    """

    def __init__(
        self,
        email: EmailLike,
        password_hash: str,
        role: RoleLike = UserRole.USER,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        now = utc_now()
        self._id = id or uuid4()
        self._email = Email.of(email)
        self._password_hash = password_hash
        self._role = UserRole.parse(role)
        self._created_at = created_at or now
        self._updated_at = updated_at or now

    @classmethod
    def create(
        cls,
        email: EmailLike,
        password_hash: str,
        role: RoleLike = None,
    ) -> "User":
        """New account with a fresh id. A missing or blank role means USER."""
        return cls(email=email, password_hash=password_hash, role=role)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        email: EmailLike,
        password_hash: str,
        role: Union[str, UserRole],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        """Rebuild an account loaded from storage."""
        return cls(
            email,
            password_hash,
            role=role,
            id=id,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def __eq__(self, other: object) -> bool:
        if isinstance(other, User):
            return other._id == self._id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User({self.email!r}, role={self._role.value}, id={self._id})"
