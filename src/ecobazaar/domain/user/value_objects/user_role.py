from enum import Enum
from typing import Optional, Union

from ecobazaar.domain.user.exceptions import InvalidRoleError


class UserRole(str, Enum):
    """Roles a user can be registered with."""

    USER = "USER"
    SELLER = "SELLER"
    ADMIN = "ADMIN"

    @classmethod
    def parse(cls, role: Optional[Union[str, "UserRole"]]) -> "UserRole":
        """Resolve a role name, falling back to USER when none is given."""
        if isinstance(role, UserRole):
            return role
        if role is None or not role.strip():
            return cls.USER
        try:
            return cls(role.strip().upper())
        except ValueError as e:
            raise InvalidRoleError(role) from e
