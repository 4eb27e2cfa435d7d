"""User domain manages user identity and credentials.

This domain handles:
- User aggregate (id, email, password hash, role)
- Email and role value objects
- The repository port used by the authentication service
"""

from ecobazaar.domain.user.aggregates import User
from ecobazaar.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidRoleError,
)
from ecobazaar.domain.user.repositories import UserRepository
from ecobazaar.domain.user.value_objects import (
    Email,
    UserRole,
)

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "InvalidRoleError",
    "User",
    "UserRepository",
    "UserRole",
]
