"""Credential primitives for EcoBazaar: bcrypt hashing and HS256 tokens.

Nothing in here knows about users or storage; the application layer
combines these services with the user domain.
"""

from ecobazaar_auth.exceptions import (
    AuthenticationFailedError,
    AuthError,
    AuthErrorCode,
    InvalidCredentialsError,
    InvalidTokenError,
    UserNotFoundError,
    WeakPasswordError,
)
from ecobazaar_auth.schemas import TokenPayload
from ecobazaar_auth.services import JWTService, PasswordHashingService

__all__ = [
    "PasswordHashingService",
    "JWTService",
    "TokenPayload",
    "AuthError",
    "AuthErrorCode",
    "AuthenticationFailedError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "UserNotFoundError",
    "WeakPasswordError",
]
