"""Errors raised by password hashing, token handling and login.

Each class carries a fixed ``code`` so callers can tell failures apart
without parsing ``message``.
"""

from enum import Enum


class AuthErrorCode(str, Enum):
    AUTH_ERROR = "AUTH_ERROR"
    INVALID_TOKEN = "INVALID_TOKEN"
    WEAK_PASSWORD = "WEAK_PASSWORD"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"


class AuthError(Exception):
    """Root of the auth error hierarchy."""

    code = AuthErrorCode.AUTH_ERROR
    default_message = "Authentication error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    code = AuthErrorCode.INVALID_TOKEN
    default_message = "Invalid or expired token"


class WeakPasswordError(AuthError):
    code = AuthErrorCode.WEAK_PASSWORD
    default_message = "Password does not meet requirements"


class AuthenticationFailedError(AuthError):
    """A login was refused.

    The subclasses record why, for the logs. Clients get the same
    answer for all of them.
    """

    code = AuthErrorCode.AUTHENTICATION_FAILED
    default_message = "Invalid email or password"


class UserNotFoundError(AuthenticationFailedError):
    """No account is registered under the email."""

    code = AuthErrorCode.USER_NOT_FOUND

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"User not found: {email}")


class InvalidCredentialsError(AuthenticationFailedError):
    """The password does not match the stored hash."""

    code = AuthErrorCode.INVALID_CREDENTIALS
