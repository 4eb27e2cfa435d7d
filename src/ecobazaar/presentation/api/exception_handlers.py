"""Translate domain and auth failures into JSON error responses.

Every error body has the same two fields::

    {"detail": "<message for humans>", "code": "<ErrorCode value>"}

Call ``setup_exception_handlers(app)`` once while building the app.
"""

import logging
from enum import Enum

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ecobazaar.domain.user import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidRoleError,
)
from ecobazaar_auth import (
    AuthenticationFailedError,
    AuthErrorCode,
    InvalidTokenError,
    WeakPasswordError,
)

logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    """Values of the ``code`` field. Clients match on these, keep them fixed."""

    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_ROLE = "INVALID_ROLE"
    WEAK_PASSWORD = AuthErrorCode.WEAK_PASSWORD.value
    AUTHENTICATION_FAILED = AuthErrorCode.AUTHENTICATION_FAILED.value
    INVALID_TOKEN = AuthErrorCode.INVALID_TOKEN.value
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# Same text for unknown user and wrong password
AUTHENTICATION_FAILED_MESSAGE = "Invalid email or password"

# Input problems reported back verbatim with a 400
_BAD_INPUT_CODES: dict[type[Exception], ErrorCode] = {
    WeakPasswordError: ErrorCode.WEAK_PASSWORD,
    InvalidEmailError: ErrorCode.INVALID_EMAIL,
    InvalidRoleError: ErrorCode.INVALID_ROLE,
}


def _error(
    status_code: int,
    message: str,
    code: ErrorCode,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": message, "code": code.value},
        headers=headers,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers below to ``app``."""

    @app.exception_handler(AuthenticationFailedError)
    async def authentication_failed(
        request: Request,
        exc: AuthenticationFailedError,
    ) -> JSONResponse:
        # The reason stays in the log; the client only learns that it failed
        logger.warning(
            "Login rejected on %s: %s (reason=%s)",
            request.url.path,
            exc.message,
            exc.code.value,
        )
        return _error(
            status.HTTP_401_UNAUTHORIZED,
            AUTHENTICATION_FAILED_MESSAGE,
            ErrorCode.AUTHENTICATION_FAILED,
        )

    @app.exception_handler(InvalidTokenError)
    async def invalid_token(request: Request, exc: InvalidTokenError) -> JSONResponse:
        logger.warning("Token rejected on %s: %s", request.url.path, exc.message)
        return _error(
            status.HTTP_401_UNAUTHORIZED,
            "Invalid or expired token",
            ErrorCode.INVALID_TOKEN,
            headers={"WWW-Authenticate": "Bearer"},
        )

    async def bad_input(request: Request, exc: Exception) -> JSONResponse:
        code = next(
            code for cls, code in _BAD_INPUT_CODES.items() if isinstance(exc, cls)
        )
        message = getattr(exc, "message", None) or str(exc)
        logger.info("Rejected input on %s: %s", request.url.path, message)
        return _error(status.HTTP_400_BAD_REQUEST, message, code)

    for exc_class in _BAD_INPUT_CODES:
        app.add_exception_handler(exc_class, bad_input)

    @app.exception_handler(EmailAlreadyExistsError)
    async def email_taken(
        request: Request,
        exc: EmailAlreadyExistsError,
    ) -> JSONResponse:
        logger.info("Email already registered on %s: %s", request.url.path, exc.email)
        return _error(
            status.HTTP_409_CONFLICT,
            "Email address is already registered",
            ErrorCode.EMAIL_ALREADY_EXISTS,
        )

    @app.exception_handler(Exception)
    async def unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled %s on %s %s",
            type(exc).__name__,
            request.method,
            request.url.path,
        )
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An internal error occurred",
            ErrorCode.INTERNAL_ERROR,
        )
