"""API request/response schemas."""

from ecobazaar.presentation.api.schemas.auth import (
    LoginRequest,
    SignupRequest,
    UserResponse,
)

__all__ = [
    "LoginRequest",
    "SignupRequest",
    "UserResponse",
]
