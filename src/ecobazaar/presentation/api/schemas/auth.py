"""Request and response bodies of the ``/auth`` routes."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SignupRequest(BaseModel):
    """Body of ``POST /auth/signup``.

    Only presence and size are checked here; email format, password
    policy and role names are domain rules and answer with 400.
    """

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)
    role: str | None = Field(
        default=None,
        max_length=20,
        description="USER, SELLER or ADMIN; USER when omitted",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"email": "a@x.com", "password": "pw1", "role": "SELLER"},
        },
    )


class LoginRequest(BaseModel):
    """Body of ``POST /auth/login``."""

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={"example": {"email": "a@x.com", "password": "pw1"}},
    )


class UserResponse(BaseModel):
    """Public view of an account; the password hash is never exposed."""

    id: UUID
    email: str
    role: str
    created_at: datetime
