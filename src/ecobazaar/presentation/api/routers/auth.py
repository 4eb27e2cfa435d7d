"""``/auth`` routes: signup, login and the current account."""

import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from ecobazaar.application.services import SignupOutcome
from ecobazaar.presentation.api.dependencies import (
    AuthService,
    CurrentUser,
    DBSession,
)
from ecobazaar.presentation.api.schemas.auth import (
    LoginRequest,
    SignupRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/signup",
    response_class=PlainTextResponse,
    summary="Create an account",
    responses={
        200: {"description": "'Signup successful' or 'User already exists'"},
        400: {"description": "Bad email, password or role"},
        422: {"description": "Missing or oversized fields"},
    },
)
async def signup(
    body: SignupRequest,
    auth_service: AuthService,
    session: DBSession,
) -> str:
    """
    Register ``email`` with ``password`` and an optional ``role``.

    Signing up an address that is already taken changes nothing and is
    reported in the response text, not as an error status.
    """
    try:
        outcome = await auth_service.signup(
            email=body.email,
            password=body.password,
            role=body.role,
        )
    except Exception:
        await session.rollback()
        raise

    # A losing insert leaves the session unusable until rolled back
    if outcome is SignupOutcome.CREATED:
        await session.commit()
    else:
        await session.rollback()

    return outcome.message


@router.post(
    "/login",
    response_class=PlainTextResponse,
    summary="Exchange credentials for a token",
    responses={
        200: {"description": "Signed JWT, plain text"},
        401: {"description": "Invalid email or password"},
    },
)
async def login(body: LoginRequest, auth_service: AuthService) -> str:
    """
    Return a bearer token whose subject is the account's email.

    Unknown addresses and wrong passwords get the same 401.
    """
    return await auth_service.login(email=body.email, password=body.password)


@router.get(
    "/me",
    summary="Account behind the bearer token",
    responses={401: {"description": "Missing, invalid or expired token"}},
)
async def read_current_user(user: CurrentUser) -> UserResponse:
    return UserResponse(
        id=user.id,
        email=user.email,
        role=user.role.value,
        created_at=user.created_at,
    )
