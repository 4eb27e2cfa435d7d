"""Signup and login use cases."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from ecobazaar.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserRole,
)
from ecobazaar_auth import (
    InvalidCredentialsError,
    JWTService,
    PasswordHashingService,
    TokenPayload,
    UserNotFoundError,
)

if TYPE_CHECKING:
    from ecobazaar.domain.user import UserRepository

logger = logging.getLogger(__name__)


class SignupOutcome(str, Enum):
    """How a signup ended. A taken email is an outcome, not an error."""

    CREATED = "created"
    ALREADY_EXISTS = "already_exists"

    @property
    def message(self) -> str:
        if self is SignupOutcome.CREATED:
            return "Signup successful"
        return "User already exists"


class AuthenticationService:
    """
    Registers accounts and exchanges credentials for tokens.

    All collaborators are injected; the service keeps no state of its
    own and is safe to build per request.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._users = user_repository
        self._passwords = password_service
        self._tokens = jwt_service

    async def signup(
        self,
        email: str,
        password: str,
        role: str | UserRole | None = None,
    ) -> SignupOutcome:
        """Create an account unless the email is already registered.

        Raises ``InvalidEmailError``, ``WeakPasswordError`` or
        ``InvalidRoleError`` for bad input; nothing is stored then.
        """
        address = Email(email)
        self._passwords.validate_strength(password)
        user_role = UserRole.parse(role)

        if await self._users.exists_by_email(address):
            logger.info("Signup for existing email ignored: %s", email)
            return SignupOutcome.ALREADY_EXISTS

        user = User.create(
            address,
            password_hash=self._passwords.hash(password),
            role=user_role,
        )
        try:
            await self._users.save(user)
        except EmailAlreadyExistsError:
            # A concurrent signup inserted the same email first
            logger.info("Signup lost insert race for %s", email)
            return SignupOutcome.ALREADY_EXISTS

        logger.info("Signed up %s as %s", email, user_role.value)
        return SignupOutcome.CREATED

    async def login(self, email: str, password: str) -> str:
        """Return a signed token for valid credentials.

        Raises ``UserNotFoundError`` or ``InvalidCredentialsError``, both
        ``AuthenticationFailedError`` subclasses.
        """
        user = await self._users.find_by_email(email)
        if user is None:
            raise UserNotFoundError(email)
        if not self._passwords.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        logger.info("Login succeeded for %s", email)
        return self._tokens.generate_token(user.email)

    def verify_token(self, token: str) -> TokenPayload:
        return self._tokens.verify_token(token)
