"""Issuing and checking the signed login tokens."""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from ecobazaar_auth.exceptions import InvalidTokenError
from ecobazaar_auth.schemas import TokenPayload


class JWTService:
    """HS256 token issuer.

    Tokens are stateless: the claims are ``sub`` (the user's email),
    ``iat`` and ``exp``. Anyone holding the shared secret can verify them.

    Examples
    --------
    >>> tokens = JWTService(secret_key="change-me")
    >>> tokens.verify_token(tokens.generate_token("a@x.com")).subject
    'a@x.com'
    """

    DEFAULT_EXPIRE_HOURS = 24
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        token_expire_hours: int = DEFAULT_EXPIRE_HOURS,
    ):
        if not secret_key:
            raise ValueError("JWT secret key cannot be empty")

        self._secret_key = secret_key
        self._lifetime = timedelta(hours=token_expire_hours)

    def generate_token(
        self,
        subject: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Sign a token for ``subject``.

        ``expires_delta`` overrides the configured lifetime.
        """
        issued_at = datetime.now(tz=timezone.utc)
        claims = {
            "sub": subject,
            "iat": issued_at,
            "exp": issued_at + (expires_delta or self._lifetime),
        }
        return jwt.encode(claims, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Check signature and expiry, then return the claims.

        Raises
        ------
        InvalidTokenError
            For expired, badly signed or malformed tokens.
        """
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

        try:
            return self._to_payload(claims)
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e

    @staticmethod
    def _to_payload(claims: dict[str, Any]) -> TokenPayload:
        subject = claims["sub"]
        if not isinstance(subject, str) or not subject:
            raise ValueError("sub must be a non-empty string")

        expires_at = datetime.fromtimestamp(claims["exp"], tz=timezone.utc)
        # iat is optional; fall back to the expiry
        issued_at = datetime.fromtimestamp(
            claims.get("iat", claims["exp"]),
            tz=timezone.utc,
        )
        return TokenPayload(
            subject=subject,
            issued_at=issued_at,
            expires_at=expires_at,
        )
