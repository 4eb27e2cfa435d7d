"""Value types returned by the auth services."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenPayload:
    """Claims of a token that passed signature and expiry checks.

    Attributes
    ----------
    subject
        The identity the token was issued for (the user's email)
    issued_at
        Token issue timestamp
    expires_at
        Token expiration timestamp
    """

    subject: str
    issued_at: datetime
    expires_at: datetime
