"""Application layer services."""

from ecobazaar.application.services.authentication_service import (
    AuthenticationService,
    SignupOutcome,
)

__all__ = [
    "AuthenticationService",
    "SignupOutcome",
]
