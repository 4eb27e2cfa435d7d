"""Email address value object.

Addresses are kept exactly as typed; two addresses that differ only in
letter case are different accounts. Syntax is checked by email-validator,
whose normalized form is discarded.
"""

from dataclasses import dataclass
from typing import Union

from email_validator import EmailNotValidError, validate_email

from ecobazaar.domain.user.exceptions import InvalidEmailError


@dataclass(frozen=True)
class Email:
    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise InvalidEmailError("Email cannot be empty")
        try:
            validate_email(self.value, check_deliverability=False)
        except EmailNotValidError as e:
            raise InvalidEmailError(f"Invalid email format: {self.value}") from e

    @classmethod
    def of(cls, email: Union[str, "Email"]) -> "Email":
        return email if isinstance(email, Email) else cls(email)

    def __str__(self) -> str:
        return self.value
