"""Validation and uniqueness errors of the user domain."""


class InvalidEmailError(ValueError):
    """The address is empty or not shaped like ``local@domain.tld``."""


class InvalidRoleError(ValueError):
    """The role name is none of USER, SELLER or ADMIN."""

    def __init__(self, role: str) -> None:
        self.role = role
        super().__init__(f"Unknown role: {role}")


class EmailAlreadyExistsError(Exception):
    """A second account with the same email was about to be stored."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Email already registered: {email}")
