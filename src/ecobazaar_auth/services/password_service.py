"""bcrypt-backed password hashing for EcoBazaar accounts."""

import bcrypt

from ecobazaar_auth.exceptions import WeakPasswordError


class PasswordHashingService:
    """Hash, check and police account passwords.

    Every hash gets a fresh random salt, so hashing the same password
    twice yields two different strings that both verify.

    Examples
    --------
    >>> passwords = PasswordHashingService(rounds=4)
    >>> stored = passwords.hash("pw1")
    >>> passwords.verify("pw1", stored), passwords.verify("pw2", stored)
    (True, False)
    """

    DEFAULT_MIN_LENGTH = 1
    # bcrypt ignores everything past 72 bytes of input
    MAX_BYTES = 72

    def __init__(self, rounds: int = 12, min_length: int = DEFAULT_MIN_LENGTH):
        """
        Parameters
        ----------
        rounds
            bcrypt cost factor; each increment doubles the hashing time.
        min_length
            Shortest accepted password in characters. Values below 1 are
            raised to 1.
        """
        self._rounds = rounds
        self._min_length = max(min_length, 1)

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Return the salted bcrypt hash of ``password``.

        Raises
        ------
        WeakPasswordError
            When the password breaks the policy in ``validate_strength``.
        """
        self.validate_strength(password)
        digest = bcrypt.hashpw(
            password.encode("utf-8"),
            bcrypt.gensalt(rounds=self._rounds),
        )
        return digest.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Check ``password`` against a stored hash.

        A malformed hash counts as a mismatch rather than an error, and
        so does a password longer than ``MAX_BYTES``: no stored hash can
        have come from it.
        """
        # Older bcrypt builds truncate instead of raising
        if len(password.encode("utf-8")) > self.MAX_BYTES:
            return False
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            return False

    def validate_strength(self, password: str) -> None:
        """Enforce the password policy.

        A password must be non-empty, have at least ``min_length``
        characters and fit in ``MAX_BYTES`` once UTF-8 encoded.
        """
        if not password:
            raise WeakPasswordError("Password cannot be empty")
        if len(password) < self._min_length:
            raise WeakPasswordError(
                f"Password must be at least {self._min_length} characters",
            )
        if len(password.encode("utf-8")) > self.MAX_BYTES:
            raise WeakPasswordError(
                f"Password cannot exceed {self.MAX_BYTES} bytes",
            )

    def needs_rehash(self, password_hash: str) -> bool:
        """True when the hash was made with a different cost factor.

        Unparseable hashes also report True.
        """
        # Layout: $<variant>$<cost>$<salt+digest>
        fields = password_hash.split("$")
        if len(fields) < 4 or not fields[2].isdigit():
            return True
        return int(fields[2]) != self._rounds
