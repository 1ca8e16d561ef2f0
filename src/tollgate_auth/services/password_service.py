"""Password hashing service using bcrypt.

Provides secure password hashing and verification with password
strength validation.
"""

import logging
import re
import secrets
from functools import cached_property

import bcrypt

from tollgate_auth.exceptions import ComparisonError, HashingError
from tollgate_auth.schemas import ValidationResult

logger = logging.getLogger(__name__)


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt for password hashing with configurable work factor.
    Also provides password strength validation.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hash = service.hash("Str0ng!Pw")
    >>> service.verify("Str0ng!Pw", hash)
    True
    >>> service.verify("wrong_password", hash)
    False
    """

    # Password requirements
    MIN_LENGTH = 8
    MAX_BYTES = 72

    _STRENGTH_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
        (
            re.compile(r"[a-z]"),
            "Password must contain at least one lowercase letter",
        ),
        (
            re.compile(r"[A-Z]"),
            "Password must contain at least one uppercase letter",
        ),
        (
            re.compile(r"\d"),
            "Password must contain at least one digit",
        ),
        (
            re.compile(r"[@$!%*?&]"),
            "Password must contain at least one special character (@$!%*?&)",
        ),
    )

    def __init__(self, rounds: int = 12):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12.
            Tests use 4 to stay fast.
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        The returned string embeds the salt and the cost factor, so
        ``verify`` needs nothing else.

        Raises
        ------
        HashingError
            If the password exceeds ``MAX_BYTES`` or bcrypt fails
        """
        encoded = password.encode("utf-8")
        if len(encoded) > self.MAX_BYTES:
            raise HashingError
        try:
            salt = bcrypt.gensalt(rounds=self._rounds)
            hashed = bcrypt.hashpw(encoded, salt)
        except (ValueError, TypeError, MemoryError) as e:
            raise HashingError from e
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        Returns
        -------
        True if password matches, False otherwise. A password longer than
        ``MAX_BYTES`` never matches, since bcrypt would only see its prefix.

        Raises
        ------
        ComparisonError
            If ``password_hash`` is not a valid bcrypt hash
        """
        encoded = password.encode("utf-8")
        if len(encoded) > self.MAX_BYTES:
            return False
        try:
            return bcrypt.checkpw(
                encoded,
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError) as e:
            raise ComparisonError from e

    def check_strength(self, password: str) -> ValidationResult:
        """Check a password against every strength rule.

        All rules are evaluated; the result lists each violation so the
        caller can report them together.
        """
        errors: list[str] = []

        if len(password) < self.MIN_LENGTH:
            errors.append(
                f"Password must be at least {self.MIN_LENGTH} characters long",
            )

        for pattern, message in self._STRENGTH_RULES:
            if not pattern.search(password):
                errors.append(message)

        if len(password.encode("utf-8")) > self.MAX_BYTES:
            errors.append(f"Password cannot exceed {self.MAX_BYTES} bytes")

        return ValidationResult(is_valid=not errors, errors=errors)

    @cached_property
    def dummy_hash(self) -> str:
        """A hash of a random throwaway value at the configured cost.

        Login compares against it when no real hash exists, so unknown
        accounts take as long to reject as wrong passwords.
        """
        logger.debug("Computing dummy password hash (rounds=%d)", self._rounds)
        return self.hash(secrets.token_urlsafe(32))

    def needs_rehash(self, password_hash: str) -> bool:
        """Check if a password hash was produced with a different work factor.

        Parameters
        ----------
        password_hash
            The existing hash to check

        Returns
        -------
        True if the hash should be regenerated
        """
        try:
            # bcrypt format: $2b$XX$...
            parts = password_hash.split("$")
            if len(parts) >= 3:
                return int(parts[2]) != self._rounds
        except ValueError:
            pass
        return True
