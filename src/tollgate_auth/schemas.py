"""Auth schemas and data structures.

These are simple data classes used for transferring authentication
data between components.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a password strength check.

    Attributes
    ----------
    is_valid
        True when no rule was violated
    errors
        Human-readable messages, one per violated rule, in rule order
    """

    is_valid: bool
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the data extracted from a verified JWT token. It
    never carries password material.

    Attributes
    ----------
    user_id
        The unique identifier of the user (``sub`` claim)
    email
        The user's email address
    role
        The user's role at issue time
    issued_at
        Token issue timestamp (``iat`` claim)
    expires_at
        Token expiration timestamp (``exp`` claim)
    token_id
        Unique token identifier (``jti`` claim), if present
    """

    user_id: str
    email: str
    role: str
    issued_at: datetime
    expires_at: datetime
    token_id: str | None = None


@dataclass(frozen=True)
class TokenPair:
    """A freshly issued access/refresh token pair."""

    access_token: str
    refresh_token: str
