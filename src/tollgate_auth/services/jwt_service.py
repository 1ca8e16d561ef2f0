"""JWT token service.

Provides JWT token creation and verification for authentication.
"""

import logging
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt

from tollgate_auth.exceptions import InvalidTokenError
from tollgate_auth.schemas import TokenPair, TokenPayload

logger = logging.getLogger(__name__)

ACCESS = "access"
REFRESH = "refresh"


class JWTService:
    """Service for JWT token creation and verification.

    Handles access tokens (short-lived) and refresh tokens (long-lived)
    for user authentication. Both are HS256 tokens signed with the same
    secret and carrying the same claims; they differ only in lifetime.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> pair = service.generate_pair(user_id, "user@example.com", "customer")
    >>> payload = service.verify_access(pair.access_token)
    >>> print(payload.user_id)
    """

    DEFAULT_ACCESS_TTL = timedelta(minutes=15)
    DEFAULT_REFRESH_TTL = timedelta(days=7)
    ALGORITHM = "HS256"
    BEARER_SCHEME = "Bearer"

    _REQUIRED_CLAIMS = ["sub", "email", "role", "iat", "exp"]

    def __init__(
        self,
        secret_key: str,
        access_token_ttl: timedelta = DEFAULT_ACCESS_TTL,
        refresh_token_ttl: timedelta = DEFAULT_REFRESH_TTL,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        access_token_ttl
            Lifetime of access tokens (default 15 minutes)
        refresh_token_ttl
            Lifetime of refresh tokens (default 7 days)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_ttl = access_token_ttl
        self._refresh_ttl = refresh_token_ttl

    @property
    def access_token_ttl(self) -> timedelta:
        return self._access_ttl

    @property
    def refresh_token_ttl(self) -> timedelta:
        return self._refresh_ttl

    def generate_pair(self, user_id: object, email: str, role: str) -> TokenPair:
        """Create a new access/refresh token pair for an identity.

        Parameters
        ----------
        user_id
            The user's unique identifier (stored as a string ``sub``)
        email
            The user's email address
        role
            The user's role

        Returns
        -------
        TokenPair with two independently signed tokens
        """
        return TokenPair(
            access_token=self._create_token(user_id, email, role, self._access_ttl),
            refresh_token=self._create_token(
                user_id,
                email,
                role,
                self._refresh_ttl,
            ),
        )

    def verify_access(self, token: str) -> TokenPayload:
        """Verify and decode an access token.

        Raises
        ------
        InvalidTokenError
            With kind ``"access"`` if the token is invalid, expired,
            or malformed
        """
        return self._verify(token, ACCESS)

    def verify_refresh(self, token: str) -> TokenPayload:
        """Verify and decode a refresh token.

        Raises
        ------
        InvalidTokenError
            With kind ``"refresh"`` if the token is invalid, expired,
            or malformed
        """
        return self._verify(token, REFRESH)

    def refresh(self, refresh_token: str) -> TokenPair:
        """Exchange a valid refresh token for a brand-new pair.

        Only the identity claims are carried over; the new tokens get fresh
        ``iat``/``exp``/``jti``. The presented refresh token is not revoked
        and stays usable until it expires.

        Raises
        ------
        InvalidTokenError
            With kind ``"refresh"`` if the refresh token is not valid
        """
        payload = self.verify_refresh(refresh_token)
        return self.generate_pair(payload.user_id, payload.email, payload.role)

    @classmethod
    def extract_bearer(cls, header_value: str | None) -> str | None:
        """Extract the token from an ``Authorization: Bearer <token>`` header.

        The header must consist of exactly two space-separated parts, the
        first being literally ``Bearer``. Anything else yields ``None``.
        """
        if not header_value:
            return None

        parts = header_value.split(" ")
        if len(parts) != 2:
            return None

        scheme, token = parts
        if scheme != cls.BEARER_SCHEME or not token:
            return None

        return token

    def _verify(self, token: str, kind: str) -> TokenPayload:
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": self._REQUIRED_CLAIMS},
            )

            return TokenPayload(
                user_id=str(claims["sub"]),
                email=str(claims["email"]),
                role=str(claims["role"]),
                issued_at=datetime.fromtimestamp(claims["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
                token_id=claims.get("jti"),
            )

        except jwt.PyJWTError as e:
            # Expired and tampered tokens are indistinguishable to the caller
            logger.debug("Rejected %s token: %s", kind, e)
            raise InvalidTokenError(kind) from e
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            logger.debug("Rejected %s token with malformed claims: %s", kind, e)
            raise InvalidTokenError(kind) from e

    def _create_token(
        self,
        user_id: object,
        email: str,
        role: str,
        expires_delta: timedelta,
    ) -> str:
        """Create a signed JWT with the given identity and lifetime."""
        now = datetime.now(tz=timezone.utc)

        payload = {
            "sub": str(user_id),
            "email": email,
            "role": role,
            "iat": now,
            "exp": now + expires_delta,
            "jti": uuid4().hex,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)
