"""Request-scoped identity of the authenticated caller."""

from __future__ import annotations

from dataclasses import dataclass

from tollgate.domain.user import UserRole
from tollgate_auth import InvalidTokenError, TokenPayload


@dataclass(frozen=True)
class AuthenticatedIdentity:
    """Immutable identity attached to a request after token verification.

    Built from the access token alone; the profile store is not consulted.
    """

    id: str
    email: str
    role: UserRole

    @classmethod
    def from_payload(cls, payload: TokenPayload) -> AuthenticatedIdentity:
        """Project a verified token payload onto an identity.

        Raises
        ------
        InvalidTokenError
            If the token carries a role this application does not know
        """
        try:
            role = UserRole(payload.role)
        except ValueError as e:
            raise InvalidTokenError("access") from e
        return cls(id=payload.user_id, email=payload.email, role=role)

    def __str__(self) -> str:
        return f"AuthenticatedIdentity({self.email})"
