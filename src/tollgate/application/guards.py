"""Request guards: authentication and role authorization.

These are framework-independent; the API layer wraps them in FastAPI
dependencies.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from tollgate.application.context import AuthenticatedIdentity
from tollgate.domain.user import UserRole
from tollgate_auth import (
    InsufficientRoleError,
    JWTService,
    MissingTokenError,
    UnauthenticatedError,
)

logger = logging.getLogger(__name__)


class AuthenticationGuard:
    """Turn an ``Authorization`` header into an authenticated identity."""

    def __init__(self, jwt_service: JWTService):
        self._jwt_service = jwt_service

    def authenticate(self, authorization: Optional[str]) -> AuthenticatedIdentity:
        """Verify the bearer token carried by a request.

        Parameters
        ----------
        authorization
            Raw value of the ``Authorization`` header, or None if absent

        Raises
        ------
        MissingTokenError
            If the header is absent or not of the form ``Bearer <token>``
        InvalidTokenError
            If the token fails verification
        """
        token = self._jwt_service.extract_bearer(authorization)
        if token is None:
            raise MissingTokenError

        payload = self._jwt_service.verify_access(token)
        return AuthenticatedIdentity.from_payload(payload)


class RoleGuard:
    """Allow a request only if the caller holds one of the declared roles.

    An empty role set means the route has no role requirement.
    """

    def __init__(self, roles: Iterable[Union[str, UserRole]] = ()):
        self._roles = frozenset(UserRole(role) for role in roles)

    @property
    def roles(self) -> frozenset[UserRole]:
        return self._roles

    def authorize(self, identity: Optional[AuthenticatedIdentity]) -> None:
        """
        Raises
        ------
        UnauthenticatedError
            If roles are required but no identity is attached
        InsufficientRoleError
            If the identity's role is not among the declared roles
        """
        if not self._roles:
            return

        if identity is None:
            raise UnauthenticatedError

        if identity.role not in self._roles:
            logger.info(
                "Denied %s (role: %s), requires one of %s",
                identity.email,
                identity.role.value,
                sorted(role.value for role in self._roles),
            )
            raise InsufficientRoleError
