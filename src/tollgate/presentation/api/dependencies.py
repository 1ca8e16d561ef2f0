"""FastAPI dependency injection for the Tollgate API.

Provides dependencies for:
- Database sessions
- Authentication services
- Request guards (authentication gate, role gate)
"""

import logging
from functools import lru_cache
from typing import Annotated, AsyncGenerator, Optional, Union

from fastapi import Depends, Header, Request
from fastapi.params import Depends as DependsParam
from sqlalchemy.ext.asyncio import AsyncSession

from tollgate.application.context import AuthenticatedIdentity
from tollgate.application.guards import AuthenticationGuard, RoleGuard
from tollgate.application.services import AuthenticationService
from tollgate.domain.user import UserRole
from tollgate.infrastructure.persistence.sqlalchemy.repositories import (
    UserProfileRepositorySQLAlchemy,
)
from tollgate.presentation.api.config import get_api_settings
from tollgate_auth import JWTService, PasswordHashingService
from tollgate_auth.persistence.sqlalchemy import UserCredentialRepositorySQLAlchemy
from tollgate_config.settings import Settings

logger = logging.getLogger(__name__)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Session
# -----------------------------------------------------------------------------


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request from the session maker the
    application opened at startup. Routers commit explicitly.

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret.get_secret_value(),
        access_token_ttl=settings.access_token_ttl,
        refresh_token_ttl=settings.refresh_token_ttl,
    )


JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]


@lru_cache
def password_service_for(rounds: int) -> PasswordHashingService:
    """Shared hashing service per work factor (keeps the dummy hash warm)."""
    return PasswordHashingService(rounds=rounds)


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Get password hashing service."""
    return password_service_for(settings.password_hash_rounds)


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTServiceDep,
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    This service orchestrates user registration, login, and token management.
    """
    return AuthenticationService(
        profile_repository=UserProfileRepositorySQLAlchemy(session),
        credential_repository=UserCredentialRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Guards
# -----------------------------------------------------------------------------


def require_authenticated(
    request: Request,
    jwt_service: JWTServiceDep,
    authorization: Annotated[Optional[str], Header()] = None,
) -> AuthenticatedIdentity:
    """
    Authentication gate.

    Verifies the ``Authorization: Bearer <token>`` header and attaches the
    resulting identity to ``request.state.identity``.

    Raises
    ------
    MissingTokenError
        401 if the header is absent or malformed
    InvalidTokenError
        401 if the token is invalid or expired
    """
    identity = AuthenticationGuard(jwt_service).authenticate(authorization)
    request.state.identity = identity
    return identity


# Type alias for the authenticated caller
CurrentIdentity = Annotated[AuthenticatedIdentity, Depends(require_authenticated)]


class RequireRoles:
    """
    Role gate dependency.

    Reads the identity attached by ``require_authenticated``; must run
    after it. With no roles declared every request passes.
    """

    def __init__(self, *roles: Union[str, UserRole]):
        self._guard = RoleGuard(roles)

    def __call__(self, request: Request) -> Optional[AuthenticatedIdentity]:
        identity = getattr(request.state, "identity", None)
        self._guard.authorize(identity)
        return identity


def protected(*roles: Union[str, UserRole]) -> list[DependsParam]:
    """Dependencies for a route behind both gates, in evaluation order.

    Usage: ``@router.get("/admin", dependencies=protected(UserRole.ADMIN))``
    """
    return [Depends(require_authenticated), Depends(RequireRoles(*roles))]
