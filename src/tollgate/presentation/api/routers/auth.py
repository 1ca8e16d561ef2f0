"""Authentication router for registration, login, token refresh and probes."""

import logging

from fastapi import APIRouter, status

from tollgate.application.services import AuthResult
from tollgate.domain.user import UserRole
from tollgate.presentation.api.dependencies import (
    AuthService,
    CurrentIdentity,
    DBSession,
    SettingsDep,
    protected,
)
from tollgate.presentation.api.schemas.auth import (
    AdminResponse,
    AuthResponse,
    IdentityResponse,
    LoginRequest,
    ProfileResponse,
    RefreshRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from tollgate_auth import TokenPair
from tollgate_config.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _expires_in(settings: Settings) -> int:
    return int(settings.access_token_ttl.total_seconds())


def _create_token_response(tokens: TokenPair, settings: Settings) -> TokenResponse:
    return TokenResponse(
        access_token=tokens.access_token,
        refresh_token=tokens.refresh_token,
        expires_in=_expires_in(settings),
    )


def _create_auth_response(result: AuthResult, settings: Settings) -> AuthResponse:
    return AuthResponse(
        access_token=result.tokens.access_token,
        refresh_token=result.tokens.refresh_token,
        expires_in=_expires_in(settings),
        user=UserResponse(
            id=result.user.id,
            email=result.user.email,
            role=result.user.role,
            full_name=result.user.full_name,
        ),
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"description": "Invalid input or weak password"},
        409: {"description": "Email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
    settings: SettingsDep,
) -> AuthResponse:
    """
    Create a customer account.

    Returns an access/refresh token pair together with the public profile.
    A weak password is rejected with every violated rule listed.
    """
    try:
        result = await auth_service.register(
            email=request.email,
            password=request.password,
            full_name=request.full_name,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return _create_auth_response(result, settings)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    session: DBSession,
    settings: SettingsDep,
) -> AuthResponse:
    """
    Authenticate with email and password.

    Unknown emails and wrong passwords get the same response.
    """
    try:
        result = await auth_service.login(
            email=request.email,
            password=request.password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return _create_auth_response(result, settings)


@router.post(
    "/refresh",
    summary="Refresh tokens",
    responses={
        200: {"description": "Tokens refreshed successfully"},
        401: {"description": "Invalid or expired refresh token"},
    },
)
async def refresh_tokens(
    request: RefreshRequest,
    auth_service: AuthService,
    settings: SettingsDep,
) -> TokenResponse:
    """
    Exchange a refresh token for a new token pair.

    The presented refresh token is not revoked.
    """
    tokens = await auth_service.refresh_tokens(request.refresh_token)
    return _create_token_response(tokens, settings)


@router.get(
    "/profile",
    summary="Current user",
    responses={401: {"description": "Missing, invalid or expired token"}},
)
async def get_profile(identity: CurrentIdentity) -> ProfileResponse:
    """Return the identity carried by the access token."""
    return ProfileResponse(
        id=identity.id,
        email=identity.email,
        role=identity.role.value,
    )


@router.get(
    "/admin",
    summary="Admin-only probe",
    dependencies=protected(UserRole.ADMIN),
    responses={
        401: {"description": "Missing, invalid or expired token"},
        403: {"description": "Admin role required"},
    },
)
async def admin_only(identity: CurrentIdentity) -> AdminResponse:
    logger.info("Admin probe accessed by %s", identity.email)
    return AdminResponse(
        user=IdentityResponse(
            id=identity.id,
            email=identity.email,
            role=identity.role.value,
        ),
        admin_data={
            "system_status": "operational",
            "total_users": "classified",
            "server_info": "admin-only-data",
        },
    )
