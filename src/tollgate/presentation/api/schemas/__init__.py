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

__all__ = [
    "AdminResponse",
    "AuthResponse",
    "IdentityResponse",
    "LoginRequest",
    "ProfileResponse",
    "RefreshRequest",
    "RegisterRequest",
    "TokenResponse",
    "UserResponse",
]
