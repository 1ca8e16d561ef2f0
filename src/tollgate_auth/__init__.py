"""Tollgate Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the application's user profile model. It handles:
- Password hashing and strength checks (bcrypt)
- JWT access/refresh token creation, verification and rotation
- User credential storage (with pluggable persistence)

Architecture:
    tollgate_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── repositories/       # Abstract interfaces
    ├── persistence/        # Implementations by technology
    │   └── sqlalchemy/     # SQLAlchemy implementation
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from tollgate_auth import PasswordHashingService, JWTService
    from tollgate_auth.persistence.sqlalchemy import (
        UserCredentialRepositorySQLAlchemy,
        AuthBase,
    )
"""

from tollgate_auth.exceptions import (
    AuthError,
    ComparisonError,
    ErrorCode,
    HashingError,
    InsufficientRoleError,
    InternalAuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    UnauthenticatedError,
    ValidationError,
    WeakPasswordError,
)
from tollgate_auth.repositories import UserCredentialData, UserCredentialRepository
from tollgate_auth.schemas import TokenPair, TokenPayload, ValidationResult
from tollgate_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Repositories (interfaces)
    "UserCredentialData",
    "UserCredentialRepository",
    # Schemas
    "TokenPair",
    "TokenPayload",
    "ValidationResult",
    # Exceptions
    "AuthError",
    "ComparisonError",
    "ErrorCode",
    "HashingError",
    "InsufficientRoleError",
    "InternalAuthError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MissingTokenError",
    "UnauthenticatedError",
    "ValidationError",
    "WeakPasswordError",
]
