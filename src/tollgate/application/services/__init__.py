"""Application services."""

from tollgate.application.services.authentication_service import (
    AuthenticationService,
    AuthResult,
    PublicProfile,
)

__all__ = [
    "AuthenticationService",
    "AuthResult",
    "PublicProfile",
]
