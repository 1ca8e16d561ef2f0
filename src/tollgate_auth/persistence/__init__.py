"""Persistence implementations for tollgate_auth.

This package contains database-specific implementations of the
repository interfaces defined in tollgate_auth.repositories.

Usage:
    from tollgate_auth.persistence.sqlalchemy import (
        UserCredentialRepositorySQLAlchemy,
        UserCredentialModel,
        AuthBase,
    )
"""

from tollgate_auth.persistence.sqlalchemy.repositories.user_credential_repository import (
    UserCredentialRepositorySQLAlchemy,
)

__all__ = ["UserCredentialRepositorySQLAlchemy"]
