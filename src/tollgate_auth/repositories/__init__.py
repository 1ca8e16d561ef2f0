"""Repository interfaces for tollgate_auth.

This package defines abstract repository interfaces that can be implemented
by different persistence technologies. The SQLAlchemy implementation lives
in tollgate_auth.persistence.sqlalchemy.
"""

from tollgate_auth.repositories.user_credential_repository import (
    UserCredentialData,
    UserCredentialRepository,
)

__all__ = ["UserCredentialData", "UserCredentialRepository"]
