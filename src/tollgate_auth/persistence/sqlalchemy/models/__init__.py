"""SQLAlchemy models for tollgate_auth."""

from tollgate_auth.persistence.sqlalchemy.models.user_credential_model import (
    UserCredentialModel,
)

__all__ = ["UserCredentialModel"]
