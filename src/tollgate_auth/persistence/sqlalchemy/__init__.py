"""SQLAlchemy implementation for tollgate_auth persistence.

Provides:
- AuthBase: Declarative base for auth models
- UserCredentialModel: SQLAlchemy model for credentials
- UserCredentialRepositorySQLAlchemy: Repository implementation

Note: The consuming application must create AuthBase.metadata tables
alongside its own (see tollgate.infrastructure.persistence.sqlalchemy).
"""

from tollgate_auth.persistence.sqlalchemy.base import AuthBase
from tollgate_auth.persistence.sqlalchemy.models import UserCredentialModel
from tollgate_auth.persistence.sqlalchemy.repositories import (
    UserCredentialRepositorySQLAlchemy,
)

__all__ = [
    "AuthBase",
    "UserCredentialModel",
    "UserCredentialRepositorySQLAlchemy",
]
