"""SQLAlchemy repository implementations."""

from tollgate.infrastructure.persistence.sqlalchemy.repositories.user_profile_repository import (
    UserProfileRepositorySQLAlchemy,
)

__all__ = ["UserProfileRepositorySQLAlchemy"]
