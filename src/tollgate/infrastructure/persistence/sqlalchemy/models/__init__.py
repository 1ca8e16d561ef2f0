"""SQLAlchemy models for persistence layer."""

from tollgate.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from tollgate.infrastructure.persistence.sqlalchemy.models.user_profile_model import (
    UserProfileModel,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "UserProfileModel",
]
