"""SQLAlchemy persistence for the tollgate application.

Provides:
- Base / UserProfileModel: declarative models for profiles
- UserProfileRepositorySQLAlchemy: profile store implementation
- create_engine / create_session_maker / create_tables: engine helpers
"""

from tollgate.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_session_maker,
    create_tables,
    drop_tables,
)
from tollgate.infrastructure.persistence.sqlalchemy.models import (
    Base,
    UserProfileModel,
)
from tollgate.infrastructure.persistence.sqlalchemy.repositories import (
    UserProfileRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "UserProfileModel",
    "UserProfileRepositorySQLAlchemy",
    "create_engine",
    "create_session_maker",
    "create_tables",
    "drop_tables",
]
