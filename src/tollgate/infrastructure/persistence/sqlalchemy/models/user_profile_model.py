"""SQLAlchemy model for the UserProfile aggregate."""

from uuid import UUID

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tollgate.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class UserProfileModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting UserProfile aggregates.

    Contains identity and display data only. Password hashes are stored
    in the user_credentials table (tollgate_auth).
    """

    __tablename__ = "profiles"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    full_name: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    avatar_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    role: Mapped[str] = mapped_column(String(20), default="customer", nullable=False)

    def __repr__(self) -> str:
        return f"<UserProfileModel(id={self.id}, email={self.email}, role={self.role})>"
