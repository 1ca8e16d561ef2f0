"""SQLAlchemy implementation of UserProfileRepository."""

import logging
from typing import Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tollgate.domain.shared.time import ensure_tz_aware
from tollgate.domain.user import (
    DuplicateEmailError,
    UserNotFoundError,
    UserProfile,
    UserProfileRepository,
    UserRole,
)
from tollgate.infrastructure.persistence.sqlalchemy.models import UserProfileModel

logger = logging.getLogger(__name__)


class UserProfileRepositorySQLAlchemy(UserProfileRepository):
    """SQLAlchemy implementation of the UserProfileRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> UserProfile | None:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_email(self, email: str) -> UserProfile | None:
        stmt = select(UserProfileModel).where(UserProfileModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def create(self, profile: UserProfile) -> UserProfile:
        model = self._map_to_model(profile)
        self._session.add(model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            # Concurrent registration won the race for this email
            if "unique" in str(e).lower():
                raise DuplicateEmailError(profile.email) from e
            raise

        logger.info("Created profile: %s", profile.id)
        return self._map_to_domain(model)

    async def update(
        self,
        user_id: UUID,
        *,
        full_name: str | None = None,
        avatar_url: str | None = None,
        role: Union[str, UserRole, None] = None,
    ) -> UserProfile:
        model = await self._find_model_by_id(user_id)
        if model is None:
            raise UserNotFoundError(str(user_id))

        profile = self._map_to_domain(model)
        profile.update_details(full_name=full_name, avatar_url=avatar_url)
        if role is not None:
            profile.change_role(role)

        model.full_name = profile.full_name
        model.avatar_url = profile.avatar_url
        model.role = profile.role.value
        model.updated_at = profile.updated_at
        await self._session.flush()

        logger.debug("Updated profile: %s", user_id)
        return profile

    async def _find_model_by_id(self, user_id: UUID) -> UserProfileModel | None:
        stmt = select(UserProfileModel).where(UserProfileModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserProfileModel) -> UserProfile:
        return UserProfile.reconstitute(
            id=model.id,
            email=model.email,
            full_name=model.full_name,
            role=model.role,
            avatar_url=model.avatar_url,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, profile: UserProfile) -> UserProfileModel:
        return UserProfileModel(
            id=profile.id,
            email=profile.email,
            full_name=profile.full_name,
            avatar_url=profile.avatar_url,
            role=profile.role.value,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )
