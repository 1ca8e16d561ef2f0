"""User profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from tollgate.domain.user.aggregates.user_profile import UserProfile
from tollgate.domain.user.value_objects import UserRole


class UserProfileRepository(ABC):
    """Repository interface for UserProfile aggregates.

    This is the profile store the authentication service depends on.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[UserProfile]:
        """Find a profile by user ID."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[UserProfile]:
        """Find a profile by email address."""

    @abstractmethod
    async def create(self, profile: UserProfile) -> UserProfile:
        """Persist a new profile.

        Raises
        ------
        DuplicateEmailError
            If another profile already uses the email
        """

    @abstractmethod
    async def update(
        self,
        user_id: UUID,
        *,
        full_name: str | None = None,
        avatar_url: str | None = None,
        role: Union[str, UserRole, None] = None,
    ) -> UserProfile:
        """Update the given fields of an existing profile.

        Fields left as None are unchanged.

        Raises
        ------
        UserNotFoundError
            If no profile exists for ``user_id``
        """
