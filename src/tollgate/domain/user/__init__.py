"""User domain manages user profiles.

This domain handles:
- UserProfile aggregate (id, email, display data, role)
- The profile store interface used by authentication

Password hashes are not part of the profile; they live in the
tollgate_auth credential store.
"""

from tollgate.domain.user.aggregates import UserProfile
from tollgate.domain.user.exceptions import DuplicateEmailError, UserNotFoundError
from tollgate.domain.user.repositories import UserProfileRepository
from tollgate.domain.user.value_objects import UserRole

__all__ = [
    "DuplicateEmailError",
    "UserNotFoundError",
    "UserProfile",
    "UserProfileRepository",
    "UserRole",
]
