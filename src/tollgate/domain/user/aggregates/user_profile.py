"""UserProfile aggregate: identity and display data of a user."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from tollgate.domain.shared.time import utc_now
from tollgate.domain.user.value_objects import UserRole


class UserProfile:
    """
    User profile aggregate root.

    Holds identity (id, email, role) and display data. The password hash
    is stored separately by the credential store.
    """

    def __init__(
        self,
        email: str,
        full_name: str = "",
        role: Union[str, UserRole] = UserRole.CUSTOMER,
        avatar_url: str | None = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._email = email
        self._full_name = full_name
        self._avatar_url = avatar_url
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email

    @property
    def full_name(self) -> str:
        return self._full_name

    @property
    def avatar_url(self) -> str | None:
        return self._avatar_url

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def change_role(self, role: Union[str, UserRole]) -> None:
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._updated_at = utc_now()

    def update_details(
        self,
        full_name: str | None = None,
        avatar_url: str | None = None,
    ) -> None:
        if full_name is not None:
            self._full_name = full_name
        if avatar_url is not None:
            self._avatar_url = avatar_url
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        email: str,
        full_name: str = "",
        role: UserRole = UserRole.CUSTOMER,
    ) -> "UserProfile":
        return cls(email=email, full_name=full_name, role=role)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        email: str,
        full_name: str,
        role: Union[str, UserRole],
        avatar_url: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "UserProfile":
        return cls(
            id=id,
            email=email,
            full_name=full_name,
            role=role,
            avatar_url=avatar_url,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserProfile):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"UserProfile(id={self._id}, email={self._email}, role={self._role.value})"
