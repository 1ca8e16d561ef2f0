"""Authentication service for user registration, login and token refresh."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tollgate.domain.user import DuplicateEmailError, UserProfile
from tollgate_auth import (
    InternalAuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    TokenPair,
    WeakPasswordError,
)
from tollgate_auth.repositories import UserCredentialRepository

if TYPE_CHECKING:
    from tollgate.domain.user import UserProfileRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PublicProfile:
    """Profile fields that are safe to return to the client."""

    id: str
    email: str
    role: str
    full_name: str

    @classmethod
    def from_profile(cls, profile: UserProfile) -> PublicProfile:
        return cls(
            id=str(profile.id),
            email=profile.email,
            role=profile.role.value,
            full_name=profile.full_name or "",
        )


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a successful registration or login."""

    tokens: TokenPair
    user: PublicProfile


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates tollgate_auth infrastructure (password hashing, JWT
    tokens) with the profile store to provide:
    - User registration
    - Login with password
    - Token refresh
    - Access token to identity resolution

    Known failures (weak password, duplicate email, bad credentials) pass
    through unchanged; anything unexpected is logged here and surfaced as
    a generic InternalAuthError.
    """

    def __init__(
        self,
        profile_repository: UserProfileRepository,
        credential_repository: UserCredentialRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._profile_repo = profile_repository
        self._credential_repo = credential_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    def _issue_tokens(self, profile: UserProfile) -> TokenPair:
        return self._jwt_service.generate_pair(
            user_id=profile.id,
            email=profile.email,
            role=profile.role.value,
        )

    async def register(
        self,
        email: str,
        password: str,
        full_name: str,
    ) -> AuthResult:
        try:
            strength = self._password_service.check_strength(password)
            if not strength.is_valid:
                raise WeakPasswordError(strength.errors)

            existing = await self._profile_repo.find_by_email(email)
            if existing is not None:
                raise DuplicateEmailError(email)

            # bcrypt is CPU-bound; keep it off the event loop
            password_hash = await asyncio.to_thread(
                self._password_service.hash,
                password,
            )

            profile = await self._profile_repo.create(
                UserProfile.create(email, full_name=full_name),
            )
            await self._credential_repo.save(
                user_id=profile.id,
                password_hash=password_hash,
            )

            tokens = self._issue_tokens(profile)

        except (WeakPasswordError, DuplicateEmailError):
            raise
        except Exception as e:
            logger.exception("Registration failed for %s", email)
            msg = "Registration failed. Please try again."
            raise InternalAuthError(msg) from e

        logger.info("User registered: %s (role: %s)", email, profile.role.value)
        return AuthResult(tokens=tokens, user=PublicProfile.from_profile(profile))

    async def login(
        self,
        email: str,
        password: str,
    ) -> AuthResult:
        try:
            profile = await self._profile_repo.find_by_email(email)
            credential = (
                await self._credential_repo.find_by_user_id(profile.id)
                if profile is not None
                else None
            )

            # Always pay for one bcrypt comparison so unknown emails are
            # not answered faster than wrong passwords
            password_hash = (
                credential.password_hash
                if credential is not None
                else self._password_service.dummy_hash
            )
            matches = await asyncio.to_thread(
                self._password_service.verify,
                password,
                password_hash,
            )

            if profile is None or credential is None or not matches:
                raise InvalidCredentialsError

            await self._credential_repo.update_last_login(profile.id)

            if self._password_service.needs_rehash(credential.password_hash):
                new_hash = await asyncio.to_thread(
                    self._password_service.hash,
                    password,
                )
                await self._credential_repo.save(
                    user_id=profile.id,
                    password_hash=new_hash,
                )
                logger.info("Rehashed password for user: %s", profile.id)

            tokens = self._issue_tokens(profile)

        except InvalidCredentialsError:
            logger.info("Rejected login attempt")
            raise
        except Exception as e:
            logger.exception("Login failed")
            msg = "Authentication failed. Please try again."
            raise InternalAuthError(msg) from e

        logger.info("User logged in: %s", email)
        return AuthResult(tokens=tokens, user=PublicProfile.from_profile(profile))

    async def refresh_tokens(self, refresh_token: str) -> TokenPair:
        """Rotate a refresh token into a brand-new pair.

        The account is not re-checked: a refresh token stays usable until
        it expires, even if the user was removed in the meantime.
        """
        try:
            tokens = self._jwt_service.refresh(refresh_token)
        except InvalidTokenError as e:
            raise InvalidCredentialsError from e
        except Exception as e:
            logger.exception("Token refresh failed")
            msg = "Token refresh failed. Please login again."
            raise InternalAuthError(msg) from e

        logger.debug("Tokens refreshed")
        return tokens
