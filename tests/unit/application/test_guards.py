"""Unit tests for the authentication and role guards."""

from datetime import timedelta
from uuid import uuid4

import pytest

from tollgate.application.context import AuthenticatedIdentity
from tollgate.application.guards import AuthenticationGuard, RoleGuard
from tollgate.domain.user import UserRole
from tollgate_auth import (
    InsufficientRoleError,
    InvalidTokenError,
    JWTService,
    MissingTokenError,
    UnauthenticatedError,
)

SECRET = "guard-test-secret"


class TestAuthenticationGuard:
    """Tests for the authentication gate."""

    def setup_method(self):
        """Set up test fixtures."""
        self.jwt_service = JWTService(secret_key=SECRET)
        self.guard = AuthenticationGuard(self.jwt_service)
        self.user_id = uuid4()

    def _header(self, role: str = "customer") -> str:
        pair = self.jwt_service.generate_pair(self.user_id, "g@example.com", role)
        return f"Bearer {pair.access_token}"

    def test_valid_header_yields_identity(self):
        """Test that a valid bearer token becomes an identity."""
        identity = self.guard.authenticate(self._header("admin"))

        assert identity.id == str(self.user_id)
        assert identity.email == "g@example.com"
        assert identity.role == UserRole.ADMIN

    @pytest.mark.parametrize("header", [None, "", "Token abc", "Bearer", "bearer x"])
    def test_missing_or_malformed_header(self, header):
        """Test that an absent or malformed header is a missing token."""
        with pytest.raises(MissingTokenError):
            self.guard.authenticate(header)

    def test_invalid_token(self):
        """Test that a bad token in a well-formed header is an invalid token."""
        with pytest.raises(InvalidTokenError) as exc_info:
            self.guard.authenticate("Bearer not.a.token")

        assert exc_info.value.kind == "access"

    def test_expired_token(self):
        """Test that an expired access token is rejected."""
        expired = JWTService(secret_key=SECRET, access_token_ttl=timedelta(seconds=-1))
        pair = expired.generate_pair(self.user_id, "g@example.com", "customer")

        with pytest.raises(InvalidTokenError):
            self.guard.authenticate(f"Bearer {pair.access_token}")

    def test_unknown_role_is_invalid_token(self):
        """Test that a signed token with an unknown role is not accepted."""
        with pytest.raises(InvalidTokenError):
            self.guard.authenticate(self._header("superuser"))


class TestRoleGuard:
    """Tests for the role gate."""

    def setup_method(self):
        """Set up test fixtures."""
        self.customer = AuthenticatedIdentity(
            id="1",
            email="c@example.com",
            role=UserRole.CUSTOMER,
        )
        self.admin = AuthenticatedIdentity(
            id="2",
            email="a@example.com",
            role=UserRole.ADMIN,
        )

    def test_no_roles_declared_allows_anyone(self):
        """Test that an empty role set passes, even without an identity."""
        guard = RoleGuard()

        guard.authorize(None)
        guard.authorize(self.customer)

    def test_matching_role_passes(self):
        guard = RoleGuard([UserRole.ADMIN])

        guard.authorize(self.admin)

    def test_any_of_several_roles_passes(self):
        guard = RoleGuard(["admin", "customer"])

        guard.authorize(self.customer)
        guard.authorize(self.admin)

    def test_wrong_role_is_insufficient(self):
        """Test that a customer is forbidden from an admin route."""
        guard = RoleGuard([UserRole.ADMIN])

        with pytest.raises(InsufficientRoleError) as exc_info:
            guard.authorize(self.customer)

        assert exc_info.value.message == "Insufficient permissions"

    def test_missing_identity_is_unauthenticated(self):
        """Test that a role check without an identity fails as unauthenticated."""
        guard = RoleGuard([UserRole.ADMIN])

        with pytest.raises(UnauthenticatedError) as exc_info:
            guard.authorize(None)

        assert exc_info.value.message == "User not authenticated"

    def test_unknown_declared_role_is_rejected(self):
        """Test that typos in a route's role set fail at declaration time."""
        with pytest.raises(ValueError):
            RoleGuard(["superuser"])
