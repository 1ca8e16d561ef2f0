"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from tollgate_auth.exceptions import InvalidTokenError
from tollgate_auth.services import JWTService

SECRET = "test-secret-key-12345"


class TestJWTServiceInit:
    """Tests for JWTService initialization."""

    def test_init_with_empty_secret_raises(self):
        """Test that empty secret raises ValueError."""
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(secret_key="")

    def test_default_lifetimes(self):
        """Test the 15 minute / 7 day defaults."""
        service = JWTService(secret_key=SECRET)

        assert service.access_token_ttl == timedelta(minutes=15)
        assert service.refresh_token_ttl == timedelta(days=7)


class TestGeneratePair:
    """Tests for token pair creation and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = JWTService(secret_key=SECRET)
        self.user_id = uuid4()
        self.email = "test@example.com"

    def test_pair_contains_two_different_tokens(self):
        """Test that access and refresh tokens are distinct strings."""
        pair = self.service.generate_pair(self.user_id, self.email, "customer")

        assert isinstance(pair.access_token, str)
        assert isinstance(pair.refresh_token, str)
        assert pair.access_token != pair.refresh_token

    def test_access_token_round_trips_identity(self):
        """Test that verify_access returns the claims the token was issued with."""
        pair = self.service.generate_pair(self.user_id, self.email, "admin")

        payload = self.service.verify_access(pair.access_token)

        assert payload.user_id == str(self.user_id)
        assert payload.email == self.email
        assert payload.role == "admin"
        assert payload.token_id is not None
        assert payload.expires_at > payload.issued_at

    def test_access_token_lifetime(self):
        """Test that exp - iat equals the configured access lifetime."""
        pair = self.service.generate_pair(self.user_id, self.email, "customer")

        access = self.service.verify_access(pair.access_token)
        refresh = self.service.verify_refresh(pair.refresh_token)

        assert access.expires_at - access.issued_at == timedelta(minutes=15)
        assert refresh.expires_at - refresh.issued_at == timedelta(days=7)

    def test_token_is_hs256(self):
        """Test that tokens are signed with HS256."""
        pair = self.service.generate_pair(self.user_id, self.email, "customer")

        header = jwt.get_unverified_header(pair.access_token)

        assert header["alg"] == "HS256"

    def test_pairs_minted_back_to_back_differ(self):
        """Test that two pairs for the same identity are never identical."""
        pair1 = self.service.generate_pair(self.user_id, self.email, "customer")
        pair2 = self.service.generate_pair(self.user_id, self.email, "customer")

        assert pair1.access_token != pair2.access_token
        assert pair1.refresh_token != pair2.refresh_token


class TestVerify:
    """Tests for rejected tokens."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = JWTService(secret_key=SECRET)
        self.pair = self.service.generate_pair(uuid4(), "test@example.com", "customer")

    def test_expired_access_token_raises(self):
        """Test that an expired access token is rejected."""
        expired_service = JWTService(
            secret_key=SECRET,
            access_token_ttl=timedelta(seconds=-1),
        )
        pair = expired_service.generate_pair(uuid4(), "a@example.com", "customer")

        with pytest.raises(InvalidTokenError) as exc_info:
            self.service.verify_access(pair.access_token)

        assert exc_info.value.kind == "access"
        assert exc_info.value.message == "Invalid or expired access token"

    def test_expired_refresh_token_raises(self):
        """Test that an expired refresh token is rejected with kind refresh."""
        expired_service = JWTService(
            secret_key=SECRET,
            refresh_token_ttl=timedelta(seconds=-1),
        )
        pair = expired_service.generate_pair(uuid4(), "a@example.com", "customer")

        with pytest.raises(InvalidTokenError) as exc_info:
            self.service.verify_refresh(pair.refresh_token)

        assert exc_info.value.kind == "refresh"
        assert exc_info.value.message == "Invalid or expired refresh token"

    def test_wrong_secret_raises(self):
        """Test that a token signed with another secret is rejected."""
        other = JWTService(secret_key="a-different-secret")

        with pytest.raises(InvalidTokenError):
            other.verify_access(self.pair.access_token)

    def test_tampered_token_raises(self):
        """Test that modifying the signature invalidates the token."""
        header, body, signature = self.pair.access_token.split(".")
        flipped = "A" if signature[0] != "A" else "B"
        tampered = f"{header}.{body}.{flipped}{signature[1:]}"

        with pytest.raises(InvalidTokenError):
            self.service.verify_access(tampered)

    def test_garbage_token_raises(self):
        """Test that a non-JWT string is rejected."""
        with pytest.raises(InvalidTokenError):
            self.service.verify_access("not-a-jwt")

    def test_unsigned_token_raises(self):
        """Test that alg=none tokens are rejected."""
        now = datetime.now(tz=timezone.utc)
        token = jwt.encode(
            {
                "sub": "someone",
                "email": "a@example.com",
                "role": "admin",
                "iat": now,
                "exp": now + timedelta(minutes=5),
            },
            key=None,
            algorithm="none",
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify_access(token)

    def test_missing_claim_raises(self):
        """Test that a correctly signed token without a role is rejected."""
        now = datetime.now(tz=timezone.utc)
        token = jwt.encode(
            {
                "sub": "someone",
                "email": "a@example.com",
                "iat": now,
                "exp": now + timedelta(minutes=5),
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify_access(token)

    def test_refresh_token_is_accepted_by_verify_refresh(self):
        """Test that verify_refresh accepts a fresh refresh token."""
        payload = self.service.verify_refresh(self.pair.refresh_token)

        assert payload.email == "test@example.com"


class TestRefresh:
    """Tests for refresh-token rotation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = JWTService(secret_key=SECRET)
        self.user_id = uuid4()

    def test_refresh_issues_new_pair_with_same_identity(self):
        """Test that rotation carries identity claims into a new pair."""
        pair = self.service.generate_pair(self.user_id, "r@example.com", "admin")

        new_pair = self.service.refresh(pair.refresh_token)

        assert new_pair.access_token != pair.access_token
        assert new_pair.refresh_token != pair.refresh_token
        payload = self.service.verify_access(new_pair.access_token)
        assert payload.user_id == str(self.user_id)
        assert payload.email == "r@example.com"
        assert payload.role == "admin"

    def test_old_refresh_token_stays_usable(self):
        """Test that rotation does not revoke the presented token."""
        pair = self.service.generate_pair(self.user_id, "r@example.com", "customer")

        self.service.refresh(pair.refresh_token)
        again = self.service.refresh(pair.refresh_token)

        assert again.access_token

    def test_refresh_with_invalid_token_raises(self):
        """Test that rotation rejects an invalid refresh token."""
        with pytest.raises(InvalidTokenError) as exc_info:
            self.service.refresh("invalid")

        assert exc_info.value.kind == "refresh"


class TestExtractBearer:
    """Tests for Authorization header parsing."""

    @pytest.mark.parametrize(
        ("header", "expected"),
        [
            ("Bearer abc.def.ghi", "abc.def.ghi"),
            (None, None),
            ("", None),
            ("Bearer", None),
            ("Bearer ", None),
            ("bearer abc", None),
            ("Basic abc", None),
            ("Bearer abc def", None),
            ("Bearer  abc", None),
        ],
    )
    def test_extract_bearer(self, header, expected):
        """Test that only an exact 'Bearer <token>' header yields a token."""
        assert JWTService.extract_bearer(header) == expected
