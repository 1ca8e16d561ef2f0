"""Unit tests for application settings."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from tollgate_config import Settings, get_settings


@pytest.fixture
def clean_env(monkeypatch):
    """Remove settings-related environment variables."""
    for name in (
        "JWT_SECRET",
        "JWT_ACCESS_TOKEN_EXPIRATION",
        "JWT_REFRESH_TOKEN_EXPIRATION",
        "PASSWORD_HASH_ROUNDS",
        "API_CORS_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    """Tests for Settings loading and validation."""

    def test_missing_jwt_secret_fails(self, clean_env):
        """Test that there is no fallback signing secret."""
        with pytest.raises(ValidationError, match="jwt_secret"):
            Settings(_env_file=None)

    def test_blank_jwt_secret_fails(self, clean_env):
        """Test that a whitespace-only secret is rejected."""
        clean_env.setenv("JWT_SECRET", "   ")

        with pytest.raises(ValidationError, match="JWT_SECRET must not be empty"):
            Settings(_env_file=None)

    def test_loads_from_environment(self, clean_env):
        """Test that values come from environment variables."""
        clean_env.setenv("JWT_SECRET", "env-secret")
        clean_env.setenv("JWT_ACCESS_TOKEN_EXPIRATION", "1h")
        clean_env.setenv("PASSWORD_HASH_ROUNDS", "10")

        settings = Settings(_env_file=None)

        assert settings.jwt_secret.get_secret_value() == "env-secret"
        assert settings.access_token_ttl == timedelta(hours=1)
        assert settings.password_hash_rounds == 10

    def test_default_lifetimes(self, clean_env):
        """Test the 15m / 7d defaults."""
        clean_env.setenv("JWT_SECRET", "env-secret")

        settings = Settings(_env_file=None)

        assert settings.access_token_ttl == timedelta(minutes=15)
        assert settings.refresh_token_ttl == timedelta(days=7)
        assert settings.password_hash_rounds == 12

    def test_invalid_expiration_fails(self, clean_env):
        """Test that an unparseable expiration is a configuration error."""
        clean_env.setenv("JWT_SECRET", "env-secret")
        clean_env.setenv("JWT_REFRESH_TOKEN_EXPIRATION", "forever")

        with pytest.raises(ValidationError, match="Invalid duration"):
            Settings(_env_file=None)

    def test_rounds_out_of_range_fails(self, clean_env):
        """Test that bcrypt costs outside 4..31 are rejected."""
        clean_env.setenv("JWT_SECRET", "env-secret")
        clean_env.setenv("PASSWORD_HASH_ROUNDS", "3")

        with pytest.raises(ValidationError, match="between 4 and 31"):
            Settings(_env_file=None)

    def test_cors_origins_are_split(self, clean_env):
        """Test that comma-separated origins become a list."""
        settings = Settings(
            _env_file=None,
            jwt_secret="s",
            api_cors_origins="http://a.test, http://b.test,",
        )

        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_secret_is_not_in_repr(self, clean_env):
        """Test that the secret is masked when settings are printed."""
        settings = Settings(_env_file=None, jwt_secret="super-secret-value")

        assert "super-secret-value" not in repr(settings)


class TestGetSettings:
    def test_get_settings_is_cached(self, clean_env):
        clean_env.setenv("JWT_SECRET", "env-secret")

        assert get_settings() is get_settings()
