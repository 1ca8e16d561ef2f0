"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (mocks, no database)
    │   ├── tollgate_auth/
    │   ├── tollgate_config/
    │   ├── domain/
    │   ├── application/
    │   └── presentation/
    └── integration/       # In-memory SQLite and the full HTTP stack
        ├── persistence/
        └── api/
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv
from pydantic import SecretStr

from tollgate_config import Settings, clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Optional local overrides for test runs (e.g. LOG_LEVEL=DEBUG)
if (PROJECT_ROOT / "config" / ".env.test").exists():
    load_dotenv(PROJECT_ROOT / "config" / ".env.test")

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"


@pytest.fixture(autouse=True)
def fresh_settings_cache():
    """Make every test load settings from its own environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def settings() -> Settings:
    """Settings for tests: in-memory database, cheap bcrypt cost."""
    return Settings(
        _env_file=None,
        jwt_secret=SecretStr(TEST_JWT_SECRET),
        database_url="sqlite+aiosqlite:///:memory:",
        password_hash_rounds=4,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
    )
