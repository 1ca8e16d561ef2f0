"""Pytest fixtures for API integration tests."""

from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient

from tollgate.domain.user import UserRole
from tollgate.infrastructure.persistence.sqlalchemy import (
    UserProfileRepositorySQLAlchemy,
)
from tollgate.presentation.api.app import API_V1_PREFIX, create_app
from tollgate_config import Settings


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def test_client(settings: Settings) -> TestClient:
    """Create a test client backed by a fresh in-memory database.

    Entering the client runs the application lifespan, which opens the
    database and creates the tables.
    """
    with TestClient(create_app(settings=settings)) as client:
        yield client


@pytest.fixture
def registered_user_data() -> dict:
    """Test user registration data."""
    return {
        "email": "test@example.com",
        "password": "SecurePassword123!",
        "full_name": "Test User",
    }


@pytest.fixture
def registered_user(test_client, registered_user_data, api_v1_prefix) -> dict:
    """Register the test user and return the response body."""
    response = test_client.post(
        f"{api_v1_prefix}/auth/register",
        json=registered_user_data,
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(registered_user) -> dict:
    """Get auth headers for a registered user."""
    return {"Authorization": f"Bearer {registered_user['access_token']}"}


@pytest.fixture
def promote_to_admin(test_client) -> Callable[[str], None]:
    """Change a user's role to admin directly in the app's database."""

    async def _promote(email: str) -> None:
        async with test_client.app.state.session_maker() as session:
            repo = UserProfileRepositorySQLAlchemy(session)
            profile = await repo.find_by_email(email)
            await repo.update(profile.id, role=UserRole.ADMIN)
            await session.commit()

    def promote(email: str) -> None:
        test_client.portal.call(_promote, email)

    return promote
