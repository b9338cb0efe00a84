"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with backend-specific helpers
for testing FastAPI routes, services, and database operations.
"""

import pytest
import pytest_asyncio


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def mongo_user_repository(mock_profile_db):
    """MongoDB repository over the mongomock database."""
    from app.repositories.mongo import MongoUserRepository

    return MongoUserRepository(mock_profile_db)


@pytest.fixture
def auth_service(mongo_user_repository, password_hasher, token_service):
    """AuthService over the mongomock database."""
    from app.services.auth_service import AuthService

    return AuthService(mongo_user_repository, password_hasher, token_service)


@pytest.fixture
def profile_service(mongo_user_repository, image_storage):
    """ProfileService over the mongomock database."""
    from app.services.profile_service import ProfileService

    return ProfileService(mongo_user_repository, image_storage)


@pytest_asyncio.fixture
async def stored_user(mongo_user_repository, password_hasher):
    """A user already present in the mongomock database."""
    return await mongo_user_repository.create(
        "storeduser",
        "stored@example.com",
        password_hasher.hash("StoredPassword1"),
    )


# =============================================================================
# Route Helpers
# =============================================================================

@pytest.fixture
def registered_client(client, test_user_data, test_login_data):
    """
    A TestClient with one registered user and its token.

    Returns (client, user_json, headers).
    """
    response = client.post("/user/register", json=test_user_data)
    assert response.status_code == 201
    user = response.json()

    response = client.post("/user/login", json=test_login_data)
    assert response.status_code == 200
    headers = {"Authorization": f"Bearer {response.json()['token']}"}
    return client, user, headers


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, detail_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "detail" in data
        if detail_contains:
            assert detail_contains.lower() in str(data["detail"]).lower()
    return _assert
