"""
Global test fixtures for ProfileHub.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Fast password hasher and a token service with a test key
- Test user factories
- FastAPI test clients wired to in-memory stores
"""

import os
import sys
from pathlib import Path
from typing import Generator
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

# The signing key has no default; provide one before settings are loaded
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-not-for-production")

TEST_SECRET = "test-secret-key-not-for-production"


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like Motor for
    testing purposes.
    """
    from mongomock_motor import AsyncMongoMockClient

    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_profile_db(mock_async_mongo_client):
    """Provide mock profile_db database with the production indexes."""
    from app.database.indexes import create_indexes

    db = mock_async_mongo_client["profile_db"]
    await create_indexes(db)
    yield db


# =============================================================================
# Security Fixtures
# =============================================================================

@pytest.fixture
def password_hasher():
    """bcrypt hasher at the minimum cost factor to keep tests fast."""
    from app.core.security import PasswordHasher

    return PasswordHasher(rounds=4)


@pytest.fixture
def token_service():
    """Token service signing with the test key and a 60 minute window."""
    from app.core.security import TokenService

    return TokenService(secret_key=TEST_SECRET, algorithm="HS256", expire_minutes=60)


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """Basic test user data for registration."""
    return {
        "username": "testuser",
        "email": "testuser@example.com",
        "password": "SecurePassword123!",
        "confirmPassword": "SecurePassword123!",
    }


@pytest.fixture
def test_login_data(test_user_data) -> dict:
    """Credentials matching test_user_data."""
    return {
        "email": test_user_data["email"],
        "password": test_user_data["password"],
    }


@pytest.fixture
def mock_user_claims() -> dict:
    """Identity claims as carried in a session token."""
    return {
        "id": "507f1f77bcf86cd799439011",
        "username": "testuser",
        "email": "testuser@example.com",
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def user_repository():
    """Fresh in-memory user repository."""
    from app.repositories.memory import InMemoryUserRepository

    return InMemoryUserRepository()


@pytest.fixture
def image_storage(tmp_path):
    """Image storage writing into a per-test temporary directory."""
    from app.services.storage import LocalImageStorage

    return LocalImageStorage(str(tmp_path / "uploads"))


@pytest.fixture
def app(user_repository, password_hasher, token_service, image_storage):
    """
    Create FastAPI app for testing.

    Database, hashing, token and storage dependencies are overridden so
    no MongoDB server is needed.
    """
    from app.core.security import get_password_hasher, get_token_service
    from app.dependencies.services import get_user_repository
    from app.main import app
    from app.services.storage import get_image_storage

    app.dependency_overrides[get_user_repository] = lambda: user_repository
    app.dependency_overrides[get_password_hasher] = lambda: password_hasher
    app.dependency_overrides[get_token_service] = lambda: token_service
    app.dependency_overrides[get_image_storage] = lambda: image_storage
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app, mock_async_mongo_client) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Startup index creation runs against mongomock instead of a server.
    """
    with patch(
        "app.main.get_database",
        AsyncMock(return_value=mock_async_mongo_client["profile_db"]),
    ):
        with TestClient(app) as c:
            yield c


@pytest.fixture
def auth_headers(token_service):
    """Build an Authorization header for a set of claims."""
    def _headers(claims: dict) -> dict:
        return {"Authorization": f"Bearer {token_service.issue(claims)}"}
    return _headers
