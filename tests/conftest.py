"""
Taskkeeper API - Test Configuration

Shared fixtures for CI-safe testing without MongoDB.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from taskkeeper.main import app
from taskkeeper.auth.dependencies import get_password_hasher, get_user_repository
from taskkeeper.auth.hashing import BcryptPasswordHasher
from taskkeeper.auth.models import User
from taskkeeper.auth.repository import InMemoryUserRepository
from taskkeeper.database import get_database
from taskkeeper.tasks.repository import InMemoryTaskRepository
from taskkeeper.tasks.router import get_task_repository


# Global in-memory repositories for tests
_test_task_repository = InMemoryTaskRepository()
_test_user_repository = InMemoryUserRepository()
# Lowest bcrypt cost keeps the suite fast
_test_password_hasher = BcryptPasswordHasher(rounds=4)


async def override_get_database():
    """Override database dependency; the in-memory repositories never touch it."""
    return MagicMock()


@pytest.fixture
def task_repository():
    """Provide a fresh in-memory task repository for each test."""
    _test_task_repository.clear()
    return _test_task_repository


@pytest.fixture
def user_repository():
    """Provide a fresh in-memory user repository for each test."""
    _test_user_repository.clear()
    return _test_user_repository


@pytest.fixture
def password_hasher():
    return _test_password_hasher


@pytest.fixture
def client(task_repository, user_repository):
    """Create test client with in-memory repositories."""
    app.dependency_overrides[get_task_repository] = lambda: _test_task_repository
    app.dependency_overrides[get_user_repository] = lambda: _test_user_repository
    app.dependency_overrides[get_password_hasher] = lambda: _test_password_hasher
    app.dependency_overrides[get_database] = override_get_database

    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def registered_user(client):
    """Register a test user and return credentials."""
    credentials = {"username": "testuser", "password": "TestPassword123"}
    client.post("/auth/signup", json=credentials)
    return credentials


@pytest.fixture
def auth_token(client, registered_user):
    """Get an auth token for the registered user."""
    response = client.post("/auth/signin", json=registered_user)
    return response.json()["accessToken"]


@pytest.fixture
def auth_headers(auth_token):
    """Create Authorization headers for authenticated requests."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def second_user_credentials():
    """Credentials for a second test user."""
    return {"username": "seconduser", "password": "SecondPassword1"}


@pytest.fixture
def second_user_token(client, second_user_credentials):
    """Register a second user and get their auth token."""
    client.post("/auth/signup", json=second_user_credentials)
    response = client.post("/auth/signin", json=second_user_credentials)
    return response.json()["accessToken"]


@pytest.fixture
def second_auth_headers(second_user_token):
    """Authorization headers for the second user."""
    return {"Authorization": f"Bearer {second_user_token}"}


@pytest.fixture
def mock_user() -> User:
    return User(id=12, username="Test user", password_hash="hash", salt="salt")
