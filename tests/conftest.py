"""
pytest configuration and fixtures shared by the test suite.

Stores come in three flavours: a ``Mock`` of the repository interface
for service tests, and the two real backends for contract and
end-to-end tests.  Clients are FastAPI ``TestClient`` instances built
from ``create_app``.
"""

from unittest.mock import create_autospec

import pytest
from fastapi.testclient import TestClient

from user_api.app.api.dependencies import get_user_service
from user_api.app.core.db import init_db
from user_api.app.main import create_app
from user_api.app.repositories.user_repository import (
    InMemoryUserRepository,
    SqliteUserRepository,
    UserRepository,
)
from user_api.app.schemas.user import User
from user_api.app.services.user_service import UserService


@pytest.fixture
def user() -> User:
    return User(id=1, name="Test", email="test@example.com")


@pytest.fixture
def mock_repository():
    return create_autospec(UserRepository, instance=True)


@pytest.fixture
def database_path(tmp_path) -> str:
    path = str(tmp_path / "users.db")
    init_db(path)
    return path


@pytest.fixture(params=["memory", "sqlite"])
def repository(request, database_path) -> UserRepository:
    """Each real backend in turn."""
    if request.param == "memory":
        return InMemoryUserRepository()
    return SqliteUserRepository(database_path)


@pytest.fixture
def mock_service():
    return create_autospec(UserService, instance=True)


@pytest.fixture
def mocked_client(mock_service):
    """Client whose handlers talk to ``mock_service`` instead of a real store."""
    app = create_app(repository=InMemoryUserRepository())
    app.dependency_overrides[get_user_service] = lambda: mock_service
    return TestClient(app)


@pytest.fixture
def client(repository):
    """Client wired to a real store, once per backend."""
    return TestClient(create_app(repository=repository))
