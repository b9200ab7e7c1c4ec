"""
Shared pytest fixtures for userhub tests.
"""
import itertools
import os
from dataclasses import replace
from typing import Dict, List, Optional
from unittest.mock import MagicMock, patch

import pytest

from userhub.domain.models import RateUsage, User
from userhub.domain.repositories import UniqueFieldConflict, UserRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_userhub",
        "BCRYPT_ROUNDS": "4",
        "ENVIRONMENT": "development",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.mongo_user_collection = "users"
    mock.bcrypt_rounds = 4
    mock.rate_limit_window_seconds = 300
    mock.rate_limit_max_requests = 100
    mock.graphql_path = "/graphql"
    mock.environment = "development"
    mock.log_level = "INFO"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("userhub.core.config.get_settings", return_value=mock), patch(
        "userhub.core.security.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def usage() -> RateUsage:
    """Rate-usage snapshot for a single request."""
    return RateUsage(current=1, limit=100, client_id="127.0.0.1")


class InMemoryUserRepository(UserRepository):
    """UserRepository backed by a dict, with unique email and username like the real indexes."""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}
        self._ids = itertools.count(1)

    async def find_all(self) -> List[User]:
        return [replace(user) for user in self.users.values()]

    async def find_by_id(self, user_id: str) -> Optional[User]:
        user = self.users.get(user_id)
        return replace(user) if user else None

    async def find_by_email(self, email: str) -> Optional[User]:
        return self._find_by("email", email)

    async def find_by_username(self, username: str) -> Optional[User]:
        return self._find_by("username", username)

    async def save(self, user: User) -> User:
        for field, label in (("email", "Email"), ("username", "Username")):
            value = getattr(user, field)
            for other in self.users.values():
                if other.id != user.id and getattr(other, field) == value:
                    raise UniqueFieldConflict(label, value)

        if user.id is None:
            user = replace(user, id=f"{next(self._ids):024x}")
        elif user.id not in self.users:
            raise ValueError(f"User with ID {user.id} not found")

        self.users[user.id] = replace(user)
        return replace(user)

    async def delete(self, user_id: str) -> bool:
        return self.users.pop(user_id, None) is not None

    def _find_by(self, field: str, value: str) -> Optional[User]:
        for user in self.users.values():
            if getattr(user, field) == value:
                return replace(user)
        return None


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    """Fresh in-memory repository per test."""
    return InMemoryUserRepository()
