"""
Unit tests for the DI container wiring (MongoDB accessors patched, no real DB).
"""
from unittest.mock import MagicMock, patch

import pytest

from userhub.application.use_cases.user import (
    AddUserUseCase,
    DeleteUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from userhub.di import get_container, reset_container
from userhub.domain.repositories import UserRepository
from userhub.infrastructure.db.mongo_user_repository import MongoUserRepository
from userhub.infrastructure.rate_limit import RateUsageTracker


@pytest.fixture
def container(mock_settings):
    collection = MagicMock()
    reset_container()
    with patch(
        "userhub.di.providers.database_provider.get_user_collection", return_value=collection
    ), patch(
        "userhub.di.providers.rate_limit_provider.get_settings", return_value=mock_settings
    ):
        yield get_container()
    reset_container()


class TestContainer:
    def test_container_is_singleton(self, container):
        assert get_container() is container

    def test_repository_uses_registered_collection(self, container):
        repo = container.get(UserRepository)
        assert isinstance(repo, MongoUserRepository)
        assert repo.user_collection is container.get("user_collection")

    @pytest.mark.parametrize(
        "use_case_class",
        [ListUsersUseCase, AddUserUseCase, UpdateUserUseCase, DeleteUserUseCase],
    )
    def test_use_cases_are_built_per_request(self, container, use_case_class):
        first = container.get(use_case_class)
        second = container.get(use_case_class)
        assert isinstance(first, use_case_class)
        assert first is not second
        assert first.user_repository is container.get(UserRepository)

    def test_rate_tracker_uses_settings(self, container):
        tracker = container.get(RateUsageTracker)
        assert tracker.window_seconds == 300
        assert tracker.max_requests == 100
        assert container.get(RateUsageTracker) is tracker

    def test_unknown_key(self, container):
        with pytest.raises(KeyError):
            container.get("nothing")

    def test_only_collections_are_registered_as_resources(self, container):
        assert container.get("user_collection") is not None
        with pytest.raises(KeyError):
            container.get("database")
