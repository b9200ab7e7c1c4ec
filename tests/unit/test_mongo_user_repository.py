"""
Unit tests for MongoUserRepository (collection mocked, no real DB).
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from userhub.domain.models.user import User
from userhub.domain.repositories import UniqueFieldConflict
from userhub.infrastructure.db.mongo_user_repository import MongoUserRepository

OID = ObjectId("64b7f0c2a1e4d3b2c1a09f8e")


def _document(**overrides) -> dict:
    document = {
        "_id": OID,
        "fullName": "Test User",
        "age": 20,
        "address": "Manila",
        "email": "a@x.com",
        "contactNumber": "09171234567",
        "username": "a1",
        "password": "$2b$04$hash",
    }
    document.update(overrides)
    return document


def _user(user_id=None) -> User:
    return User(
        id=user_id,
        full_name="Test User",
        age=20,
        address="Manila",
        email="a@x.com",
        contact_number="09171234567",
        username="a1",
        hashed_password="$2b$04$hash",
    )


class _AsyncCursor:
    def __init__(self, documents):
        self._documents = iter(documents)

    def __aiter__(self):
        return self

    async def __anext__(self):
        try:
            return next(self._documents)
        except StopIteration:
            raise StopAsyncIteration


@pytest.fixture
def collection():
    mock = MagicMock()
    mock.find_one = AsyncMock()
    mock.insert_one = AsyncMock()
    mock.update_one = AsyncMock()
    mock.delete_one = AsyncMock()
    return mock


@pytest.fixture
def repo(collection):
    return MongoUserRepository(collection)


class TestReads:
    @pytest.mark.asyncio
    async def test_find_all_maps_documents(self, repo, collection):
        collection.find.return_value = _AsyncCursor([_document(), _document(_id=ObjectId())])

        users = await repo.find_all()

        assert len(users) == 2
        assert users[0] == _user(str(OID))

    @pytest.mark.asyncio
    async def test_find_by_id_invalid_format(self, repo, collection):
        assert await repo.find_by_id("not-an-object-id") is None
        collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_find_by_id(self, repo, collection):
        collection.find_one.return_value = _document()
        user = await repo.find_by_id(str(OID))
        assert user.id == str(OID)
        collection.find_one.assert_called_once_with({"_id": OID})

    @pytest.mark.asyncio
    async def test_find_by_email_queries_stored_field(self, repo, collection):
        collection.find_one.return_value = None
        assert await repo.find_by_email("a@x.com") is None
        collection.find_one.assert_called_once_with({"email": "a@x.com"})

    @pytest.mark.asyncio
    async def test_storage_failure_becomes_runtime_error(self, repo, collection):
        collection.find_one.side_effect = ServerSelectionTimeoutError("no servers")
        with pytest.raises(RuntimeError, match="Error finding user by username"):
            await repo.find_by_username("a1")


class TestSave:
    @pytest.mark.asyncio
    async def test_insert_uses_stored_field_names(self, repo, collection):
        collection.insert_one.return_value = MagicMock(inserted_id=OID)
        collection.find_one.return_value = _document()

        saved = await repo.save(_user())

        stored = collection.insert_one.call_args.args[0]
        assert stored == {k: v for k, v in _document().items() if k != "_id"}
        assert saved.id == str(OID)

    @pytest.mark.asyncio
    async def test_update_sets_fields(self, repo, collection):
        collection.update_one.return_value = MagicMock(matched_count=1)
        collection.find_one.return_value = _document(age=25)
        user = _user(str(OID))
        user.age = 25

        saved = await repo.save(user)

        filter_, update = collection.update_one.call_args.args
        assert filter_ == {"_id": OID}
        assert update["$set"]["age"] == 25
        assert saved.age == 25

    @pytest.mark.asyncio
    async def test_update_of_missing_document(self, repo, collection):
        collection.update_one.return_value = MagicMock(matched_count=0)
        with pytest.raises(ValueError, match="not found"):
            await repo.save(_user(str(OID)))

    @pytest.mark.asyncio
    async def test_duplicate_key_names_field_from_key_value(self, repo, collection):
        collection.insert_one.side_effect = DuplicateKeyError(
            "E11000 duplicate key error collection: userhub.users index: username_unique",
            11000,
            {"keyValue": {"username": "a1"}},
        )

        with pytest.raises(UniqueFieldConflict) as exc_info:
            await repo.save(_user())

        assert exc_info.value.field == "Username"
        assert exc_info.value.value == "a1"

    @pytest.mark.asyncio
    async def test_duplicate_key_falls_back_to_index_name(self, repo, collection):
        collection.insert_one.side_effect = DuplicateKeyError(
            "E11000 duplicate key error collection: userhub.users index: email_unique", 11000
        )

        with pytest.raises(UniqueFieldConflict) as exc_info:
            await repo.save(_user())

        assert exc_info.value.field == "Email"
        assert exc_info.value.value == "a@x.com"

    @pytest.mark.asyncio
    async def test_duplicate_key_on_unknown_index_is_storage_error(self, repo, collection):
        collection.insert_one.side_effect = DuplicateKeyError(
            "E11000 duplicate key error collection: userhub.users index: legacy_idx",
            11000,
            {"keyValue": {"legacyId": 7}},
        )

        with pytest.raises(RuntimeError, match="Error saving user"):
            await repo.save(_user())


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete_existing(self, repo, collection):
        collection.delete_one.return_value = MagicMock(deleted_count=1)
        assert await repo.delete(str(OID)) is True
        collection.delete_one.assert_called_once_with({"_id": OID})

    @pytest.mark.asyncio
    async def test_delete_missing(self, repo, collection):
        collection.delete_one.return_value = MagicMock(deleted_count=0)
        assert await repo.delete(str(OID)) is False

    @pytest.mark.asyncio
    async def test_delete_invalid_id(self, repo, collection):
        assert await repo.delete("bogus") is False
        collection.delete_one.assert_not_called()
