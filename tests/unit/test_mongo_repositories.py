"""
Unit tests for the Mongo repositories with mocked Motor collections (no real DB).
"""
from datetime import date, datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from devconnect.core.errors import (
    AlreadyRegistered,
    ConcurrentModification,
    NotFound,
    StorageFailure,
)
from devconnect.domain.models import Comment, Experience, Like, Post, Profile, User
from devconnect.infrastructure.db.mongo_post_repository import MongoPostRepository
from devconnect.infrastructure.db.mongo_profile_repository import MongoProfileRepository
from devconnect.infrastructure.db.mongo_transaction_runner import MongoTransactionRunner
from devconnect.infrastructure.db.mongo_user_repository import MongoUserRepository
from devconnect.application.dto.profile_dto import ProfileUpsertRequest
from devconnect.application.use_cases.post import LikePostUseCase
from devconnect.application.use_cases.profile import UpsertProfileUseCase
from devconnect.infrastructure.db import mongo_connection
from devconnect.infrastructure.db.versioned_write import (
    insert_versioned,
    replace_versioned,
    upsert_versioned,
)


@pytest.fixture
def collection():
    return AsyncMock()


class TestVersionedWrites:
    """Tests for insert_versioned/replace_versioned"""

    @pytest.mark.asyncio
    async def test_insert_starts_at_version_one(self, collection):
        new_id = ObjectId()
        collection.insert_one.return_value = MagicMock(inserted_id=new_id)

        stored = await insert_versioned(collection, {"text": "hi"}, "Post")

        inserted = collection.insert_one.await_args.args[0]
        assert inserted["version"] == 1
        assert stored["_id"] == new_id

    @pytest.mark.asyncio
    async def test_insert_duplicate_is_concurrent_modification(self, collection):
        collection.insert_one.side_effect = DuplicateKeyError("dup")
        with pytest.raises(ConcurrentModification):
            await insert_versioned(collection, {"user_id": "u1"}, "Profile")

    @pytest.mark.asyncio
    async def test_replace_filters_on_expected_version(self, collection):
        object_id = ObjectId()
        collection.find_one_and_replace.return_value = {"_id": object_id, "version": 4}

        stored = await replace_versioned(collection, object_id, 3, {"text": "x"}, "Post")

        query, replacement = collection.find_one_and_replace.await_args.args[:2]
        assert query == {"_id": object_id, "version": 3}
        assert replacement["version"] == 4
        assert stored["version"] == 4

    @pytest.mark.asyncio
    async def test_stale_version_is_concurrent_modification(self, collection):
        collection.find_one_and_replace.return_value = None
        collection.count_documents.return_value = 1
        with pytest.raises(ConcurrentModification):
            await replace_versioned(collection, ObjectId(), 3, {"text": "x"}, "Post")

    @pytest.mark.asyncio
    async def test_missing_document_is_not_found(self, collection):
        collection.find_one_and_replace.return_value = None
        collection.count_documents.return_value = 0
        with pytest.raises(NotFound):
            await replace_versioned(collection, ObjectId(), 3, {"text": "x"}, "Post")

    @pytest.mark.asyncio
    async def test_unversioned_document_accepted_at_version_zero(self, collection):
        object_id = ObjectId()
        collection.find_one_and_replace.return_value = {"_id": object_id, "version": 1}

        await replace_versioned(collection, object_id, 0, {"text": "x"}, "Post")

        query = collection.find_one_and_replace.await_args.args[0]
        assert query == {
            "_id": object_id,
            "$or": [{"version": 0}, {"version": {"$exists": False}}],
        }

    @pytest.mark.asyncio
    async def test_upsert_creates_keyed_on_natural_key(self, collection):
        new_id = ObjectId()
        collection.update_one.return_value = MagicMock(upserted_id=new_id)

        stored = await upsert_versioned(
            collection, {"user_id": "u1"}, {"user_id": "u1", "status": "Dev"}, "Profile"
        )

        query, update = collection.update_one.await_args.args
        assert query == {"user_id": "u1"}
        assert update == {"$setOnInsert": {"status": "Dev", "version": 1}}
        assert collection.update_one.await_args.kwargs == {"upsert": True}
        assert stored["_id"] == new_id
        assert stored["user_id"] == "u1"
        collection.insert_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_upsert_matching_existing_is_concurrent_modification(self, collection):
        collection.update_one.return_value = MagicMock(upserted_id=None)
        with pytest.raises(ConcurrentModification):
            await upsert_versioned(collection, {"user_id": "u1"}, {"user_id": "u1"}, "Profile")

    @pytest.mark.asyncio
    async def test_upsert_racing_unique_index_is_concurrent_modification(self, collection):
        collection.update_one.side_effect = DuplicateKeyError("dup")
        with pytest.raises(ConcurrentModification):
            await upsert_versioned(collection, {"user_id": "u1"}, {"user_id": "u1"}, "Profile")

    @pytest.mark.asyncio
    async def test_driver_error_is_storage_failure(self, collection):
        collection.find_one_and_replace.side_effect = ServerSelectionTimeoutError("down")
        with pytest.raises(StorageFailure):
            await replace_versioned(collection, ObjectId(), 1, {"text": "x"}, "Post")


class TestMongoUserRepository:
    """Tests for MongoUserRepository"""

    @pytest.mark.asyncio
    async def test_duplicate_email_is_already_registered(self, collection):
        collection.insert_one.side_effect = DuplicateKeyError("dup")
        repo = MongoUserRepository(user_collection=collection)
        with pytest.raises(AlreadyRegistered):
            await repo.save(User(id=None, name="A", email="a@example.com", hashed_password="h"))

    @pytest.mark.asyncio
    async def test_malformed_id_returns_none_without_query(self, collection):
        repo = MongoUserRepository(user_collection=collection)
        assert await repo.find_by_id("not-an-object-id") is None
        collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_passes_session(self, collection):
        object_id = ObjectId()
        collection.delete_one.return_value = MagicMock(deleted_count=1)
        session = object()
        repo = MongoUserRepository(user_collection=collection)

        assert await repo.delete(str(object_id), session=session) is True
        collection.delete_one.assert_awaited_once_with({"_id": object_id}, session=session)


class TestMongoProfileRepository:
    """Tests for MongoProfileRepository mapping"""

    def test_dates_stored_as_midnight_utc_and_read_back(self, collection):
        repo = MongoProfileRepository(profile_collection=collection)
        profile = Profile.create("u1", {"status": "Dev", "skills": "python"})
        profile.add_experience(
            Experience(id="e1", title="Dev", company="Acme", from_date=date(2020, 1, 1))
        )

        document = repo._profile_to_dict(profile)
        entry = document["experience"][0]
        assert entry["from"] == datetime(2020, 1, 1, tzinfo=timezone.utc)
        assert entry["to"] is None

        document.update({"_id": ObjectId(), "version": 2})
        restored = repo._document_to_profile(document)
        assert restored.experience[0].from_date == date(2020, 1, 1)
        assert restored.version == 2

    @pytest.mark.asyncio
    async def test_update_uses_version_check(self, collection):
        object_id = ObjectId()
        collection.find_one_and_replace.return_value = {
            "_id": object_id,
            "user_id": "u1",
            "status": "Dev",
            "skills": ["python"],
            "version": 6,
        }
        repo = MongoProfileRepository(profile_collection=collection)
        profile = Profile.create("u1", {"status": "Dev", "skills": "python"})
        profile.id = str(object_id)
        profile.version = 5

        saved = await repo.save(profile)

        query = collection.find_one_and_replace.await_args.args[0]
        assert query == {"_id": object_id, "version": 5}
        assert saved.version == 6


class TestMongoPostRepository:
    """Tests for MongoPostRepository"""

    def test_document_to_post_keeps_embedded_order(self, collection):
        repo = MongoPostRepository(post_collection=collection)
        post = Post(
            id=None,
            user_id="u1",
            text="hello",
            likes=[Like(user_id="u3"), Like(user_id="u2")],
            comments=[
                Comment(id="c2", user_id="u2", text="second"),
                Comment(id="c1", user_id="u3", text="first"),
            ],
        )
        document = repo._post_to_dict(post)
        document.update({"_id": ObjectId(), "version": 1})

        restored = repo._document_to_post(document)
        assert [like.user_id for like in restored.likes] == ["u3", "u2"]
        assert [comment.id for comment in restored.comments] == ["c2", "c1"]

    @pytest.mark.asyncio
    async def test_find_by_malformed_id(self, collection):
        repo = MongoPostRepository(post_collection=collection)
        assert await repo.find_by_id("123") is None
        collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_by_user_counts(self, collection):
        collection.delete_many.return_value = MagicMock(deleted_count=3)
        repo = MongoPostRepository(post_collection=collection)
        assert await repo.delete_by_user("u1") == 3
        collection.delete_many.assert_awaited_once_with({"user_id": "u1"}, session=None)

    @pytest.mark.asyncio
    async def test_driver_error_is_storage_failure(self, collection):
        collection.delete_many.side_effect = ServerSelectionTimeoutError("down")
        repo = MongoPostRepository(post_collection=collection)
        with pytest.raises(StorageFailure):
            await repo.delete_by_user("u1")


class TestMongoTransactionRunner:
    """Tests for MongoTransactionRunner"""

    @pytest.mark.asyncio
    async def test_disabled_runs_without_session(self):
        client = MagicMock()
        runner = MongoTransactionRunner(client, enabled=False)
        operation = AsyncMock(return_value=7)

        assert runner.is_atomic is False
        assert await runner.run(operation) == 7
        operation.assert_awaited_once_with(None)
        client.start_session.assert_not_called()


class TestUnversionedDocuments:
    """Documents stored without a version field (e.g. imported data) stay writable"""

    @pytest.mark.asyncio
    async def test_like_post_without_version_field(self, collection):
        object_id = ObjectId()
        document = {
            "_id": object_id,
            "user_id": "author",
            "text": "imported",
            "likes": [],
            "comments": [],
        }
        collection.find_one.return_value = document
        collection.find_one_and_replace.side_effect = lambda query, replacement, **kwargs: {
            "_id": object_id,
            **replacement,
        }
        repo = MongoPostRepository(post_collection=collection)

        likes = await LikePostUseCase(repo, max_attempts=3).execute("u2", str(object_id))

        assert [like.user_id for like in likes] == ["u2"]
        assert collection.find_one_and_replace.await_count == 1
        query = collection.find_one_and_replace.await_args.args[0]
        assert query["$or"] == [{"version": 0}, {"version": {"$exists": False}}]
        replacement = collection.find_one_and_replace.await_args.args[1]
        assert replacement["version"] == 1


class TestSingleProfilePerUser:
    """Creating a profile never inserts a second document for the same user"""

    @pytest.mark.asyncio
    async def test_losing_first_upsert_becomes_update(self, collection):
        object_id = ObjectId()
        existing = {
            "_id": object_id,
            "user_id": "u1",
            "status": "First",
            "skills": ["python"],
            "version": 1,
        }
        # Our read sees no profile; a concurrent request creates it before our write
        collection.find_one.side_effect = [None, existing]
        collection.update_one.return_value = MagicMock(upserted_id=None)
        collection.find_one_and_replace.side_effect = lambda query, replacement, **kwargs: {
            "_id": object_id,
            **replacement,
        }
        repo = MongoProfileRepository(profile_collection=collection)

        result = await UpsertProfileUseCase(repo).execute(
            "u1", ProfileUpsertRequest(status="Second", skills="go")
        )

        assert result.id == str(object_id)
        assert result.status == "Second"
        assert collection.update_one.await_count == 1
        collection.insert_one.assert_not_called()
        query = collection.find_one_and_replace.await_args.args[0]
        assert query == {"_id": object_id, "version": 1}


class TestEnsureIndexes:
    """Tests for ensure_indexes"""

    @pytest.mark.asyncio
    async def test_creates_unique_indexes(self, monkeypatch):
        users, profiles, posts = AsyncMock(), AsyncMock(), AsyncMock()
        monkeypatch.setattr(mongo_connection, "get_user_collection", lambda: users)
        monkeypatch.setattr(mongo_connection, "get_profile_collection", lambda: profiles)
        monkeypatch.setattr(mongo_connection, "get_post_collection", lambda: posts)

        await mongo_connection.ensure_indexes()

        users.create_index.assert_awaited_once_with(
            [("email", 1)], unique=True, name="uniq_email"
        )
        profiles.create_index.assert_awaited_once_with(
            [("user_id", 1)], unique=True, name="uniq_user_id"
        )
        assert posts.create_index.await_count == 2

    @pytest.mark.asyncio
    async def test_failure_propagates(self, monkeypatch):
        users = AsyncMock()
        users.create_index.side_effect = ServerSelectionTimeoutError("down")
        monkeypatch.setattr(mongo_connection, "get_user_collection", lambda: users)

        with pytest.raises(ServerSelectionTimeoutError):
            await mongo_connection.ensure_indexes()
