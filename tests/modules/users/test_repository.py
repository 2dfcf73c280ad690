"""Tests for modules/users/repository.py."""

import asyncio
import json
import pytest

from modules.users.exceptions import (
    UserAlreadyExistsError,
    UserStoreCorruptedError,
    UserStoreUnavailableError,
)
from modules.users.models import User
from modules.users.repository import UserRepository
from shared.exceptions import ConflictError, StorageError


@pytest.fixture
def users_file(tmp_path):
    return tmp_path / "data" / "users.json"


@pytest.fixture
def repository(users_file):
    return UserRepository(users_file)


class TestEnsureStorage:
    @pytest.mark.asyncio
    async def test_creates_empty_collection(self, repository, users_file):
        """First run creates the directory and an empty array."""
        assert await repository.ensure_storage() is True
        assert json.loads(users_file.read_text()) == []

    @pytest.mark.asyncio
    async def test_keeps_existing_collection(self, repository, users_file):
        await repository.ensure_storage()
        await repository.add(User.create("a@x.com", "hash"))
        assert await repository.ensure_storage() is False
        assert len(await repository.load()) == 1


class TestLoad:
    @pytest.mark.asyncio
    async def test_missing_file_raises_storage_error(self, repository):
        with pytest.raises(UserStoreUnavailableError) as exc_info:
            await repository.load()
        assert isinstance(exc_info.value, StorageError)

    @pytest.mark.asyncio
    async def test_invalid_json_raises_corrupted(self, repository, users_file):
        users_file.parent.mkdir(parents=True)
        users_file.write_text("{not json")
        with pytest.raises(UserStoreCorruptedError):
            await repository.load()

    @pytest.mark.asyncio
    async def test_non_array_raises_corrupted(self, repository, users_file):
        users_file.parent.mkdir(parents=True)
        users_file.write_text('{"users": []}')
        with pytest.raises(UserStoreCorruptedError):
            await repository.load()

    @pytest.mark.asyncio
    async def test_bad_record_raises_corrupted(self, repository, users_file):
        users_file.parent.mkdir(parents=True)
        users_file.write_text('[{"id": "u1"}]')
        with pytest.raises(UserStoreCorruptedError):
            await repository.load()


class TestSave:
    @pytest.mark.asyncio
    async def test_round_trip_preserves_order(self, repository):
        await repository.ensure_storage()
        users = [User.create(f"user{i}@x.com", "hash") for i in range(3)]
        await repository.save(users)
        assert await repository.load() == users

    @pytest.mark.asyncio
    async def test_document_is_pretty_printed(self, repository, users_file):
        await repository.ensure_storage()
        await repository.save([User.create("a@x.com", "hash")])
        text = users_file.read_text()
        assert text.startswith("[\n  {\n    \"id\"")
        assert '"passwordHash": "hash"' in text

    @pytest.mark.asyncio
    async def test_leaves_no_temp_files(self, repository, users_file):
        await repository.ensure_storage()
        await repository.save([User.create("a@x.com", "hash")])
        assert [p.name for p in users_file.parent.iterdir()] == ["users.json"]


class TestLookups:
    @pytest.mark.asyncio
    async def test_find_by_email_is_case_insensitive(self, repository):
        await repository.ensure_storage()
        user = await repository.add(User.create("Alice@X.com", "hash"))
        assert await repository.find_by_email("alice@x.COM") == user
        assert await repository.find_by_email("bob@x.com") is None

    @pytest.mark.asyncio
    async def test_find_by_id(self, repository):
        await repository.ensure_storage()
        user = await repository.add(User.create("a@x.com", "hash"))
        assert await repository.find_by_id(user.id) == user
        assert await repository.find_by_id("missing") is None


class TestAdd:
    @pytest.mark.asyncio
    async def test_appends_user(self, repository):
        await repository.ensure_storage()
        first = await repository.add(User.create("a@x.com", "hash"))
        second = await repository.add(User.create("b@x.com", "hash"))
        assert await repository.load() == [first, second]

    @pytest.mark.asyncio
    async def test_rejects_duplicate_email_any_case(self, repository):
        await repository.ensure_storage()
        await repository.add(User.create("a@x.com", "hash"))
        with pytest.raises(UserAlreadyExistsError) as exc_info:
            await repository.add(User.create("A@X.COM", "hash"))
        assert isinstance(exc_info.value, ConflictError)
        assert len(await repository.load()) == 1

    @pytest.mark.asyncio
    async def test_concurrent_adds_for_same_email(self, repository):
        """Only one of two simultaneous inserts for an email succeeds."""
        await repository.ensure_storage()
        results = await asyncio.gather(
            repository.add(User.create("a@x.com", "hash1")),
            repository.add(User.create("a@x.com", "hash2")),
            return_exceptions=True,
        )
        errors = [r for r in results if isinstance(r, Exception)]
        assert len(errors) == 1
        assert isinstance(errors[0], UserAlreadyExistsError)
        assert len(await repository.load()) == 1
