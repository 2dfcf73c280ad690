"""
JSON file implementation of the user store.

The users document is a JSON array of user records, rewritten in full on
every mutation. Blocking file access runs in the threadpool so only the
calling request waits on disk I/O.
"""

import json
import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError as PydanticValidationError

from shared.repository import JsonFileRepository

from .exceptions import (
    UserAlreadyExistsError,
    UserStoreCorruptedError,
    UserStoreUnavailableError,
)
from .interfaces import IUserRepository
from .models import User

logger = logging.getLogger(__name__)


class UserRepository(JsonFileRepository[User], IUserRepository):
    """
    User store backed by a single JSON document.

    Lookups are linear scans over a fresh load. ``add`` holds the
    repository lock across load, duplicate check and save, so two
    registrations for the same email inside this process cannot both
    succeed.
    """

    async def ensure_storage(self) -> bool:
        try:
            created = await run_in_threadpool(self._create_if_missing, [])
        except OSError as e:
            raise UserStoreUnavailableError(self._path, str(e))
        if created:
            logger.info(f"Created empty user store at {self._path}")
        return created

    async def load(self) -> list[User]:
        return await run_in_threadpool(self._load_users)

    async def save(self, users: list[User]) -> None:
        async with self._lock:
            await run_in_threadpool(self._save_users, users)

    async def find_by_email(self, email: str) -> Optional[User]:
        for user in await self.load():
            if user.matches_email(email):
                return user
        return None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        for user in await self.load():
            if user.id == user_id:
                return user
        return None

    async def add(self, user: User) -> User:
        async with self._lock:
            await run_in_threadpool(self._insert_if_absent, user)
        return user

    def _insert_if_absent(self, user: User) -> None:
        users = self._load_users()
        if any(existing.matches_email(user.email) for existing in users):
            raise UserAlreadyExistsError(user.email)
        users.append(user)
        self._save_users(users)

    def _load_users(self) -> list[User]:
        try:
            document = self._read_document()
        except FileNotFoundError:
            raise UserStoreUnavailableError(self._path, "file not found")
        except OSError as e:
            raise UserStoreUnavailableError(self._path, str(e))
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError
            raise UserStoreCorruptedError(self._path, str(e))

        if not isinstance(document, list):
            raise UserStoreCorruptedError(self._path, "expected a JSON array")

        try:
            return [User.model_validate(item) for item in document]
        except PydanticValidationError as e:
            raise UserStoreCorruptedError(self._path, f"invalid user record: {e.error_count()} error(s)")

    def _save_users(self, users: list[User]) -> None:
        try:
            self._write_document([user.to_document() for user in users])
        except OSError as e:
            raise UserStoreUnavailableError(self._path, str(e))
