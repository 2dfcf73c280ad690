"""
Users module interface.

The auth module depends on IUserRepository, not the JSON implementation,
so tests can substitute an in-memory store.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import User


@runtime_checkable
class IUserRepository(Protocol):
    """
    Interface for user persistence.

    Implementations keep the whole user collection as one ordered
    sequence and never update or delete records.
    """

    async def ensure_storage(self) -> bool:
        """
        Create an empty collection if none exists yet.

        Returns:
            True if storage was created by this call
        """
        ...

    async def load(self) -> list[User]:
        """
        Load every user, in insertion order.

        Raises:
            StorageError: If storage is missing or corrupt
        """
        ...

    async def save(self, users: list[User]) -> None:
        """Replace the stored collection with ``users``."""
        ...

    async def find_by_email(self, email: str) -> Optional[User]:
        """Return the first user whose email matches case-insensitively."""
        ...

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Return the user with this ID, if any."""
        ...

    async def add(self, user: User) -> User:
        """
        Append a user unless the email is already taken.

        The duplicate check and the write happen as one step.

        Raises:
            UserAlreadyExistsError: If the email exists in any casing
        """
        ...
