"""
Users module exceptions.
"""

from pathlib import Path
from typing import Optional

from shared.exceptions import ConflictError, NotFoundError, StorageError


class UserAlreadyExistsError(ConflictError):
    """Raised when registering an email that is already taken (any casing)."""

    def __init__(self, email: str):
        super().__init__(
            "user already exists",
            code="USER_EXISTS",
            details={"email": email},
        )


class UserNotFoundError(NotFoundError):
    """Raised when a user ID has no stored record."""

    def __init__(self, user_id: str):
        super().__init__(
            "not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class UserStoreUnavailableError(StorageError):
    """Raised when the users document is missing or cannot be read or written."""

    def __init__(self, path: Path, reason: Optional[str] = None):
        message = f"User store unavailable: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(
            message,
            code="USER_STORE_UNAVAILABLE",
            details={"path": str(path)},
        )


class UserStoreCorruptedError(StorageError):
    """Raised when the users document is not a valid list of user records."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"User store is corrupt: {path} ({reason})",
            code="USER_STORE_CORRUPTED",
            details={"path": str(path), "reason": reason},
        )
