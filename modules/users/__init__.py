"""
Users module.

Owns the persisted user collection.

Public API:
- IUserRepository: Interface for user persistence
- UserRepository: JSON file implementation
- User, PublicUser, UserProfile: Models
- User exceptions: UserAlreadyExistsError, UserNotFoundError, etc.
"""

from .interfaces import IUserRepository
from .models import User, PublicUser, UserProfile
from .repository import UserRepository
from .exceptions import (
    UserAlreadyExistsError,
    UserNotFoundError,
    UserStoreUnavailableError,
    UserStoreCorruptedError,
)

__all__ = [
    # Interface
    "IUserRepository",
    # Implementation
    "UserRepository",
    # Models
    "User",
    "PublicUser",
    "UserProfile",
    # Exceptions
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserStoreUnavailableError",
    "UserStoreCorruptedError",
]
