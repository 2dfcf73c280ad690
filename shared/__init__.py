"""
Shared infrastructure for the code review backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- exceptions: Base exception classes
- logging_config: Root logger setup
- repository: Base class for JSON file persistence

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .exceptions import (
    CodeReviewError,
    ValidationError,
    AuthenticationError,
    NotFoundError,
    ConflictError,
    StorageError,
)
from .logging_config import setup_logging
from .models import AuthenticatedUser
from .repository import JsonFileRepository

__all__ = [
    "Settings",
    "get_settings",
    "CodeReviewError",
    "ValidationError",
    "AuthenticationError",
    "NotFoundError",
    "ConflictError",
    "StorageError",
    "setup_logging",
    "AuthenticatedUser",
    "JsonFileRepository",
]
