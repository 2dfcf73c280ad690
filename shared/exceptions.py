"""
Base exception classes for the code review backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base to an HTTP status code, so a module only has
to pick the right parent class.
"""

from typing import Optional, Any


class CodeReviewError(Exception):
    """
    Base exception for all application errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.message,
            "code": self.code,
        }


class ValidationError(CodeReviewError):
    """Input validation failed (missing or malformed fields)."""

    pass


class AuthenticationError(CodeReviewError):
    """Authentication failed (bad credentials or bad/missing token)."""

    pass


class NotFoundError(CodeReviewError):
    """Resource not found."""

    pass


class ConflictError(CodeReviewError):
    """Resource already exists."""

    pass


class StorageError(CodeReviewError):
    """Persisted state is missing, unreadable or corrupt."""

    pass
