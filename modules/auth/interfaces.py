"""
Authentication module interface.

The API layer depends on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser
from modules.users.models import User, UserProfile

from .models import AuthResult


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def register(self, email: str | None, password: str | None) -> AuthResult:
        """
        Create a user and log them in.

        Args:
            email: Email address; uniqueness is case-insensitive
            password: Plain-text password, stored only as a bcrypt hash

        Returns:
            AuthResult with a fresh token and the public user

        Raises:
            ValidationError: If either field is missing or empty
            ConflictError: If the email is already registered
        """
        ...

    async def login(self, email: str | None, password: str | None) -> AuthResult:
        """
        Check credentials and issue a token.

        Raises:
            ValidationError: If either field is missing or empty
            AuthenticationError: If the email is unknown or the password
                does not match (same error for both)
        """
        ...

    def issue_token(self, user: User) -> str:
        """Sign a token carrying the user's ID and email."""
        ...

    def verify_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a token and return the caller it identifies.

        Raises:
            AuthenticationError: If the token is missing, malformed,
                tampered with or expired
        """
        ...

    async def get_user(self, user_id: str) -> UserProfile:
        """
        Load the stored profile for an authenticated user.

        Raises:
            NotFoundError: If no record exists for ``user_id``
        """
        ...
