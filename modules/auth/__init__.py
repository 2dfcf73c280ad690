"""
Authentication module.

Handles registration, login, password hashing and session tokens.

Public API:
- IAuthService: Interface for auth operations
- AuthService: Concrete implementation
- TokenPayload, Credentials, AuthResult: Models
- Auth exceptions: InvalidCredentialsError, InvalidTokenError, etc.
"""

from .interfaces import IAuthService
from .models import TokenPayload, Credentials, AuthResult
from .passwords import hash_password, verify_password
from .service import AuthService
from .exceptions import (
    MissingCredentialsError,
    InvalidCredentialsError,
    MissingTokenError,
    InvalidAuthorizationHeaderError,
    InvalidTokenError,
    ExpiredTokenError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Implementation
    "AuthService",
    "hash_password",
    "verify_password",
    # Models
    "TokenPayload",
    "Credentials",
    "AuthResult",
    # Exceptions
    "MissingCredentialsError",
    "InvalidCredentialsError",
    "MissingTokenError",
    "InvalidAuthorizationHeaderError",
    "InvalidTokenError",
    "ExpiredTokenError",
]
