"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, ValidationError


class MissingCredentialsError(ValidationError):
    """Raised when email or password is absent or empty."""

    def __init__(self, message: str = "email and password required"):
        super().__init__(message, code="MISSING_CREDENTIALS")


class InvalidCredentialsError(AuthenticationError):
    """
    Raised when login fails.

    Unknown email and wrong password raise the same error so responses
    do not reveal which accounts exist.
    """

    def __init__(self, message: str = "invalid credentials"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class MissingTokenError(AuthenticationError):
    """Raised when no Authorization header is provided."""

    def __init__(self, message: str = "missing authorization"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidAuthorizationHeaderError(AuthenticationError):
    """Raised when the Authorization header is not ``Bearer <token>``."""

    def __init__(self, message: str = "invalid authorization header"):
        super().__init__(message, code="INVALID_AUTHORIZATION_HEADER")


class InvalidTokenError(AuthenticationError):
    """Raised when a token is malformed, tampered with or has bad claims."""

    def __init__(self, message: str = "invalid token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a token has expired."""

    def __init__(self, message: str = "token expired"):
        super().__init__(message, code="TOKEN_EXPIRED")
