"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

The container is built from an explicit Settings object and stored on
``app.state``, so each app instance (and each test) gets its own
configuration and storage.
"""

from typing import TYPE_CHECKING

from fastapi import Request

from shared.config import Settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.users.interfaces import IUserRepository


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached for the
    lifetime of the container.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._user_repository: "IUserRepository | None" = None
        self._auth_service: "IAuthService | None" = None

    @property
    def users(self) -> "IUserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            self._user_repository = UserRepository(self.settings.users_file)
        return self._user_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(self.settings, self.users)
        return self._auth_service


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency for the app's service container."""
    return request.app.state.container


def get_auth_service(request: Request) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container(request).auth


def get_user_repository(request: Request) -> "IUserRepository":
    """FastAPI dependency for user repository."""
    return get_container(request).users
