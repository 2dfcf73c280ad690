"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents the caller behind a verified bearer token.

    Populated from the token claims and made available to route
    handlers via dependency injection. Nothing here is read from
    storage; use the auth service to fetch the stored profile.
    """

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="Email address as registered")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }
