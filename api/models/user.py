"""
User response models.
"""

from pydantic import BaseModel

from modules.users.models import UserProfile


class UserResponse(BaseModel):
    """Wrapper for the current user's stored profile."""

    user: UserProfile
