"""API models package."""

from .errors import ErrorResponse
from .review import ReviewRequest, ReviewResponse
from .user import UserResponse

__all__ = [
    "ErrorResponse",
    "ReviewRequest",
    "ReviewResponse",
    "UserResponse",
]
