"""
User-related endpoints.
"""

from fastapi import APIRouter, Depends

from modules.auth.interfaces import IAuthService
from shared.models import AuthenticatedUser
from ..dependencies import get_auth_service
from ..middleware.auth import get_current_user
from ..models.errors import ErrorResponse
from ..models.user import UserResponse

router = APIRouter()


@router.get(
    "/me",
    response_model=UserResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    auth: IAuthService = Depends(get_auth_service),
) -> UserResponse:
    """
    Get the current user's stored profile.

    Requires authentication. Returns 404 if the token is valid but the
    user record no longer exists.
    """
    return UserResponse(user=await auth.get_user(user.id))
