"""
Code review endpoint.

Requires authentication.
"""

from fastapi import APIRouter, Depends

from modules.review import MissingCodeError, review
from shared.models import AuthenticatedUser
from ..middleware.auth import get_current_user
from ..models.errors import ErrorResponse
from ..models.review import ReviewRequest, ReviewResponse

router = APIRouter()


@router.post(
    "/get-review",
    response_model=ReviewResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
async def get_review(
    request: ReviewRequest,
    user: AuthenticatedUser = Depends(get_current_user),
) -> ReviewResponse:
    """Run the heuristic review over the submitted code."""
    if not request.code:
        raise MissingCodeError()
    return ReviewResponse(review=review(request.code, user.email))
