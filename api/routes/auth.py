"""
Registration and login endpoints.

Both return a fresh bearer token and the public user fields.
"""

from typing import Optional
from fastapi import APIRouter, Depends

from modules.auth.interfaces import IAuthService
from modules.auth.models import AuthResult, Credentials
from ..dependencies import get_auth_service
from ..models.errors import ErrorResponse

router = APIRouter()


@router.post(
    "/register",
    response_model=AuthResult,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def register(
    credentials: Optional[Credentials] = None,
    auth: IAuthService = Depends(get_auth_service),
) -> AuthResult:
    """
    Create an account and log in.

    Emails are unique regardless of case.
    """
    if credentials is None:
        credentials = Credentials()
    return await auth.register(credentials.email, credentials.password)


@router.post(
    "/login",
    response_model=AuthResult,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
async def login(
    credentials: Optional[Credentials] = None,
    auth: IAuthService = Depends(get_auth_service),
) -> AuthResult:
    """
    Exchange email and password for a token.

    The email lookup is case-insensitive.
    """
    if credentials is None:
        credentials = Credentials()
    return await auth.login(credentials.email, credentials.password)
