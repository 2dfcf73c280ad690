"""
Bearer token authentication.

Protected routes depend on ``get_current_user``; it runs before the
route body and turns every failure into a 401.
"""

from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import InvalidAuthorizationHeaderError, MissingTokenError
from modules.auth.interfaces import IAuthService
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None:
        # HTTPBearer returns None both for a missing header and for one
        # that is not "Bearer <token>".
        if request.headers.get("Authorization"):
            raise InvalidAuthorizationHeaderError()
        raise MissingTokenError()

    return auth.verify_token(credentials.credentials)
