"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from typing import Optional
from pydantic import BaseModel, Field

from modules.users.models import PublicUser


class TokenPayload(BaseModel):
    """
    Decoded session token claims.

    Tokens are stateless: nothing about them is stored server-side and
    they stay valid until ``exp``.
    """

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="User's email at issuance")
    exp: int = Field(..., description="Expiration timestamp")
    iat: Optional[int] = Field(None, description="Issued at timestamp")


class Credentials(BaseModel):
    """Email/password pair submitted to register or login."""

    email: Optional[str] = Field(None, description="Email address")
    password: Optional[str] = Field(None, description="Plain-text password")


class AuthResult(BaseModel):
    """Token plus public user info, returned by register and login."""

    token: str = Field(..., description="Signed bearer token")
    user: PublicUser = Field(..., description="The authenticated user")
