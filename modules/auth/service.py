"""
Authentication service implementation.

Registers and logs in users against the user store, and issues and
verifies HS256 session tokens signed with the configured secret.
"""

import logging
from datetime import datetime, timedelta, timezone
import jwt
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings
from shared.models import AuthenticatedUser
from modules.users.exceptions import UserAlreadyExistsError, UserNotFoundError
from modules.users.interfaces import IUserRepository
from modules.users.models import User, UserProfile

from .interfaces import IAuthService
from .models import AuthResult, TokenPayload
from .passwords import hash_password, verify_password
from .exceptions import (
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingCredentialsError,
    MissingTokenError,
)

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Settings and the user store are injected at construction; the
    service keeps no other state. bcrypt runs in the threadpool so
    hashing does not stall other requests.
    """

    def __init__(self, settings: Settings, users: IUserRepository):
        self._settings = settings
        self._users = users

    async def register(self, email: str | None, password: str | None) -> AuthResult:
        if not email or not password:
            raise MissingCredentialsError()

        # Cheap pre-check so duplicates skip the bcrypt cost; the
        # repository repeats the check atomically on insert.
        if await self._users.find_by_email(email) is not None:
            raise UserAlreadyExistsError(email)

        password_hash = await run_in_threadpool(
            hash_password, password, self._settings.bcrypt_rounds
        )
        user = await self._users.add(User.create(email, password_hash))
        logger.info(f"Registered user {user.id}")
        return self._result(user)

    async def login(self, email: str | None, password: str | None) -> AuthResult:
        if not email or not password:
            raise MissingCredentialsError()

        user = await self._users.find_by_email(email)
        if user is None or not await run_in_threadpool(
            verify_password, password, user.password_hash
        ):
            logger.info("Rejected login with invalid credentials")
            raise InvalidCredentialsError()

        return self._result(user)

    def issue_token(self, user: User) -> str:
        now = datetime.now(timezone.utc)
        expire = now + timedelta(days=self._settings.token_expire_days)
        payload = {
            "id": user.id,
            "email": user.email,
            "iat": int(now.timestamp()),
            "exp": int(expire.timestamp()),
        }
        return jwt.encode(
            payload,
            self._settings.jwt_secret,
            algorithm=self._settings.jwt_algorithm,
        )

    def verify_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a token and return the authenticated user.

        Signature, algorithm and expiry are checked by PyJWT; the claim
        shape is then checked against TokenPayload.
        """
        if not token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(
                token,
                self._settings.jwt_secret,
                algorithms=[self._settings.jwt_algorithm],
                options={"require": ["exp"]},
            )
            claims = TokenPayload(**payload)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            logger.debug(f"Token rejected: {e}")
            raise InvalidTokenError()
        except PydanticValidationError:
            logger.debug("Token rejected: unexpected claims")
            raise InvalidTokenError()

        return AuthenticatedUser(id=claims.id, email=claims.email)

    async def get_user(self, user_id: str) -> UserProfile:
        user = await self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user.to_profile()

    def _result(self, user: User) -> AuthResult:
        return AuthResult(token=self.issue_token(user), user=user.to_public())
