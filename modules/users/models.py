"""
User module data models.

``User`` is the persisted record. Its wire form uses the camelCase keys
of the users document (``passwordHash``, ``createdAt``), while Python code
uses snake_case attributes.
"""

import uuid
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, field_serializer


def format_timestamp(value: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a Z suffix."""
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class PublicUser(BaseModel):
    """User fields safe to return alongside a freshly issued token."""

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="Email address as registered")


class UserProfile(BaseModel):
    """User fields returned by the profile endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="Email address as registered")
    created_at: datetime = Field(..., alias="createdAt", description="Registration time (UTC)")

    @field_serializer("created_at", when_used="json")
    def _serialize_created_at(self, value: datetime) -> str:
        return format_timestamp(value)


class User(BaseModel):
    """
    A registered user as stored in the users document.

    Records are created on registration and never mutated or deleted.
    Email uniqueness is case-insensitive and is enforced by the
    repository, not by this model.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="Email address, original casing preserved")
    password_hash: str = Field(..., alias="passwordHash", description="bcrypt hash")
    created_at: datetime = Field(..., alias="createdAt", description="Registration time (UTC)")

    @field_serializer("created_at", when_used="json")
    def _serialize_created_at(self, value: datetime) -> str:
        return format_timestamp(value)

    @classmethod
    def create(cls, email: str, password_hash: str) -> "User":
        """Build a new record with a fresh UUID and the current UTC time, to the millisecond."""
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid.uuid4()),
            email=email,
            password_hash=password_hash,
            created_at=now.replace(microsecond=now.microsecond // 1000 * 1000),
        )

    def matches_email(self, email: str) -> bool:
        """Case-insensitive email comparison."""
        return self.email.lower() == email.lower()

    def to_document(self) -> dict:
        """Serialize to the JSON shape kept in the users document."""
        return self.model_dump(mode="json", by_alias=True)

    def to_public(self) -> PublicUser:
        return PublicUser(id=self.id, email=self.email)

    def to_profile(self) -> UserProfile:
        return UserProfile(id=self.id, email=self.email, created_at=self.created_at)
