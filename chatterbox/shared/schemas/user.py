"""
User Schemas

Request/response models for user endpoints, and the client-view projector.

Length rules are not repeated here: the validation pipeline checks them and
reports every violated field in one error.

Projection:
===========
to_client_view() is the only way a User leaves the service. It renames
nothing but exposes the primary key as "id" and drops passports entirely,
so no password hash, access token or provider id crosses the boundary.
"""

from datetime import datetime
from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from chatterbox.shared.models.user import User
from chatterbox.shared.schemas.common import BaseSchema


class UserCreate(BaseModel):
    """Schema for user registration."""

    username: str = Field(description="Login name (1-31 characters)")
    password: str = Field(description="Password (1-63 characters, at most 72 UTF-8 bytes)")
    name: Optional[str] = Field(
        default=None,
        description="Display name (1-63 characters), defaults to the username",
    )
    avatar_url: Optional[str] = None


class UserLogin(BaseModel):
    """Schema for credential verification."""

    username: str
    password: str


class PasswordChange(BaseModel):
    """Schema for replacing the local password."""

    password: str


class SocialPassportLink(BaseModel):
    """Schema for attaching a social provider identity."""

    type: Literal["facebook", "google"]
    access_token: Optional[str] = None
    profile_id: Optional[str] = None


class PublicUser(BaseSchema):
    """Client-facing view of a user."""

    id: UUID
    username: str
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


def to_client_view(user: User) -> PublicUser:
    """
    Project a user for external callers.

    Args:
        user: Persisted user

    Returns:
        PublicUser without any passport data
    """
    return PublicUser(
        id=user.id,
        username=user.username,
        name=user.name,
        avatar_url=user.avatar_url,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )
