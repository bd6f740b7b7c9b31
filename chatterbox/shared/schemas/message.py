"""
Message Schemas

Request/response models for message endpoints.

MessageResponse carries the derived presentation fields (friendly_timestamp,
location, footer) computed at response time.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from chatterbox.shared.models.message import Message
from chatterbox.shared.schemas.common import BaseSchema
from chatterbox.shared.utils import message_format


class GeoSchema(BaseModel):
    """Where the poster was."""

    country_name: Optional[str] = None
    region_name: Optional[str] = None
    city: Optional[str] = None
    time_zone: Optional[str] = None


class CreatorSchema(BaseModel):
    """Snapshot of the poster."""

    id: UUID
    name: str
    avatar_url: Optional[str] = None


class MessageCreate(BaseModel):
    """Schema for posting a message."""

    creator_id: UUID
    text: str
    geo: Optional[GeoSchema] = None


class MessageResponse(BaseSchema):
    """Schema for message response."""

    id: UUID
    creator: CreatorSchema
    text: str
    geo: GeoSchema
    created_at: datetime
    friendly_timestamp: str
    location: Optional[str] = None
    footer: str


def to_message_view(message: Message, now: Optional[datetime] = None) -> MessageResponse:
    """
    Project a message with its derived fields.

    Args:
        message: Persisted message
        now: Reference time for the relative timestamp (defaults to now)
    """
    now = now or datetime.now(timezone.utc)
    geo = message.geo
    return MessageResponse(
        id=message.id,
        creator=CreatorSchema(
            id=message.creator_id,
            name=message.creator_name,
            avatar_url=message.creator_avatar_url,
        ),
        text=message.text,
        geo=GeoSchema(**geo),
        created_at=message.created_at,
        friendly_timestamp=message_format.friendly_timestamp(message.created_at, now),
        location=message_format.location(geo),
        footer=message_format.footer(message.created_at, geo, now),
    )
