"""
Message Entity Model

A short text posted by a user.

A message is independent of its creator: it keeps a denormalized snapshot of
the creator's id, name and avatar taken when the message was posted, so
later profile changes do not rewrite history.

Derived fields (friendly_timestamp, location, footer) are computed on every
read by chatterbox.shared.utils.message_format and are never stored.

SAMPLE MESSAGE RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id                 │ 7c9e6679-7425-40de-944b-e07fc1f90ae7                    │
│ creator_id         │ 550e8400-e29b-41d4-a716-446655440000                    │
│ creator_name       │ "guest"                                                 │
│ creator_avatar_url │ "/avatar/default"                                       │
│ text               │ "Hello friend !!"                                       │
│ geo_city           │ "Lyon"                                                  │
│ geo_country_name   │ "France"                                                │
│ geo_time_zone      │ "Europe/Paris"                                          │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from datetime import datetime
from typing import Optional
import uuid

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from chatterbox.shared.models.base import Base, TimestampMixin
from chatterbox.shared.utils import message_format


GEO_FIELDS = ("country_name", "region_name", "city", "time_zone")


class Message(Base, TimestampMixin):
    """
    Message model.

    Attributes:
        id: Unique identifier (UUID v4)
        creator_id: Id of the posting user (snapshot, not a foreign key)
        creator_name: Display name of the poster at posting time
        creator_avatar_url: Avatar of the poster at posting time
        text: Message body, 1-255 characters
        geo_*: Optional location of the poster
    """

    __tablename__ = "messages"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATOR SNAPSHOT
    # ═══════════════════════════════════════════════════════════════════════════

    creator_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        nullable=False,
        index=True,
    )

    creator_name: Mapped[str] = mapped_column(String(255), nullable=False)
    creator_avatar_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # CONTENT
    # ═══════════════════════════════════════════════════════════════════════════

    text: Mapped[str] = mapped_column(String(255), nullable=False)

    # ═══════════════════════════════════════════════════════════════════════════
    # GEO
    # ═══════════════════════════════════════════════════════════════════════════

    geo_country_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    geo_region_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    geo_city: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    geo_time_zone: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # DERIVED FIELDS
    # ═══════════════════════════════════════════════════════════════════════════

    @property
    def geo(self) -> dict[str, Optional[str]]:
        return {field: getattr(self, f"geo_{field}") for field in GEO_FIELDS}

    @geo.setter
    def geo(self, value: Optional[dict[str, Optional[str]]]) -> None:
        value = value or {}
        for field in GEO_FIELDS:
            setattr(self, f"geo_{field}", value.get(field))

    @property
    def friendly_timestamp(self) -> str:
        return message_format.friendly_timestamp(self.created_at)

    @property
    def location(self) -> Optional[str]:
        return message_format.location(self.geo)

    @property
    def footer(self) -> str:
        return message_format.footer(self.created_at, self.geo)

    def footer_at(self, now: datetime) -> str:
        """Footer relative to an explicit reference time."""
        return message_format.footer(self.created_at, self.geo, now)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Message(id={self.id}, creator={self.creator_name})>"
