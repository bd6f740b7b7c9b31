"""
User Entity Model

Represents a registered application user.

Model Hierarchy:
================
    User
       └── passports (Passport[]) - Authentication methods, owned by the user

Invariant: every persisted user has exactly one LocalPassport with a
password hash. Social passports may coexist. The invariant is enforced by
chatterbox.shared.validation.validate_and_prepare before each write.

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ username         │ "alice"                                                   │
│ name             │ "Alice"                                                   │
│ avatar_url       │ "/avatar/default"                                         │
│ created_at       │ 2024-01-01T00:00:00Z                                      │
│ updated_at       │ 2024-01-15T10:30:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import Optional
import uuid

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chatterbox.config.settings import settings
from chatterbox.shared.models.base import Base, TimestampMixin
from chatterbox.shared.models.enums import PassportType
from chatterbox.shared.models.passport import LocalPassport, Passport, get_passport_by_type


class User(Base, TimestampMixin):
    """
    User model representing a registered application user.

    Attributes:
        id: Unique identifier (UUID v4)
        username: Login name, 1-31 characters, unique
        name: Display name, 1-63 characters, defaults to username
        avatar_url: Avatar path or URL

    Relationships:
        passports: Authentication methods of this user
    """

    __tablename__ = "users"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # IDENTITY
    # ═══════════════════════════════════════════════════════════════════════════

    # Login name - uniqueness is guaranteed here, not by the validators
    username: Mapped[str] = mapped_column(
        String(31),
        unique=True,
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(
        String(63),
        nullable=False,
    )

    avatar_url: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default=lambda: settings.DEFAULT_AVATAR_URL,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    # One-to-Many: selectin so passports are available without lazy IO
    passports: Mapped[list[Passport]] = relationship(
        Passport,
        back_populates="user",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    def get_passport_by_type(self, passport_type: PassportType | str) -> Optional[Passport]:
        """First passport of the given type, or None."""
        return get_passport_by_type(self.passports, passport_type)

    @property
    def local_passport(self) -> Optional[LocalPassport]:
        return self.get_passport_by_type(PassportType.LOCAL)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, username={self.username})>"
