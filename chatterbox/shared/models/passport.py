"""
Passport Entity Models

An authentication method owned by exactly one User. Passports have no
lifecycle of their own: they are created, loaded and deleted with their user.

Model Hierarchy (single-table inheritance on "type"):
=====================================================
    Passport                      ← passports table, discriminated by type
       ├── LocalPassport          ← "local": password_hash
       └── SocialPassport         ← abstract: access_token, profile_id
              ├── FacebookPassport  ← "facebook"
              └── GooglePassport    ← "google"

Passwords:
==========
A LocalPassport never stores plaintext. set_password() stages the new
password on the instance only; the user validation pipeline hashes it and
calls mark_hashed() before the row is written. A passport loaded from the
database has nothing staged, so saving it again leaves password_hash as is.

SAMPLE PASSPORT RECORDS:
┌──────────────────────────────────────────────────────────────────────────────┐
│ type      │ password_hash   │ access_token │ profile_id                      │
│ local     │ "$2b$10$..."    │ NULL         │ NULL                            │
│ facebook  │ NULL            │ "EAAG..."    │ "10215..."                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Any, Iterable, Optional
import uuid

from sqlalchemy import ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chatterbox.shared.core.exceptions import FieldError, ValidationError
from chatterbox.shared.models.base import Base
from chatterbox.shared.models.enums import PassportType


if TYPE_CHECKING:
    from chatterbox.shared.models.user import User


class Passport(Base):
    """
    Base passport row.

    Attributes:
        id: Unique identifier (UUID v4)
        user_id: Owning user
        type: Discriminator, one of PassportType
    """

    __tablename__ = "passports"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    type: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
    )

    user: Mapped["User"] = relationship(
        "User",
        back_populates="passports",
    )

    __mapper_args__ = {
        "polymorphic_on": "type",
    }

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id}, type={self.type})>"


class LocalPassport(Passport):
    """Username/password credential."""

    password_hash: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    __mapper_args__ = {
        "polymorphic_identity": PassportType.LOCAL.value,
    }

    # Staged plaintext; never mapped, never persisted
    _pending_password = None

    def __init__(self, password: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        if password is not None:
            self.set_password(password)

    def set_password(self, plaintext: Optional[str]) -> None:
        """
        Stage a new password for hashing on the next save.

        Surrounding whitespace is trimmed. An empty value clears the
        credential, which makes the next save fail with MissingPasswordError.
        """
        plaintext = (plaintext or "").strip()
        if plaintext:
            self._pending_password = plaintext
        else:
            self._pending_password = None
            self.password_hash = None

    @property
    def pending_password(self) -> Optional[str]:
        """Plaintext staged by set_password() and not yet hashed."""
        return self._pending_password

    @property
    def has_password(self) -> bool:
        """True when a password is staged or already hashed."""
        return bool(self._pending_password or self.password_hash)

    def mark_hashed(self, digest: str) -> None:
        """Replace the staged plaintext with its digest."""
        self.password_hash = digest
        self._pending_password = None


class SocialPassport(Passport):
    """
    Identity issued by a social provider.

    access_token and profile_id are opaque provider values and are stored
    as given.
    """

    access_token: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    profile_id: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )

    __mapper_args__ = {
        "polymorphic_abstract": True,
    }

    @property
    def provider(self) -> PassportType:
        return PassportType(self.type)


class FacebookPassport(SocialPassport):
    __mapper_args__ = {
        "polymorphic_identity": PassportType.FACEBOOK.value,
    }


class GooglePassport(SocialPassport):
    __mapper_args__ = {
        "polymorphic_identity": PassportType.GOOGLE.value,
    }


PASSPORT_CLASSES: dict[PassportType, type[Passport]] = {
    PassportType.LOCAL: LocalPassport,
    PassportType.FACEBOOK: FacebookPassport,
    PassportType.GOOGLE: GooglePassport,
}


def get_passport_by_type(
    passports: Iterable[Passport],
    passport_type: PassportType | str,
) -> Optional[Passport]:
    """
    Find the first passport of a given type.

    Several passports of one type are not expected; when they occur the
    first one is canonical.

    Args:
        passports: Passports to search
        passport_type: PassportType member or its string value

    Returns:
        The first matching passport, or None
    """
    wanted = PassportType(passport_type).value
    return next((p for p in passports if p.type == wanted), None)


def build_passport(passport_type: Optional[str], **fields: Any) -> Passport:
    """
    Construct the passport variant for a type string.

    Fields that do not apply to the variant are ignored: a password on a
    social passport, tokens on a local one.

    Raises:
        ValidationError: If the type is missing or unknown
    """
    if not passport_type:
        raise ValidationError(
            errors=[FieldError("type", passport_type, "a passport type is required")]
        )
    try:
        kind = PassportType(passport_type)
    except ValueError:
        raise ValidationError(
            errors=[
                FieldError(
                    "type",
                    passport_type,
                    f"`{passport_type}` is not a valid passport type",
                )
            ]
        ) from None

    if kind is PassportType.LOCAL:
        return LocalPassport(password=fields.get("password"))
    return PASSPORT_CLASSES[kind](
        access_token=fields.get("access_token"),
        profile_id=fields.get("profile_id"),
    )
