"""
Base Model Classes

Declarative base and the created_at/updated_at mixin shared by users and
messages. Passports have no timestamps.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       └── TimestampMixin   ← Automatic created_at/updated_at

Usage:
======
    from chatterbox.shared.models.base import Base, TimestampMixin

    class User(Base, TimestampMixin):
        __tablename__ = "users"
        id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
        username: Mapped[str] = mapped_column(String(31), unique=True)

Portability:
============
Columns use the generic Uuid/String/Text/DateTime types so the same models
run on PostgreSQL (production, asyncpg) and SQLite (tests, aiosqlite).
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Owns the metadata alembic migrates."""


class TimestampMixin:
    """
    created_at is filled by the database on INSERT; updated_at starts equal
    to it and is bumped by SQLAlchemy on every UPDATE.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
