"""
Chatterbox SQLAlchemy Models

This package contains all database models for the Chatterbox application.

Model Hierarchy:
================
    User
       └── passports (Passport[])
              ├── LocalPassport
              └── SocialPassport
                     ├── FacebookPassport
                     └── GooglePassport

    Message   ← independent, holds a snapshot of its creator

Models Overview:
================
- Base: Base class and timestamp mixin
- User: Registered application user
- Passport: Authentication method owned by a user
- Message: Text posted by a user

Usage:
======
    from chatterbox.shared.models import User, LocalPassport, Message

    user = User(username="alice", passports=[LocalPassport(password="s3cret")])
"""

from chatterbox.shared.models.base import Base, TimestampMixin
from chatterbox.shared.models.enums import PassportType
from chatterbox.shared.models.passport import (
    Passport,
    LocalPassport,
    SocialPassport,
    FacebookPassport,
    GooglePassport,
    PASSPORT_CLASSES,
    build_passport,
    get_passport_by_type,
)
from chatterbox.shared.models.user import User
from chatterbox.shared.models.message import Message, GEO_FIELDS

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    # Enums
    "PassportType",
    # Passports
    "Passport",
    "LocalPassport",
    "SocialPassport",
    "FacebookPassport",
    "GooglePassport",
    "PASSPORT_CLASSES",
    "build_passport",
    "get_passport_by_type",
    # Core models
    "User",
    "Message",
    "GEO_FIELDS",
]
