"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: Password hashing and verification
- passports: Passport lookup and password checks against a user
- message_format: Relative time, location and footer of messages

Usage:
======
    from chatterbox.shared.utils.security import PasswordHasher, get_password_hasher
    from chatterbox.shared.utils.passports import verify_password
    from chatterbox.shared.utils.message_format import footer

passports depends on the models and is imported by path only; the models
themselves import message_format from this package.
"""

from chatterbox.shared.utils.security import PasswordHasher, get_password_hasher
from chatterbox.shared.utils.message_format import friendly_timestamp, location, footer

__all__ = [
    "PasswordHasher",
    "get_password_hasher",
    "friendly_timestamp",
    "location",
    "footer",
]
