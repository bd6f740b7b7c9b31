"""
Passport Store

Lookup and password verification over a user's passports.

    get_passport_by_type(passports, "local")  → first local passport or None
    verify_password(user, "s3cret", hasher)   → bool
    await verify_password_async(user, "s3cret", hasher)

verify_password never calls the hasher when there is nothing to compare:
no local passport, an empty candidate password, or no stored hash all
answer False straight away.
"""

from typing import Optional

from chatterbox.shared.models.enums import PassportType
from chatterbox.shared.models.passport import (
    LocalPassport,
    build_passport,
    get_passport_by_type,
)
from chatterbox.shared.models.user import User
from chatterbox.shared.utils.security import PasswordHasher, get_password_hasher

__all__ = [
    "build_passport",
    "get_passport_by_type",
    "verify_password",
    "verify_password_async",
]


def _stored_digest(user: User, plaintext: Optional[str]) -> Optional[str]:
    if not plaintext:
        return None
    passport = get_passport_by_type(user.passports, PassportType.LOCAL)
    if not isinstance(passport, LocalPassport):
        return None
    return passport.password_hash or None


def verify_password(
    user: User,
    plaintext: Optional[str],
    hasher: Optional[PasswordHasher] = None,
) -> bool:
    """
    Check a candidate password against the user's local passport.

    Blocks while bcrypt runs; use verify_password_async from async code.

    Args:
        user: User whose local passport is checked
        plaintext: Candidate password
        hasher: Hasher to use (defaults to the process-wide one)

    Returns:
        True if the password matches the stored hash
    """
    digest = _stored_digest(user, plaintext)
    if digest is None:
        return False
    return (hasher or get_password_hasher()).verify(plaintext, digest)


async def verify_password_async(
    user: User,
    plaintext: Optional[str],
    hasher: Optional[PasswordHasher] = None,
) -> bool:
    """Non-blocking variant of verify_password."""
    digest = _stored_digest(user, plaintext)
    if digest is None:
        return False
    return await (hasher or get_password_hasher()).verify_async(plaintext, digest)
