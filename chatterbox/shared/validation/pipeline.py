"""
User Validation Pipeline

Guarantees that every persisted user can log in with a password.

validate_and_prepare() is called by UserRepository before each write. It
mutates the user in place and either returns it ready for persistence or
raises; nothing is written when it raises.

Pipeline:
=========
┌─────────────────────────────────────────────────────────────────────────────┐
│  0. normalize + field rules   → ValidationError (every violated field)      │
│  1. default name              → name = username when empty                  │
│  2. locate local passport     → MissingLocalPassportError                   │
│  3. require a password        → MissingPasswordError                        │
│  4. hash staged password      → HashingFailedError                          │
│                                 (only when set_password() ran since the     │
│                                  last save; a stored hash is never          │
│                                  re-hashed)                                 │
└─────────────────────────────────────────────────────────────────────────────┘

Steps 1-4 short-circuit: the first structural failure stops the pipeline
before any hashing work is done.

Usage:
======
    user = User(username="alice", passports=[LocalPassport(password="s3cret")])
    validate_and_prepare(user, hasher)
    user.name                           # "alice"
    user.local_passport.password_hash   # "$2b$10$..."

    # From async code (hash runs in a worker thread)
    await validate_and_prepare_async(user, hasher)
"""

from typing import Optional

from chatterbox.config.settings import settings
from chatterbox.shared.core.exceptions import (
    FieldError,
    HashingFailedError,
    MissingLocalPassportError,
    MissingPasswordError,
    ValidationError,
)
from chatterbox.shared.core.logging import logger
from chatterbox.shared.models.enums import PassportType
from chatterbox.shared.models.passport import LocalPassport, Passport
from chatterbox.shared.models.user import User
from chatterbox.shared.utils.security import PasswordHasher, get_password_hasher
from chatterbox.shared.validation.rules import PASSPORT_RULES, USER_RULES, run_rules


def _strip(value: Optional[str]) -> Optional[str]:
    return value.strip() if isinstance(value, str) else value


def _passport_values(passport: Passport) -> dict[str, Optional[str]]:
    return {
        "type": passport.type,
        "password": getattr(passport, "pending_password", None),
    }


def validate_user(user: User) -> None:
    """
    Normalize a user and run every field rule.

    Trims username and avatar_url and fills in the default avatar. Does not
    touch passwords beyond checking the staged plaintext.

    Raises:
        ValidationError: Listing every violated field
    """
    user.username = _strip(user.username)
    user.avatar_url = _strip(user.avatar_url) or settings.DEFAULT_AVATAR_URL

    errors = run_rules(USER_RULES, {"username": user.username, "name": user.name})
    for index, passport in enumerate(user.passports):
        errors.extend(
            run_rules(PASSPORT_RULES, _passport_values(passport), prefix=f"passports.{index}.")
        )

    local_count = sum(1 for p in user.passports if p.type == PassportType.LOCAL.value)
    if local_count > 1:
        errors.append(
            FieldError(
                "passports",
                local_count,
                'only one passport of type "local" is allowed',
            )
        )

    if errors:
        fields = ", ".join(error.field for error in errors)
        raise ValidationError(message=f"User validation failed: {fields}", errors=errors)


def _check_invariants(user: User) -> LocalPassport:
    validate_user(user)

    if not user.name:
        user.name = user.username

    passport = user.local_passport
    if passport is None:
        raise MissingLocalPassportError()

    if not isinstance(passport, LocalPassport) or not passport.has_password:
        raise MissingPasswordError()

    return passport


def _hash_failed(user: User, exc: Exception) -> HashingFailedError:
    logger.error(
        "Password hashing failed",
        username=user.username,
        error_type=type(exc).__name__,
    )
    return HashingFailedError()


def validate_and_prepare(user: User, hasher: Optional[PasswordHasher] = None) -> User:
    """
    Enforce user invariants and hash a newly set password.

    Blocks while bcrypt runs.

    Args:
        user: Draft or loaded user, mutated in place
        hasher: Hasher to use (defaults to the process-wide one)

    Returns:
        The same user, ready to persist

    Raises:
        ValidationError: Field rules violated
        MissingLocalPassportError: No passport of type "local"
        MissingPasswordError: Local passport has no password
        HashingFailedError: The hasher raised
    """
    passport = _check_invariants(user)

    plaintext = passport.pending_password
    if plaintext is None:
        return user

    try:
        digest = (hasher or get_password_hasher()).hash(plaintext)
    except Exception as exc:
        raise _hash_failed(user, exc) from exc

    passport.mark_hashed(digest)
    logger.debug("Password hashed", username=user.username)
    return user


async def validate_and_prepare_async(
    user: User,
    hasher: Optional[PasswordHasher] = None,
) -> User:
    """Non-blocking variant of validate_and_prepare."""
    passport = _check_invariants(user)

    plaintext = passport.pending_password
    if plaintext is None:
        return user

    try:
        digest = await (hasher or get_password_hasher()).hash_async(plaintext)
    except Exception as exc:
        raise _hash_failed(user, exc) from exc

    passport.mark_hashed(digest)
    logger.debug("Password hashed", username=user.username)
    return user
