"""
User Repository

Database operations specific to the User model.
Extends BaseRepository with user-specific query methods and runs the user
validation pipeline before every write.

Common Operations:
==================
- get_by_username()  → Find user by login name
- username_exists()  → Check if a login name is taken
- save()             → Validate, hash a new password, persist

Usage Example:
==============
    repo = UserRepository(db, hasher)
    user = User(username="alice", passports=[LocalPassport(password="s3cret")])
    await repo.save(user)
    user.local_passport.password_hash   # "$2b$10$..."
"""

from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from chatterbox.shared.core.exceptions import DuplicateResourceError
from chatterbox.shared.core.logging import logger
from chatterbox.shared.models.user import User
from chatterbox.shared.repositories.base import BaseRepository
from chatterbox.shared.utils.security import PasswordHasher, get_password_hasher
from chatterbox.shared.validation.pipeline import validate_and_prepare_async


def _is_username_conflict(exc: IntegrityError) -> bool:
    # PostgreSQL: duplicate key ... "ix_users_username"; SQLite: UNIQUE constraint failed: users.username
    reason = str(exc.orig).lower()
    return "username" in reason and ("unique" in reason or "duplicate" in reason)


class UserRepository(BaseRepository[User]):
    """
    Repository for User database operations.

    Attributes:
        hasher: Password hasher used by the validation pipeline
    """

    def __init__(self, session: AsyncSession, hasher: Optional[PasswordHasher] = None) -> None:
        """
        Initialize UserRepository.

        Args:
            session: Async database session
            hasher: Password hasher (defaults to the process-wide one)
        """
        super().__init__(User, session)
        self.hasher = hasher or get_password_hasher()

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_username(self, username: str) -> Optional[User]:
        """
        Get user by login name.

        Surrounding whitespace is ignored, matching how usernames are stored.

        SQL Generated:
            SELECT * FROM users WHERE username = 'alice'
        """
        query = select(User).where(User.username == (username or "").strip())
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def username_exists(self, username: str) -> bool:
        """
        Check if a username is already taken.

        Example:
            if await repo.username_exists("alice"):
                raise DuplicateResourceError("Username already taken")
        """
        user = await self.get_by_username(username)
        return user is not None

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def save(self, user: User) -> User:
        """
        Validate and persist a new or modified user.

        Runs validate_and_prepare_async first, so a newly set password is
        hashed exactly once and an unchanged one is left alone.

        Raises:
            ValidationError: And its subclasses, from the pipeline
            HashingFailedError: The hasher raised
            DuplicateResourceError: The username is taken
        """
        await validate_and_prepare_async(user, self.hasher)
        try:
            await self.add(user)
        except IntegrityError as exc:
            if not _is_username_conflict(exc):
                raise
            raise DuplicateResourceError("Username already taken") from exc
        logger.info("User saved", user_id=str(user.id), username=user.username)
        return user

    async def create(self, **kwargs: Any) -> User:
        """Build a user from field values and save it."""
        return await self.save(User(**kwargs))
