"""
User Service

Business logic for user registration, credential checks and passport
management.

Service Pattern:
================
Services encapsulate business logic and coordinate between:
- Repositories (data access)
- The password hasher
- Domain rules

Usage:
======
    from chatterbox.shared.services.user_service import UserService

    service = UserService(db)
    user = await service.register_user("alice", "s3cret")
    user = await service.authenticate("alice", "s3cret")
"""

from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from chatterbox.shared.core.exceptions import (
    AuthenticationError,
    DuplicateResourceError,
    FieldError,
    UserNotFoundError,
    ValidationError,
)
from chatterbox.shared.core.logging import logger
from chatterbox.shared.models.passport import LocalPassport, SocialPassport
from chatterbox.shared.models.user import User
from chatterbox.shared.repositories.user_repository import UserRepository
from chatterbox.shared.utils.passports import (
    build_passport,
    get_passport_by_type,
    verify_password_async,
)
from chatterbox.shared.utils.security import PasswordHasher, get_password_hasher


class UserService:
    """
    Service for user-related business logic.

    Handles:
    - User registration with username/password
    - Credential verification
    - Password changes
    - Linking social provider identities

    Attributes:
        session: Database session
        hasher: Password hasher
        repo: UserRepository instance
    """

    def __init__(self, session: AsyncSession, hasher: Optional[PasswordHasher] = None) -> None:
        """
        Initialize UserService.

        Args:
            session: Async database session
            hasher: Password hasher (defaults to the process-wide one)
        """
        self.session = session
        self.hasher = hasher or get_password_hasher()
        self.repo = UserRepository(session, self.hasher)

    async def register_user(
        self,
        username: str,
        password: str,
        name: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> User:
        """
        Register a new user with a local passport.

        Args:
            username: Login name
            password: Plain text password (will be hashed)
            name: Display name, defaults to the username
            avatar_url: Avatar, defaults to the placeholder

        Returns:
            The persisted user

        Raises:
            DuplicateResourceError: If the username is taken
            ValidationError: If any field rule is violated
        """
        if await self.repo.username_exists(username):
            raise DuplicateResourceError("Username already taken")

        user = User(
            username=username,
            name=name,
            avatar_url=avatar_url,
            passports=[LocalPassport(password=password)],
        )
        user = await self.repo.save(user)

        logger.info("User registered", user_id=str(user.id), username=user.username)
        return user

    async def get_user(self, user_id: UUID) -> User:
        """
        Get a user by id.

        Raises:
            UserNotFoundError: If no such user
        """
        user = await self.repo.get(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user

    async def authenticate(self, username: str, password: str) -> User:
        """
        Verify a username/password pair.

        Args:
            username: Login name
            password: Plain text password

        Returns:
            The matching user

        Raises:
            AuthenticationError: If credentials are invalid
        """
        user = await self.repo.get_by_username(username)
        if user is None or not await verify_password_async(user, password, self.hasher):
            logger.info("Authentication failed", username=username)
            raise AuthenticationError("Invalid username or password")
        return user

    async def change_password(self, user_id: UUID, password: str) -> User:
        """
        Replace the local password of a user.

        Adds a local passport when the user has none.

        Raises:
            UserNotFoundError: If no such user
            MissingPasswordError: If the new password is empty
        """
        user = await self.get_user(user_id)
        passport = user.local_passport
        if passport is None:
            user.passports.append(LocalPassport(password=password))
        else:
            passport.set_password(password)
        return await self.repo.save(user)

    async def link_social_passport(
        self,
        user_id: UUID,
        passport_type: str,
        access_token: Optional[str] = None,
        profile_id: Optional[str] = None,
    ) -> User:
        """
        Attach a social provider identity, or refresh an existing one.

        The local password is left untouched.

        Raises:
            UserNotFoundError: If no such user
            ValidationError: If the type is not a known provider
        """
        user = await self.get_user(user_id)
        passport = build_passport(passport_type, access_token=access_token, profile_id=profile_id)
        if not isinstance(passport, SocialPassport):
            raise ValidationError(
                errors=[FieldError("type", passport_type, f"`{passport_type}` is not a social provider")]
            )

        existing = get_passport_by_type(user.passports, passport.type)
        if isinstance(existing, SocialPassport):
            existing.access_token = access_token
            existing.profile_id = profile_id
        else:
            user.passports.append(passport)

        user = await self.repo.save(user)
        logger.info("Social passport linked", user_id=str(user.id), provider=passport.type)
        return user
