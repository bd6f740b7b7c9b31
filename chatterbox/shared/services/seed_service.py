"""
Seed Service

Bootstrap data created when the API starts.

Defaults:
=========
- A guest user (GUEST_USERNAME / GUEST_NAME, local password GUEST_PASSWORD)
- One welcome message (DEFAULT_MESSAGE_TEXT) posted by the guest, only
  when the guest user is created by this run

Running the seed twice is harmless: an existing guest user means there is
nothing to do.

Usage:
======
    # Inside a transaction you manage
    created = await SeedService(db).ensure_defaults()

    # At startup, with its own session; failures are logged, not raised
    await seed_defaults(AsyncSessionLocal)
"""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from chatterbox.config.settings import settings
from chatterbox.shared.core.exceptions import ChatterboxException
from chatterbox.shared.core.logging import logger
from chatterbox.shared.models.user import User
from chatterbox.shared.services.message_service import MessageService
from chatterbox.shared.services.user_service import UserService
from chatterbox.shared.utils.security import PasswordHasher


class SeedService:
    """
    Creates the default guest user and welcome message.

    Attributes:
        users: UserService used to register the guest
        messages: MessageService used to post the welcome message
    """

    def __init__(self, session: AsyncSession, hasher: Optional[PasswordHasher] = None) -> None:
        self.session = session
        self.users = UserService(session, hasher)
        self.messages = MessageService(session)

    async def ensure_defaults(self) -> Optional[User]:
        """
        Create the guest user and welcome message if the guest is missing.

        Returns:
            The guest user when it was created by this call, None otherwise
        """
        if await self.users.repo.username_exists(settings.GUEST_USERNAME):
            logger.debug("Guest user already present", username=settings.GUEST_USERNAME)
            return None

        guest = await self.users.register_user(
            username=settings.GUEST_USERNAME,
            password=settings.GUEST_PASSWORD,
            name=settings.GUEST_NAME,
        )
        logger.info("Guest user created", user_id=str(guest.id))

        message = await self.messages.post_message(guest, settings.DEFAULT_MESSAGE_TEXT)
        logger.info("Default message created", message_id=str(message.id))
        return guest


async def seed_defaults(
    session_factory: async_sessionmaker[AsyncSession],
    hasher: Optional[PasswordHasher] = None,
) -> Optional[User]:
    """
    Run SeedService in its own transaction.

    Seeding problems never stop the application: they are logged and the
    transaction is rolled back.

    Args:
        session_factory: Factory producing sessions bound to the target database
        hasher: Password hasher (defaults to the process-wide one)

    Returns:
        The guest user when it was created, None otherwise
    """
    async with session_factory() as session:
        try:
            guest = await SeedService(session, hasher).ensure_defaults()
            await session.commit()
            return guest
        except (ChatterboxException, SQLAlchemyError) as e:
            await session.rollback()
            logger.error("Failed to seed default data", error=str(e), error_type=type(e).__name__)
            return None
