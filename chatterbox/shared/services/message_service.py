"""
Message Service

Business logic for posting and reading messages.

A posted message takes a snapshot of its creator (id, name, avatar) at the
time of posting.

Usage:
======
    service = MessageService(db)
    message = await service.post_message(user.id, "Hello!", geo={"time_zone": "Europe/Paris"})
    messages = await service.list_messages(limit=20)
"""

from typing import Mapping, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from chatterbox.shared.core.exceptions import MessageNotFoundError, UserNotFoundError
from chatterbox.shared.core.logging import logger
from chatterbox.shared.models.message import Message
from chatterbox.shared.models.user import User
from chatterbox.shared.repositories.message_repository import MessageRepository
from chatterbox.shared.repositories.user_repository import UserRepository


class MessageService:
    """
    Service for message-related business logic.

    Attributes:
        session: Database session
        repo: MessageRepository instance
        user_repo: UserRepository instance, to resolve creators
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = MessageRepository(session)
        self.user_repo = UserRepository(session)

    async def post_message(
        self,
        creator: User | UUID,
        text: str,
        geo: Optional[Mapping[str, Optional[str]]] = None,
    ) -> Message:
        """
        Post a message on behalf of a user.

        Args:
            creator: The posting user, or its id
            text: Message body
            geo: Optional country_name/region_name/city/time_zone

        Returns:
            The persisted message

        Raises:
            UserNotFoundError: If the creator id is unknown
            ValidationError: If any field rule is violated
        """
        if not isinstance(creator, User):
            user = await self.user_repo.get(creator)
            if user is None:
                raise UserNotFoundError(str(creator))
            creator = user

        message = Message(
            creator_id=creator.id,
            creator_name=creator.name,
            creator_avatar_url=creator.avatar_url,
            text=text,
            geo=dict(geo or {}),
        )
        message = await self.repo.save(message)

        logger.info("Message posted", message_id=str(message.id), creator_id=str(creator.id))
        return message

    async def get_message(self, message_id: UUID) -> Message:
        """
        Get a message by id.

        Raises:
            MessageNotFoundError: If no such message
        """
        message = await self.repo.get(message_id)
        if message is None:
            raise MessageNotFoundError(str(message_id))
        return message

    async def list_messages(self, *, offset: int = 0, limit: int = 50) -> list[Message]:
        """Newest messages first."""
        return await self.repo.list_recent(offset=offset, limit=limit)
