"""
Message Repository

Database operations specific to the Message model.

Common Operations:
==================
- save()         → Validate and persist a message
- list_recent()  → Newest messages first
"""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chatterbox.shared.models.message import Message
from chatterbox.shared.repositories.base import BaseRepository
from chatterbox.shared.validation.messages import validate_message


class MessageRepository(BaseRepository[Message]):
    """Repository for Message database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Message, session)

    async def save(self, message: Message) -> Message:
        """
        Validate and persist a message.

        Raises:
            ValidationError: Listing every violated field
        """
        validate_message(message)
        return await self.add(message)

    async def create(self, **kwargs: Any) -> Message:
        return await self.save(Message(**kwargs))

    async def list_recent(self, *, offset: int = 0, limit: int = 50) -> list[Message]:
        """
        Newest messages first.

        SQL Generated:
            SELECT * FROM messages ORDER BY created_at DESC, id OFFSET 0 LIMIT 50
        """
        query = (
            select(Message)
            .order_by(Message.created_at.desc(), Message.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())
