"""
Base Repository

Generic data access shared by the user and message repositories.

A repository owns no transaction: it works inside the session it was given
and only flushes. Whoever created the session (get_db, seed_defaults, a test
fixture) decides when to commit or roll back.

Operations:
===========
    get(id)            → instance or None
    count()            → number of rows
    add(instance)      → INSERT/UPDATE + flush + refresh
    create(**fields)   → add(Model(**fields))
    delete(id)         → bool

Subclasses override create()/add a save() when a model needs validation
before it is written.
"""

from typing import Any, Generic, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from chatterbox.shared.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    CRUD helpers for one model class.

    Attributes:
        model: Mapped class handled by this repository
        session: Session the queries run in
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: UUID) -> Optional[ModelType]:
        """Load one row by primary key."""
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def count(self) -> int:
        query = select(sql_count()).select_from(self.model)
        return (await self.session.execute(query)).scalar() or 0

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE
    # ═══════════════════════════════════════════════════════════════════════════

    async def add(self, instance: ModelType) -> ModelType:
        """
        Write a new or modified instance.

        The flush assigns database defaults (created_at, updated_at) and the
        refresh loads them back onto the instance.
        """
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def create(self, **kwargs: Any) -> ModelType:
        return await self.add(self.model(**kwargs))

    async def delete(self, record_id: UUID) -> bool:
        """
        Delete a row by primary key.

        Returns:
            False when there was nothing to delete
        """
        instance = await self.get(record_id)
        if instance is None:
            return False
        await self.session.delete(instance)
        await self.session.flush()
        return True
