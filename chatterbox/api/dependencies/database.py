"""
Database Dependency

FastAPI dependency for database sessions.

The session is committed on success and rolled back on error.

Usage:
======
    from chatterbox.api.dependencies.database import DbSession

    @router.get("/users/{user_id}")
    async def get_user(user_id: UUID, db: DbSession):
        return await UserRepository(db).get(user_id)
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from chatterbox.shared.db import get_db as _get_db


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Yield a database session for the duration of the request.

    Tests override this dependency to point at a throwaway database.
    """
    async for session in _get_db():
        yield session


# Type alias for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
