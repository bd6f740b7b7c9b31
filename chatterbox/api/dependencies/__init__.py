"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Hashing: get_hasher(), Hasher
- Services: get_user_service(), get_message_service()

Usage:
======
    from chatterbox.api.dependencies import DbSession

    @router.get("/messages")
    async def list_messages(db: DbSession):
        return await MessageRepository(db).list_recent()
"""

from chatterbox.api.dependencies.database import (
    get_db,
    DbSession,
)
from chatterbox.api.dependencies.services import (
    get_hasher,
    get_user_service,
    get_message_service,
    Hasher,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Services
    "get_hasher",
    "get_user_service",
    "get_message_service",
    "Hasher",
]
