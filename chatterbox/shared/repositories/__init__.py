"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data
access. Writes go through the validation pipelines before hitting the
database.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]      ← Generic CRUD operations
         │
         ├── UserRepository        ← Lookup by username, validated save
         └── MessageRepository     ← Validated save, newest-first listing

Usage Example:
==============
    from chatterbox.shared.repositories import UserRepository

    async def find(db: AsyncSession, username: str):
        repo = UserRepository(db)
        return await repo.get_by_username(username)
"""

from chatterbox.shared.repositories.base import BaseRepository
from chatterbox.shared.repositories.user_repository import UserRepository
from chatterbox.shared.repositories.message_repository import MessageRepository

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "UserRepository",
    "MessageRepository",
]
