"""
Database Module

Database connectivity and session management for Chatterbox.

Architecture Overview:
======================
    FastAPI Route
        │  Dependency Injection: get_db()
        ▼
    AsyncSession (one per request, commit on success, rollback on error)
        │  Passed to Repository
        ▼
    UserRepository / MessageRepository
        │  SQL Queries
        ▼
    PostgreSQL Database

Usage in FastAPI:
=================
    from fastapi import Depends
    from chatterbox.shared.db import get_db
    from chatterbox.shared.repositories import UserRepository

    @app.get("/users/{user_id}")
    async def get_user(user_id: UUID, db: AsyncSession = Depends(get_db)):
        return await UserRepository(db).get(user_id)
"""

from chatterbox.shared.db.session import (
    get_db,
    init_db,
    close_db,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "AsyncSessionLocal",
    "engine",
]
