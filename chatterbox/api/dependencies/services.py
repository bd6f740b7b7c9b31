"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per-request, which is fine because:
- Services only hold the session and the hasher
- Each request gets its own db session
- The hasher is shared and stateless

Usage:
======
    from chatterbox.api.dependencies.services import get_user_service

    @router.post("")
    async def register(
        data: UserCreate,
        user_service: UserService = Depends(get_user_service),
    ):
        return await user_service.register_user(data.username, data.password)
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from chatterbox.api.dependencies.database import get_db
from chatterbox.shared.services.message_service import MessageService
from chatterbox.shared.services.user_service import UserService
from chatterbox.shared.utils.security import PasswordHasher, get_password_hasher


def get_hasher() -> PasswordHasher:
    """
    Dependency to get the password hasher.

    Tests override this with a low-cost hasher.
    """
    return get_password_hasher()


Hasher = Annotated[PasswordHasher, Depends(get_hasher)]


async def get_user_service(
    hasher: Hasher,
    db: AsyncSession = Depends(get_db),
) -> UserService:
    """
    Dependency to get UserService instance.

    Creates a new service instance per request with the request's db session.
    """
    return UserService(db, hasher)


async def get_message_service(
    db: AsyncSession = Depends(get_db),
) -> MessageService:
    """
    Dependency to get MessageService instance.
    """
    return MessageService(db)
