"""
User Handler

Handles registration, lookup, credential checks and passport changes.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model
          ↘ to_client_view

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Domain errors (ValidationError, DuplicateResourceError, AuthenticationError,
UserNotFoundError) propagate to the exception handlers, which turn them into
the standard error body. Every response goes through to_client_view(), so
passports never leave the service.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from chatterbox.shared.schemas.user import (
    PasswordChange,
    PublicUser,
    SocialPassportLink,
    UserCreate,
    UserLogin,
    to_client_view,
)
from chatterbox.shared.services.user_service import UserService
from chatterbox.api.dependencies.services import get_user_service


router = APIRouter()


@router.post(
    "",
    response_model=PublicUser,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    user_data: UserCreate,
    user_service: UserService = Depends(get_user_service),
):
    """
    Register a new user with a local password.

    Raises:
        400: If a field rule is violated
        409: If the username is taken
    """
    user = await user_service.register_user(
        username=user_data.username,
        password=user_data.password,
        name=user_data.name,
        avatar_url=user_data.avatar_url,
    )
    return to_client_view(user)


@router.post("/login", response_model=PublicUser)
async def login(
    credentials: UserLogin,
    user_service: UserService = Depends(get_user_service),
):
    """
    Verify a username/password pair.

    No session or token is issued; a match returns the user.

    Raises:
        401: If credentials are invalid
    """
    user = await user_service.authenticate(
        username=credentials.username,
        password=credentials.password,
    )
    return to_client_view(user)


@router.get("/{user_id}", response_model=PublicUser)
async def get_user(
    user_id: UUID,
    user_service: UserService = Depends(get_user_service),
):
    """
    Get a user by id.

    Raises:
        404: If the user does not exist
    """
    return to_client_view(await user_service.get_user(user_id))


@router.put("/{user_id}/password", response_model=PublicUser)
async def change_password(
    user_id: UUID,
    data: PasswordChange,
    user_service: UserService = Depends(get_user_service),
):
    """
    Replace the local password.

    Raises:
        400: If the password is empty or too long
        404: If the user does not exist
    """
    return to_client_view(await user_service.change_password(user_id, data.password))


@router.post("/{user_id}/passports", response_model=PublicUser)
async def link_passport(
    user_id: UUID,
    data: SocialPassportLink,
    user_service: UserService = Depends(get_user_service),
):
    """
    Attach or refresh a Facebook/Google identity.

    Raises:
        404: If the user does not exist
    """
    user = await user_service.link_social_passport(
        user_id,
        data.type,
        access_token=data.access_token,
        profile_id=data.profile_id,
    )
    return to_client_view(user)
