"""
Message Handler

Handles posting and reading messages.

Every response carries the derived presentation fields (friendly_timestamp,
location, footer) computed at request time.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from chatterbox.shared.schemas.message import (
    MessageCreate,
    MessageResponse,
    to_message_view,
)
from chatterbox.shared.services.message_service import MessageService
from chatterbox.api.dependencies.services import get_message_service


router = APIRouter()


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def post_message(
    data: MessageCreate,
    message_service: MessageService = Depends(get_message_service),
):
    """
    Post a message as an existing user.

    Raises:
        400: If a field rule is violated
        404: If the creator does not exist
    """
    geo = data.geo.model_dump() if data.geo else None
    message = await message_service.post_message(data.creator_id, data.text, geo)
    return to_message_view(message)


@router.get("", response_model=list[MessageResponse])
async def list_messages(
    message_service: MessageService = Depends(get_message_service),
    skip: int = Query(0, ge=0, description="Number of items to skip"),
    limit: int = Query(50, ge=1, le=100, description="Number of items to return"),
):
    """List messages, newest first."""
    messages = await message_service.list_messages(offset=skip, limit=limit)
    return [to_message_view(message) for message in messages]


@router.get("/{message_id}", response_model=MessageResponse)
async def get_message(
    message_id: UUID,
    message_service: MessageService = Depends(get_message_service),
):
    """
    Get a single message.

    Raises:
        404: If the message does not exist
    """
    return to_message_view(await message_service.get_message(message_id))
