"""
Pydantic Schemas

Request and response models for the API, plus the projectors that turn
models into client views.

Usage:
======
    from chatterbox.shared.schemas import UserCreate, PublicUser, to_client_view
"""

from chatterbox.shared.schemas.common import (
    ERROR_RESPONSES,
    BaseSchema,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from chatterbox.shared.schemas.user import (
    UserCreate,
    UserLogin,
    PasswordChange,
    SocialPassportLink,
    PublicUser,
    to_client_view,
)
from chatterbox.shared.schemas.message import (
    GeoSchema,
    CreatorSchema,
    MessageCreate,
    MessageResponse,
    to_message_view,
)

__all__ = [
    # Common
    "BaseSchema",
    "ERROR_RESPONSES",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # User
    "UserCreate",
    "UserLogin",
    "PasswordChange",
    "SocialPassportLink",
    "PublicUser",
    "to_client_view",
    # Message
    "GeoSchema",
    "CreatorSchema",
    "MessageCreate",
    "MessageResponse",
    "to_message_view",
]
