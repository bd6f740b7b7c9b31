"""
API Handlers

Route handlers for the Chatterbox API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer.
"""

from chatterbox.api.handlers import (
    health_handler,
    message_handler,
    user_handler,
)

__all__ = [
    "health_handler",
    "message_handler",
    "user_handler",
]
