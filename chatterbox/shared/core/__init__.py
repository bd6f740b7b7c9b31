"""
Core

Logging and the error hierarchy; imported by every other layer, imports
none of them.

Usage:
======
    from chatterbox.shared.core.logging import logger, get_logger
    from chatterbox.shared.core.exceptions import ChatterboxException, NotFoundError

    logger.info("Starting operation", user_id=user_id)
"""

from chatterbox.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from chatterbox.shared.core.exceptions import (
    FieldError,
    ChatterboxException,
    AuthenticationError,
    NotFoundError,
    UserNotFoundError,
    MessageNotFoundError,
    ValidationError,
    MissingLocalPassportError,
    MissingPasswordError,
    ConflictError,
    DuplicateResourceError,
    HashingFailedError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "FieldError",
    "ChatterboxException",
    "AuthenticationError",
    "NotFoundError",
    "UserNotFoundError",
    "MessageNotFoundError",
    "ValidationError",
    "MissingLocalPassportError",
    "MissingPasswordError",
    "ConflictError",
    "DuplicateResourceError",
    "HashingFailedError",
]
