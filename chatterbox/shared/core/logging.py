"""
Logging Configuration

Structured logging setup using structlog for consistent, parseable logs.

Log Output:
===========
Development:
    2024-01-15 10:30:00 [info     ] User saved                     username=alice

Production (JSON):
    {"timestamp": "2024-01-15T10:30:00", "level": "info", "event": "User saved", "username": "alice"}

Secrets:
========
Credential material must never reach a log line. Any event key listed in
SENSITIVE_KEYS is masked by the redact_secrets processor before rendering,
so an accidental ``logger.info("...", password=pwd)`` prints ``***``.

Usage:
======
    from chatterbox.shared.core.logging import logger, get_logger, log_context

    # Basic logging
    logger.info("User registered", user_id=user_id, username=username)

    # Get named logger
    auth_logger = get_logger("auth")
    auth_logger.debug("Verifying credentials", username=username)

    # Add context to all subsequent logs
    log_context(request_id=request_id)
    logger.info("Processing request")  # Includes request_id
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

from chatterbox.config.settings import settings


SENSITIVE_KEYS = frozenset(
    {
        "password",
        "password_hash",
        "plaintext",
        "digest",
        "access_token",
    }
)


def redact_secrets(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
    """Mask values of credential-bearing keys."""
    for key in SENSITIVE_KEYS.intersection(event_dict):
        event_dict[key] = "***"
    return event_dict


def setup_logging() -> None:
    """
    Route structlog through stdlib logging at LOG_LEVEL.

    Development renders coloured key=value lines; every other APP_ENV renders
    one JSON object per line. Runs once, on import of this module.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper()),
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        redact_secrets,
    ]

    renderers: list[Processor]
    if settings.is_development:
        renderers = [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        renderers = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=shared_processors + renderers,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Named structlog logger (e.g. "chatterbox.seed")."""
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Add context variables to all subsequent log calls.

    Context lives in context variables and is included in every log
    message until cleared.

    Args:
        **kwargs: Key-value pairs to add to log context
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """
    Clear all context variables.

    Call this at the end of request processing so context does not leak
    into other requests.
    """
    structlog.contextvars.clear_contextvars()


# Initialize logging on module import
setup_logging()

# Default logger instance for convenient import
logger = get_logger("chatterbox")
