"""
API Middleware

Custom middleware for the FastAPI application.

Components:
===========
- error_handler: Global exception handling
- request_context: Request id and path bound to every log line

Usage:
======
    from chatterbox.api.middleware import RequestContextMiddleware, setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
    app.add_middleware(RequestContextMiddleware)
"""

from chatterbox.api.middleware.error_handler import setup_exception_handlers
from chatterbox.api.middleware.request_context import RequestContextMiddleware

__all__ = [
    "setup_exception_handlers",
    "RequestContextMiddleware",
]
