"""
Route Registration

Mounts the routers. User and message routes document the shared error
body for their failure statuses.

Route Hierarchy:
================
    /health, /ready, /live  → Health check endpoints
    /users                  → Registration, lookup, credential checks
    /messages               → Posting and reading messages

Usage:
======
    from chatterbox.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from chatterbox.api.handlers import (
    health_handler,
    message_handler,
    user_handler,
)
from chatterbox.shared.schemas.common import ERROR_RESPONSES


def register_routes(app: FastAPI) -> None:
    """Mount health at the root and the resource routers under prefixes."""
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    app.include_router(
        user_handler.router,
        prefix="/users",
        tags=["Users"],
        responses=ERROR_RESPONSES,
    )

    app.include_router(
        message_handler.router,
        prefix="/messages",
        tags=["Messages"],
        responses=ERROR_RESPONSES,
    )
