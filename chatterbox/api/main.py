"""
Chatterbox API Application Entry Point

Builds the FastAPI app: CORS, exception handlers, routers and the
startup/shutdown hooks.

Request Path:
=============
    HTTP request
        │
        ▼
    CORSMiddleware → RequestContextMiddleware (request_id in logs)
        │
        ▼
    Router (/health /ready /live, /users, /messages)
        │   Depends: DbSession, Hasher, UserService, MessageService
        ▼
    Handler ──raises──▶ exception handlers ──▶ {"error": {...}}
        │
        ▼
    PublicUser / MessageResponse

Lifecycle:
==========
1. Application starts → lifespan startup
2. Database connection initialized
3. Guest user and welcome message seeded (SEED_DEFAULTS)
4. Application serves requests
5. Application stops → lifespan shutdown
6. Database connection closed

Usage:
======
    # Run with uvicorn
    uvicorn chatterbox.api.main:app --host 0.0.0.0 --port 8000 --reload

    # Or programmatically
    from chatterbox.api.main import create_application
    app = create_application()
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chatterbox.config.settings import settings
from chatterbox.shared.db import AsyncSessionLocal, init_db, close_db
from chatterbox.shared.core.logging import logger
from chatterbox.shared.services.seed_service import seed_defaults
from chatterbox.api.middleware import RequestContextMiddleware, setup_exception_handlers
from chatterbox.api.routes import register_routes


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup and shutdown hooks.

    Seeding runs after the connection check and never aborts startup. The
    engine is disposed even when startup fails halfway.
    """
    logger.info(
        "Starting Chatterbox API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )
    try:
        await init_db()
        if settings.SEED_DEFAULTS:
            await seed_defaults(AsyncSessionLocal)
        logger.info("Chatterbox API started successfully")

        yield

        logger.info("Shutting down Chatterbox API")
    finally:
        await close_db()
    logger.info("Chatterbox API shutdown complete")


def create_application() -> FastAPI:
    """
    Build a configured FastAPI application.

    Tests import the module-level ``app`` and replace its dependencies
    through ``app.dependency_overrides``.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Users, credentials and messages",
        version=settings.APP_VERSION,
        # Interactive docs only when debugging
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_exception_handlers(app)
    register_routes(app)

    return app


app = create_application()
