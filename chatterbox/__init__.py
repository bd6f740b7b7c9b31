"""
Chatterbox Backend

User identity, credential storage and messages for a small social
messaging application.

Package Structure:
==================
    chatterbox/
    ├── api/        ← FastAPI application
    ├── shared/     ← Models, validation, repositories, services
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    uvicorn chatterbox.api.main:app --reload

    # Migrations
    alembic upgrade head
"""
