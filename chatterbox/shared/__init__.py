"""
Shared Module

Contains the domain and data layers used by the API:
- Models: SQLAlchemy ORM models
- Validation: Field rules and pre-persistence pipelines
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models and projectors
- Core: Logging, exceptions
- Utils: Password hashing, passport store, message presentation

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── migrations/     ← Alembic environment and revisions
    ├── models/         ← SQLAlchemy models
    ├── validation/     ← Rule tables and validate_and_prepare
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    └── utils/          ← Utilities

Usage:
======
    from chatterbox.shared.models import User, LocalPassport
    from chatterbox.shared.repositories import UserRepository
    from chatterbox.shared.services import UserService
    from chatterbox.shared.schemas import to_client_view
    from chatterbox.shared.core import logger, ChatterboxException
"""
