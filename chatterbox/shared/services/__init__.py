"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories,
the password hasher, and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database
                ↘ PasswordHasher

Services should:
- Contain business logic
- Coordinate multiple repositories if needed
- Handle transactions (via session)
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- UserService: Registration, credential checks, passports
- MessageService: Posting and reading messages
- SeedService: Guest user and welcome message on startup

Usage:
======
    from chatterbox.shared.services import UserService

    service = UserService(db)
    user = await service.register_user("alice", "s3cret")
"""

from chatterbox.shared.services.user_service import UserService
from chatterbox.shared.services.message_service import MessageService
from chatterbox.shared.services.seed_service import SeedService, seed_defaults

__all__ = [
    "UserService",
    "MessageService",
    "SeedService",
    "seed_defaults",
]
