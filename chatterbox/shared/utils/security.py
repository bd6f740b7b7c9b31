"""
Security Utilities

Password hashing and verification.

Password Hashing:
=================
Uses bcrypt (through passlib) for salted, one-way password hashing.
Every call to hash() generates a fresh random salt, so hashing the same
password twice yields two different digests that both verify.

The work factor is configurable (BCRYPT_ROUNDS, default 10). Each extra
round doubles the cost of a guess.

Blocking vs Async:
==================
bcrypt is CPU-bound. hash()/verify() block the calling thread and are meant
for scripts and sync code. hash_async()/verify_async() run the same
computation in a worker thread so the event loop keeps serving other
requests while a hash is in flight. A hash that has started always runs to
completion; a caller that stops awaiting simply discards the result.

Usage:
======
    from chatterbox.shared.utils.security import get_password_hasher

    hasher = get_password_hasher()

    # Hash password
    digest = hasher.hash("password123")

    # Verify password
    if hasher.verify("password123", digest):
        print("Password matches!")

    # From async code
    digest = await hasher.hash_async("password123")
"""

import asyncio
from functools import lru_cache
from typing import Optional

from passlib.context import CryptContext

from chatterbox.config.settings import settings


class PasswordHasher:
    """
    bcrypt password hasher.

    Attributes:
        rounds: bcrypt work factor used for new hashes
    """

    def __init__(self, rounds: int = 10) -> None:
        """
        Initialize the hasher.

        Args:
            rounds: bcrypt work factor (4-31)
        """
        self.rounds = rounds
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # BLOCKING
    # ═══════════════════════════════════════════════════════════════════════════

    def hash(self, plaintext: str) -> str:
        """
        Hash a password.

        Args:
            plaintext: Plain text password

        Returns:
            bcrypt hash string (includes algorithm, cost and salt)
        """
        return self._context.hash(plaintext)

    def verify(self, plaintext: str, digest: Optional[str]) -> bool:
        """
        Verify a password against a bcrypt hash.

        The comparison is constant-time. A missing or unrecognised digest
        never matches.

        Args:
            plaintext: Plain text password to verify
            digest: bcrypt hash to verify against

        Returns:
            True if password matches, False otherwise
        """
        if not plaintext or not digest:
            return False
        try:
            return self._context.verify(plaintext, digest)
        except ValueError:
            # digest is not a hash passlib recognises
            return False

    # ═══════════════════════════════════════════════════════════════════════════
    # NON-BLOCKING
    # ═══════════════════════════════════════════════════════════════════════════

    async def hash_async(self, plaintext: str) -> str:
        """Hash a password in a worker thread."""
        return await asyncio.to_thread(self.hash, plaintext)

    async def verify_async(self, plaintext: str, digest: Optional[str]) -> bool:
        """Verify a password in a worker thread."""
        return await asyncio.to_thread(self.verify, plaintext, digest)

    def __repr__(self) -> str:
        return f"<PasswordHasher(rounds={self.rounds})>"


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """
    Get the process-wide password hasher.

    Built once from settings.BCRYPT_ROUNDS.
    """
    return PasswordHasher(rounds=settings.BCRYPT_ROUNDS)
