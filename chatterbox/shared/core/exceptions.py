"""
Domain Errors

Every error the core raises on purpose, each knowing its HTTP status and
the stable code clients switch on.

Exception Hierarchy:
====================
    ChatterboxException (base)
       │
       ├── AuthenticationError (401)        ← Invalid credentials
       ├── NotFoundError (404)              ← Resource not found
       │      ├── UserNotFoundError
       │      └── MessageNotFoundError
       ├── ValidationError (400)            ← One or more field rules violated
       │      ├── MissingLocalPassportError ← User has no "local" passport
       │      └── MissingPasswordError      ← Local passport has no password
       ├── ConflictError (409)              ← Resource already exists
       │      └── DuplicateResourceError
       └── HashingFailedError (500)         ← Password hashing backend failed

Usage:
======
    from chatterbox.shared.core.exceptions import NotFoundError, ValidationError

    # Status and code come from the class
    raise NotFoundError("User", user_id)
    # Results in: {"error": {"code": "NOT_FOUND", "message": "User with id 'abc' not found"}}

    # Raise with every violated field
    raise ValidationError(errors=[FieldError("username", "", "a unique username is required")])

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "User validation failed: username",
            "details": {"errors": [{"field": "username", "value": "", "message": "..."}]}
        }
    }

None of these errors ever carries a plaintext password or a password digest.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class FieldError:
    """A single violated field rule."""

    field: str
    value: Any
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "value": self.value, "message": self.message}


class ChatterboxException(Exception):
    """
    Root of every error the application raises on purpose.

    Carries what the API needs to answer: an HTTP status, a stable
    machine-readable code and an optional details mapping that is safe to
    show to clients.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Body of the JSON error response."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION ERRORS (401)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(ChatterboxException):
    """Unknown username or wrong password (401). The two are not distinguished."""

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(ChatterboxException):
    """
    A looked-up record does not exist (404).

    The message names the resource and, when given, its id:
    "Message with id 'abc-123' not found".
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class UserNotFoundError(NotFoundError):
    """No user with this id."""

    def __init__(self, user_id: str) -> None:
        super().__init__(resource="User", resource_id=user_id)


class MessageNotFoundError(NotFoundError):
    """No message with this id."""

    def __init__(self, message_id: str) -> None:
        super().__init__(resource="Message", resource_id=message_id)


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION ERRORS (400)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(ChatterboxException):
    """
    One or more field rules failed (400).

    All violations of a single save are reported together.

    Attributes:
        errors: One FieldError per violated rule
    """

    def __init__(
        self,
        message: Optional[str] = None,
        errors: Optional[list[FieldError]] = None,
        details: Optional[dict[str, Any]] = None,
        error_code: str = "VALIDATION_ERROR",
    ) -> None:
        self.errors = list(errors or [])
        if message is None:
            fields = ", ".join(error.field for error in self.errors)
            message = f"Validation failed: {fields}" if fields else "Validation failed"
        extra_details = details or {}
        if self.errors:
            extra_details["errors"] = [error.to_dict() for error in self.errors]
        super().__init__(
            message=message,
            status_code=400,
            error_code=error_code,
            details=extra_details,
        )

    @property
    def fields(self) -> list[str]:
        """Names of the violated fields, in rule order."""
        return [error.field for error in self.errors]


class MissingLocalPassportError(ValidationError):
    """Raised when a user is saved without a passport of type "local"."""

    def __init__(self) -> None:
        super().__init__(
            message='at least a passport of type "local" is required',
            errors=[
                FieldError(
                    "passports",
                    None,
                    'at least a passport of type "local" is required',
                )
            ],
            error_code="MISSING_LOCAL_PASSPORT",
        )


class MissingPasswordError(ValidationError):
    """Raised when the local passport carries neither a new password nor a stored hash."""

    def __init__(self) -> None:
        super().__init__(
            message="password is required",
            errors=[FieldError("password", None, "password is required")],
            error_code="MISSING_PASSWORD",
        )


# ═══════════════════════════════════════════════════════════════════════════════
# CONFLICT ERRORS (409)
# ═══════════════════════════════════════════════════════════════════════════════


class ConflictError(ChatterboxException):
    """The write would break a uniqueness rule (409)."""

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


class DuplicateResourceError(ConflictError):
    """Raised for a username that is already registered."""

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)


# ═══════════════════════════════════════════════════════════════════════════════
# CREDENTIAL ERRORS (500)
# ═══════════════════════════════════════════════════════════════════════════════


class HashingFailedError(ChatterboxException):
    """
    Password hashing failed.

    Wraps the underlying crypto library failure (available as __cause__).
    Not retried; callers may retry the whole save.
    """

    def __init__(self, message: str = "Password hashing failed") -> None:
        super().__init__(
            message=message,
            status_code=500,
            error_code="HASHING_FAILED",
        )
