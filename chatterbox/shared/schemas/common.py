"""
Common Schemas

BaseSchema is the parent of every response model built from an ORM
object. ErrorResponse documents the body the exception handlers send;
ERROR_RESPONSES attaches it to the OpenAPI description of each router.

Usage:
======
    from chatterbox.shared.schemas.common import BaseSchema, ERROR_RESPONSES

    class PublicUser(BaseSchema):
        id: UUID
        username: str

    app.include_router(router, responses=ERROR_RESPONSES)
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class BaseSchema(BaseModel):
    """Response model readable straight from ORM attributes."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# ERRORS
# ═══════════════════════════════════════════════════════════════════════════════


class ErrorDetail(BaseModel):
    code: str = Field(description="Stable error code, e.g. VALIDATION_ERROR")
    message: str = Field(description="Readable summary")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Field errors or ids; never passwords or hashes",
    )


class ErrorResponse(BaseModel):
    """
    Body of every non-2xx response.

        {
            "error": {
                "code": "MISSING_LOCAL_PASSPORT",
                "message": "at least a passport of type \"local\" is required",
                "details": {"errors": [...]}
            }
        }
    """

    error: ErrorDetail


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status: {"model": ErrorResponse, "description": description}
    for status, description in (
        (400, "Validation failed"),
        (401, "Bad credentials"),
        (404, "Unknown user or message"),
        (409, "Username taken"),
        (500, "Unexpected failure"),
    )
}


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str = "chatterbox"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
