"""Response schemas for the session and error endpoints."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field


class UserRecord(BaseModel):
    """User returned by GET /api/auth."""

    id: UUID
    username: str
    profile: dict[str, Any] = Field(
        default_factory=dict,
        description="GitHub profile without the login field.",
    )
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class ErrorResponse(BaseModel):
    """JSON envelope for every failed request."""

    error: str
