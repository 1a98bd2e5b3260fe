"""Pydantic request/response schemas."""

from acme_auth.schemas.auth import ErrorResponse, UserRecord
from acme_auth.schemas.health import HealthResponse

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "UserRecord",
]
