"""Core app configuration, database, errors and session signing."""

from acme_auth.core.config import Settings, get_settings
from acme_auth.core.database import get_db
from acme_auth.core.errors import AppError, AuthError, ErrorKind
from acme_auth.core.security import SessionSigner

__all__ = [
    "AppError",
    "AuthError",
    "ErrorKind",
    "SessionSigner",
    "Settings",
    "get_db",
    "get_settings",
]
