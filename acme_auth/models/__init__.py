"""SQLAlchemy ORM models."""

from acme_auth.models.base import Base
from acme_auth.models.user import User

__all__ = ["Base", "User"]
