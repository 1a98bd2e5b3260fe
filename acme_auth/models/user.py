"""ORM model for users signed in through GitHub."""

import uuid

from sqlalchemy import JSON, Column, DateTime, String, Uuid, func
from sqlalchemy.dialects.postgresql import JSONB

from acme_auth.models.base import Base


class User(Base):
    """
    One row per GitHub login.

    profile holds the GitHub profile document minus the login field and is
    replaced wholesale on every sign-in.
    """

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    username = Column(String(255), nullable=False, unique=True, index=True)
    profile = Column(
        JSON().with_variant(JSONB(), "postgresql"),
        nullable=False,
        default=dict,
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
