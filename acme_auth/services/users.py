"""User store: lookups and writes for GitHub-backed user records."""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from acme_auth.models import User

logger = logging.getLogger(__name__)


class UserStore:
    """Persisted users keyed by generated id, unique by username."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_id(self, user_id: UUID | str) -> User | None:
        if not isinstance(user_id, UUID):
            try:
                user_id = UUID(str(user_id))
            except ValueError:
                return None
        return self.db.get(User, user_id)

    def find_by_username(self, username: str) -> User | None:
        return self.db.query(User).filter(User.username == username).first()

    def create(self, username: str, profile: dict[str, Any]) -> User:
        user = User(username=username, profile=dict(profile))
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def update(self, user: User, profile: dict[str, Any]) -> User:
        """Replace the stored profile; keys missing from profile are dropped, not kept."""
        user.profile = dict(profile)
        self.db.commit()
        self.db.refresh(user)
        return user

    def upsert(self, username: str, profile: dict[str, Any]) -> tuple[User, bool]:
        """
        Create the user on first sign-in, otherwise replace its profile.

        Returns (user, created). The lookup and insert are not locked; when a
        concurrent sign-in inserts the same username first, the unique constraint
        rejects our insert and the winner's row is updated instead.
        """
        user = self.find_by_username(username)
        if user is not None:
            return self.update(user, profile), False
        try:
            return self.create(username, profile), True
        except IntegrityError:
            self.db.rollback()
            user = self.find_by_username(username)
            if user is None:
                raise
            logger.info(
                "Concurrent first sign-in; updating existing user",
                extra={"username": username, "user_id": str(user.id)},
            )
            return self.update(user, profile), False
