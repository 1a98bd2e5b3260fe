"""Session token signing and verification (JWT)."""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt

from acme_auth.core.config import Settings
from acme_auth.core.errors import AuthError

logger = logging.getLogger(__name__)

# Claim that carries the local user id.
USER_ID_CLAIM = "id"


class SessionSigner:
    """
    Mint and check the session tokens handed to the browser after sign-in.

    Tokens are self-contained JWTs signed with JWT_SECRET; nothing is stored
    server-side. An exp claim is only added when JWT_EXPIRE_MINUTES is set.
    """

    def __init__(self, settings: Settings) -> None:
        self._secret = settings.JWT_SECRET.get_secret_value()
        self._algorithm = settings.JWT_ALGORITHM
        self._expire_minutes = settings.JWT_EXPIRE_MINUTES

    def sign(self, user_id: UUID | str) -> str:
        """Create a signed token embedding user_id. Raises ValueError if user_id is not a UUID."""
        user_id = UUID(str(user_id))
        now = datetime.now(UTC)
        payload: dict[str, Any] = {
            USER_ID_CLAIM: str(user_id),
            "iat": now,
        }
        if self._expire_minutes is not None:
            payload["exp"] = now + timedelta(minutes=self._expire_minutes)
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str | None) -> UUID:
        """
        Return the user id embedded in token.

        Raises AuthError if the token is missing, malformed, signed with another
        key, expired, or does not carry a valid user id.
        """
        if not token or not token.strip():
            raise AuthError("bad credentials")
        try:
            payload = jwt.decode(
                token.strip(),
                self._secret,
                algorithms=[self._algorithm],
                # iat is not checked; the signing clock may run ahead of ours.
                options={"verify_iat": False},
            )
        except jwt.ExpiredSignatureError as e:
            raise AuthError("session token expired") from e
        except jwt.PyJWTError as e:
            logger.debug("Rejected session token: %s", e)
            raise AuthError("bad credentials") from e
        raw_id = payload.get(USER_ID_CLAIM)
        if not raw_id:
            raise AuthError("bad credentials")
        try:
            return UUID(str(raw_id))
        except ValueError as e:
            raise AuthError("bad credentials") from e
