"""Session verification: resolve the Authorization header to a stored user."""

from typing import Annotated

from fastapi import APIRouter, Depends, Header

from acme_auth.api.deps import get_session_signer, get_user_store
from acme_auth.core.errors import AuthError
from acme_auth.core.security import SessionSigner
from acme_auth.schemas.auth import ErrorResponse, UserRecord
from acme_auth.services.users import UserStore

router = APIRouter()


def _token_from_header(authorization: str | None) -> str | None:
    """Accept the raw token (as the browser page sends it) or 'Bearer <token>'."""
    if not authorization:
        return None
    scheme, _, param = authorization.strip().partition(" ")
    if param and scheme.lower() == "bearer":
        return param.strip()
    return authorization.strip()


@router.get(
    "",
    response_model=UserRecord,
    responses={401: {"model": ErrorResponse}},
)
def get_auth_user(
    signer: Annotated[SessionSigner, Depends(get_session_signer)],
    store: Annotated[UserStore, Depends(get_user_store)],
    authorization: Annotated[str | None, Header()] = None,
) -> UserRecord:
    """Return the user the session token belongs to. 401 if the token is bad or the user is gone."""
    user_id = signer.verify(_token_from_header(authorization))
    user = store.find_by_id(user_id)
    if user is None:
        raise AuthError("bad credentials")
    return UserRecord.model_validate(user)
