"""GitHub OAuth callback: sign the user in and hand the session token to the browser."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from acme_auth.api.deps import get_github_client, get_session_signer, get_user_store
from acme_auth.core.errors import AuthError
from acme_auth.core.security import SessionSigner
from acme_auth.pages import render_callback
from acme_auth.schemas.auth import ErrorResponse
from acme_auth.services.github import GitHubClient, split_profile
from acme_auth.services.users import UserStore

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "/callback",
    response_class=HTMLResponse,
    responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def oauth_callback(
    github: Annotated[GitHubClient, Depends(get_github_client)],
    store: Annotated[UserStore, Depends(get_user_store)],
    signer: Annotated[SessionSigner, Depends(get_session_signer)],
    code: str | None = None,
) -> HTMLResponse:
    """
    Exchange the authorization code, fetch the GitHub profile, create or update
    the user, and respond with a page that stores the session token and
    redirects to /.
    """
    if not code:
        raise AuthError("missing authorization code")

    access_token = await github.exchange_code(code)
    profile = await github.fetch_profile(access_token)
    login, attributes = split_profile(profile)

    user, created = store.upsert(login, attributes)
    token = signer.sign(user.id)
    logger.info(
        "User signed in",
        extra={"username": login, "user_id": str(user.id), "created": created},
    )
    return HTMLResponse(render_callback(token))
