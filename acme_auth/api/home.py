"""Landing page."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from acme_auth.api.deps import get_app_settings
from acme_auth.core.config import Settings
from acme_auth.pages import render_index

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def index(settings: Annotated[Settings, Depends(get_app_settings)]) -> HTMLResponse:
    """Render the landing page with the GitHub client id for the login link."""
    return HTMLResponse(render_index(settings.GITHUB_CLIENT_ID, settings.GITHUB_OAUTH_URL))
