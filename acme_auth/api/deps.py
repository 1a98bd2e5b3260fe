"""Request-scoped dependencies: settings, store, signer and GitHub client."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from acme_auth.core.config import Settings
from acme_auth.core.database import get_db
from acme_auth.core.security import SessionSigner
from acme_auth.services.github import GitHubClient
from acme_auth.services.users import UserStore


def get_app_settings(request: Request) -> Settings:
    """Settings the app was created with."""
    return request.app.state.settings


def get_user_store(db: Annotated[Session, Depends(get_db)]) -> UserStore:
    return UserStore(db)


def get_session_signer(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> SessionSigner:
    return SessionSigner(settings)


def get_github_client(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> GitHubClient:
    return GitHubClient(settings)
