"""GitHub OAuth client: exchange an authorization code and fetch the signed-in profile."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from acme_auth.core.errors import AppError, AuthError

if TYPE_CHECKING:
    from acme_auth.core.config import Settings

logger = logging.getLogger(__name__)

LOGIN_FIELD = "login"


def _json_object(resp: httpx.Response) -> dict[str, Any]:
    """Decode a JSON object body; non-JSON error responses raise httpx.HTTPStatusError."""
    try:
        data = resp.json()
    except ValueError:
        resp.raise_for_status()
        raise
    if not isinstance(data, dict):
        raise AppError(f"Expected a JSON object from GitHub, got {type(data).__name__}")
    return data


def split_profile(profile: dict[str, Any]) -> tuple[str, dict[str, Any]]:
    """Split a GitHub profile into (login, remaining attributes)."""
    rest = dict(profile)
    login = rest.pop(LOGIN_FIELD, None)
    if not login or not isinstance(login, str):
        raise AuthError("GitHub profile is missing login")
    return login, rest


class GitHubClient:
    """
    Two outbound calls per sign-in: code exchange, then profile fetch.

    No retries. Transport failures and unexpected HTTP statuses propagate as
    httpx errors; only errors GitHub reports in the exchange body become AuthError.
    """

    def __init__(self, settings: Settings) -> None:
        self._client_id = settings.GITHUB_CLIENT_ID
        self._client_secret = settings.GITHUB_CLIENT_SECRET.get_secret_value()
        self._oauth_url = settings.GITHUB_OAUTH_URL.rstrip("/")
        self._api_url = settings.GITHUB_API_URL.rstrip("/")
        self._timeout = httpx.Timeout(settings.GITHUB_REQUEST_TIMEOUT_SEC)

    async def exchange_code(self, code: str) -> str:
        """Exchange an authorization code for an access token. Raises AuthError if GitHub reports an error."""
        url = f"{self._oauth_url}/login/oauth/access_token"
        payload = {
            "code": code,
            "client_id": self._client_id,
            "client_secret": self._client_secret,
        }
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            resp = await client.post(
                url,
                json=payload,
                headers={"Accept": "application/json"},
            )
        data = _json_object(resp)
        error = data.get("error")
        if error:
            logger.warning(
                "GitHub code exchange rejected",
                extra={
                    "oauth_error": str(error),
                    "status_code": resp.status_code,
                },
            )
            raise AuthError(str(error))
        resp.raise_for_status()
        access_token = data.get("access_token")
        if not access_token:
            raise AuthError("GitHub response missing access_token")
        return str(access_token)

    async def fetch_profile(self, access_token: str) -> dict[str, Any]:
        """Fetch the authenticated user's profile using the access token."""
        url = f"{self._api_url}/user"
        headers = {
            "Authorization": f"token {access_token}",
            "Accept": "application/vnd.github+json",
        }
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            resp = await client.get(url, headers=headers)
        resp.raise_for_status()
        profile = _json_object(resp)
        if not profile.get(LOGIN_FIELD):
            raise AuthError("GitHub profile is missing login")
        return profile
