"""Talk to the Directus REST API: log in and download the OpenAPI spec."""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

LOGIN_PATH = "/auth/login"
SPEC_PATH = "/server/specs/oas"


class AuthenticationError(Exception):
    """Login did not yield an access token."""


def build_url(host: str, path: str) -> str:
    """Join an API path onto the configured host."""
    return host.rstrip("/") + path


def _json_object(response: httpx.Response) -> dict[str, Any]:
    payload = response.json()
    if not isinstance(payload, dict):
        raise ValueError(
            f"Expected a JSON object from {response.request.url}, got {type(payload).__name__}"
        )
    return payload


async def authenticate(
    client: httpx.AsyncClient,
    host: str,
    email: str,
    password: str,
    password_is_static_token: bool = False,
) -> str:
    """Return a bearer token for the API.

    A static token is used as-is; otherwise the email/password pair is
    exchanged at /auth/login.
    """
    if password_is_static_token:
        logger.debug("Using static token, skipping login")
        return password

    url = build_url(host, LOGIN_PATH)
    logger.debug("POST %s", url)
    response = await client.post(
        url,
        json={"email": email, "password": password, "mode": "json"},
    )
    payload = _json_object(response)

    token = (payload.get("data") or {}).get("access_token")
    if not token:
        errors = payload.get("errors") or []
        messages = "; ".join(str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in errors)
        raise AuthenticationError(
            f"Login to {url} failed (status {response.status_code})"
            + (f": {messages}" if messages else "")
        )
    return token


async def fetch_spec(client: httpx.AsyncClient, host: str, token: str) -> dict[str, Any]:
    """Download the OpenAPI document.

    The body is returned whatever the status code so the caller can
    report the server's error list.
    """
    url = build_url(host, SPEC_PATH)
    logger.debug("GET %s", url)
    response = await client.get(url, headers={"Authorization": f"Bearer {token}"})
    return _json_object(response)
