"""Factory for the two preconfigured OLX HTTP clients."""

from __future__ import annotations

from typing import Any

import httpx

from core.config import DEFAULT_APP_BASE_URL, DEFAULT_AUTH_BASE_URL

AUTH_BASE_URL = DEFAULT_AUTH_BASE_URL
APP_BASE_URL = DEFAULT_APP_BASE_URL

# The token endpoint only accepts form-encoded bodies
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


def _create_client(base_url: str, content_type: str, timeout: float | None) -> httpx.AsyncClient:
    kwargs: dict[str, Any] = {
        "base_url": base_url,
        "headers": {"Content-Type": content_type},
    }
    # Leave httpx's default timeout in place unless one is configured
    if timeout is not None:
        kwargs["timeout"] = timeout
    return httpx.AsyncClient(**kwargs)


def create_auth_client(
    base_url: str = AUTH_BASE_URL,
    timeout: float | None = None,
) -> httpx.AsyncClient:
    """
    Create the client for the authentication host.

    Args:
        base_url: Authentication host root.
        timeout: Request timeout in seconds, or None for the httpx default.

    Returns:
        An httpx.AsyncClient sending form-encoded requests.
    """
    return _create_client(base_url, FORM_CONTENT_TYPE, timeout)


def create_app_client(
    base_url: str = APP_BASE_URL,
    timeout: float | None = None,
) -> httpx.AsyncClient:
    """
    Create the client for the application host.

    No Authorization header is set: OLX expects the access token inside the
    JSON body of every call.

    Args:
        base_url: Application host root.
        timeout: Request timeout in seconds, or None for the httpx default.

    Returns:
        An httpx.AsyncClient sending JSON requests.
    """
    return _create_client(base_url, JSON_CONTENT_TYPE, timeout)
