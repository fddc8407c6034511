"""Issue one OLX request and normalize its outcome into a Result."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from core.logging import get_logger
from core.result import Result, failure, success
from services.olx.errors import OlxError, RemoteError, TransportError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = get_logger(__name__)


def _decode_body(response: httpx.Response) -> Any:
    """Return the JSON body, the raw text when it is not JSON, or None when empty."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def normalize_response(response: httpx.Response) -> Result[Any, OlxError]:
    """
    Turn an httpx response into a Result.

    2xx responses yield their body: the JSON value, the raw text when it is
    not JSON, or None when empty. Error responses yield the remote error
    body when there is one, otherwise the raw ``httpx.HTTPStatusError``.

    Args:
        response: Response received from OLX.

    Returns:
        Result containing the response body or OlxError.
    """
    body = _decode_body(response)
    if response.is_success:
        return success(body)

    logger.warning(
        "OLX API error",
        url=str(response.url),
        status_code=response.status_code,
        has_body=body is not None,
    )
    if body is not None:
        return failure(RemoteError(body=body, status_code=response.status_code))

    error = httpx.HTTPStatusError(
        f"HTTP {response.status_code} {response.reason_phrase} for url '{response.url}'",
        request=response.request,
        response=response,
    )
    return failure(TransportError(error, status_code=response.status_code))


async def send_request(
    client: httpx.AsyncClient,
    method: str,
    path: str,
    *,
    json: Mapping[str, Any] | None = None,
    data: Mapping[str, Any] | None = None,
) -> Result[Any, OlxError]:
    """
    Send exactly one request and normalize the outcome.

    Nothing is retried. Transport failures (DNS, connection, timeout) are
    returned with the raw httpx exception in ``OlxError.cause``.

    Args:
        client: Preconfigured OLX client (auth or app host).
        method: HTTP method.
        path: Path relative to the client's base URL.
        json: JSON body.
        data: Form body.

    Returns:
        Result containing the decoded response body or OlxError.
    """
    logger.debug("Sending OLX request", host=str(client.base_url), method=method, path=path)

    try:
        response = await client.request(method, path, json=json, data=data)
    except httpx.RequestError as e:
        logger.error(
            "OLX request failed",
            host=str(client.base_url),
            method=method,
            path=path,
            error=str(e),
            error_type=type(e).__name__,
        )
        return failure(TransportError(e))

    return normalize_response(response)
