"""OAuth side of the OLX API: authorization URL and token exchange."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from core.logging import get_logger
from core.result import Result, failure, success
from services.olx.errors import OlxError, ParseError
from services.olx.http import AUTH_BASE_URL, create_auth_client
from services.olx.transport import send_request
from services.olx.types import ClientCredentials

if TYPE_CHECKING:
    from types import TracebackType

    import httpx

    from core.config import Settings

logger = get_logger(__name__)

BASE_SCOPE = "basic_user_info"
AUTOUPLOAD_SCOPE = "autoupload"
TOKEN_PATH = "/oauth/token"
AUTHORIZE_PATH = "/oauth"


class OlxAuthClient:
    """
    Client for the OLX authentication host.

    Holds the application's OAuth credentials and exposes the two operations
    that need them. Everything done with the resulting access token lives in
    ``AutoUploadClient``.

    Attributes:
        auth_base_url: Root of the authentication host.
        timeout: Request timeout in seconds, or None for the httpx default.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        *,
        auth_base_url: str = AUTH_BASE_URL,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the client.

        Credentials are stored as given; nothing is validated.

        Args:
            client_id: OAuth client ID.
            client_secret: OAuth client secret.
            redirect_uri: Redirect URI registered with OLX.
            auth_base_url: Root of the authentication host.
            timeout: Request timeout in seconds.
            http_client: Client to use instead of a lazily created one.
                It is left open by ``close``.
        """
        self._credentials = ClientCredentials(client_id, client_secret, redirect_uri)
        self.auth_base_url = auth_base_url.rstrip("/")
        self.timeout = timeout
        self._client = http_client
        self._owns_client = http_client is None

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        """Build a client from ``OLX_*`` settings."""
        olx = settings.olx
        return cls(
            olx.client_id,
            olx.client_secret.get_secret_value(),
            olx.redirect_uri,
            auth_base_url=olx.auth_base_url,
            timeout=olx.timeout,
        )

    @property
    def credentials(self) -> ClientCredentials:
        """Return the OAuth credentials."""
        return self._credentials

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or (self._owns_client and self._client.is_closed):
            self._client = create_auth_client(self.auth_base_url, self.timeout)
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this object created it."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    def get_auth_url(self, autoupload: bool = True, state: str | None = None) -> str:
        """
        Build the URL that sends a user to OLX to grant access.

        Values are interpolated as given, without percent-encoding. Callers
        passing reserved characters in ``redirect_uri`` or ``state`` must
        encode them first.

        Args:
            autoupload: Also request the ``autoupload`` scope.
            state: Opaque value OLX echoes back to the redirect URI.

        Returns:
            The authorization URL.
        """
        scope = BASE_SCOPE
        if autoupload:
            scope += f"%20{AUTOUPLOAD_SCOPE}"

        creds = self._credentials
        query = (
            f"response_type=code&client_id={creds.client_id}"
            f"&redirect_uri={creds.redirect_uri}&scope={scope}"
        )
        if state:
            query += f"&state={state}"

        return f"{self.auth_base_url}{AUTHORIZE_PATH}?{query}"

    async def exchange_code(self, code: str) -> Result[dict[str, Any], OlxError]:
        """
        Exchange an authorization code for the full token payload.

        Args:
            code: Code OLX appended to the redirect URI.

        Returns:
            Result containing the token response body or OlxError.
        """
        creds = self._credentials
        form = {
            "code": code,
            "client_id": creds.client_id,
            "client_secret": creds.client_secret,
            "redirect_uri": creds.redirect_uri,
            "grant_type": "authorization_code",
        }

        logger.info("Exchanging OLX authorization code", client_id=creds.client_id)

        client = await self._get_client()
        return await send_request(client, "POST", TOKEN_PATH, data=form)

    async def get_token(self, code: str) -> Result[str, OlxError]:
        """
        Exchange an authorization code for an access token.

        Args:
            code: Code OLX appended to the redirect URI.

        Returns:
            Result containing the access token or OlxError.
        """
        result = await self.exchange_code(code)
        return result.and_then(_extract_access_token)


def _extract_access_token(payload: Any) -> Result[str, OlxError]:
    if isinstance(payload, dict) and payload.get("access_token"):
        return success(payload["access_token"])

    logger.error("OLX token response has no access_token")
    return failure(ParseError(message="Token response has no access_token", body=payload))
