"""Token-scoped OLX operations: ads, imports and vehicle catalogs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from core.logging import get_logger
from services.olx.http import APP_BASE_URL, create_app_client
from services.olx.transport import send_request
from services.olx.types import build_catalog_path, build_delete_operations

if TYPE_CHECKING:
    from collections.abc import Iterable
    from types import TracebackType

    import httpx

    from core.config import Settings
    from core.result import Result
    from services.olx.errors import OlxError
    from services.olx.types import Ad, AdOperation

logger = get_logger(__name__)

PUBLISHED_PATH = "/autoupload/published"
BASIC_USER_INFO_PATH = "/oauth_api/basic_user_info"
IMPORT_PATH = "/autoupload/import"
CAR_INFO_PATH = "/autoupload/car_info"
MOTO_INFO_PATH = "/autoupload/moto_info"
MOTO_DISPLACEMENTS_PATH = "/autoupload/moto_cubiccms_info"


class AutoUploadClient:
    """
    Client for the OLX application host.

    Holds no credentials: every method takes the user's access token, which
    OLX expects inside the JSON body rather than in an Authorization header.
    Methods can be awaited concurrently on the same instance.

    Attributes:
        app_base_url: Root of the application host.
        timeout: Request timeout in seconds, or None for the httpx default.
    """

    def __init__(
        self,
        *,
        app_base_url: str = APP_BASE_URL,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            app_base_url: Root of the application host.
            timeout: Request timeout in seconds.
            http_client: Client to use instead of a lazily created one.
                It is left open by ``close``.
        """
        self.app_base_url = app_base_url.rstrip("/")
        self.timeout = timeout
        self._client = http_client
        self._owns_client = http_client is None

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        """Build a client from ``OLX_*`` settings."""
        return cls(app_base_url=settings.olx.app_base_url, timeout=settings.olx.timeout)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or (self._owns_client and self._client.is_closed):
            self._client = create_app_client(self.app_base_url, self.timeout)
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

    async def _post(self, path: str, access_token: str) -> Result[Any, OlxError]:
        client = await self._get_client()
        return await send_request(client, "POST", path, json={"access_token": access_token})

    async def _import(
        self,
        access_token: str,
        ad_list: list[Ad] | list[AdOperation],
    ) -> Result[Any, OlxError]:
        client = await self._get_client()
        return await send_request(
            client,
            "PUT",
            IMPORT_PATH,
            json={"access_token": access_token, "ad_list": ad_list},
        )

    async def get_published_ads(self, access_token: str) -> Result[Any, OlxError]:
        """
        List the user's active ads.

        Args:
            access_token: User access token.

        Returns:
            Result containing the list of ads or OlxError.
        """
        return await self._post(PUBLISHED_PATH, access_token)

    async def get_basic_user_info(self, access_token: str) -> Result[Any, OlxError]:
        """
        Get the user's name and email.

        Args:
            access_token: User access token.

        Returns:
            Result containing the user info or OlxError.
        """
        return await self._post(BASIC_USER_INFO_PATH, access_token)

    async def publish_ads(self, access_token: str, ads: Iterable[Ad]) -> Result[Any, OlxError]:
        """
        Create or update ads.

        Ads are sent unmodified; OLX validates them and reports problems in
        the import status.

        Args:
            access_token: User access token.
            ads: Ads in the OLX import format.

        Returns:
            Result containing the import response (with a tracking token when
            accepted) or OlxError.
        """
        ad_list = list(ads)
        logger.info("Publishing OLX ads", count=len(ad_list))
        return await self._import(access_token, ad_list)

    async def delete_ads(self, access_token: str, ad_ids: Iterable[str]) -> Result[Any, OlxError]:
        """
        Delete ads through the import endpoint.

        Args:
            access_token: User access token.
            ad_ids: Ids of the ads to delete.

        Returns:
            Result containing the import response or OlxError.
        """
        operations = build_delete_operations(ad_ids)
        logger.info("Deleting OLX ads", count=len(operations))
        return await self._import(access_token, operations)

    async def get_import_status(
        self,
        access_token: str,
        import_token: str,
    ) -> Result[Any, OlxError]:
        """
        Get the status of an import.

        The ``status`` field of the response is one of the ``ImportStatus``
        values.

        Args:
            access_token: User access token.
            import_token: Tracking token returned by ``publish_ads`` or
                ``delete_ads``.

        Returns:
            Result containing the import status or OlxError.
        """
        return await self._post(f"{IMPORT_PATH}/{import_token}", access_token)

    async def get_car_catalog(
        self,
        access_token: str,
        brand_id: int | str | None = None,
        model_id: int | str | None = None,
    ) -> Result[Any, OlxError]:
        """
        Get car brands, models of a brand, or versions of a model.

        Args:
            access_token: User access token.
            brand_id: Restrict to one brand.
            model_id: Restrict to one model of ``brand_id``; ignored without it.

        Returns:
            Result containing the catalog or OlxError.
        """
        return await self._post(build_catalog_path(CAR_INFO_PATH, brand_id, model_id), access_token)

    async def get_moto_catalog(
        self,
        access_token: str,
        brand_id: int | str | None = None,
        model_id: int | str | None = None,
    ) -> Result[Any, OlxError]:
        """
        Get motorcycle brands, models of a brand, or versions of a model.

        Args:
            access_token: User access token.
            brand_id: Restrict to one brand.
            model_id: Restrict to one model of ``brand_id``; ignored without it.

        Returns:
            Result containing the catalog or OlxError.
        """
        return await self._post(
            build_catalog_path(MOTO_INFO_PATH, brand_id, model_id), access_token
        )

    async def get_moto_displacements(self, access_token: str) -> Result[Any, OlxError]:
        """Get the list of motorcycle engine displacements."""
        return await self._post(MOTO_DISPLACEMENTS_PATH, access_token)
