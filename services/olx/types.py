"""Request and response shapes for the OLX API."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Literal, TypedDict

if TYPE_CHECKING:
    from collections.abc import Iterable

# A listing as the OLX import API defines it (subject, price, category,
# images, ...). The schema belongs to OLX, so it is kept as an open mapping.
type Ad = dict[str, Any]


class AdOperation(TypedDict):
    """An import entry that removes a published ad."""

    id: str
    operation: Literal["delete"]


@dataclass(frozen=True, slots=True)
class ClientCredentials:
    """
    OAuth credentials of an OLX application.

    Stored verbatim; OLX rejects bad values when they are first used.

    Attributes:
        client_id: OAuth client ID.
        client_secret: OAuth client secret.
        redirect_uri: Redirect URI registered for the application.
    """

    client_id: str
    client_secret: str
    redirect_uri: str

    def __repr__(self) -> str:
        """Hide the secret."""
        return (
            f"ClientCredentials(client_id={self.client_id!r}, "
            f"client_secret='***', redirect_uri={self.redirect_uri!r})"
        )


class ImportStatus(str, Enum):
    """Status of an ad import, as reported by ``/autoupload/import/{token}``."""

    PENDING = "pending"
    ERROR = "error"
    QUEUED = "queued"
    ACCEPTED = "accepted"
    REFUSED = "refused"

    @property
    def is_final(self) -> bool:
        """Check if OLX has finished processing the import."""
        return self in {ImportStatus.ERROR, ImportStatus.ACCEPTED, ImportStatus.REFUSED}


def build_delete_operations(ad_ids: Iterable[str]) -> list[AdOperation]:
    """Build one delete entry per ad id, keeping the given order."""
    return [{"id": ad_id, "operation": "delete"} for ad_id in ad_ids]


def build_catalog_path(
    base_path: str,
    brand_id: int | str | None = None,
    model_id: int | str | None = None,
) -> str:
    """
    Build a vehicle catalog path.

    Filters are hierarchical: ``model_id`` only narrows a brand, so it is
    ignored when ``brand_id`` is falsy.

    Args:
        base_path: Catalog root, e.g. ``/autoupload/car_info``.
        brand_id: Optional brand filter.
        model_id: Optional model filter.

    Returns:
        The path with the filters appended.
    """
    if not brand_id:
        return base_path
    if not model_id:
        return f"{base_path}/{brand_id}"
    return f"{base_path}/{brand_id}/{model_id}"
