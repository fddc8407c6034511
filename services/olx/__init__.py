"""OLX OAuth and autoupload API client package."""

from services.olx.auth import OlxAuthClient
from services.olx.autoupload import AutoUploadClient
from services.olx.errors import (
    ErrorCode,
    OlxError,
    ParseError,
    RemoteError,
    TransportError,
)
from services.olx.http import create_app_client, create_auth_client
from services.olx.types import Ad, AdOperation, ClientCredentials, ImportStatus

__all__ = [
    "Ad",
    "AdOperation",
    "AutoUploadClient",
    "ClientCredentials",
    "ErrorCode",
    "ImportStatus",
    "OlxAuthClient",
    "OlxError",
    "ParseError",
    "RemoteError",
    "TransportError",
    "create_app_client",
    "create_auth_client",
]
