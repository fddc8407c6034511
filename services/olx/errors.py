"""Error types for OLX API calls."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Kinds of OLX API failures."""

    REMOTE = "remote"
    TRANSPORT = "transport"
    PARSE = "parse"


@dataclass(frozen=True, slots=True)
class OlxError:
    """
    Normalized failure of an OLX API call.

    A remote error carries the error body the OLX service returned (its own
    error code and field-level messages). A transport error carries the raw
    httpx exception in ``cause``.

    Attributes:
        code: Kind of failure.
        message: Human-readable summary.
        status_code: HTTP status, when a response was received.
        body: Decoded error body returned by the remote service.
        cause: Underlying exception, when there is one.
    """

    code: ErrorCode
    message: str
    status_code: int | None = None
    body: Any = None
    cause: Exception | None = None

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.status_code is not None:
            return f"{self.code.value} ({self.status_code}): {self.message}"
        return f"{self.code.value}: {self.message}"

    @property
    def has_remote_body(self) -> bool:
        """Check if the remote service returned an error body."""
        return self.code == ErrorCode.REMOTE and self.body is not None

    @property
    def is_transport_error(self) -> bool:
        """Check if the failure happened below the API (network, DNS, timeout)."""
        return self.code == ErrorCode.TRANSPORT


def RemoteError(
    body: Any,
    status_code: int,
    message: str = "OLX API returned an error",
) -> OlxError:
    """Create an error wrapping the remote service's error body."""
    return OlxError(
        code=ErrorCode.REMOTE,
        message=message,
        status_code=status_code,
        body=body,
    )


def TransportError(
    cause: Exception,
    message: str | None = None,
    status_code: int | None = None,
) -> OlxError:
    """Create an error wrapping a raw httpx exception."""
    return OlxError(
        code=ErrorCode.TRANSPORT,
        message=message or str(cause) or type(cause).__name__,
        status_code=status_code,
        cause=cause,
    )


def ParseError(
    message: str = "Failed to parse response",
    status_code: int | None = None,
    body: Any = None,
    cause: Exception | None = None,
) -> OlxError:
    """Create an error for a successful response with an unusable body."""
    return OlxError(
        code=ErrorCode.PARSE,
        message=message,
        status_code=status_code,
        body=body,
        cause=cause,
    )
