"""
Pytest configuration and fixtures for the test suite.

This module contains shared fixtures used across all tests.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from core.config import get_settings

type Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it handled."""

    def __init__(self, handler: Handler) -> None:
        """Wrap the handler so requests are recorded before it runs."""
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


def json_handler(status_code: int = 200, body: Any = None) -> Handler:
    """Return a handler answering every request with the same JSON body."""

    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=body)

    return handler


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> None:
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()


@pytest.fixture()
def make_transport() -> Callable[[Handler], RecordingTransport]:
    """Return a factory for recording mock transports."""
    return RecordingTransport


@pytest.fixture()
def respond_json() -> Callable[..., Handler]:
    """Return a factory for fixed JSON handlers."""
    return json_handler
