"""Shared test fixtures."""

import json
from typing import Callable

import httpx
import pytest

from adapters.http_client import AsyncHttpTransport, HttpTransport
from core.config import AppSettings

Handler = Callable[[httpx.Request], httpx.Response]


def json_response(status_code: int, payload: object) -> Handler:
    """Handler answering every request with `payload` as JSON."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=json.dumps(payload).encode("utf-8"))

    return handler


def raw_response(status_code: int, body: bytes) -> Handler:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=body)

    return handler


@pytest.fixture
def settings() -> AppSettings:
    """Settings with defaults only (no .env files)."""
    return AppSettings(_env_file=None)


@pytest.fixture
def make_transport(settings: AppSettings) -> Callable[[Handler], HttpTransport]:
    def factory(handler: Handler) -> HttpTransport:
        return HttpTransport(settings, transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture
def make_async_transport(settings: AppSettings) -> Callable[[Handler], AsyncHttpTransport]:
    def factory(handler: Handler) -> AsyncHttpTransport:
        return AsyncHttpTransport(settings, transport=httpx.MockTransport(handler))

    return factory
