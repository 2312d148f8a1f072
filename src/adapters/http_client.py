"""Transport Step on top of httpx.

Notes:
- `build_client` / `build_async_client` standardize timeout and redirect policy
  so every call behaves the same.
- The optional `transport` argument lets tests plug in `httpx.MockTransport`.
- No retries: one call, one connection, closed before `fetch` returns.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from core.config import AppSettings
from core.domain.models import Request, Response
from core.errors import TransportError

logger = logging.getLogger(__name__)

# httpx.InvalidURL does not derive from httpx.HTTPError.
_HTTPX_ERRORS = (httpx.HTTPError, httpx.InvalidURL)


def build_request(
    url: str,
    settings: AppSettings | None = None,
    *,
    headers: dict[str, str] | None = None,
) -> Request:
    """Build a GET `Request` carrying the configured User-Agent.

    An empty `settings.user_agent` leaves the header out. An empty URL or a
    non-ASCII header value raises `TransportError` before anything is sent.
    """

    settings = settings or AppSettings()
    merged: dict[str, str] = {}
    if settings.user_agent:
        merged["User-Agent"] = settings.user_agent
    if headers:
        merged.update(headers)
    try:
        return Request(url=url, headers=merged)
    except ValidationError as exc:
        first = exc.errors()[0]
        raise TransportError(f"GET {url}", f"invalid request ({first['msg']})") from exc


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` with the application defaults."""

    settings = settings or AppSettings()
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=settings.follow_redirects,
        headers=extra_headers or {},
        transport=transport,
    )


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Async twin of `build_client`."""

    settings = settings or AppSettings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=settings.follow_redirects,
        headers=extra_headers or {},
        transport=transport,
    )


def _to_response(resp: httpx.Response) -> Response:
    logger.debug("GET %s -> %s (%d bytes)", resp.url, resp.status_code, len(resp.content))
    return Response(status_code=resp.status_code, body=resp.content, url=str(resp.url))


class HttpTransport:
    """Blocking transport: one `httpx.Client` per call."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def fetch(self, request: Request) -> Response:
        logger.debug("Sending GET %s", request.url)
        try:
            with build_client(self._settings, transport=self._transport) as client:
                resp = client.get(request.url, headers=request.headers)
        except _HTTPX_ERRORS as exc:
            raise TransportError(f"GET {request.url}", f"Couldn't send request ({exc})") from exc
        return _to_response(resp)


class AsyncHttpTransport:
    """Single-future transport: one `httpx.AsyncClient` per awaited call."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def fetch(self, request: Request) -> Response:
        logger.debug("Sending GET %s (async)", request.url)
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                resp = await client.get(request.url, headers=request.headers)
        except _HTTPX_ERRORS as exc:
            raise TransportError(f"GET {request.url}", f"Couldn't send request ({exc})") from exc
        return _to_response(resp)
