"""Transport contracts.

Design rules:
- `fetch` performs exactly one GET and returns the raw `Response`; it does not
  look at the status code.
- Failures to complete the call raise `core.errors.TransportError`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Request, Response


@runtime_checkable
class Transport(Protocol):
    """Blocking transport."""

    def fetch(self, request: Request) -> Response:
        """Send `request` and return the full response."""

        ...


@runtime_checkable
class AsyncTransport(Protocol):
    """Single-future transport: one awaited request at a time."""

    async def fetch(self, request: Request) -> Response:
        """Send `request` and return the full response."""

        ...
