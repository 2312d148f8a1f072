"""Core interfaces.

Protocols implemented by concrete adapters, so the pipelines depend on
abstractions rather than on httpx directly.
"""

from core.interfaces.transport import AsyncTransport, Transport

__all__ = ["AsyncTransport", "Transport"]
