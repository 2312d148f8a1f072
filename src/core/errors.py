"""Error kinds raised by the I/O steps.

Every step either returns its value or raises one of these. The library never
catches, retries or downgrades them; the outermost caller (the CLI) decides
whether to abort, log or retry.
"""

from __future__ import annotations


class StepError(Exception):
    """Base error for every fallible step.

    `operation` names the step that failed (e.g. "fetch", "read 'hello.txt'")
    so a single diagnostic line is enough to tell what went wrong.
    """

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation
        self.message = message


class TransportError(StepError):
    """The HTTP call could not complete (DNS, refused, TLS, timeout...)."""


class HttpStatusError(StepError):
    """The server answered with an error status."""

    kind = "HTTP error"

    def __init__(self, status_code: int, operation: str = "validate") -> None:
        super().__init__(operation, f"Got {self.kind}: {status_code}")
        self.status_code = status_code


class ClientError(HttpStatusError):
    kind = "client error"


class ServerError(HttpStatusError):
    kind = "server error"


class EncodingError(StepError):
    """Bytes are not valid UTF-8."""


class SchemaError(StepError):
    """Payload does not match the expected record schema."""


class NotFound(StepError):
    pass


class PermissionDenied(StepError):
    pass


class IoError(StepError):
    """Any other OS-level failure (partial write, flush, directory as file...)."""
