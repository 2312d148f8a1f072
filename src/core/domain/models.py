"""Domain models (Pydantic v2).

Notes:
- These models describe *what* travels between steps, not *how* it is fetched.
- `Request` and `Response` live for a single call; `Repository` is the record
  decoded from a JSON listing.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class Request(BaseModel):
    """An outbound HTTP GET. Immutable once built.

    Headers are stored as a tuple of `(name, value)` pairs; a mapping is
    accepted on input. Values must be ASCII, as HTTP/1.1 headers are sent.
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(
        ...,
        min_length=1,
        description="Absolute URL to GET.",
    )
    headers: tuple[tuple[str, str], ...] = Field(
        default=(),
        description="Request headers as (name, value) pairs.",
    )

    @field_validator("headers", mode="before")
    @classmethod
    def headers_from_mapping(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return tuple(value.items())
        return value

    @field_validator("headers")
    @classmethod
    def headers_must_be_ascii(cls, value: tuple[tuple[str, str], ...]) -> tuple[tuple[str, str], ...]:
        for name, header_value in value:
            if not (name.isascii() and header_value.isascii()):
                raise ValueError(f"header {name!r} must be ASCII")
        return value


class Response(BaseModel):
    """Raw result of the Transport Step, before validation and decoding."""

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(
        ...,
        description="HTTP status code returned by the server.",
    )
    body: bytes = Field(
        default=b"",
        description="Full response body, undecoded.",
    )
    url: str = Field(
        default="",
        description="Final URL of the response (informational).",
    )


class StatusClass(str, Enum):
    """Classification of an HTTP status code."""

    SUCCESS = "success"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    OTHER = "other"


class Repository(BaseModel):
    """One entry of a repository listing.

    Unknown keys from the source are ignored. Types are strict: `name` must be
    a string and `fork` a boolean, no coercion from "true" or 1.
    """

    model_config = ConfigDict(extra="ignore", strict=True, frozen=True)

    name: str = Field(
        ...,
        description="Repository name.",
    )
    description: str | None = Field(
        default=None,
        description="Free-text description; absent or null maps to None.",
    )
    fork: bool = Field(
        ...,
        description="Whether the repository is a fork.",
    )
