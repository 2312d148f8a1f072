"""Decode Step: bytes -> text, bytes -> repository records.

Decoding is all-or-nothing: either every record validates or `SchemaError`
is raised and nothing is returned.
"""

from __future__ import annotations

import json
import logging
from typing import Iterable

from pydantic import TypeAdapter, ValidationError

from core.domain.models import Repository
from core.errors import EncodingError, SchemaError

logger = logging.getLogger(__name__)

_REPOSITORY_LIST = TypeAdapter(list[Repository])


def _is_encodable(value: str) -> bool:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def decode_text(data: bytes, *, operation: str = "decode text") -> str:
    """Strict UTF-8 decode."""

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise EncodingError(operation, f"invalid UTF-8 at byte {exc.start}") from exc


def decode_repositories(data: bytes) -> list[Repository]:
    """Parse a JSON array of objects into `Repository` records.

    Errors:
    - `EncodingError` if the body is not UTF-8, or a string field decodes to a
      lone surrogate (`"\\ud800"`) that cannot be written back as UTF-8.
    - `SchemaError` for malformed JSON, a non-array payload or any element
      missing `name`/`fork` or carrying the wrong type. Also JSON the parser
      refuses (integers over the digit limit, nesting past the recursion limit).
    """

    text = decode_text(data, operation="decode repositories")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaError("decode repositories", f"Couldn't parse response ({exc.msg})") from exc
    except (ValueError, RecursionError) as exc:
        # Valid JSON the parser still refuses: oversized integers, deep nesting.
        raise SchemaError("decode repositories", f"Couldn't parse response ({exc})") from exc

    if not isinstance(payload, list):
        raise SchemaError(
            "decode repositories",
            f"expected a JSON array, got {type(payload).__name__}",
        )

    try:
        records = _REPOSITORY_LIST.validate_python(payload)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise SchemaError(
            "decode repositories",
            f"{exc.error_count()} invalid field(s), first at [{location}]: {first['msg']}",
        ) from exc

    for index, record in enumerate(records):
        for field in ("name", "description"):
            value = getattr(record, field)
            if value is not None and not _is_encodable(value):
                raise EncodingError(
                    "decode repositories",
                    f"[{index}.{field}] holds a lone surrogate, not valid UTF-8",
                )

    logger.debug("Decoded %d repositories", len(records))
    return records


def encode_repositories(records: Iterable[Repository]) -> bytes:
    """Inverse of `decode_repositories` on the recognized fields."""

    payload = [record.model_dump(mode="json") for record in records]
    return (json.dumps(payload, ensure_ascii=False, indent=2) + "\n").encode("utf-8")
