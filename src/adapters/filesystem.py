"""Filesystem Step: whole-file read and write.

Notes:
- Reads size the buffer from `fstat` and fill it in one call. Fine for small
  fixtures; not meant for large or streaming sources.
- Writes truncate in place. There is no atomic rename, so a crash mid-write
  leaves a truncated file.
- File handles never outlive the call (`with` blocks).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from adapters.decoding import decode_text
from core.errors import IoError, NotFound, PermissionDenied, StepError

logger = logging.getLogger(__name__)


def _os_error(operation: str, exc: OSError) -> StepError:
    reason = exc.strerror or str(exc)
    if isinstance(exc, FileNotFoundError):
        return NotFound(operation, reason)
    if isinstance(exc, PermissionError):
        return PermissionDenied(operation, reason)
    return IoError(operation, reason)


def read_whole_file(path: str | Path, *, as_text: bool = False) -> bytes | str:
    """Read the whole file at `path`; decode as UTF-8 when `as_text`."""

    operation = f"read '{path}'"
    try:
        with open(path, "rb") as fh:
            size = os.fstat(fh.fileno()).st_size
            data = fh.read(size)
    except OSError as exc:
        raise _os_error(operation, exc) from exc

    logger.debug("Read %d bytes from %s", len(data), path)
    if as_text:
        return decode_text(data, operation=operation)
    return data


def write_whole_file(path: str | Path, data: bytes | str) -> int:
    """Create or truncate `path` and write all of `data` (text as UTF-8).

    Returns the number of bytes written.
    """

    operation = f"write '{path}'"
    payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    try:
        with open(path, "wb") as fh:
            written = fh.write(payload)
            fh.flush()
    except OSError as exc:
        raise _os_error(operation, exc) from exc

    if written != len(payload):
        raise IoError(operation, f"partial write ({written} of {len(payload)} bytes)")
    logger.debug("Wrote %d bytes to %s", written, path)
    return written
