"""Sequential I/O pipelines.

Each function composes a few steps strictly in order and lets the first
`StepError` propagate. Nothing here prints or exits; the CLI (or any other
entry-point) decides how to report a failure.

Order is always fetch -> validate -> decode, so an error status never reaches
the decoder.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, cast

from adapters.decoding import decode_repositories, decode_text
from adapters.filesystem import read_whole_file, write_whole_file
from adapters.http_client import build_request
from adapters.json_exporter import export_repositories_json
from core.config import AppSettings
from core.domain.models import Repository, Response
from core.domain.status import validate_response
from core.interfaces.transport import AsyncTransport, Transport

logger = logging.getLogger(__name__)


@dataclass
class TextResult:
    """Output of `fetch_text`."""

    response: Response
    text: str


@dataclass
class RepositoriesResult:
    """Output of `fetch_repositories`."""

    response: Response
    repositories: list[Repository]


@dataclass
class ConcatResult:
    """Output of `concat_files`."""

    output_path: Path
    content: str
    bytes_written: int


def fetch_text(url: str, *, transport: Transport, settings: AppSettings | None = None) -> TextResult:
    response = validate_response(transport.fetch(build_request(url, settings)))
    return TextResult(response=response, text=decode_text(response.body))


async def fetch_text_async(
    url: str,
    *,
    transport: AsyncTransport,
    settings: AppSettings | None = None,
) -> TextResult:
    response = validate_response(await transport.fetch(build_request(url, settings)))
    return TextResult(response=response, text=decode_text(response.body))


def fetch_repositories(
    url: str,
    *,
    transport: Transport,
    settings: AppSettings | None = None,
) -> RepositoriesResult:
    """GET a repository listing, check the status, decode the records."""

    response = validate_response(transport.fetch(build_request(url, settings)))
    return RepositoriesResult(response=response, repositories=decode_repositories(response.body))


async def fetch_repositories_async(
    url: str,
    *,
    transport: AsyncTransport,
    settings: AppSettings | None = None,
) -> RepositoriesResult:
    response = validate_response(await transport.fetch(build_request(url, settings)))
    return RepositoriesResult(response=response, repositories=decode_repositories(response.body))


def read_text(path: str | Path) -> str:
    return cast(str, read_whole_file(path, as_text=True))


def concat_files(first: str | Path, second: str | Path, output: str | Path) -> ConcatResult:
    """Read two text files and write `"{first} {second}!"` to `output`.

    Aborts on the first failing read; the output is only touched once both
    inputs were read.
    """

    hello = read_text(first)
    world = read_text(second)
    content = f"{hello} {world}!"
    written = write_whole_file(output, content)
    logger.info("Wrote %s (%d bytes)", output, written)
    return ConcatResult(output_path=Path(output), content=content, bytes_written=written)


def export_repositories(records: Iterable[Repository], output: str | Path) -> Path:
    return export_repositories_json(records=records, output_path=Path(output))
