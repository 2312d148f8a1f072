"""JSON export of decoded repository records."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from adapters.decoding import encode_repositories
from adapters.filesystem import write_whole_file
from core.domain.models import Repository
from core.errors import IoError


def export_repositories_json(*, records: Iterable[Repository], output_path: Path) -> Path:
    """Write `records` as a UTF-8 JSON array, replacing any existing file."""

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise IoError(f"create '{output_path.parent}'", exc.strerror or str(exc)) from exc
    write_whole_file(output_path, encode_repositories(records))
    return output_path
