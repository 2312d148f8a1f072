"""UI components for the CLI (Rich).

Keeps table/panel layout out of the command functions.
"""

from __future__ import annotations

from typing import Iterable

from rich.table import Table

from core.domain.models import Repository


def build_repositories_table(repositories: Iterable[Repository]) -> Table:
    """Rich table for a decoded repository listing."""

    table = Table(title="Repositories")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description", style="white")
    table.add_column("Fork", style="magenta")

    for repo in repositories:
        table.add_row(repo.name, repo.description or "-", "yes" if repo.fork else "no")
    return table
