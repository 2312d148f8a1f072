"""Typer entry-point.

The CLI is the outermost caller: it is the only place where a `StepError`
turns into a diagnostic line on stderr and a non-zero exit code.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Callable, Optional, TypeVar

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.http_client import AsyncHttpTransport, HttpTransport
from cli import doctor
from cli.ui_components import build_repositories_table
from core.config import AppSettings
from core.errors import StepError
from core.services.pipeline import (
    concat_files,
    export_repositories,
    fetch_repositories,
    fetch_repositories_async,
    fetch_text,
    fetch_text_async,
    read_text,
)

app = typer.Typer(no_args_is_help=True, help="Fetch, decode, read and write: one step at a time.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

T = TypeVar("T")


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


def _settings(user_agent: str | None = None) -> AppSettings:
    settings = AppSettings()
    if user_agent is not None:
        settings = settings.model_copy(update={"user_agent": user_agent})
    return settings


def _run_step(func: Callable[[], T]) -> T:
    """Run a pipeline; report any `StepError` and abort with exit code 1."""

    try:
        return func()
    except StepError as exc:
        _err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False, soft_wrap=True)
        raise typer.Exit(code=1) from exc


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    configure_logging(verbose)


@app.command()
def fetch(
    url: Optional[str] = typer.Argument(None, help="URL to GET (default: settings.user_url)."),
    use_async: bool = typer.Option(False, "--async", help="Use the single-future async transport."),
    user_agent: Optional[str] = typer.Option(None, "--user-agent", help="Override the User-Agent ('' disables it)."),
) -> None:
    """GET a URL and print the response body."""

    settings = _settings(user_agent)
    target = url or settings.user_url

    if use_async:
        result = _run_step(
            lambda: asyncio.run(fetch_text_async(target, transport=AsyncHttpTransport(settings), settings=settings))
        )
    else:
        result = _run_step(lambda: fetch_text(target, transport=HttpTransport(settings), settings=settings))

    _console.print(f"Response: {result.text}", markup=False, highlight=False, soft_wrap=True)


@app.command()
def repos(
    url: Optional[str] = typer.Argument(None, help="Repository listing URL (default: settings.repos_url)."),
    use_async: bool = typer.Option(False, "--async", help="Use the single-future async transport."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also export the records as JSON."),
) -> None:
    """GET a JSON repository listing and print the decoded records."""

    settings = _settings()
    target = url or settings.repos_url

    if use_async:
        result = _run_step(
            lambda: asyncio.run(
                fetch_repositories_async(target, transport=AsyncHttpTransport(settings), settings=settings)
            )
        )
    else:
        result = _run_step(lambda: fetch_repositories(target, transport=HttpTransport(settings), settings=settings))

    _console.print(build_repositories_table(result.repositories))

    if output is not None:
        path = _run_step(lambda: export_repositories(result.repositories, output))
        _console.print(f"[green]Exported JSON:[/green] {escape(str(path))}", soft_wrap=True)


@app.command()
def read(
    path: Optional[Path] = typer.Argument(None, help="File to read (default: settings.hello_path)."),
) -> None:
    """Read a UTF-8 text file and print it."""

    target = path or _settings().hello_path
    data = _run_step(lambda: read_text(target))
    _console.print(f"Content is: {data}", markup=False, highlight=False, soft_wrap=True)


@app.command()
def concat(
    first: Optional[Path] = typer.Argument(None, help="First file (default: hello.txt)."),
    second: Optional[Path] = typer.Argument(None, help="Second file (default: world.txt)."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file (default: hello-world.txt)."),
) -> None:
    """Write "<first> <second>!" to the output file."""

    settings = _settings()
    result = _run_step(
        lambda: concat_files(
            first or settings.hello_path,
            second or settings.world_path,
            output or settings.output_path,
        )
    )
    _console.print(
        f"Wrote file '{result.output_path}' with content: {result.content}",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def run() -> None:
    app()
