"""Doctor command for environment diagnostics."""

from __future__ import annotations

import uuid
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from adapters.filesystem import read_whole_file, write_whole_file
from adapters.http_client import HttpTransport, build_request
from core.config import AppSettings, get_user_env_file
from core.errors import StepError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    # Cap the probe when no timeout is configured.
    if settings.http_timeout_seconds is None:
        settings = settings.model_copy(update={"http_timeout_seconds": 10.0})
    try:
        response = HttpTransport(settings).fetch(build_request(url, settings))
    except StepError as exc:
        return False, str(exc)
    return True, f"HTTP {response.status_code}"


def _check_write(directory: Path) -> tuple[bool, str]:
    """Round-trip a small file in `directory` to detect permission issues."""

    probe = directory / f".stepwise-doctor-{uuid.uuid4().hex}"
    payload = b"doctor"
    try:
        write_whole_file(probe, payload)
        ok = read_whole_file(probe) == payload
    except StepError as exc:
        return False, str(exc)
    finally:
        probe.unlink(missing_ok=True)
    return ok, "OK" if ok else "read-back mismatch"


@app.command()
def run() -> None:
    """Run baseline diagnostics."""

    settings = AppSettings()

    table = Table(title="stepwise-io Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("User-Agent", "OK" if settings.user_agent else "NONE", settings.user_agent or "header disabled")
    timeout = settings.http_timeout_seconds
    table.add_row("HTTP timeout", "OK", f"{timeout}s" if timeout else "none (blocks indefinitely)")
    env_file = get_user_env_file()
    table.add_row("User .env", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    ok_http, detail_http = _check_http(settings.user_url, settings)
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    ok_fs, detail_fs = _check_write(Path.cwd())
    table.add_row("Working dir writable", "OK" if ok_fs else "FAIL", detail_fs)

    _console.print(table)
