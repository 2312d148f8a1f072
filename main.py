"""Development entry point: `python -m main <command>` without installing."""

from __future__ import annotations

import sys
from pathlib import Path

if __name__ == "__main__":
    sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

    from cli.main import run  # noqa: E402

    run()
