"""Run infocast from a checkout without installing it.

    python -m main info
    python -m main dashboard --output reports/snapshot.json

Puts `src/` on `sys.path` so `cli`, `core` and `adapters` import, then hands
over to the typer app.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
