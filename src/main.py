"""Run script.

Why it exists:
- Lets the CLI run with `python -m main` from `src/` during development.
- Keeps a simple entrypoint next to the installed `infocast` script.
"""

from __future__ import annotations

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
