"""Allows `python -m drone_client ...`."""

from __future__ import annotations

import sys

# Windows terminals default to cp1252; JSON output may contain any character.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from drone_client.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
