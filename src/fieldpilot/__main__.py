"""Module entrypoint for ``python -m fieldpilot``."""

from fieldpilot.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
