"""Module entrypoint for ``python -m slimconf``."""

from __future__ import annotations

from slimconf.main import cli_entrypoint

if __name__ == "__main__":
    raise SystemExit(cli_entrypoint())
