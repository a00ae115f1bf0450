"""Module entrypoint for ``python -m spine_bootstrap``."""

from __future__ import annotations

from spine_bootstrap.main import cli_entrypoint

if __name__ == "__main__":
    raise SystemExit(cli_entrypoint())
