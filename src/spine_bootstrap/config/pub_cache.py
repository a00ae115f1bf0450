"""Location of executables installed with ``pub global activate``."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from pathlib import Path


def is_windows(platform: str | None = None) -> bool:
    return (platform if platform is not None else sys.platform).startswith("win")


def pub_cache_bin(
    *,
    environ: Mapping[str, str] | None = None,
    platform: str | None = None,
    home: Path | None = None,
) -> Path:
    """Return the Pub cache ``bin`` directory of the current user.

    ``%LOCALAPPDATA%/Pub/Cache/bin`` on Windows, ``~/.pub-cache/bin`` elsewhere.
    """
    if is_windows(platform):
        env = os.environ if environ is None else environ
        return Path(env.get("LOCALAPPDATA", "")) / "Pub" / "Cache" / "bin"
    return (home if home is not None else Path.home()) / ".pub-cache" / "bin"


__all__ = ["is_windows", "pub_cache_bin"]
