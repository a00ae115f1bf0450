"""
spine-bootstrap - Dart code generator invocation.

File: src/spine_bootstrap/tools/dart_code_gen.py

Purpose
- Run ``dart_code_gen`` from the Pub cache to turn a descriptor set into a
  ``types.dart`` registry of known types.

Functional requirements
- A missing descriptor set makes the run a silent no-op.
- The tool inherits the standard streams of the build and is awaited.
- A non-zero exit raises :class:`DartCodeGenError` naming the command and
  exit code; failing to start or timing out chains the cause.
- A missing tool binary is only a warning until the tool is actually run.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Final, Protocol

import structlog

from spine_bootstrap.config.pub_cache import is_windows, pub_cache_bin
from spine_bootstrap.errors import DartCodeGenError

TOOL_NAME: Final[str] = "dart_code_gen"
TYPES_FILE: Final[str] = "types.dart"
STANDARD_TYPES: Final[str] = "spine_client"
IMPORT_PREFIX: Final[str] = "."


class ProcessRunner(Protocol):
    """Injectable process runner used for deterministic/offline testing."""

    def run(self, command: Sequence[str], *, timeout_seconds: float | None) -> int: ...


class SubprocessProcessRunner:
    """Runs a command with inherited standard streams and returns its exit code."""

    def run(self, command: Sequence[str], *, timeout_seconds: float | None) -> int:
        completed = subprocess.run(list(command), check=False, timeout=timeout_seconds)
        return completed.returncode


def tool_file_name(platform: str | None = None) -> str:
    return TOOL_NAME + (".bat" if is_windows(platform) else "")


def default_tool_path() -> Path:
    return pub_cache_bin() / tool_file_name()


class DartCodeGen:
    """The ``dart_code_gen`` command line tool."""

    def __init__(
        self,
        tool_path: Path | None = None,
        *,
        runner: ProcessRunner | None = None,
        timeout_seconds: float | None = None,
        logger: Any | None = None,
    ) -> None:
        self._tool_path = Path(tool_path) if tool_path is not None else default_tool_path()
        self._runner = runner or SubprocessProcessRunner()
        self._timeout_seconds = timeout_seconds
        self._logger = logger if logger is not None else structlog.get_logger(__name__)

    @property
    def tool_path(self) -> Path:
        return self._tool_path

    def warn_if_missing(self) -> bool:
        """Log an installation hint when the tool is absent; return whether it exists."""
        if self._tool_path.exists():
            return True
        self._logger.warning(
            f"Cannot locate `{TOOL_NAME}` under `{self._tool_path}`. "
            f"To install, run `pub global activate {TOOL_NAME}`.",
            tool_path=str(self._tool_path),
        )
        return False

    def command(self, descriptor: Path, dart_dir: Path) -> tuple[str, ...]:
        return (
            str(self._tool_path),
            "--descriptor",
            str(Path(descriptor).absolute()),
            "--destination",
            str((Path(dart_dir) / TYPES_FILE).absolute()),
            "--standard-types",
            STANDARD_TYPES,
            "--import-prefix",
            IMPORT_PREFIX,
        )

    def run(self, descriptor: Path, dart_dir: Path) -> bool:
        """Generate ``types.dart`` under ``dart_dir``; return whether the tool ran."""
        if not Path(descriptor).exists():
            self._logger.debug("dart_descriptor_missing", descriptor=str(descriptor))
            return False

        command = self.command(descriptor, dart_dir)
        try:
            returncode = self._runner.run(command, timeout_seconds=self._timeout_seconds)
        except (OSError, subprocess.SubprocessError) as exc:
            raise DartCodeGenError(f"Failed to execute `{TOOL_NAME}`.", command=command) from exc

        if returncode != 0:
            raise DartCodeGenError(
                f"Command `{' '.join(command)}` exited with code {returncode}.",
                command=command,
                returncode=returncode,
            )
        self._logger.info("dart_types_generated", destination=command[4])
        return True


__all__ = [
    "DartCodeGen",
    "IMPORT_PREFIX",
    "ProcessRunner",
    "STANDARD_TYPES",
    "SubprocessProcessRunner",
    "TOOL_NAME",
    "TYPES_FILE",
    "default_tool_path",
    "tool_file_name",
]
