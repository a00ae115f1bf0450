"""Error hierarchy shared by the project model, the extensions and the CLI."""

from __future__ import annotations

from collections.abc import Sequence


class BootstrapError(RuntimeError):
    """Base error for spine-bootstrap failures."""


class SnapshotLoadError(BootstrapError):
    """Raised when the artifact snapshot cannot be read."""


class SnapshotKeyError(SnapshotLoadError):
    """Raised when a snapshot key is missing, blank or malformed."""

    def __init__(self, key: str, reason: str = "is missing") -> None:
        self.key = key
        super().__init__(f"artifact snapshot key {key!r} {reason}")


class BuildError(BootstrapError):
    """Fatal build failure raised while executing project tasks."""


class DartCodeGenError(BuildError):
    """Raised when the Dart code generator cannot be run or exits with an error."""

    def __init__(
        self,
        message: str,
        *,
        command: Sequence[str] = (),
        returncode: int | None = None,
    ) -> None:
        self.command = tuple(command)
        self.returncode = returncode
        super().__init__(message)


class TaskExecutionError(BuildError):
    """Raised when a task fails or the task graph cannot be ordered."""

    def __init__(self, task: str | None, message: str) -> None:
        self.task = task
        super().__init__(message)


class UnknownPluginError(BootstrapError):
    """Raised when a plugin identifier has no registered implementation."""

    def __init__(self, plugin_id: str) -> None:
        self.plugin_id = plugin_id
        super().__init__(f"plugin with id {plugin_id!r} not found")


class ExtensionConfigurationError(BootstrapError, ValueError):
    """Raised when an extension is constructed or configured with invalid input."""


__all__ = [
    "BootstrapError",
    "BuildError",
    "DartCodeGenError",
    "ExtensionConfigurationError",
    "SnapshotKeyError",
    "SnapshotLoadError",
    "TaskExecutionError",
    "UnknownPluginError",
]
