"""
spine-bootstrap - artifact snapshot.

File: src/spine_bootstrap/config/artifacts.py

Purpose
- Hold the framework versions, Protobuf and gRPC artifacts, and Maven
  repositories a bootstrapped project depends on.
- Load them from the bundled ``artifact-snapshot.properties`` or from an
  alternate file, and write snapshots in the same format.

Functional requirements
- A missing or unreadable resource raises :class:`SnapshotLoadError` with
  the I/O error as its cause.
- A missing or blank key, or a repository that is not an absolute URL,
  raises :class:`SnapshotKeyError` naming the key.
- The bundled snapshot is read once per process and shared read-only.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from functools import cache
from importlib import resources
from pathlib import Path
from typing import Final
from urllib.parse import urlparse

from spine_bootstrap.config import properties
from spine_bootstrap.errors import SnapshotKeyError, SnapshotLoadError

SNAPSHOT_RESOURCE: Final[str] = "artifact-snapshot.properties"
SNAPSHOT_COMMENT: Final[str] = "Dependencies and versions required by Spine."

_KEYS: Final[dict[str, str]] = {
    "spine_base_version": "spine.version.base",
    "spine_time_version": "spine.version.time",
    "spine_core_version": "spine.version.core",
    "spine_web_version": "spine.version.web",
    "spine_gcloud_version": "spine.version.gcloud",
    "protoc": "protobuf.compiler",
    "protobuf_java": "protobuf.java",
    "grpc_protobuf": "grpc.protobuf",
    "grpc_stub": "grpc.stub",
    "spine_repository": "repository.spine.release",
    "spine_snapshot_repository": "repository.spine.snapshot",
}
_REPOSITORY_FIELDS: Final[frozenset[str]] = frozenset(
    {"spine_repository", "spine_snapshot_repository"}
)


@dataclass(frozen=True, slots=True)
class ArtifactSnapshot:
    """Versions and coordinates a bootstrapped project is built against."""

    spine_base_version: str
    spine_time_version: str
    spine_core_version: str
    spine_web_version: str
    spine_gcloud_version: str
    protoc: str
    protobuf_java: str
    grpc_protobuf: str
    grpc_stub: str
    spine_repository: str
    spine_snapshot_repository: str

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            key = _KEYS[item.name]
            if not isinstance(value, str) or not value.strip():
                raise SnapshotKeyError(key, "must not be blank")
            if item.name in _REPOSITORY_FIELDS and not _is_absolute_url(value):
                raise SnapshotKeyError(key, f"is not an absolute URL: {value!r}")

    @classmethod
    def from_properties(cls, values: dict[str, str]) -> ArtifactSnapshot:
        arguments: dict[str, str] = {}
        for field_name, key in _KEYS.items():
            if key not in values:
                raise SnapshotKeyError(key)
            arguments[field_name] = values[key].strip()
        return cls(**arguments)

    @classmethod
    def from_resources(cls) -> ArtifactSnapshot:
        """Return the bundled snapshot, loading it on first use."""
        return _bundled_snapshot()

    def spine_version(self) -> str:
        """The framework version reported to build scripts."""
        return self.spine_core_version

    def grpc_dependencies(self) -> tuple[str, str]:
        return (self.grpc_protobuf, self.grpc_stub)

    def to_properties(self) -> dict[str, str]:
        return {key: getattr(self, field_name) for field_name, key in _KEYS.items()}


def load_snapshot(path: str | Path | None = None) -> ArtifactSnapshot:
    """Load a snapshot from ``path``, or the bundled resource when ``path`` is ``None``."""

    if path is None:
        return ArtifactSnapshot.from_resources()
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotLoadError(f"unable to read artifact snapshot {source}: {exc}") from exc
    return _parse(text, str(source))


def write_snapshot(snapshot: ArtifactSnapshot, path: str | Path) -> Path:
    """Store ``snapshot`` as properties text and return the written path."""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(
        properties.dumps(snapshot.to_properties(), comments=(SNAPSHOT_COMMENT,)),
        encoding="utf-8",
    )
    return target


@cache
def _bundled_snapshot() -> ArtifactSnapshot:
    resource = resources.files("spine_bootstrap").joinpath("resources", SNAPSHOT_RESOURCE)
    try:
        text = resource.read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotLoadError(
            f"bundled resource {SNAPSHOT_RESOURCE!r} is not available: {exc}"
        ) from exc
    return _parse(text, SNAPSHOT_RESOURCE)


def _parse(text: str, origin: str) -> ArtifactSnapshot:
    try:
        values = properties.loads(text)
    except properties.PropertiesSyntaxError as exc:
        raise SnapshotLoadError(f"malformed artifact snapshot {origin}: {exc}") from exc
    return ArtifactSnapshot.from_properties(values)


def _is_absolute_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in {"http", "https", "file"} and bool(parsed.netloc or parsed.path)


__all__ = [
    "ArtifactSnapshot",
    "SNAPSHOT_RESOURCE",
    "load_snapshot",
    "write_snapshot",
]
