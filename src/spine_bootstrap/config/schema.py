"""
spine-bootstrap - configuration schema and validation.

File: src/spine_bootstrap/config/schema.py

Purpose
- Define the defaults and strict validation rules of ``bootstrap.toml``.

What should be included in this file
- Schema versioning and migration guidance.
- Validation rules for required fields, types, enums and numeric constraints.
- Deterministic deep-merge helpers.

Functional requirements
- Validate config payloads and return structured errors (field path + message).
- Reject unknown keys with the offending path.

Non-functional requirements
- Keep rules deterministic and easy to audit.
"""

from __future__ import annotations

import copy
import math
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Final, Literal, NotRequired, TypedDict

from spine_bootstrap.constants import (
    IDEA_PLUGIN_ID,
    JAVA_PLUGIN_ID,
    MODEL_COMPILER_PLUGIN_ID,
    PROTO_DART_PLUGIN_ID,
    PROTO_JS_PLUGIN_ID,
    PROTOBUF_PLUGIN_ID,
)

CONFIG_SCHEMA_VERSION: Final[int] = 1

LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_FORMATS: Final[tuple[str, ...]] = ("json", "text")
PLUGIN_IDS: Final[tuple[str, ...]] = (
    IDEA_PLUGIN_ID,
    JAVA_PLUGIN_ID,
    MODEL_COMPILER_PLUGIN_ID,
    PROTO_DART_PLUGIN_ID,
    PROTO_JS_PLUGIN_ID,
    PROTOBUF_PLUGIN_ID,
)

# Config paths that are normalized relative to the config file location.
PATH_FIELDS: Final[tuple[tuple[str, ...], ...]] = (
    ("project", "dir"),
    ("paths", "artifact_snapshot"),
    ("observability", "log_dir"),
)

# Java flags that only make sense for a Java-enabled project.
JAVA_DEPENDENCY_FLAGS: Final[tuple[str, ...]] = (
    "client",
    "server",
    "web_server",
    "firebase_web_server",
    "datastore",
)


class MetaConfig(TypedDict):
    schema_version: int


class ProjectConfig(TypedDict):
    name: str
    dir: str
    plugins: NotRequired[list[str]]


class JavaCodegenConfig(TypedDict):
    protobuf: bool
    grpc: bool
    spine: bool


class JavaConfig(TypedDict):
    enabled: bool
    client: bool
    server: bool
    web_server: bool
    firebase_web_server: bool
    datastore: bool
    codegen: JavaCodegenConfig


class JavaScriptConfig(TypedDict):
    enabled: bool


class DartConfig(TypedDict):
    enabled: bool
    timeout_seconds: float


class SpineConfig(TypedDict):
    force_dependencies: bool
    assemble_model: bool
    java: JavaConfig
    javascript: JavaScriptConfig
    dart: DartConfig


class PathsConfig(TypedDict):
    artifact_snapshot: NotRequired[str]


class ObservabilityConfig(TypedDict):
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"]
    log_format: Literal["json", "text"]
    log_dir: NotRequired[str]


class BootstrapConfig(TypedDict):
    meta: MetaConfig
    project: ProjectConfig
    spine: SpineConfig
    paths: PathsConfig
    observability: ObservabilityConfig


DEFAULT_CONFIG: Final[BootstrapConfig] = {
    "meta": {
        "schema_version": CONFIG_SCHEMA_VERSION,
    },
    "project": {
        "name": "project",
        "dir": ".",
        "plugins": [],
    },
    "spine": {
        "force_dependencies": False,
        "assemble_model": False,
        "java": {
            "enabled": False,
            "client": False,
            "server": False,
            "web_server": False,
            "firebase_web_server": False,
            "datastore": False,
            "codegen": {
                "protobuf": True,
                "grpc": False,
                "spine": True,
            },
        },
        "javascript": {
            "enabled": False,
        },
        "dart": {
            "enabled": False,
            "timeout_seconds": 600.0,
        },
    },
    "paths": {},
    "observability": {
        "log_level": "INFO",
        "log_format": "json",
    },
}


@dataclass(frozen=True, slots=True)
class ConfigValidationIssue:
    """Single structured validation failure."""

    path: str
    message: str


@dataclass(frozen=True, slots=True)
class ConfigValidationResult:
    """Validation result with normalized config when no issues were found."""

    config: dict[str, Any] | None
    issues: tuple[ConfigValidationIssue, ...]

    @property
    def is_valid(self) -> bool:
        return self.config is not None and not self.issues


class ConfigValidationError(ValueError):
    """Raised when strict config validation fails."""

    def __init__(self, issues: Sequence[ConfigValidationIssue]) -> None:
        self.issues = tuple(issues)
        if not self.issues:
            rendered = "unknown validation failure"
        else:
            rendered = "\n".join(f"- {item.path}: {item.message}" for item in self.issues)
        super().__init__(f"invalid config:\n{rendered}")


class _IssueCollector:
    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[ConfigValidationIssue] = []

    def add(self, path: str, message: str) -> None:
        self._items.append(ConfigValidationIssue(path=path, message=message))

    def items(self) -> tuple[ConfigValidationIssue, ...]:
        return tuple(self._items)

    @property
    def has_issues(self) -> bool:
        return bool(self._items)


_Validator = Callable[[Mapping[str, object], str, _IssueCollector], dict[str, Any]]


def default_config() -> BootstrapConfig:
    """Return a deep copy of the built-in defaults."""

    return copy.deepcopy(DEFAULT_CONFIG)


def migration_guidance(found_version: int) -> str:
    """Return migration guidance for a schema version mismatch."""

    if found_version < CONFIG_SCHEMA_VERSION:
        return (
            f"schema version {found_version} is older than supported {CONFIG_SCHEMA_VERSION}; "
            "upgrade bootstrap.toml to the current schema"
        )
    if found_version > CONFIG_SCHEMA_VERSION:
        return (
            f"schema version {found_version} is newer than supported {CONFIG_SCHEMA_VERSION}; "
            "upgrade spine-bootstrap"
        )
    return "schema version is current"


def merge_config(base: Mapping[str, object], overlay: Mapping[str, object]) -> dict[str, Any]:
    """Deterministically deep-merge ``overlay`` onto ``base``."""

    merged = _deep_copy_mapping(base)
    _merge_into(merged, overlay)
    return merged


def validate_config(config: Mapping[str, object] | object) -> ConfigValidationResult:
    """Validate config and return structured issues with deterministic paths."""

    issues = _IssueCollector()
    if not isinstance(config, Mapping):
        issues.add("<root>", f"expected object, got {type(config).__name__}")
        return ConfigValidationResult(config=None, issues=issues.items())

    sections: dict[str, _Validator] = {
        "meta": _validate_meta,
        "project": _validate_project,
        "spine": _validate_spine,
        "paths": _validate_paths,
        "observability": _validate_observability,
    }
    _reject_unknown_keys(config, set(sections), "", issues)
    _require_keys(config, set(sections), "", issues)

    normalized: dict[str, Any] = {}
    for key in sorted(sections):
        raw = config.get(key)
        if raw is None:
            continue
        if not isinstance(raw, Mapping):
            issues.add(key, f"expected object, got {type(raw).__name__}")
            continue
        normalized[key] = sections[key](raw, key, issues)

    if issues.has_issues:
        return ConfigValidationResult(config=None, issues=issues.items())
    return ConfigValidationResult(config=normalized, issues=())


def assert_valid_config(config: Mapping[str, object] | object) -> dict[str, Any]:
    """Validate config and raise ``ConfigValidationError`` on failure."""

    result = validate_config(config)
    if result.config is None:
        raise ConfigValidationError(result.issues)
    return result.config


def _validate_meta(
    payload: Mapping[str, object], path: str, issues: _IssueCollector
) -> dict[str, Any]:
    _reject_unknown_keys(payload, {"schema_version"}, path, issues)
    _require_keys(payload, {"schema_version"}, path, issues)

    out: dict[str, Any] = {}
    if "schema_version" in payload:
        field_path = _join(path, "schema_version")
        parsed = _as_int(payload["schema_version"], field_path, issues, minimum=1)
        if parsed is not None:
            out["schema_version"] = parsed
            if parsed != CONFIG_SCHEMA_VERSION:
                issues.add(field_path, migration_guidance(parsed))
    return out


def _validate_project(
    payload: Mapping[str, object], path: str, issues: _IssueCollector
) -> dict[str, Any]:
    _reject_unknown_keys(payload, {"name", "dir", "plugins"}, path, issues)
    _require_keys(payload, {"name", "dir"}, path, issues)

    out: dict[str, Any] = {}
    if "name" in payload:
        name = _as_str(payload["name"], _join(path, "name"), issues)
        if name is not None:
            out["name"] = name
    if "dir" in payload:
        directory = _as_path_text(payload["dir"], _join(path, "dir"), issues)
        if directory is not None:
            out["dir"] = directory
    if "plugins" in payload:
        plugins = _as_plugin_ids(payload["plugins"], _join(path, "plugins"), issues)
        if plugins is not None:
            out["plugins"] = plugins
    return out


def _validate_spine(
    payload: Mapping[str, object], path: str, issues: _IssueCollector
) -> dict[str, Any]:
    allowed = {"force_dependencies", "assemble_model", "java", "javascript", "dart"}
    _reject_unknown_keys(payload, allowed, path, issues)
    _require_keys(payload, allowed, path, issues)

    out: dict[str, Any] = {}
    for flag in ("force_dependencies", "assemble_model"):
        if flag in payload:
            parsed = _as_bool(payload[flag], _join(path, flag), issues)
            if parsed is not None:
                out[flag] = parsed

    nested: dict[str, _Validator] = {
        "java": _validate_java,
        "javascript": _validate_javascript,
        "dart": _validate_dart,
    }
    for key in sorted(nested):
        raw = payload.get(key)
        if raw is None:
            continue
        section_path = _join(path, key)
        if not isinstance(raw, Mapping):
            issues.add(section_path, f"expected object, got {type(raw).__name__}")
            continue
        out[key] = nested[key](raw, section_path, issues)
    return out


def _validate_java(
    payload: Mapping[str, object], path: str, issues: _IssueCollector
) -> dict[str, Any]:
    flags = ("enabled", *JAVA_DEPENDENCY_FLAGS)
    allowed = {*flags, "codegen"}
    _reject_unknown_keys(payload, allowed, path, issues)
    _require_keys(payload, allowed, path, issues)

    out: dict[str, Any] = {}
    for flag in flags:
        if flag in payload:
            parsed = _as_bool(payload[flag], _join(path, flag), issues)
            if parsed is not None:
                out[flag] = parsed

    codegen_path = _join(path, "codegen")
    codegen = payload.get("codegen")
    if isinstance(codegen, Mapping):
        codegen_flags = {"protobuf", "grpc", "spine"}
        _reject_unknown_keys(codegen, codegen_flags, codegen_path, issues)
        _require_keys(codegen, codegen_flags, codegen_path, issues)
        out["codegen"] = {}
        for flag in sorted(codegen_flags & set(codegen)):
            parsed = _as_bool(codegen[flag], _join(codegen_path, flag), issues)
            if parsed is not None:
                out["codegen"][flag] = parsed
    elif codegen is not None:
        issues.add(codegen_path, f"expected object, got {type(codegen).__name__}")

    if out.get("enabled") is False:
        for flag in JAVA_DEPENDENCY_FLAGS:
            if out.get(flag):
                issues.add(_join(path, flag), "requires spine.java.enabled = true")
        if out.get("codegen", {}).get("grpc"):
            issues.add(_join(codegen_path, "grpc"), "requires spine.java.enabled = true")
    return out


def _validate_javascript(
    payload: Mapping[str, object], path: str, issues: _IssueCollector
) -> dict[str, Any]:
    _reject_unknown_keys(payload, {"enabled"}, path, issues)
    _require_keys(payload, {"enabled"}, path, issues)

    out: dict[str, Any] = {}
    if "enabled" in payload:
        parsed = _as_bool(payload["enabled"], _join(path, "enabled"), issues)
        if parsed is not None:
            out["enabled"] = parsed
    return out


def _validate_dart(
    payload: Mapping[str, object], path: str, issues: _IssueCollector
) -> dict[str, Any]:
    allowed = {"enabled", "timeout_seconds"}
    _reject_unknown_keys(payload, allowed, path, issues)
    _require_keys(payload, allowed, path, issues)

    out: dict[str, Any] = {}
    if "enabled" in payload:
        parsed = _as_bool(payload["enabled"], _join(path, "enabled"), issues)
        if parsed is not None:
            out["enabled"] = parsed
    if "timeout_seconds" in payload:
        timeout = _as_float(
            payload["timeout_seconds"], _join(path, "timeout_seconds"), issues, minimum=0.0
        )
        if timeout is not None:
            if timeout == 0.0:
                issues.add(_join(path, "timeout_seconds"), "must be > 0")
            else:
                out["timeout_seconds"] = timeout
    return out


def _validate_paths(
    payload: Mapping[str, object], path: str, issues: _IssueCollector
) -> dict[str, Any]:
    _reject_unknown_keys(payload, {"artifact_snapshot"}, path, issues)

    out: dict[str, Any] = {}
    if "artifact_snapshot" in payload:
        parsed = _as_path_text(
            payload["artifact_snapshot"], _join(path, "artifact_snapshot"), issues
        )
        if parsed is not None:
            out["artifact_snapshot"] = parsed
    return out


def _validate_observability(
    payload: Mapping[str, object], path: str, issues: _IssueCollector
) -> dict[str, Any]:
    allowed = {"log_level", "log_format", "log_dir"}
    _reject_unknown_keys(payload, allowed, path, issues)
    _require_keys(payload, {"log_level", "log_format"}, path, issues)

    out: dict[str, Any] = {}
    if "log_level" in payload:
        level = _as_enum(
            payload["log_level"], _join(path, "log_level"), issues, allowed_values=LOG_LEVELS
        )
        if level is not None:
            out["log_level"] = level
    if "log_format" in payload:
        log_format = _as_enum(
            payload["log_format"], _join(path, "log_format"), issues, allowed_values=LOG_FORMATS
        )
        if log_format is not None:
            out["log_format"] = log_format
    if "log_dir" in payload:
        log_dir = _as_path_text(payload["log_dir"], _join(path, "log_dir"), issues)
        if log_dir is not None:
            out["log_dir"] = log_dir
    return out


def _as_str(value: object, path: str, issues: _IssueCollector) -> str | None:
    if not isinstance(value, str):
        issues.add(path, f"expected string, got {type(value).__name__}")
        return None
    parsed = value.strip()
    if not parsed:
        issues.add(path, "must not be empty")
        return None
    return parsed


def _as_path_text(value: object, path: str, issues: _IssueCollector) -> str | None:
    parsed = _as_str(value, path, issues)
    if parsed is None:
        return None
    if "\x00" in parsed:
        issues.add(path, "must not contain NUL bytes")
        return None
    return parsed


def _as_plugin_ids(value: object, path: str, issues: _IssueCollector) -> list[str] | None:
    if not isinstance(value, list):
        issues.add(path, f"expected array, got {type(value).__name__}")
        return None
    plugin_ids: list[str] = []
    valid = True
    for index, item in enumerate(value):
        plugin_id = _as_enum(item, f"{path}[{index}]", issues, allowed_values=PLUGIN_IDS)
        if plugin_id is None:
            valid = False
        elif plugin_id not in plugin_ids:
            plugin_ids.append(plugin_id)
    return plugin_ids if valid else None


def _as_bool(value: object, path: str, issues: _IssueCollector) -> bool | None:
    if isinstance(value, bool):
        return value
    issues.add(path, f"expected boolean, got {type(value).__name__}")
    return None


def _as_int(
    value: object,
    path: str,
    issues: _IssueCollector,
    *,
    minimum: int | None = None,
) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        issues.add(path, f"expected integer, got {type(value).__name__}")
        return None
    if minimum is not None and value < minimum:
        issues.add(path, f"must be >= {minimum}")
        return None
    return value


def _as_float(
    value: object,
    path: str,
    issues: _IssueCollector,
    *,
    minimum: float | None = None,
) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        issues.add(path, f"expected number, got {type(value).__name__}")
        return None
    parsed = float(value)
    if not math.isfinite(parsed):
        issues.add(path, "must be finite")
        return None
    if minimum is not None and parsed < minimum:
        issues.add(path, f"must be >= {minimum}")
        return None
    return parsed


def _as_enum(
    value: object,
    path: str,
    issues: _IssueCollector,
    *,
    allowed_values: tuple[str, ...],
) -> str | None:
    parsed = _as_str(value, path, issues)
    if parsed is None:
        return None
    if parsed not in allowed_values:
        expected = ", ".join(sorted(allowed_values))
        issues.add(path, f"invalid value {parsed!r}; expected one of: {expected}")
        return None
    return parsed


def _reject_unknown_keys(
    payload: Mapping[str, object],
    allowed: set[str],
    path: str,
    issues: _IssueCollector,
) -> None:
    for key in sorted(str(item) for item in payload):
        if key not in allowed:
            issues.add(_join(path, key), "unknown field")


def _require_keys(
    payload: Mapping[str, object],
    required: set[str],
    path: str,
    issues: _IssueCollector,
) -> None:
    for key in sorted(required):
        if key not in payload:
            issues.add(_join(path, key), "missing required field")


def _join(path: str, key: str) -> str:
    if not path:
        return key
    return f"{path}.{key}"


def _merge_into(target: dict[str, Any], overlay: Mapping[str, object]) -> None:
    for key in sorted(overlay):
        value = overlay[key]
        if isinstance(value, Mapping):
            existing = target.get(key)
            if not isinstance(existing, dict):
                existing = {}
                target[key] = existing
            _merge_into(existing, value)
        else:
            target[key] = copy.deepcopy(value)


def _deep_copy_mapping(value: Mapping[str, object]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key in sorted(value):
        item = value[key]
        out[key] = _deep_copy_mapping(item) if isinstance(item, Mapping) else copy.deepcopy(item)
    return out


__all__ = [
    "BootstrapConfig",
    "CONFIG_SCHEMA_VERSION",
    "ConfigValidationError",
    "ConfigValidationIssue",
    "ConfigValidationResult",
    "DEFAULT_CONFIG",
    "JAVA_DEPENDENCY_FLAGS",
    "LOG_FORMATS",
    "LOG_LEVELS",
    "PATH_FIELDS",
    "PLUGIN_IDS",
    "assert_valid_config",
    "default_config",
    "merge_config",
    "migration_guidance",
    "validate_config",
]
