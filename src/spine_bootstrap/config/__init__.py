"""
spine-bootstrap config package public API.

File: src/spine_bootstrap/config/__init__.py

Purpose
- Export the declarative build configuration loader, its schema, and the
  artifact snapshot the extensions are configured against.

Functional requirements
- Support loading from ``bootstrap.toml`` + ``SPINE_BOOTSTRAP_`` env overrides.
- Fail fast with clear structured validation/load errors.
"""

from spine_bootstrap.config.artifacts import (
    SNAPSHOT_RESOURCE,
    ArtifactSnapshot,
    load_snapshot,
    write_snapshot,
)
from spine_bootstrap.config.loader import (
    DEFAULT_CONFIG_FILE,
    ENV_PREFIX,
    ConfigLoadError,
    dump_effective_config,
    load_config,
    normalize_paths,
    parse_override,
)
from spine_bootstrap.config.pub_cache import pub_cache_bin
from spine_bootstrap.config.schema import (
    CONFIG_SCHEMA_VERSION,
    DEFAULT_CONFIG,
    BootstrapConfig,
    ConfigValidationError,
    ConfigValidationIssue,
    ConfigValidationResult,
    assert_valid_config,
    default_config,
    merge_config,
    validate_config,
)

__all__ = [
    "ArtifactSnapshot",
    "BootstrapConfig",
    "CONFIG_SCHEMA_VERSION",
    "ConfigLoadError",
    "ConfigValidationError",
    "ConfigValidationIssue",
    "ConfigValidationResult",
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_FILE",
    "ENV_PREFIX",
    "SNAPSHOT_RESOURCE",
    "assert_valid_config",
    "default_config",
    "dump_effective_config",
    "load_config",
    "load_snapshot",
    "merge_config",
    "normalize_paths",
    "parse_override",
    "pub_cache_bin",
    "validate_config",
    "write_snapshot",
]
