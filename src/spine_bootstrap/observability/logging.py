"""
spine-bootstrap - structured logging setup.

File: src/spine_bootstrap/observability/logging.py

Purpose
- Configure stdlib logging for a CLI run: one JSON object (or one text line)
  per record on stderr and, when ``observability.log_dir`` is set, in
  ``spine-bootstrap.jsonl`` under that directory.
- Route ``structlog`` loggers through stdlib logging so library events and
  plain log records share sinks and levels.

Non-functional requirements
- Output is deterministic: sorted keys, UTC timestamps, compact separators.
- Configuring twice replaces the previous handlers instead of stacking them.
"""

from __future__ import annotations

import contextlib
import json
import logging
import math
import sys
from collections.abc import Mapping, MutableMapping
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Final, TextIO

import structlog

JSONScalar = str | int | float | bool | None
JSONValue = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]

LOGGER_NAME: Final[str] = "spine_bootstrap"
LOG_FILENAME: Final[str] = "spine-bootstrap.jsonl"

_STANDARD_LOG_RECORD_FIELDS: Final[frozenset[str]] = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "thread",
        "threadName",
        "taskName",
    }
)
_RESERVED_EXTRA_KEYS: Final[frozenset[str]] = _STANDARD_LOG_RECORD_FIELDS - {"exc_info", "stack_info"}


class _JsonLineFormatter(logging.Formatter):
    """Formatter that emits canonical JSON objects per log line."""

    def format(self, record: logging.LogRecord) -> str:
        event: dict[str, JSONValue] = {
            "timestamp": _iso8601z_from_epoch(record.created),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        extras = _extract_extra_fields(record)
        if extras:
            event["fields"] = extras
        if record.exc_info is not None:
            event["exception"] = self.formatException(record.exc_info)
        return json.dumps(event, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


class _TextFormatter(logging.Formatter):
    """``LEVEL logger: message key=value ...`` lines for humans."""

    def format(self, record: logging.LogRecord) -> str:
        line = f"{record.levelname} {record.name}: {record.getMessage()}"
        extras = _extract_extra_fields(record)
        if extras:
            pairs = " ".join(
                f"{key}={json.dumps(value, sort_keys=True, ensure_ascii=False)}"
                for key, value in sorted(extras.items())
            )
            line = f"{line} {pairs}"
        if record.exc_info is not None:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(
    observability_config: Mapping[str, object] | None = None,
    *,
    verbose: bool = False,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the package logger from the ``[observability]`` settings.

    Parameters
    ----------
    observability_config:
        Mapping compatible with ``[observability]`` settings in ``bootstrap.toml``.
    verbose:
        Force ``DEBUG`` regardless of the configured level.
    stream:
        Console sink; defaults to ``sys.stderr``.
    """

    cfg = dict(observability_config or {})
    raw_level = cfg.get("log_level", "INFO")
    level: int | str = "DEBUG" if verbose else (raw_level if isinstance(raw_level, str) else "INFO")
    formatter: logging.Formatter = (
        _TextFormatter() if cfg.get("log_format") == "text" else _JsonLineFormatter()
    )

    logger = logging.getLogger(LOGGER_NAME)
    shutdown_logging()
    logger.setLevel(level)
    logger.propagate = False

    console = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console.setFormatter(formatter)
    logger.addHandler(console)

    log_dir = cfg.get("log_dir")
    if isinstance(log_dir, (str, Path)):
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(directory / LOG_FILENAME, encoding="utf-8")
        file_handler.setFormatter(_JsonLineFormatter())
        logger.addHandler(file_handler)

    configure_structlog()
    return logger


def configure_structlog() -> None:
    """Send ``structlog`` events to stdlib loggers of the same name."""

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            _rename_reserved_keys,
            structlog.stdlib.render_to_log_kwargs,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def shutdown_logging() -> None:
    """Flush and detach every handler installed by :func:`setup_logging`."""

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        # The stream may already be closed by its owner, e.g. pytest capture.
        with contextlib.suppress(ValueError):
            handler.flush()
        handler.close()


def _rename_reserved_keys(
    _logger: object, _method: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    # LogRecord refuses extras that shadow its own attributes.
    for key in [key for key in event_dict if key in _RESERVED_EXTRA_KEYS]:
        event_dict[f"{key}_"] = event_dict.pop(key)
    return event_dict


def _iso8601z_from_epoch(epoch_seconds: float) -> str:
    timestamp = datetime.fromtimestamp(epoch_seconds, tz=UTC)
    return timestamp.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _extract_extra_fields(record: logging.LogRecord) -> dict[str, JSONValue]:
    fields: dict[str, JSONValue] = {}
    for key, value in record.__dict__.items():
        if key in _STANDARD_LOG_RECORD_FIELDS or key.startswith("_"):
            continue
        fields[key] = _normalize_json_value(value)
    return fields


def _normalize_json_value(value: object) -> JSONValue:
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else str(value)
    if isinstance(value, Path):
        return value.as_posix()
    if isinstance(value, Mapping):
        return {str(key): _normalize_json_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        items = sorted(value, key=str) if isinstance(value, (set, frozenset)) else value
        return [_normalize_json_value(item) for item in items]
    return str(value)


__all__ = [
    "LOGGER_NAME",
    "LOG_FILENAME",
    "configure_structlog",
    "setup_logging",
    "shutdown_logging",
]
