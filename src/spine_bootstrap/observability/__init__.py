"""Logging setup for CLI runs."""

from spine_bootstrap.observability.logging import (
    LOG_FILENAME,
    LOGGER_NAME,
    configure_structlog,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    "LOGGER_NAME",
    "LOG_FILENAME",
    "configure_structlog",
    "setup_logging",
    "shutdown_logging",
]
