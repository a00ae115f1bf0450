"""Command-line interface of spine-bootstrap."""

from spine_bootstrap.ui.cli import build_parser, main, run_cli
from spine_bootstrap.ui.render import CLIRenderer, create_renderer

__all__ = ["CLIRenderer", "build_parser", "create_renderer", "main", "run_cli"]
