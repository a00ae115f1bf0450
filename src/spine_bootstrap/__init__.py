"""
spine-bootstrap - package root.

File: src/spine_bootstrap/__init__.py

Purpose
- Package root for the Bootstrap build configurator: declarative Java, JavaScript
  and Dart code generation from Protobuf for Spine-based projects.

Functional requirements
- Must not have side effects at import time (no snapshot loading, no logging init).
"""

from __future__ import annotations

__version__ = "2.0.0"

__all__ = ["__version__"]
