"""
spine-bootstrap bootstrap package public API.

File: src/spine_bootstrap/bootstrap/__init__.py

Purpose
- Export the ``spine`` extension, its per-language targets and the plugin
  that installs it into a project.
"""

from spine_bootstrap.bootstrap.context import CodeGenContext, CodeGenTarget
from spine_bootstrap.bootstrap.dart import DartExtension
from spine_bootstrap.bootstrap.dependant import SpineBasedProject
from spine_bootstrap.bootstrap.dependencies import SpineDependency, ThirdPartyDependency
from spine_bootstrap.bootstrap.extension import Extension
from spine_bootstrap.bootstrap.java import JavaCodegenExtension, JavaExtension
from spine_bootstrap.bootstrap.javascript import JavaScriptExtension
from spine_bootstrap.bootstrap.model import ModelExtension
from spine_bootstrap.bootstrap.plugin import BootstrapPlugin, apply_settings, configure_project
from spine_bootstrap.bootstrap.plugin_target import SpinePluginTarget

__all__ = [
    "BootstrapPlugin",
    "CodeGenContext",
    "CodeGenTarget",
    "DartExtension",
    "Extension",
    "JavaCodegenExtension",
    "JavaExtension",
    "JavaScriptExtension",
    "ModelExtension",
    "SpineBasedProject",
    "SpineDependency",
    "SpinePluginTarget",
    "ThirdPartyDependency",
    "apply_settings",
    "configure_project",
]
