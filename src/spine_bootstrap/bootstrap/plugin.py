"""
spine-bootstrap - the Bootstrap plugin.

File: src/spine_bootstrap/bootstrap/plugin.py

Purpose
- Install the ``spine`` extension into a project: repositories, extension
  registration, the ``protoc`` artifact, and Java generation off by default.
- Drive an installed extension from the declarative ``bootstrap.toml``
  settings and build a configured project from them.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog

from spine_bootstrap.bootstrap.context import CodeGenContext
from spine_bootstrap.bootstrap.dependant import SpineBasedProject
from spine_bootstrap.bootstrap.extension import Extension
from spine_bootstrap.bootstrap.java import JavaCodegenExtension, JavaExtension
from spine_bootstrap.config.artifacts import ArtifactSnapshot, load_snapshot
from spine_bootstrap.constants import SPINE_EXTENSION_NAME
from spine_bootstrap.project.layout import ProjectSourceSuperset
from spine_bootstrap.project.plugins import ProjectPluginTarget
from spine_bootstrap.project.project import Project
from spine_bootstrap.protoc.generator import ProtobufGenerator
from spine_bootstrap.tools.dart_code_gen import DartCodeGen

logger = structlog.get_logger(__name__)


class BootstrapPlugin:
    """Applies the ``spine`` extension to a project."""

    def apply(
        self,
        project: Project,
        artifacts: ArtifactSnapshot | None = None,
        *,
        dart_code_gen: DartCodeGen | None = None,
    ) -> Extension:
        snapshot = artifacts if artifacts is not None else ArtifactSnapshot.from_resources()
        dependant = SpineBasedProject(project)
        dependant.prepare_repositories(snapshot)
        generator = ProtobufGenerator(project)
        context = CodeGenContext.create(
            project=project,
            plugin_target=ProjectPluginTarget(project),
            dependant=dependant,
            source_superset=ProjectSourceSuperset(project),
            artifacts=snapshot,
            generator=generator,
        )
        extension = Extension(context, dart_code_gen=dart_code_gen)
        project.extensions.add(SPINE_EXTENSION_NAME, extension)
        extension.disable_java_generation()
        generator.use_compiler(snapshot.protoc)
        logger.info("bootstrap_applied", project=project.name, version=extension.version())
        return extension


def apply_settings(extension: Extension, settings: Mapping[str, Any]) -> Extension:
    """Configure ``extension`` from the ``spine`` table of ``bootstrap.toml``."""

    java = settings.get("java", {})
    if java.get("enabled", False):
        extension.enable_java(lambda target: _configure_java(target, java))
    if settings.get("javascript", {}).get("enabled", False):
        extension.enable_javascript()
    if settings.get("dart", {}).get("enabled", False):
        extension.enable_dart()
    if settings.get("assemble_model", False):
        extension.assemble_model()
    if settings.get("force_dependencies", False):
        extension.force_dependencies = True
    return extension


def configure_project(
    config: Mapping[str, Any],
    *,
    artifacts: ArtifactSnapshot | None = None,
    dart_code_gen: DartCodeGen | None = None,
) -> tuple[Project, Extension]:
    """Build, configure and evaluate the project ``config`` describes."""

    project_settings = config["project"]
    project = Project(project_settings["name"], Path(project_settings["dir"]))
    for plugin_id in project_settings.get("plugins", []):
        project.plugins.apply(plugin_id)
    if artifacts is None:
        artifacts = load_snapshot(config.get("paths", {}).get("artifact_snapshot"))
    spine = config["spine"]
    if dart_code_gen is None and spine.get("dart", {}).get("enabled", False):
        dart_code_gen = DartCodeGen(timeout_seconds=spine["dart"].get("timeout_seconds"))
    extension = BootstrapPlugin().apply(project, artifacts, dart_code_gen=dart_code_gen)
    apply_settings(extension, spine)
    project.evaluate()
    return project, extension


def _configure_java(java: JavaExtension, settings: Mapping[str, Any]) -> None:
    codegen = settings.get("codegen", {})
    java.configure_codegen(lambda options: _configure_codegen(options, codegen))
    if settings.get("client", False):
        java.client()
    if settings.get("server", False):
        java.server()
    if settings.get("web_server", False):
        java.web_server()
    if settings.get("firebase_web_server", False):
        java.firebase_web_server()
    if settings.get("datastore", False):
        java.with_datastore()


def _configure_codegen(codegen: JavaCodegenExtension, settings: Mapping[str, Any]) -> None:
    if "protobuf" in settings:
        codegen.protobuf = bool(settings["protobuf"])
    if "grpc" in settings:
        codegen.grpc = bool(settings["grpc"])
    if "spine" in settings:
        codegen.spine = bool(settings["spine"])


__all__ = ["BootstrapPlugin", "apply_settings", "configure_project"]
