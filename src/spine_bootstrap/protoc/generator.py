"""
spine-bootstrap - project-wide switchboard of Protobuf code-generation jobs.

File: src/spine_bootstrap/protoc/generator.py

Purpose
- Enable or disable a job in every generate task of a project with one call.
- Select the ``protoc`` artifact for the project.

Functional requirements
- Every operation may be called before ``com.google.protobuf`` is applied;
  the effect is deferred until it is.
- Toggles affect current and future generate tasks; for a task created
  later, toggles replay in the order they were made.
- Operations are idempotent and never fail on absent jobs.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog

from spine_bootstrap.constants import PROTOBUF_PLUGIN_ID
from spine_bootstrap.project.container import NamedContainer
from spine_bootstrap.project.protobuf import GenerateProtoTask, PluginOptions, ProtobufConvention
from spine_bootstrap.protoc.plugin import ProtocPlugin

if TYPE_CHECKING:
    from spine_bootstrap.project.project import Project

JobSelector = Callable[[GenerateProtoTask], NamedContainer[PluginOptions]]


def _builtins(task: GenerateProtoTask) -> NamedContainer[PluginOptions]:
    return task.builtins


def _plugins(task: GenerateProtoTask) -> NamedContainer[PluginOptions]:
    return task.plugins


class ProtobufGenerator:
    """Toggles :class:`ProtocPlugin` jobs across all generate tasks of a project."""

    def __init__(self, project: Project, *, logger: Any | None = None) -> None:
        if project is None:
            raise ValueError("project is required")
        self._project = project
        self._logger = logger if logger is not None else structlog.get_logger(__name__)

    def enable_built_in(self, job: ProtocPlugin) -> None:
        self._enable_in(job, _builtins, kind="builtin")

    def enable_plugin(self, job: ProtocPlugin) -> None:
        self._enable_in(job, _plugins, kind="plugin")

    def disable_built_in(self, job: ProtocPlugin) -> None:
        self._disable_in(job, _builtins, kind="builtin")

    def disable_plugin(self, job: ProtocPlugin) -> None:
        self._disable_in(job, _plugins, kind="plugin")

    def switch_built_in(self, job: ProtocPlugin, enabled: bool) -> None:
        if enabled:
            self.enable_built_in(job)
        else:
            self.disable_built_in(job)

    def switch_plugin(self, job: ProtocPlugin, enabled: bool) -> None:
        if enabled:
            self.enable_plugin(job)
        else:
            self.disable_plugin(job)

    def use_compiler(self, artifact: str) -> None:
        """Make every generate task run ``protoc`` from ``artifact``."""
        if not artifact:
            raise ValueError("compiler artifact must be a non-empty notation")
        self._with_protobuf(lambda convention: convention.protoc(artifact))

    def _enable_in(self, job: ProtocPlugin, selector: JobSelector, *, kind: str) -> None:
        self._logger.debug("protoc_job_enabled", job=str(job), kind=kind)
        self._with_protobuf(
            lambda convention: convention.all_tasks(lambda task: job.create_in(selector(task)))
        )

    def _disable_in(self, job: ProtocPlugin, selector: JobSelector, *, kind: str) -> None:
        self._logger.debug("protoc_job_disabled", job=str(job), kind=kind)
        self._with_protobuf(
            lambda convention: convention.all_tasks(lambda task: job.remove_from(selector(task)))
        )

    def _with_protobuf(self, action: Callable[[ProtobufConvention], None]) -> None:
        project = self._project
        project.plugins.with_plugin(
            PROTOBUF_PLUGIN_ID,
            lambda: action(project.extensions.get_by_type(ProtobufConvention)),
        )


__all__ = ["ProtobufGenerator"]
