"""
spine-bootstrap - Protobuf compiler integration of the project model.

File: src/spine_bootstrap/project/protobuf.py

Purpose
- One code-generation task per source set, each with two named collections
  of jobs: ``builtins`` run by ``protoc`` itself and ``plugins`` run through
  a ``protoc-gen-*`` hook.
- The ``protoc`` artifact shared by all generate tasks.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from spine_bootstrap.project.container import NamedContainer


@dataclass(slots=True)
class PluginOptions:
    """A configured job inside a generate task."""

    name: str
    options: list[str] = field(default_factory=list)

    def option(self, value: str) -> PluginOptions:
        """Set the job option, replacing a previously attached one."""
        self.options[:] = [value]
        return self


@dataclass(slots=True)
class GenerateProtoTask:
    """Code generation settings of one source set."""

    name: str
    source_set: str
    builtins: NamedContainer[PluginOptions] = field(
        default_factory=lambda: NamedContainer(PluginOptions)
    )
    plugins: NamedContainer[PluginOptions] = field(
        default_factory=lambda: NamedContainer(PluginOptions)
    )

    def describe(self) -> dict[str, object]:
        return {
            "source_set": self.source_set,
            "builtins": {job.name: list(job.options) for job in self.builtins},
            "plugins": {job.name: list(job.options) for job in self.plugins},
        }


class ProtobufConvention:
    """The ``protobuf { ... }`` block of a project."""

    def __init__(self) -> None:
        self.protoc_artifact: str | None = None
        self.generate_proto_tasks: NamedContainer[GenerateProtoTask] = NamedContainer()

    def protoc(self, artifact: str) -> None:
        self.protoc_artifact = artifact

    def all_tasks(self, action: Callable[[GenerateProtoTask], None]) -> None:
        """Configure every current and future generate task."""
        self.generate_proto_tasks.all(action)

    def describe(self) -> dict[str, object]:
        return {
            "protoc": self.protoc_artifact,
            "tasks": {task.name: task.describe() for task in self.generate_proto_tasks},
        }


__all__ = ["GenerateProtoTask", "PluginOptions", "ProtobufConvention"]
