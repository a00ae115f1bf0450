"""
spine-bootstrap - collaborators shared by the code-generation extensions.

File: src/spine_bootstrap/bootstrap/context.py

Purpose
- Bundle the project, the job registry, the plugin, dependency and source
  root sinks, and the artifact snapshot into one validated value.
- Provide the enable/disable baseline every target runs and the
  :class:`CodeGenTarget` capability the root extension works with.

Functional requirements
- Construction fails with :class:`ExtensionConfigurationError` naming the
  first missing collaborator.
- The baseline applies ``java``, declares ``base`` and ``time`` at snapshot
  versions, and turns the target's job on as a built-in of ``protoc``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TypeVar

from spine_bootstrap.bootstrap.dependencies import SpineDependency
from spine_bootstrap.bootstrap.plugin_target import SpinePluginTarget
from spine_bootstrap.errors import ExtensionConfigurationError
from spine_bootstrap.project.dependencies import Dependant
from spine_bootstrap.project.layout import SourceSuperset
from spine_bootstrap.project.plugins import PluginTarget
from spine_bootstrap.protoc.generator import ProtobufGenerator
from spine_bootstrap.protoc.plugin import ProtocPlugin

if TYPE_CHECKING:
    from spine_bootstrap.config.artifacts import ArtifactSnapshot
    from spine_bootstrap.project.project import Project

T = TypeVar("T")


class CodeGenTarget(Protocol):
    """A language the project can generate code for."""

    def enable(self) -> None: ...

    def disable(self) -> None: ...

    def forced_dependencies(self) -> tuple[str, ...]: ...


@dataclass(frozen=True, slots=True)
class CodeGenContext:
    project: Project
    generator: ProtobufGenerator
    plugin_target: SpinePluginTarget
    dependant: Dependant
    source_superset: SourceSuperset
    artifacts: ArtifactSnapshot

    @classmethod
    def create(
        cls,
        *,
        project: Project | None,
        plugin_target: PluginTarget | None,
        dependant: Dependant | None,
        source_superset: SourceSuperset | None,
        artifacts: ArtifactSnapshot | None,
        generator: ProtobufGenerator | None = None,
    ) -> CodeGenContext:
        """Validate collaborators and build the context."""
        checked_project = _require("project", project)
        target = _require("plugin_target", plugin_target)
        checked_dependant = _require("dependant", dependant)
        superset = _require("source_superset", source_superset)
        snapshot = _require("artifacts", artifacts)

        if not isinstance(target, SpinePluginTarget):
            target = SpinePluginTarget(target)
        return cls(
            project=checked_project,
            generator=generator if generator is not None else ProtobufGenerator(checked_project),
            plugin_target=target,
            dependant=checked_dependant,
            source_superset=superset,
            artifacts=snapshot,
        )


def _require(name: str, value: T | None) -> T:
    if value is None:
        raise ExtensionConfigurationError(f"code generation context requires {name!r}")
    return value


def enable_baseline(context: CodeGenContext, code_gen_job: ProtocPlugin | None) -> None:
    """Steps every target takes when enabled."""
    context.plugin_target.apply_java_plugin()
    artifacts = context.artifacts
    dependant = context.dependant
    dependant.implementation(
        SpineDependency.base().of_version(artifacts.spine_base_version).notation()
    )
    dependant.implementation(
        SpineDependency.time().of_version(artifacts.spine_time_version).notation()
    )
    if code_gen_job is not None:
        context.plugin_target.apply_protobuf_plugin()
        context.generator.enable_built_in(code_gen_job)


def disable_baseline(context: CodeGenContext, code_gen_job: ProtocPlugin | None) -> None:
    """Turn the target's job off; dependencies and plugins stay."""
    if code_gen_job is not None:
        context.generator.disable_built_in(code_gen_job)


def force_dependencies(context: CodeGenContext, target: CodeGenTarget) -> None:
    for notation in target.forced_dependencies():
        context.dependant.force(notation)


def release_dependencies(context: CodeGenContext, target: CodeGenTarget) -> None:
    for notation in target.forced_dependencies():
        context.dependant.remove_forced_dependency(notation)


__all__ = [
    "CodeGenContext",
    "CodeGenTarget",
    "disable_baseline",
    "enable_baseline",
    "force_dependencies",
    "release_dependencies",
]
