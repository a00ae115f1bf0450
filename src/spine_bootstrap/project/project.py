"""In-memory project model driven by the Bootstrap extension."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from pathlib import Path
from typing import Any, TypeVar

import structlog

from spine_bootstrap.project.dependencies import (
    Configuration,
    DependencyHandler,
    ResolutionStrategy,
    new_configuration_container,
)
from spine_bootstrap.project.layout import IdeaModule, SourceSet, new_source_set_container
from spine_bootstrap.project.plugins import PluginImplementation, PluginManager
from spine_bootstrap.project.protobuf import ProtobufConvention
from spine_bootstrap.project.repositories import RepositoryHandler
from spine_bootstrap.project.tasks import TaskContainer

E = TypeVar("E")


class ExtensionContainer:
    """Named extension objects, looked up by name or by type."""

    __slots__ = ("_extensions",)

    def __init__(self) -> None:
        self._extensions: dict[str, object] = {}

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._extensions)

    def add(self, name: str, extension: object) -> None:
        if name in self._extensions:
            raise ValueError(f"extension {name!r} is already registered")
        self._extensions[name] = extension

    def find_by_name(self, name: str) -> object | None:
        return self._extensions.get(name)

    def get_by_name(self, name: str) -> object:
        try:
            return self._extensions[name]
        except KeyError:
            raise KeyError(f"extension {name!r} not found; known: {list(self._extensions)}") from None

    def find_by_type(self, kind: type[E]) -> E | None:
        for extension in self._extensions.values():
            if isinstance(extension, kind):
                return extension
        return None

    def get_by_type(self, kind: type[E]) -> E:
        found = self.find_by_type(kind)
        if found is None:
            raise KeyError(f"no extension of type {kind.__name__}")
        return found

    def __iter__(self) -> Iterator[tuple[str, object]]:
        return iter(tuple(self._extensions.items()))


class Project:
    """A build project: plugins, dependencies, source sets, tasks and extensions."""

    def __init__(
        self,
        name: str,
        project_dir: Path,
        *,
        plugin_implementations: Mapping[str, PluginImplementation] | None = None,
        logger: Any | None = None,
    ) -> None:
        if not name.strip():
            raise ValueError("project name must not be empty")
        if plugin_implementations is None:
            from spine_bootstrap.project.host_plugins import HOST_PLUGINS

            plugin_implementations = HOST_PLUGINS

        self.name = name
        self.project_dir = Path(project_dir)
        self._logger = logger if logger is not None else structlog.get_logger(__name__)

        self.configurations = new_configuration_container()
        self.dependencies = DependencyHandler(self.configurations)
        self.resolution_strategy = ResolutionStrategy()
        self.source_sets = new_source_set_container()
        self.tasks = TaskContainer(logger=self._logger)
        self.repositories = RepositoryHandler()
        self.extensions = ExtensionContainer()
        self.plugins = PluginManager(self, plugin_implementations, logger=self._logger)

        self._after_evaluate: list[Callable[[Project], None]] = []
        self._evaluated = False

    @property
    def evaluated(self) -> bool:
        return self._evaluated

    def file(self, path: str | Path) -> Path:
        """Resolve ``path`` against the project directory."""
        return self.project_dir / path

    def after_evaluate(self, action: Callable[[Project], None]) -> None:
        if self._evaluated:
            action(self)
            return
        self._after_evaluate.append(action)

    def evaluate(self) -> None:
        """Finish configuration by running the after-evaluate callbacks once."""
        if self._evaluated:
            return
        self._evaluated = True
        pending, self._after_evaluate = self._after_evaluate, []
        for action in pending:
            action(self)
        self._logger.debug("project_evaluated", project=self.name, callbacks=len(pending))

    def describe(self) -> dict[str, object]:
        """Return a JSON-friendly snapshot of the configured build."""
        plan: dict[str, object] = {
            "project": self.name,
            "plugins": list(self.plugins.applied),
            "repositories": [
                {
                    "url": repository.url,
                    "content": repository.content.value,
                    "groups": list(repository.include_group_patterns),
                }
                for repository in self.repositories
            ],
            "configurations": {
                configuration.name: _describe_configuration(configuration)
                for configuration in self.configurations
            },
            "forced": list(self.resolution_strategy.forced_modules),
            "source_sets": {
                source_set.name: self._describe_source_set(source_set)
                for source_set in self.source_sets
            },
            "tasks": {
                task.name: {
                    "enabled": task.enabled,
                    "depends_on": sorted(task.dependencies),
                    "should_run_after": sorted(task.run_after),
                    "actions": len(task.actions),
                }
                for task in self.tasks
            },
        }
        protobuf = self.extensions.find_by_type(ProtobufConvention)
        if protobuf is not None:
            plan["protobuf"] = protobuf.describe()
        idea = self.extensions.find_by_type(IdeaModule)
        if idea is not None:
            plan["idea"] = {
                "generated_source_dirs": [self._relative(d) for d in idea.generated_source_dirs]
            }
        extensions: dict[str, object] = {}
        for name, extension in self.extensions:
            describe = getattr(extension, "describe", None)
            if callable(describe) and not isinstance(extension, ProtobufConvention):
                extensions[name] = describe()
        if extensions:
            plan["extensions"] = extensions
        return plan

    def _describe_source_set(self, source_set: SourceSet) -> dict[str, list[str]]:
        return {
            "java": [self._relative(d) for d in source_set.java_dirs],
            "resources": [self._relative(d) for d in source_set.resource_dirs],
        }

    def _relative(self, path: Path) -> str:
        try:
            return path.relative_to(self.project_dir).as_posix()
        except ValueError:
            return path.as_posix()

    def __repr__(self) -> str:
        return f"Project(name={self.name!r}, project_dir={str(self.project_dir)!r})"


def _describe_configuration(configuration: Configuration) -> dict[str, object]:
    return {
        "transitive": configuration.transitive,
        "dependencies": list(configuration.notations),
        "exclusions": [str(module) for module in configuration.exclusions],
    }


__all__ = ["ExtensionContainer", "Project"]
