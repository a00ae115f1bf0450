"""Source sets, generated source roots, and IDE module directories."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from spine_bootstrap.constants import (
    GENERATED_DIR,
    GENERATED_JAVA_SUBDIRS,
    GENERATED_RESOURCES_SUBDIR,
    IDEA_PLUGIN_ID,
)
from spine_bootstrap.project.container import NamedContainer

if TYPE_CHECKING:
    from spine_bootstrap.project.project import Project


@dataclass(slots=True)
class SourceSet:
    """A build variant: ``main``, ``test``, and so on."""

    name: str
    java_dirs: list[Path] = field(default_factory=list)
    resource_dirs: list[Path] = field(default_factory=list)

    def add_java_dir(self, directory: Path) -> None:
        if directory not in self.java_dirs:
            self.java_dirs.append(directory)

    def add_resource_dir(self, directory: Path) -> None:
        if directory not in self.resource_dirs:
            self.resource_dirs.append(directory)


def new_source_set_container() -> NamedContainer[SourceSet]:
    return NamedContainer(SourceSet)


@dataclass(slots=True)
class IdeaModule:
    """IDE module settings contributed by the ``idea`` plugin."""

    source_dirs: list[Path] = field(default_factory=list)
    test_source_dirs: list[Path] = field(default_factory=list)
    generated_source_dirs: list[Path] = field(default_factory=list)

    def mark_generated(self, directory: Path, *, test: bool) -> None:
        bucket = self.test_source_dirs if test else self.source_dirs
        if directory not in bucket:
            bucket.append(directory)
        if directory not in self.generated_source_dirs:
            self.generated_source_dirs.append(directory)


@dataclass(frozen=True, slots=True)
class GeneratedSourceRoot:
    """The root directory of generated code, one sub-directory per source set."""

    path: Path

    @classmethod
    def of(cls, project: Project) -> GeneratedSourceRoot:
        return cls(project.project_dir / GENERATED_DIR)

    def java_dirs(self, source_set: str) -> tuple[Path, ...]:
        return tuple(self.path / source_set / sub for sub in GENERATED_JAVA_SUBDIRS)

    def resources_dir(self, source_set: str) -> Path:
        return self.path / source_set / GENERATED_RESOURCES_SUBDIR


class SourceSuperset(Protocol):
    """A sink for generated source root registration."""

    def register(self, root: GeneratedSourceRoot) -> None: ...


class ProjectSourceSuperset:
    """Registers generated roots on every source set of a project.

    Source sets created after registration are covered as well. When the
    ``idea`` plugin is applied, the same directories are marked as generated
    source roots of the IDE module.
    """

    def __init__(self, project: Project) -> None:
        self._project = project

    def register(self, root: GeneratedSourceRoot) -> None:
        self._project.source_sets.all(lambda source_set: self._register_in(root, source_set))

    def _register_in(self, root: GeneratedSourceRoot, source_set: SourceSet) -> None:
        for directory in root.java_dirs(source_set.name):
            source_set.add_java_dir(directory)
        source_set.add_resource_dir(root.resources_dir(source_set.name))

        project = self._project
        is_test = source_set.name != "main"
        project.plugins.with_plugin(
            IDEA_PLUGIN_ID,
            lambda: _mark_in_ide(project, root.java_dirs(source_set.name), test=is_test),
        )


def _mark_in_ide(project: Project, directories: tuple[Path, ...], *, test: bool) -> None:
    module = project.extensions.get_by_type(IdeaModule)
    for directory in directories:
        module.mark_generated(directory, test=test)


__all__ = [
    "GeneratedSourceRoot",
    "IdeaModule",
    "ProjectSourceSuperset",
    "SourceSet",
    "SourceSuperset",
    "new_source_set_container",
]
