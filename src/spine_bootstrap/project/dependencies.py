"""
spine-bootstrap - dependency declarations for the project model.

File: src/spine_bootstrap/project/dependencies.py

Purpose
- Value types for modules and artifacts (``group:name[:version]`` notations).
- Named dependency configurations with exclusions and transitivity.
- A resolution strategy holding forced versions.
- The :class:`Dependant` sink used by the Bootstrap extensions.

Functional requirements
- Declaring, forcing and excluding are total: repeating an operation is a no-op.
- Malformed notations fail with the offending notation in the message.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from spine_bootstrap.constants import (
    IMPLEMENTATION,
    RUNTIME_CLASSPATH,
    TEST_IMPLEMENTATION,
    TEST_RUNTIME_CLASSPATH,
)
from spine_bootstrap.project.container import NamedContainer

if TYPE_CHECKING:
    from spine_bootstrap.project.project import Project


@dataclass(frozen=True, slots=True)
class Dependency:
    """A module: a group ID and a name, with no version."""

    group: str
    name: str

    def __post_init__(self) -> None:
        for label, value in (("group", self.group), ("name", self.name)):
            if not value or ":" in value or value != value.strip():
                raise ValueError(f"dependency {label} is invalid: {value!r}")

    def of_version(self, version: str) -> Artifact:
        return Artifact(group=self.group, name=self.name, version=version)

    def __str__(self) -> str:
        return f"{self.group}:{self.name}"


@dataclass(frozen=True, slots=True)
class Artifact:
    """A concrete module version."""

    group: str
    name: str
    version: str

    def __post_init__(self) -> None:
        if not self.version or not self.version.strip():
            raise ValueError(f"artifact {self.group}:{self.name} must have a version")

    @property
    def module(self) -> Dependency:
        return Dependency(self.group, self.name)

    def notation(self) -> str:
        return f"{self.group}:{self.name}:{self.version}"

    def __str__(self) -> str:
        return self.notation()


def parse_notation(notation: str) -> Dependency | Artifact:
    """Parse ``group:name`` or ``group:name:version``."""

    parts = notation.strip().split(":")
    if len(parts) not in (2, 3) or not all(parts):
        raise ValueError(f"malformed dependency notation: {notation!r}")
    if len(parts) == 2:
        return Dependency(parts[0], parts[1])
    return Artifact(parts[0], parts[1], parts[2])


@dataclass(slots=True)
class Configuration:
    """A named bucket of dependency notations (a dependency scope)."""

    name: str
    transitive: bool = True
    notations: list[str] = field(default_factory=list)
    exclusions: list[Dependency] = field(default_factory=list)

    def add(self, notation: str) -> None:
        if notation not in self.notations:
            self.notations.append(notation)

    def exclude(self, module: Dependency) -> None:
        if module not in self.exclusions:
            self.exclusions.append(module)


class ResolutionStrategy:
    """Forced module versions, kept in insertion order without duplicates."""

    __slots__ = ("_forced",)

    def __init__(self) -> None:
        self._forced: list[str] = []

    @property
    def forced_modules(self) -> tuple[str, ...]:
        return tuple(self._forced)

    def force(self, notation: str) -> None:
        parsed = parse_notation(notation)
        if not isinstance(parsed, Artifact):
            raise ValueError(f"forced dependency must carry a version: {notation!r}")
        if notation not in self._forced:
            self._forced.append(notation)

    def remove(self, notation: str) -> None:
        if notation in self._forced:
            self._forced.remove(notation)


def new_configuration_container() -> NamedContainer[Configuration]:
    return NamedContainer(Configuration)


class DependencyHandler:
    """Adds notations to the project's configurations."""

    __slots__ = ("_configurations",)

    def __init__(self, configurations: NamedContainer[Configuration]) -> None:
        self._configurations = configurations

    def add(self, configuration: str, notation: str) -> None:
        parse_notation(notation)
        self._configurations.maybe_create(configuration).add(notation)


class Dependant(Protocol):
    """A sink for dependency declarations, typically a project."""

    def depend(self, configuration: str, notation: str) -> None: ...

    def implementation(self, notation: str) -> None: ...

    def test_implementation(self, notation: str) -> None: ...

    def exclude(self, dependency: Dependency) -> None: ...

    def force(self, notation: str) -> None: ...

    def remove_forced_dependency(self, notation: str) -> None: ...


class DependantMixin(ABC):
    """Convenience scopes over :meth:`Dependant.depend`."""

    @abstractmethod
    def depend(self, configuration: str, notation: str) -> None: ...

    def implementation(self, notation: str) -> None:
        self.depend(IMPLEMENTATION, notation)

    def test_implementation(self, notation: str) -> None:
        self.depend(TEST_IMPLEMENTATION, notation)


class ProjectDependant(DependantMixin):
    """A :class:`Dependant` implemented over the project's dependency model."""

    def __init__(self, project: Project) -> None:
        self._project = project

    def depend(self, configuration: str, notation: str) -> None:
        self._project.dependencies.add(configuration, notation)

    def exclude(self, dependency: Dependency) -> None:
        configurations = self._project.configurations
        for name in (RUNTIME_CLASSPATH, TEST_RUNTIME_CLASSPATH):
            configurations.maybe_create(name).exclude(dependency)

    def force(self, notation: str) -> None:
        self._project.resolution_strategy.force(notation)

    def remove_forced_dependency(self, notation: str) -> None:
        self._project.resolution_strategy.remove(notation)


__all__ = [
    "Artifact",
    "Configuration",
    "Dependant",
    "DependantMixin",
    "Dependency",
    "DependencyHandler",
    "ProjectDependant",
    "ResolutionStrategy",
    "new_configuration_container",
    "parse_notation",
]
