"""Dependency sink of a project built on the framework."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from spine_bootstrap.errors import ExtensionConfigurationError
from spine_bootstrap.project.dependencies import DependantMixin, Dependency, ProjectDependant
from spine_bootstrap.project.repositories import RepositoryContent

if TYPE_CHECKING:
    from spine_bootstrap.config.artifacts import ArtifactSnapshot
    from spine_bootstrap.project.project import Project

SPINE_GROUP_PATTERN: Final[str] = r"io\.spine\b.*"


class SpineBasedProject(DependantMixin):
    """Declares dependencies of a project and the repositories they come from."""

    def __init__(self, project: Project) -> None:
        if project is None:
            raise ExtensionConfigurationError("project is required")
        self._project = project
        self._dependencies = ProjectDependant(project)

    def depend(self, configuration: str, notation: str) -> None:
        self._dependencies.depend(configuration, notation)

    def exclude(self, dependency: Dependency) -> None:
        self._dependencies.exclude(dependency)

    def force(self, notation: str) -> None:
        self._dependencies.force(notation)

    def remove_forced_dependency(self, notation: str) -> None:
        self._dependencies.remove_forced_dependency(notation)

    def prepare_repositories(self, artifacts: ArtifactSnapshot) -> None:
        """Add the framework release and snapshot repositories, then Maven Central."""
        repositories = self._project.repositories
        repositories.maven(
            artifacts.spine_repository,
            content=RepositoryContent.RELEASES_ONLY,
            include_group_patterns=(SPINE_GROUP_PATTERN,),
        )
        repositories.maven(
            artifacts.spine_snapshot_repository,
            content=RepositoryContent.SNAPSHOTS_ONLY,
            include_group_patterns=(SPINE_GROUP_PATTERN,),
        )
        repositories.maven_central()


__all__ = ["SPINE_GROUP_PATTERN", "SpineBasedProject"]
