"""Maven repository declarations for the project model."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum
from typing import Final

MAVEN_CENTRAL_URL: Final[str] = "https://repo.maven.apache.org/maven2/"


class RepositoryContent(StrEnum):
    """Which kinds of versions a repository may serve."""

    ANY = "any"
    RELEASES_ONLY = "releases"
    SNAPSHOTS_ONLY = "snapshots"


@dataclass(frozen=True, slots=True)
class MavenRepository:
    url: str
    content: RepositoryContent = RepositoryContent.ANY
    include_group_patterns: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.url.strip():
            raise ValueError("repository url must not be empty")
        for pattern in self.include_group_patterns:
            re.compile(pattern)

    def serves(self, group: str, version: str) -> bool:
        """Check whether a module version may be resolved from this repository."""
        if self.include_group_patterns and not any(
            re.fullmatch(pattern, group) for pattern in self.include_group_patterns
        ):
            return False
        is_snapshot = version.endswith("-SNAPSHOT")
        if self.content is RepositoryContent.RELEASES_ONLY:
            return not is_snapshot
        if self.content is RepositoryContent.SNAPSHOTS_ONLY:
            return is_snapshot
        return True


class RepositoryHandler:
    """Ordered, duplicate-free list of repositories."""

    __slots__ = ("_repositories",)

    def __init__(self) -> None:
        self._repositories: list[MavenRepository] = []

    def __iter__(self) -> Iterator[MavenRepository]:
        return iter(tuple(self._repositories))

    def __len__(self) -> int:
        return len(self._repositories)

    def maven(
        self,
        url: str,
        *,
        content: RepositoryContent = RepositoryContent.ANY,
        include_group_patterns: tuple[str, ...] = (),
    ) -> MavenRepository:
        repository = MavenRepository(
            url=url, content=content, include_group_patterns=include_group_patterns
        )
        if repository not in self._repositories:
            self._repositories.append(repository)
        return repository

    def maven_central(self) -> MavenRepository:
        return self.maven(MAVEN_CENTRAL_URL)


__all__ = [
    "MAVEN_CENTRAL_URL",
    "MavenRepository",
    "RepositoryContent",
    "RepositoryHandler",
]
