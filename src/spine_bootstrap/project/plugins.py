"""
spine-bootstrap - plugin application for the project model.

File: src/spine_bootstrap/project/plugins.py

Purpose
- Apply plugins to a project by identifier and let callers defer work until a
  plugin is applied.

Functional requirements
- ``apply`` is idempotent: a second application of the same identifier is a no-op.
- ``with_plugin(id, action)`` runs ``action`` immediately when the plugin is
  already applied, otherwise exactly once right after it gets applied.
- Unknown identifiers raise :class:`UnknownPluginError`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, Protocol

import structlog

from spine_bootstrap.errors import UnknownPluginError

if TYPE_CHECKING:
    from spine_bootstrap.project.project import Project

PluginImplementation = Callable[["Project"], None]
PluginAction = Callable[[], None]


class PluginTarget(Protocol):
    """A target of plugin application, typically a project."""

    def apply(self, plugin_id: str) -> None: ...

    def is_applied(self, plugin_id: str) -> bool: ...


class PluginManager:
    """Tracks applied plugins and the actions waiting for them."""

    def __init__(
        self,
        project: Project,
        implementations: Mapping[str, PluginImplementation],
        *,
        logger: Any | None = None,
    ) -> None:
        self._project = project
        self._implementations = dict(implementations)
        self._applied: list[str] = []
        self._applying: set[str] = set()
        self._pending: dict[str, list[PluginAction]] = {}
        self._logger = logger if logger is not None else structlog.get_logger(__name__)

    @property
    def applied(self) -> tuple[str, ...]:
        """Applied plugin identifiers in application order."""
        return tuple(self._applied)

    def register(self, plugin_id: str, implementation: PluginImplementation) -> None:
        self._implementations[plugin_id] = implementation

    def has_plugin(self, plugin_id: str) -> bool:
        return plugin_id in self._applied

    def apply(self, plugin_id: str) -> None:
        if plugin_id in self._applied or plugin_id in self._applying:
            return
        implementation = self._implementations.get(plugin_id)
        if implementation is None:
            raise UnknownPluginError(plugin_id)

        self._applying.add(plugin_id)
        try:
            implementation(self._project)
        finally:
            self._applying.discard(plugin_id)
        self._applied.append(plugin_id)
        self._logger.debug("plugin_applied", plugin_id=plugin_id, project=self._project.name)

        for action in self._pending.pop(plugin_id, []):
            action()

    def with_plugin(self, plugin_id: str, action: PluginAction) -> None:
        """Run ``action`` now if ``plugin_id`` is applied, else once when it is."""
        if self.has_plugin(plugin_id):
            action()
            return
        self._pending.setdefault(plugin_id, []).append(action)


class ProjectPluginTarget:
    """A :class:`PluginTarget` backed by the project's plugin manager."""

    def __init__(self, project: Project) -> None:
        self._plugins = project.plugins

    def apply(self, plugin_id: str) -> None:
        self._plugins.apply(plugin_id)

    def is_applied(self, plugin_id: str) -> bool:
        return self._plugins.has_plugin(plugin_id)


__all__ = [
    "PluginAction",
    "PluginImplementation",
    "PluginManager",
    "PluginTarget",
    "ProjectPluginTarget",
]
