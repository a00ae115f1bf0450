"""
spine-bootstrap project model public API.

File: src/spine_bootstrap/project/__init__.py

Purpose
- Export the in-memory build project and the sinks the Bootstrap extension
  drives: plugin application, dependency declaration, generated source root
  registration and the task graph.

Non-functional requirements
- Importing the package has no side effects.
"""

from spine_bootstrap.project.container import NamedContainer
from spine_bootstrap.project.dependencies import (
    Artifact,
    Configuration,
    Dependant,
    DependantMixin,
    Dependency,
    ProjectDependant,
    ResolutionStrategy,
    parse_notation,
)
from spine_bootstrap.project.host_plugins import (
    HOST_PLUGINS,
    ModelCompilerExtension,
    ProtoDartExtension,
    ProtoJsExtension,
)
from spine_bootstrap.project.layout import (
    GeneratedSourceRoot,
    IdeaModule,
    ProjectSourceSuperset,
    SourceSet,
    SourceSuperset,
)
from spine_bootstrap.project.plugins import PluginManager, PluginTarget, ProjectPluginTarget
from spine_bootstrap.project.project import ExtensionContainer, Project
from spine_bootstrap.project.protobuf import GenerateProtoTask, PluginOptions, ProtobufConvention
from spine_bootstrap.project.repositories import (
    MavenRepository,
    RepositoryContent,
    RepositoryHandler,
)
from spine_bootstrap.project.task_graph import CycleError, TaskGraph
from spine_bootstrap.project.tasks import Task, TaskContainer, TaskOutcome, TaskResult

__all__ = [
    "Artifact",
    "Configuration",
    "CycleError",
    "Dependant",
    "DependantMixin",
    "Dependency",
    "ExtensionContainer",
    "GenerateProtoTask",
    "GeneratedSourceRoot",
    "HOST_PLUGINS",
    "IdeaModule",
    "MavenRepository",
    "ModelCompilerExtension",
    "NamedContainer",
    "PluginManager",
    "PluginOptions",
    "PluginTarget",
    "Project",
    "ProjectDependant",
    "ProjectPluginTarget",
    "ProjectSourceSuperset",
    "ProtoDartExtension",
    "ProtoJsExtension",
    "ProtobufConvention",
    "RepositoryContent",
    "RepositoryHandler",
    "ResolutionStrategy",
    "SourceSet",
    "SourceSuperset",
    "Task",
    "TaskContainer",
    "TaskGraph",
    "TaskOutcome",
    "TaskResult",
    "parse_notation",
]
