"""In-memory collaborators for extension tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from spine_bootstrap.bootstrap.context import CodeGenContext
from spine_bootstrap.bootstrap.dependant import SpineBasedProject
from spine_bootstrap.config.artifacts import ArtifactSnapshot
from spine_bootstrap.project.dependencies import DependantMixin, Dependency
from spine_bootstrap.project.layout import GeneratedSourceRoot, ProjectSourceSuperset
from spine_bootstrap.project.plugins import ProjectPluginTarget
from spine_bootstrap.project.project import Project
from spine_bootstrap.project.protobuf import ProtobufConvention

SPINE_VERSION = "42.3.14-AVOCADO"
GRPC_PROTOBUF = "io.foo.bar.grpc:fake-pb-dependency:6.14"
GRPC_STUB = "io.foo.bar.grpc:stub-dependency:6.14"
PROTOC = "com.google.protobuf:protoc:3.6.1"
PROTOBUF_JAVA = "com.google.protobuf:protobuf-java:3.6.1"
RELEASES = "http://fake.maven.repo.org/releases"
SNAPSHOTS = "http://fake.maven.repo.org/snapshots"


def fake_artifacts() -> ArtifactSnapshot:
    return ArtifactSnapshot(
        spine_base_version=SPINE_VERSION,
        spine_time_version=SPINE_VERSION,
        spine_core_version=SPINE_VERSION,
        spine_web_version=SPINE_VERSION,
        spine_gcloud_version=SPINE_VERSION,
        protoc=PROTOC,
        protobuf_java=PROTOBUF_JAVA,
        grpc_protobuf=GRPC_PROTOBUF,
        grpc_stub=GRPC_STUB,
        spine_repository=RELEASES,
        spine_snapshot_repository=SNAPSHOTS,
    )


class MemoizingPluginTarget:
    """Remembers applied plugins without touching a project."""

    def __init__(self) -> None:
        self.applied: list[str] = []

    def apply(self, plugin_id: str) -> None:
        if plugin_id not in self.applied:
            self.applied.append(plugin_id)

    def is_applied(self, plugin_id: str) -> bool:
        return plugin_id in self.applied


class MemoizingDependant(DependantMixin):
    """Records dependency declarations per configuration."""

    def __init__(self) -> None:
        self.dependencies: dict[str, list[str]] = {}
        self.exclusions: list[Dependency] = []
        self.forced: list[str] = []

    def depend(self, configuration: str, notation: str) -> None:
        notations = self.dependencies.setdefault(configuration, [])
        if notation not in notations:
            notations.append(notation)

    def exclude(self, dependency: Dependency) -> None:
        if dependency not in self.exclusions:
            self.exclusions.append(dependency)

    def force(self, notation: str) -> None:
        if notation not in self.forced:
            self.forced.append(notation)

    def remove_forced_dependency(self, notation: str) -> None:
        if notation in self.forced:
            self.forced.remove(notation)

    def all_notations(self) -> list[str]:
        return [notation for notations in self.dependencies.values() for notation in notations]


class MemoizingSourceSuperset:
    def __init__(self) -> None:
        self.roots: list[GeneratedSourceRoot] = []

    def register(self, root: GeneratedSourceRoot) -> None:
        self.roots.append(root)


@dataclass(slots=True)
class Given:
    """A context whose sinks only record what the extensions ask for."""

    project: Project
    plugins: MemoizingPluginTarget = field(default_factory=MemoizingPluginTarget)
    dependant: MemoizingDependant = field(default_factory=MemoizingDependant)
    superset: MemoizingSourceSuperset = field(default_factory=MemoizingSourceSuperset)
    context: CodeGenContext = field(init=False)

    def __post_init__(self) -> None:
        self.context = CodeGenContext.create(
            project=self.project,
            plugin_target=self.plugins,
            dependant=self.dependant,
            source_superset=self.superset,
            artifacts=fake_artifacts(),
        )


def given_context(tmp_path: Path | None = None) -> Given:
    return Given(Project("fake", tmp_path if tmp_path is not None else Path("fake-project")))


def spine(short_name: str, group: str = "io.spine") -> str:
    return f"{group}:spine-{short_name}:{SPINE_VERSION}"


def live_context(project: Project) -> CodeGenContext:
    """A context wired to the project's own plugin, dependency and source sinks."""
    return CodeGenContext.create(
        project=project,
        plugin_target=ProjectPluginTarget(project),
        dependant=SpineBasedProject(project),
        source_superset=ProjectSourceSuperset(project),
        artifacts=fake_artifacts(),
    )


def generate_task_jobs(project: Project, task_name: str) -> tuple[list[str], list[str]]:
    """Built-in and plugin job names of one generate task."""
    convention = project.extensions.get_by_type(ProtobufConvention)
    task = convention.generate_proto_tasks.get_by_name(task_name)
    return list(task.builtins.names), list(task.plugins.names)
