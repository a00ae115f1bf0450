"""
spine-bootstrap - built-in implementations of the host plugins.

File: src/spine_bootstrap/project/host_plugins.py

Purpose
- Provide in-memory counterparts of the plugins the Bootstrap extension
  applies: ``java``, ``com.google.protobuf``, ``idea``, the Java and JS model
  compilers, and the Dart Protobuf integration.

Functional requirements
- Each implementation only adds what other plugins and the Bootstrap
  extension observe: configurations, source sets, tasks and extensions.
- Plugins that build on the ``java`` plugin apply it first.
- Cross-plugin wiring goes through ``with_plugin`` so application order
  does not matter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Final

from spine_bootstrap.constants import (
    ASSEMBLE,
    BUILD,
    BUILD_DIR,
    COMPILE_JAVA,
    COMPILE_TEST_JAVA,
    GENERATE_JSON_PARSERS,
    GENERATE_PROTO,
    GENERATE_REJECTIONS,
    GENERATE_TEST_REJECTIONS,
    IDEA_PLUGIN_ID,
    IMPLEMENTATION,
    JAVA_PLUGIN_ID,
    MAIN_SOURCE_SET,
    MODEL_COMPILER_PLUGIN_ID,
    PROCESS_RESOURCES,
    PROTOBUF_CONFIGURATION,
    PROTOBUF_PLUGIN_ID,
    PROTO_DART_PLUGIN_ID,
    PROTO_JS_PLUGIN_ID,
    RUNTIME_CLASSPATH,
    TEST_IMPLEMENTATION,
    TEST_RUNTIME_CLASSPATH,
    TEST_SOURCE_SET,
)
from spine_bootstrap.project.layout import IdeaModule, SourceSet
from spine_bootstrap.project.plugins import PluginImplementation
from spine_bootstrap.project.protobuf import GenerateProtoTask, ProtobufConvention
from spine_bootstrap.project.tasks import task_name_for

if TYPE_CHECKING:
    from spine_bootstrap.project.project import Project

PROTOBUF_EXTENSION_NAME: Final[str] = "protobuf"
IDEA_EXTENSION_NAME: Final[str] = "idea"
MODEL_COMPILER_EXTENSION_NAME: Final[str] = "modelCompiler"
PROTO_JS_EXTENSION_NAME: Final[str] = "protoJs"
PROTO_DART_EXTENSION_NAME: Final[str] = "protoDart"

DESCRIPTORS_DIR: Final[str] = "descriptors"
KNOWN_TYPES_FILE: Final[str] = "known_types.desc"


@dataclass(slots=True)
class ModelCompilerExtension:
    """Settings of the Java model compiler."""

    generate_validating_builders: bool = True

    def describe(self) -> dict[str, object]:
        return {"generate_validating_builders": self.generate_validating_builders}


@dataclass(slots=True)
class ProtoJsExtension:
    """Settings of the JavaScript model compiler."""

    generate_parsers_task: str = GENERATE_JSON_PARSERS

    def describe(self) -> dict[str, object]:
        return {"generate_parsers_task": self.generate_parsers_task}


@dataclass(slots=True)
class ProtoDartExtension:
    """Descriptor sets and output directories of the Dart integration."""

    main_descriptor_set: Path
    test_descriptor_set: Path
    lib_dir: Path
    test_dir: Path
    project_dir: Path = field(repr=False, default=Path("."))

    @classmethod
    def for_project(cls, project: Project) -> ProtoDartExtension:
        descriptors = project.project_dir / BUILD_DIR / DESCRIPTORS_DIR
        return cls(
            main_descriptor_set=descriptors / MAIN_SOURCE_SET / KNOWN_TYPES_FILE,
            test_descriptor_set=descriptors / TEST_SOURCE_SET / KNOWN_TYPES_FILE,
            lib_dir=project.project_dir / "lib",
            test_dir=project.project_dir / "test",
            project_dir=project.project_dir,
        )

    def describe(self) -> dict[str, object]:
        def relative(path: Path) -> str:
            try:
                return path.relative_to(self.project_dir).as_posix()
            except ValueError:
                return path.as_posix()

        return {
            "main_descriptor_set": relative(self.main_descriptor_set),
            "test_descriptor_set": relative(self.test_descriptor_set),
            "lib_dir": relative(self.lib_dir),
            "test_dir": relative(self.test_dir),
        }


def apply_java(project: Project) -> None:
    for configuration in (
        IMPLEMENTATION,
        TEST_IMPLEMENTATION,
        RUNTIME_CLASSPATH,
        TEST_RUNTIME_CLASSPATH,
    ):
        project.configurations.maybe_create(configuration)

    tasks = project.tasks
    tasks.maybe_create(PROCESS_RESOURCES)
    tasks.maybe_create(COMPILE_JAVA)
    tasks.maybe_create(COMPILE_TEST_JAVA).depends_on(COMPILE_JAVA)
    tasks.maybe_create(ASSEMBLE).depends_on(COMPILE_JAVA, PROCESS_RESOURCES)
    tasks.maybe_create(BUILD).depends_on(ASSEMBLE, COMPILE_TEST_JAVA)

    project.source_sets.maybe_create(MAIN_SOURCE_SET)
    project.source_sets.maybe_create(TEST_SOURCE_SET)


def apply_protobuf(project: Project) -> None:
    convention = ProtobufConvention()
    project.extensions.add(PROTOBUF_EXTENSION_NAME, convention)
    project.configurations.maybe_create(PROTOBUF_CONFIGURATION)

    def add_generate_task(source_set: SourceSet) -> None:
        name = task_name_for("generate", source_set.name, "Proto")
        generate = GenerateProtoTask(name=name, source_set=source_set.name)
        generate.builtins.create("java")
        convention.generate_proto_tasks.add(generate)
        project.tasks.maybe_create(name)
        project.plugins.with_plugin(
            JAVA_PLUGIN_ID,
            lambda: project.tasks.maybe_create(
                task_name_for("compile", source_set.name, "Java")
            ).depends_on(name),
        )

    project.source_sets.all(add_generate_task)


def apply_idea(project: Project) -> None:
    project.extensions.add(IDEA_EXTENSION_NAME, IdeaModule())


def apply_model_compiler(project: Project) -> None:
    project.plugins.apply(JAVA_PLUGIN_ID)
    project.extensions.add(MODEL_COMPILER_EXTENSION_NAME, ModelCompilerExtension())
    tasks = project.tasks
    tasks.maybe_create(GENERATE_REJECTIONS)
    tasks.maybe_create(GENERATE_TEST_REJECTIONS)
    tasks.get_by_name(COMPILE_JAVA).depends_on(GENERATE_REJECTIONS)
    tasks.get_by_name(COMPILE_TEST_JAVA).depends_on(GENERATE_TEST_REJECTIONS)


def apply_proto_js(project: Project) -> None:
    extension = ProtoJsExtension()
    project.extensions.add(PROTO_JS_EXTENSION_NAME, extension)
    parsers = project.tasks.maybe_create(extension.generate_parsers_task)
    project.plugins.with_plugin(PROTOBUF_PLUGIN_ID, lambda: parsers.depends_on(GENERATE_PROTO))


def apply_proto_dart(project: Project) -> None:
    project.extensions.add(PROTO_DART_EXTENSION_NAME, ProtoDartExtension.for_project(project))


HOST_PLUGINS: Final[dict[str, PluginImplementation]] = {
    JAVA_PLUGIN_ID: apply_java,
    PROTOBUF_PLUGIN_ID: apply_protobuf,
    IDEA_PLUGIN_ID: apply_idea,
    MODEL_COMPILER_PLUGIN_ID: apply_model_compiler,
    PROTO_JS_PLUGIN_ID: apply_proto_js,
    PROTO_DART_PLUGIN_ID: apply_proto_dart,
}


__all__ = [
    "HOST_PLUGINS",
    "ModelCompilerExtension",
    "ProtoDartExtension",
    "ProtoJsExtension",
    "apply_idea",
    "apply_java",
    "apply_model_compiler",
    "apply_proto_dart",
    "apply_proto_js",
    "apply_protobuf",
]
