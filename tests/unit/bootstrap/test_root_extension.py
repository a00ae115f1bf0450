"""Unit tests for the ``spine`` extension facade."""

from __future__ import annotations

from pathlib import Path

from given import PROTOBUF_JAVA, SPINE_VERSION, given_context, live_context, spine

from spine_bootstrap.bootstrap.extension import Extension
from spine_bootstrap.bootstrap.java import JavaExtension
from spine_bootstrap.constants import (
    COMPILE_JAVA,
    COMPILE_TEST_JAVA,
    IMPLEMENTATION,
    PROTOBUF_CONFIGURATION,
    TEST_IMPLEMENTATION,
)
from spine_bootstrap.project.project import Project
from spine_bootstrap.tools.dart_code_gen import DartCodeGen


class _Quiet:
    def warning(self, event: str, **_: object) -> None: ...

    def info(self, event: str, **_: object) -> None: ...

    def debug(self, event: str, **_: object) -> None: ...


def _extension(project: Project) -> Extension:
    code_gen = DartCodeGen(project.project_dir / "dart_code_gen", logger=_Quiet())
    return Extension(live_context(project), dart_code_gen=code_gen)


def test_version_comes_from_snapshot() -> None:
    assert Extension(given_context().context).version() == SPINE_VERSION


def test_enable_java_turns_compilation_on(tmp_path: Path) -> None:
    project = Project("java", tmp_path)
    extension = _extension(project)
    configured: list[JavaExtension] = []

    java = extension.enable_java(configured.append)

    assert configured == [java]
    assert extension.java_enabled
    assert project.tasks.get_by_name(COMPILE_JAVA).enabled
    assert project.tasks.get_by_name(COMPILE_TEST_JAVA).enabled
    assert project.configurations.get_by_name(PROTOBUF_CONFIGURATION).transitive is False
    assert spine("testlib") in project.configurations.get_by_name(TEST_IMPLEMENTATION).notations


def test_enable_java_declares_exactly_base_and_time(tmp_path: Path) -> None:
    project = Project("java", tmp_path)

    _extension(project).enable_java()

    assert project.configurations.get_by_name(IMPLEMENTATION).notations == [
        spine("base"),
        spine("time"),
    ]


def test_javascript_alone_disables_java_compilation(tmp_path: Path) -> None:
    project = Project("js", tmp_path)
    extension = _extension(project)

    extension.enable_javascript()

    assert not extension.java_enabled
    assert project.tasks.get_by_name(COMPILE_JAVA).enabled is False
    assert project.tasks.get_by_name(COMPILE_TEST_JAVA).enabled is False
    assert project.configurations.get_by_name(PROTOBUF_CONFIGURATION).transitive is False


def test_javascript_after_java_keeps_compilation(tmp_path: Path) -> None:
    project = Project("mixed", tmp_path)
    extension = _extension(project)

    extension.enable_java()
    extension.enable_javascript()

    assert project.tasks.get_by_name(COMPILE_JAVA).enabled
    assert extension.enabled_targets == ("java", "javascript")


def test_dart_alone_disables_java_compilation(tmp_path: Path) -> None:
    project = Project("dart", tmp_path)
    extension = _extension(project)

    extension.enable_dart()

    assert project.tasks.get_by_name(COMPILE_JAVA).enabled is False


def test_disable_java_generation_before_java_plugin_is_harmless(tmp_path: Path) -> None:
    project = Project("none", tmp_path)
    extension = _extension(project)

    extension.disable_java_generation()

    assert not extension.java_enabled
    assert COMPILE_JAVA not in project.tasks


def test_force_dependencies_round_trip() -> None:
    given = given_context()
    extension = Extension(given.context)
    given.dependant.force("org.example:kept:1.0")

    extension.force_dependencies = True
    assert extension.force_dependencies
    assert given.dependant.forced == ["org.example:kept:1.0", PROTOBUF_JAVA]

    extension.force_dependencies = False
    assert given.dependant.forced == ["org.example:kept:1.0"]


def test_assemble_model_and_describe(tmp_path: Path) -> None:
    project = Project("model", tmp_path)
    extension = _extension(project)

    extension.assemble_model()

    assert extension.describe() == {
        "version": SPINE_VERSION,
        "targets": ["model"],
        "java_enabled": False,
        "force_dependencies": False,
        "java_codegen": {"protobuf": True, "grpc": False, "spine": True},
    }
