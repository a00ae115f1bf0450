"""Unit tests for Java code generation."""

from __future__ import annotations

from pathlib import Path

from given import (
    GRPC_PROTOBUF,
    GRPC_STUB,
    PROTOBUF_JAVA,
    generate_task_jobs,
    given_context,
    live_context,
    spine,
)

from spine_bootstrap.bootstrap.dependencies import protobuf_lite
from spine_bootstrap.bootstrap.java import JavaExtension
from spine_bootstrap.constants import (
    GENERATE_PROTO,
    GENERATE_REJECTIONS,
    GENERATE_TEST_PROTO,
    GENERATE_TEST_REJECTIONS,
    IMPLEMENTATION,
    JAVA_PLUGIN_ID,
    MODEL_COMPILER_PLUGIN_ID,
    PROTOBUF_PLUGIN_ID,
    TEST_IMPLEMENTATION,
)
from spine_bootstrap.project.host_plugins import ModelCompilerExtension
from spine_bootstrap.project.layout import GeneratedSourceRoot
from spine_bootstrap.project.project import Project


def test_enable_applies_plugins_and_declares_dependencies() -> None:
    given = given_context()

    JavaExtension(given.context).enable()

    assert given.plugins.applied == [JAVA_PLUGIN_ID, PROTOBUF_PLUGIN_ID, MODEL_COMPILER_PLUGIN_ID]
    assert given.dependant.dependencies[IMPLEMENTATION] == [spine("base"), spine("time")]
    assert given.dependant.dependencies[TEST_IMPLEMENTATION] == [
        spine("testlib"),
        spine("testutil-time"),
    ]
    assert given.dependant.exclusions == [protobuf_lite()]
    assert given.superset.roots == [GeneratedSourceRoot(Path("fake-project") / "generated")]


def test_enable_generates_java_and_framework_code(tmp_path: Path) -> None:
    project = Project("java", tmp_path)
    java = JavaExtension(live_context(project))

    java.enable()

    for task in (GENERATE_PROTO, GENERATE_TEST_PROTO):
        assert generate_task_jobs(project, task) == (["java"], ["spineProtoc"])


def test_grpc_switch_adds_runtime_and_plugin(tmp_path: Path) -> None:
    project = Project("java", tmp_path)
    java = JavaExtension(live_context(project))
    java.enable()

    java.codegen.grpc = True

    assert generate_task_jobs(project, GENERATE_PROTO)[1] == ["grpc", "spineProtoc"]
    implementation = project.configurations.get_by_name(IMPLEMENTATION).notations
    assert GRPC_PROTOBUF in implementation
    assert GRPC_STUB in implementation

    java.codegen.grpc = False

    assert generate_task_jobs(project, GENERATE_PROTO)[1] == ["spineProtoc"]
    assert GRPC_STUB in project.configurations.get_by_name(IMPLEMENTATION).notations


def test_protobuf_switch_toggles_java_builtin(tmp_path: Path) -> None:
    project = Project("java", tmp_path)
    java = JavaExtension(live_context(project))
    java.enable()

    java.configure_codegen(lambda codegen: setattr(codegen, "protobuf", False))

    assert generate_task_jobs(project, GENERATE_PROTO)[0] == []
    assert java.codegen.describe() == {"protobuf": False, "grpc": False, "spine": True}


def test_spine_switch_off_disables_rejections_and_validating_builders(tmp_path: Path) -> None:
    project = Project("java", tmp_path)
    java = JavaExtension(live_context(project))
    java.enable()

    java.codegen.spine = False

    assert generate_task_jobs(project, GENERATE_PROTO)[1] == []
    assert project.extensions.get_by_type(ModelCompilerExtension).generate_validating_builders is False
    assert project.tasks.get_by_name(GENERATE_REJECTIONS).enabled is False
    assert project.tasks.get_by_name(GENERATE_TEST_REJECTIONS).enabled is False


def test_spine_switch_waits_for_model_compiler(tmp_path: Path) -> None:
    project = Project("java", tmp_path)
    java = JavaExtension(live_context(project))

    java.codegen.spine = False
    java.enable()

    assert project.tasks.get_by_name(GENERATE_REJECTIONS).enabled is False


def test_disable_turns_java_builtin_off(tmp_path: Path) -> None:
    project = Project("java", tmp_path)
    java = JavaExtension(live_context(project))
    java.enable()

    java.disable()

    assert generate_task_jobs(project, GENERATE_PROTO)[0] == []
    assert "io.spine:spine-base:42.3.14-AVOCADO" in project.configurations.get_by_name(
        IMPLEMENTATION
    ).notations


def test_convenience_calls_add_fixed_dependency_sets() -> None:
    given = given_context()
    java = JavaExtension(given.context)

    java.client()
    java.web_server()
    java.firebase_web_server()
    java.with_datastore()

    assert given.dependant.dependencies[IMPLEMENTATION] == [
        spine("client"),
        spine("server"),
        spine("web"),
        spine("firebase-web"),
        spine("datastore", "io.spine.gcloud"),
    ]
    assert given.dependant.dependencies[TEST_IMPLEMENTATION] == [
        spine("testutil-client"),
        spine("testutil-server"),
        spine("testutil-gcloud", "io.spine.gcloud"),
    ]


def test_forced_dependency_is_protobuf_java() -> None:
    assert JavaExtension(given_context().context).forced_dependencies() == (PROTOBUF_JAVA,)
