"""Unit tests for the build project, its plugins and its host plugin implementations."""

from __future__ import annotations

from pathlib import Path

import pytest

from spine_bootstrap.constants import (
    ASSEMBLE,
    BUILD,
    COMPILE_JAVA,
    COMPILE_TEST_JAVA,
    GENERATE_JSON_PARSERS,
    GENERATE_PROTO,
    GENERATE_REJECTIONS,
    IDEA_PLUGIN_ID,
    IMPLEMENTATION,
    JAVA_PLUGIN_ID,
    MODEL_COMPILER_PLUGIN_ID,
    PROTO_DART_PLUGIN_ID,
    PROTO_JS_PLUGIN_ID,
    PROTOBUF_PLUGIN_ID,
    TEST_IMPLEMENTATION,
)
from spine_bootstrap.errors import UnknownPluginError
from spine_bootstrap.project.dependencies import ProjectDependant
from spine_bootstrap.project.host_plugins import ProtoDartExtension
from spine_bootstrap.project.layout import GeneratedSourceRoot, IdeaModule, ProjectSourceSuperset
from spine_bootstrap.project.project import Project


def test_unknown_plugin_is_an_error(tmp_path: Path) -> None:
    project = Project("p", tmp_path)

    with pytest.raises(UnknownPluginError, match="org.example.missing"):
        project.plugins.apply("org.example.missing")


def test_with_plugin_runs_once_applied(tmp_path: Path) -> None:
    project = Project("p", tmp_path)
    calls: list[str] = []

    project.plugins.with_plugin(JAVA_PLUGIN_ID, lambda: calls.append("late"))
    project.plugins.apply(JAVA_PLUGIN_ID)
    project.plugins.apply(JAVA_PLUGIN_ID)
    project.plugins.with_plugin(JAVA_PLUGIN_ID, lambda: calls.append("now"))

    assert calls == ["late", "now"]
    assert project.plugins.applied == (JAVA_PLUGIN_ID,)


def test_java_plugin_builds_lifecycle_tasks(tmp_path: Path) -> None:
    project = Project("p", tmp_path)

    project.plugins.apply(JAVA_PLUGIN_ID)

    assert project.tasks.execution_plan([BUILD]) == (
        COMPILE_JAVA,
        COMPILE_TEST_JAVA,
        "processResources",
        ASSEMBLE,
        BUILD,
    )


def test_protobuf_before_java_still_wires_compilation(tmp_path: Path) -> None:
    project = Project("p", tmp_path)

    project.plugins.apply(PROTOBUF_PLUGIN_ID)
    project.plugins.apply(JAVA_PLUGIN_ID)

    assert GENERATE_PROTO in project.tasks.get_by_name(COMPILE_JAVA).dependencies


def test_model_compilers_add_their_tasks(tmp_path: Path) -> None:
    project = Project("p", tmp_path)

    project.plugins.apply(MODEL_COMPILER_PLUGIN_ID)
    project.plugins.apply(PROTO_JS_PLUGIN_ID)
    project.plugins.apply(PROTOBUF_PLUGIN_ID)

    assert JAVA_PLUGIN_ID in project.plugins.applied
    assert GENERATE_REJECTIONS in project.tasks.get_by_name(COMPILE_JAVA).dependencies
    assert project.tasks.get_by_name(GENERATE_JSON_PARSERS).dependencies == [GENERATE_PROTO]


def test_generated_roots_reach_source_sets_and_ide(tmp_path: Path) -> None:
    project = Project("p", tmp_path)
    project.plugins.apply(JAVA_PLUGIN_ID)
    root = GeneratedSourceRoot.of(project)

    ProjectSourceSuperset(project).register(root)
    project.source_sets.create("integration")
    project.plugins.apply(IDEA_PLUGIN_ID)

    main = project.source_sets.get_by_name("main")
    assert main.java_dirs == [
        tmp_path / "generated/main/java",
        tmp_path / "generated/main/spine",
        tmp_path / "generated/main/grpc",
    ]
    assert main.resource_dirs == [tmp_path / "generated/main/resources"]
    assert project.source_sets.get_by_name("integration").java_dirs[0] == (
        tmp_path / "generated/integration/java"
    )
    idea = project.extensions.get_by_type(IdeaModule)
    assert tmp_path / "generated/main/java" in idea.source_dirs
    assert tmp_path / "generated/test/java" in idea.test_source_dirs
    assert len(idea.generated_source_dirs) == 9


def test_after_evaluate_runs_once(tmp_path: Path) -> None:
    project = Project("p", tmp_path)
    calls: list[str] = []

    project.after_evaluate(lambda evaluated: calls.append("queued"))
    project.evaluate()
    project.evaluate()
    project.after_evaluate(lambda evaluated: calls.append("immediate"))

    assert project.evaluated
    assert calls == ["queued", "immediate"]


def test_describe_is_relative_and_json_friendly(tmp_path: Path) -> None:
    project = Project("p", tmp_path)
    project.plugins.apply(JAVA_PLUGIN_ID)
    project.plugins.apply(PROTO_DART_PLUGIN_ID)
    ProjectSourceSuperset(project).register(GeneratedSourceRoot.of(project))

    plan = project.describe()

    assert plan["project"] == "p"
    assert plan["plugins"] == [JAVA_PLUGIN_ID, PROTO_DART_PLUGIN_ID]
    assert plan["source_sets"]["main"]["java"][0] == "generated/main/java"
    assert plan["tasks"][ASSEMBLE]["depends_on"] == [COMPILE_JAVA, "processResources"]
    assert plan["extensions"]["protoDart"] == {
        "main_descriptor_set": "build/descriptors/main/known_types.desc",
        "test_descriptor_set": "build/descriptors/test/known_types.desc",
        "lib_dir": "lib",
        "test_dir": "test",
    }
    assert "protobuf" not in plan


def test_duplicate_extension_names_are_rejected(tmp_path: Path) -> None:
    project = Project("p", tmp_path)
    project.extensions.add("protoDart", ProtoDartExtension.for_project(project))

    with pytest.raises(ValueError):
        project.extensions.add("protoDart", object())


def test_dependant_scopes_land_in_their_configurations(tmp_path: Path) -> None:
    project = Project("p", tmp_path)
    dependant = ProjectDependant(project)

    dependant.implementation("io.spine:spine-base:1.0.0")
    dependant.test_implementation("io.spine:spine-testlib:1.0.0")
    dependant.implementation("io.spine:spine-base:1.0.0")

    configurations = project.configurations
    assert list(configurations.get_by_name(IMPLEMENTATION).notations) == [
        "io.spine:spine-base:1.0.0"
    ]
    assert list(configurations.get_by_name(TEST_IMPLEMENTATION).notations) == [
        "io.spine:spine-testlib:1.0.0"
    ]
