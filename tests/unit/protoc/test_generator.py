"""Unit tests for the project-wide job switchboard."""

from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from spine_bootstrap.constants import (
    GENERATE_PROTO,
    GENERATE_TEST_PROTO,
    JAVA_PLUGIN_ID,
    PROTOBUF_PLUGIN_ID,
)
from spine_bootstrap.project.project import Project
from spine_bootstrap.project.protobuf import GenerateProtoTask, ProtobufConvention
from spine_bootstrap.protoc.generator import ProtobufGenerator
from spine_bootstrap.protoc.plugin import Name, ProtocPlugin

GRPC = ProtocPlugin.called(Name.GRPC)
JS = ProtocPlugin.with_option(Name.JS, "import_style=commonjs")


def _project() -> Project:
    return Project("protoc", Path("protoc-project"))


def _task(project: Project, name: str = GENERATE_PROTO) -> GenerateProtoTask:
    convention = project.extensions.get_by_type(ProtobufConvention)
    return convention.generate_proto_tasks.get_by_name(name)


def test_toggles_wait_for_protobuf_plugin() -> None:
    project = _project()
    generator = ProtobufGenerator(project)

    generator.enable_plugin(GRPC)
    generator.use_compiler("com.google.protobuf:protoc:3.6.1")
    assert project.extensions.find_by_type(ProtobufConvention) is None

    project.plugins.apply(JAVA_PLUGIN_ID)
    project.plugins.apply(PROTOBUF_PLUGIN_ID)

    for name in (GENERATE_PROTO, GENERATE_TEST_PROTO):
        assert _task(project, name).plugins.names == ("grpc",)
    convention = project.extensions.get_by_type(ProtobufConvention)
    assert convention.protoc_artifact == "com.google.protobuf:protoc:3.6.1"


def test_toggles_reach_tasks_created_later() -> None:
    project = _project()
    project.plugins.apply(PROTOBUF_PLUGIN_ID)
    generator = ProtobufGenerator(project)

    generator.enable_built_in(JS)
    generator.disable_built_in(ProtocPlugin.called(Name.JAVA))
    project.plugins.apply(JAVA_PLUGIN_ID)

    task = _task(project)
    assert task.builtins.names == ("js",)
    assert task.builtins.get_by_name("js").options == ["import_style=commonjs"]


def test_switch_dispatches_on_flag() -> None:
    project = _project()
    project.plugins.apply(JAVA_PLUGIN_ID)
    project.plugins.apply(PROTOBUF_PLUGIN_ID)
    generator = ProtobufGenerator(project)

    generator.switch_plugin(GRPC, True)
    generator.switch_built_in(JS, True)
    assert _task(project).plugins.names == ("grpc",)
    assert _task(project).builtins.names == ("java", "js")

    generator.switch_plugin(GRPC, False)
    generator.switch_built_in(JS, False)
    assert _task(project).plugins.names == ()
    assert _task(project).builtins.names == ("java",)


def test_built_ins_and_plugins_are_separate_collections() -> None:
    project = _project()
    project.plugins.apply(JAVA_PLUGIN_ID)
    project.plugins.apply(PROTOBUF_PLUGIN_ID)
    generator = ProtobufGenerator(project)

    generator.enable_plugin(ProtocPlugin.called(Name.JAVA))
    generator.disable_built_in(ProtocPlugin.called(Name.JAVA))

    assert _task(project).builtins.names == ()
    assert _task(project).plugins.names == ("java",)


def test_empty_compiler_artifact_is_rejected() -> None:
    with pytest.raises(ValueError):
        ProtobufGenerator(_project()).use_compiler("")


_JOBS = st.sampled_from([ProtocPlugin.called(name) for name in Name])
_OPERATIONS = st.lists(st.tuples(_JOBS, st.booleans()), max_size=20)


@given(operations=_OPERATIONS, apply_early=st.booleans())
@settings(max_examples=50, derandomize=True, deadline=None)
def test_property_registry_reflects_last_toggle_per_job(
    operations: list[tuple[ProtocPlugin, bool]], apply_early: bool
) -> None:
    project = _project()
    if apply_early:
        project.plugins.apply(JAVA_PLUGIN_ID)
        project.plugins.apply(PROTOBUF_PLUGIN_ID)
    generator = ProtobufGenerator(project)

    for job, enabled in operations:
        generator.switch_plugin(job, enabled)
    project.plugins.apply(JAVA_PLUGIN_ID)
    project.plugins.apply(PROTOBUF_PLUGIN_ID)

    expected: dict[str, bool] = {}
    for job, enabled in operations:
        expected[job.name.value] = enabled
    wanted = tuple(sorted(name for name, enabled in expected.items() if enabled))
    for name in (GENERATE_PROTO, GENERATE_TEST_PROTO):
        assert _task(project, name).plugins.names == wanted


@given(repeats=st.integers(min_value=1, max_value=5))
@settings(max_examples=10, derandomize=True, deadline=None)
def test_property_enable_is_idempotent(repeats: int) -> None:
    project = _project()
    project.plugins.apply(JAVA_PLUGIN_ID)
    project.plugins.apply(PROTOBUF_PLUGIN_ID)
    generator = ProtobufGenerator(project)

    for _ in range(repeats):
        generator.enable_built_in(JS)

    assert _task(project).builtins.names == ("java", "js")
    assert _task(project).builtins.get_by_name("js").options == ["import_style=commonjs"]
