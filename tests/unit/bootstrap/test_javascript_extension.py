"""Unit tests for JavaScript code generation."""

from __future__ import annotations

from pathlib import Path

from given import generate_task_jobs, given_context, live_context, spine

from spine_bootstrap.bootstrap.javascript import JavaScriptExtension
from spine_bootstrap.constants import (
    GENERATE_JSON_PARSERS,
    GENERATE_PROTO,
    IMPLEMENTATION,
    JAVA_PLUGIN_ID,
    PROTO_JS_PLUGIN_ID,
    PROTOBUF_PLUGIN_ID,
)
from spine_bootstrap.project.project import Project
from spine_bootstrap.project.protobuf import ProtobufConvention


def test_enable_applies_js_plugin_after_baseline() -> None:
    given = given_context()

    JavaScriptExtension(given.context).enable()

    assert given.plugins.applied == [JAVA_PLUGIN_ID, PROTOBUF_PLUGIN_ID, PROTO_JS_PLUGIN_ID]
    assert given.dependant.dependencies == {IMPLEMENTATION: [spine("base"), spine("time")]}


def test_js_job_carries_commonjs_import_style(tmp_path: Path) -> None:
    project = Project("js", tmp_path)
    JavaScriptExtension(live_context(project)).enable()

    convention = project.extensions.get_by_type(ProtobufConvention)
    js = convention.generate_proto_tasks.get_by_name(GENERATE_PROTO).builtins.get_by_name("js")
    assert js.options == ["import_style=commonjs"]
    assert GENERATE_PROTO in project.tasks.get_by_name(GENERATE_JSON_PARSERS).dependencies


def test_enable_twice_keeps_single_job(tmp_path: Path) -> None:
    project = Project("js", tmp_path)
    extension = JavaScriptExtension(live_context(project))

    extension.enable()
    extension.enable()

    assert generate_task_jobs(project, GENERATE_PROTO)[0] == ["java", "js"]


def test_disable_removes_js_job(tmp_path: Path) -> None:
    project = Project("js", tmp_path)
    extension = JavaScriptExtension(live_context(project))
    extension.enable()

    extension.disable()

    assert generate_task_jobs(project, GENERATE_PROTO)[0] == ["java"]
    assert extension.forced_dependencies() == ()
