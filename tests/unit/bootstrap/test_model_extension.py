"""Unit tests for model-only projects."""

from __future__ import annotations

from pathlib import Path

from given import PROTOBUF_JAVA, generate_task_jobs, given_context, live_context

from spine_bootstrap.bootstrap.model import ModelExtension
from spine_bootstrap.constants import GENERATE_PROTO, JAVA_PLUGIN_ID, PROTOBUF_PLUGIN_ID
from spine_bootstrap.project.project import Project


def test_enable_registers_generated_root_without_jobs() -> None:
    given = given_context()
    model = ModelExtension(given.context)

    model.enable()

    assert given.plugins.applied == [JAVA_PLUGIN_ID, PROTOBUF_PLUGIN_ID]
    assert len(given.superset.roots) == 1
    assert model.forced_dependencies() == (PROTOBUF_JAVA,)


def test_enable_keeps_default_java_builtin(tmp_path: Path) -> None:
    project = Project("model", tmp_path)
    model = ModelExtension(live_context(project))

    model.enable()
    model.disable()

    assert generate_task_jobs(project, GENERATE_PROTO) == (["java"], [])
    assert project.source_sets.get_by_name("main").java_dirs[0] == tmp_path / "generated/main/java"
