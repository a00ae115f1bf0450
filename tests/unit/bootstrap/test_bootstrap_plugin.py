"""Unit tests for installing and configuring the ``spine`` extension."""

from __future__ import annotations

from pathlib import Path

from given import PROTOC, RELEASES, SNAPSHOTS, fake_artifacts, generate_task_jobs

from spine_bootstrap.bootstrap.extension import Extension
from spine_bootstrap.bootstrap.plugin import BootstrapPlugin, apply_settings, configure_project
from spine_bootstrap.config.schema import default_config, merge_config
from spine_bootstrap.constants import (
    COMPILE_JAVA,
    GENERATE_PROTO,
    GENERATE_TEST_PROTO,
    IMPLEMENTATION,
    SPINE_EXTENSION_NAME,
)
from spine_bootstrap.project.project import Project
from spine_bootstrap.project.protobuf import ProtobufConvention
from spine_bootstrap.project.repositories import MAVEN_CENTRAL_URL, RepositoryContent


def _applied(tmp_path: Path) -> tuple[Project, Extension]:
    project = Project("app", tmp_path)
    return project, BootstrapPlugin().apply(project, fake_artifacts())


def test_apply_registers_extension_and_repositories(tmp_path: Path) -> None:
    project, extension = _applied(tmp_path)

    assert project.extensions.get_by_name(SPINE_EXTENSION_NAME) is extension
    assert [(repo.url, repo.content) for repo in project.repositories] == [
        (RELEASES, RepositoryContent.RELEASES_ONLY),
        (SNAPSHOTS, RepositoryContent.SNAPSHOTS_ONLY),
        (MAVEN_CENTRAL_URL, RepositoryContent.ANY),
    ]
    assert project.plugins.applied == ()


def test_javascript_project_generates_no_java(tmp_path: Path) -> None:
    project, extension = _applied(tmp_path)

    extension.enable_javascript()

    convention = project.extensions.get_by_type(ProtobufConvention)
    assert convention.protoc_artifact == PROTOC
    assert generate_task_jobs(project, GENERATE_PROTO) == (["js"], [])
    assert project.tasks.get_by_name(COMPILE_JAVA).enabled is False


def test_java_project_restores_java_generation(tmp_path: Path) -> None:
    project, extension = _applied(tmp_path)

    extension.enable_java()

    for task in (GENERATE_PROTO, GENERATE_TEST_PROTO):
        assert generate_task_jobs(project, task) == (["java"], ["spineProtoc"])


def test_apply_settings_drives_java_options(tmp_path: Path) -> None:
    project, extension = _applied(tmp_path)
    settings = merge_config(
        default_config()["spine"],
        {"java": {"enabled": True, "server": True, "codegen": {"grpc": True}}},
    )

    apply_settings(extension, settings)

    assert generate_task_jobs(project, GENERATE_PROTO)[1] == ["grpc", "spineProtoc"]
    notations = project.configurations.get_by_name(IMPLEMENTATION).notations
    assert "io.spine:spine-server:42.3.14-AVOCADO" in notations
    assert extension.enabled_targets == ("java",)


def test_configure_project_evaluates_project(tmp_path: Path) -> None:
    config = merge_config(
        default_config(),
        {
            "project": {"name": "shop", "dir": str(tmp_path)},
            "spine": {"javascript": {"enabled": True}, "force_dependencies": True},
        },
    )

    project, extension = configure_project(config, artifacts=fake_artifacts())

    assert project.name == "shop"
    assert project.evaluated
    assert extension.enabled_targets == ("javascript",)
    assert extension.force_dependencies
