"""Unit tests for the shared code-generation context and baseline."""

from __future__ import annotations

from pathlib import Path

import pytest
from given import (
    MemoizingDependant,
    MemoizingPluginTarget,
    MemoizingSourceSuperset,
    fake_artifacts,
    given_context,
    spine,
)

from spine_bootstrap.bootstrap.context import (
    CodeGenContext,
    disable_baseline,
    enable_baseline,
    force_dependencies,
    release_dependencies,
)
from spine_bootstrap.bootstrap.plugin_target import SpinePluginTarget
from spine_bootstrap.constants import IMPLEMENTATION, JAVA_PLUGIN_ID, PROTOBUF_PLUGIN_ID
from spine_bootstrap.errors import ExtensionConfigurationError
from spine_bootstrap.project.project import Project
from spine_bootstrap.protoc.plugin import Name, ProtocPlugin


def _collaborators() -> dict[str, object]:
    return {
        "project": Project("p", Path("p")),
        "plugin_target": MemoizingPluginTarget(),
        "dependant": MemoizingDependant(),
        "source_superset": MemoizingSourceSuperset(),
        "artifacts": fake_artifacts(),
    }


@pytest.mark.parametrize(
    "missing", ["project", "plugin_target", "dependant", "source_superset", "artifacts"]
)
def test_create_names_missing_collaborator(missing: str) -> None:
    arguments = _collaborators()
    arguments[missing] = None

    with pytest.raises(ExtensionConfigurationError, match=missing):
        CodeGenContext.create(**arguments)


def test_create_wraps_plain_plugin_target() -> None:
    context = CodeGenContext.create(**_collaborators())

    assert isinstance(context.plugin_target, SpinePluginTarget)
    assert context.generator is not None


class _Target:
    def __init__(self, *notations: str) -> None:
        self._notations = notations

    def enable(self) -> None: ...

    def disable(self) -> None: ...

    def forced_dependencies(self) -> tuple[str, ...]:
        return self._notations


def test_baseline_without_job_applies_java_and_declares_base_and_time() -> None:
    given = given_context()

    enable_baseline(given.context, None)

    assert given.plugins.applied == [JAVA_PLUGIN_ID]
    assert given.dependant.dependencies == {IMPLEMENTATION: [spine("base"), spine("time")]}


def test_baseline_with_job_applies_protobuf() -> None:
    given = given_context()

    enable_baseline(given.context, ProtocPlugin.called(Name.JS))

    assert given.plugins.applied == [JAVA_PLUGIN_ID, PROTOBUF_PLUGIN_ID]


def test_disable_baseline_keeps_dependencies_and_plugins() -> None:
    given = given_context()
    job = ProtocPlugin.called(Name.DART)
    enable_baseline(given.context, job)

    disable_baseline(given.context, job)

    assert given.plugins.applied == [JAVA_PLUGIN_ID, PROTOBUF_PLUGIN_ID]
    assert len(given.dependant.dependencies[IMPLEMENTATION]) == 2


def test_force_and_release_touch_exactly_declared_notations() -> None:
    given = given_context()
    given.dependant.force("org.example:unrelated:1.0")
    target = _Target("com.google.protobuf:protobuf-java:3.6.1")

    force_dependencies(given.context, target)
    assert given.dependant.forced == [
        "org.example:unrelated:1.0",
        "com.google.protobuf:protobuf-java:3.6.1",
    ]

    release_dependencies(given.context, target)
    assert given.dependant.forced == ["org.example:unrelated:1.0"]
