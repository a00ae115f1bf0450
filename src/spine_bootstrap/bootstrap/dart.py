"""
spine-bootstrap - Dart code generation.

File: src/spine_bootstrap/bootstrap/dart.py

Purpose
- Generate Dart code from the project's Protobuf definitions: ``protoc``
  writes messages, ``dart_code_gen`` writes the ``types.dart`` registry.

Functional requirements
- ``generateDart`` and ``generateTestDart`` run after the matching
  ``generateProto`` tasks and before ``assemble``.
- A missing ``dart_code_gen`` binary is reported when Dart is enabled and
  fails the build only when a task actually runs the tool.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from spine_bootstrap.bootstrap.context import CodeGenContext, disable_baseline, enable_baseline
from spine_bootstrap.constants import (
    ASSEMBLE,
    GENERATE_DART,
    GENERATE_PROTO,
    GENERATE_TEST_DART,
    GENERATE_TEST_PROTO,
)
from spine_bootstrap.project.host_plugins import ProtoDartExtension
from spine_bootstrap.protoc.plugin import Name, ProtocPlugin
from spine_bootstrap.tools.dart_code_gen import DartCodeGen

if TYPE_CHECKING:
    from spine_bootstrap.project.project import Project

DART_JOB = ProtocPlugin.called(Name.DART)


class DartExtension:
    """Dart code generation for a project built on the framework."""

    def __init__(
        self,
        context: CodeGenContext,
        *,
        code_gen: DartCodeGen | None = None,
        logger: Any | None = None,
    ) -> None:
        self._context = context
        self._code_gen = code_gen
        self._logger = logger if logger is not None else structlog.get_logger(__name__)

    @property
    def code_gen(self) -> DartCodeGen:
        if self._code_gen is None:
            self._code_gen = DartCodeGen()
        return self._code_gen

    def enable(self) -> None:
        context = self._context
        enable_baseline(context, DART_JOB)
        context.plugin_target.apply_protobuf_plugin()
        context.plugin_target.apply_proto_dart_plugin()
        self._create_tasks()
        self.code_gen.warn_if_missing()
        self._logger.info("dart_enabled", project=context.project.name)

    def disable(self) -> None:
        disable_baseline(self._context, DART_JOB)

    def forced_dependencies(self) -> tuple[str, ...]:
        return ()

    def _create_tasks(self) -> None:
        project = self._context.project
        tasks = project.tasks
        main = tasks.maybe_create(GENERATE_DART)
        test = tasks.maybe_create(GENERATE_TEST_DART)
        if not main.actions:
            main.description = "Generates Dart types registry for main Protobuf definitions."
            main.do_last(lambda task: self._generate(project, test=False))
        if not test.actions:
            test.description = "Generates Dart types registry for test Protobuf definitions."
            test.do_last(lambda task: self._generate(project, test=True))
        test.should_run_after(GENERATE_DART)

        def wire_proto_tasks(evaluated: Project) -> None:
            if GENERATE_PROTO in evaluated.tasks:
                main.depends_on(GENERATE_PROTO)
            if GENERATE_TEST_PROTO in evaluated.tasks:
                test.depends_on(GENERATE_TEST_PROTO)

        project.after_evaluate(wire_proto_tasks)
        tasks.maybe_create(ASSEMBLE).depends_on(GENERATE_DART, GENERATE_TEST_DART)

    def _generate(self, project: Project, *, test: bool) -> None:
        layout = _layout(project)
        if test:
            self.code_gen.run(layout.test_descriptor_set, layout.test_dir)
        else:
            self.code_gen.run(layout.main_descriptor_set, layout.lib_dir)


def _layout(project: Project) -> ProtoDartExtension:
    layout = project.extensions.find_by_type(ProtoDartExtension)
    if layout is None:
        layout = ProtoDartExtension.for_project(project)
    return layout


__all__ = ["DART_JOB", "DartExtension"]
