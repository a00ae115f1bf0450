"""
spine-bootstrap - the ``spine`` extension.

File: src/spine_bootstrap/bootstrap/extension.py

Purpose
- Offer build scripts one entry point for Java, JavaScript and Dart code
  generation and for model-only projects.
- Track the cross-cutting switches: forced dependency versions and whether
  the Java compilation tasks run.

Functional requirements
- Enabling JavaScript or Dart without Java keeps the Java compilation tasks
  disabled; enabling Java turns them back on.
- Every enabled language resolves ``.proto`` dependencies non-transitively.
- ``force_dependencies`` forces exactly the notations the targets declare and
  removes exactly those notations when turned off.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from spine_bootstrap.bootstrap.context import (
    CodeGenContext,
    CodeGenTarget,
    force_dependencies,
    release_dependencies,
)
from spine_bootstrap.bootstrap.dart import DartExtension
from spine_bootstrap.bootstrap.dependencies import SpineDependency
from spine_bootstrap.bootstrap.java import JavaExtension
from spine_bootstrap.bootstrap.javascript import JavaScriptExtension
from spine_bootstrap.bootstrap.model import ModelExtension
from spine_bootstrap.constants import (
    COMPILE_JAVA,
    COMPILE_TEST_JAVA,
    PROTOBUF_CONFIGURATION,
)
from spine_bootstrap.tools.dart_code_gen import DartCodeGen


class Extension:
    """The ``spine { ... }`` surface of a build script."""

    def __init__(
        self,
        context: CodeGenContext,
        *,
        dart_code_gen: DartCodeGen | None = None,
        logger: Any | None = None,
    ) -> None:
        self._context = context
        self._logger = logger if logger is not None else structlog.get_logger(__name__)
        self._java = JavaExtension(context)
        self._javascript = JavaScriptExtension(context)
        self._dart = DartExtension(context, code_gen=dart_code_gen)
        self._model = ModelExtension(context)
        self._java_enabled = False
        self._force_dependencies = False
        self._enabled: list[str] = []

    @property
    def context(self) -> CodeGenContext:
        return self._context

    @property
    def java(self) -> JavaExtension:
        return self._java

    @property
    def javascript(self) -> JavaScriptExtension:
        return self._javascript

    @property
    def dart(self) -> DartExtension:
        return self._dart

    @property
    def model(self) -> ModelExtension:
        return self._model

    @property
    def java_enabled(self) -> bool:
        return self._java_enabled

    @property
    def enabled_targets(self) -> tuple[str, ...]:
        return tuple(self._enabled)

    def version(self) -> str:
        """The framework version the project is built against."""
        return self._context.artifacts.spine_version()

    def enable_java(
        self, configure: Callable[[JavaExtension], None] | None = None
    ) -> JavaExtension:
        """Generate and compile Java code; ``configure`` receives the Java extension."""
        self._java.enable()
        self._context.dependant.test_implementation(
            SpineDependency.testlib()
            .of_version(self._context.artifacts.spine_base_version)
            .notation(),
        )
        self._toggle_java_tasks(True)
        self._resolve_protos_non_transitively()
        self._mark_enabled("java")
        if configure is not None:
            configure(self._java)
        return self._java

    def enable_javascript(self) -> JavaScriptExtension:
        self._javascript.enable()
        if not self._java_enabled:
            self._toggle_java_tasks(False)
        self._resolve_protos_non_transitively()
        self._mark_enabled("javascript")
        return self._javascript

    def enable_dart(self) -> DartExtension:
        self._dart.enable()
        if not self._java_enabled:
            self._toggle_java_tasks(False)
        self._resolve_protos_non_transitively()
        self._mark_enabled("dart")
        return self._dart

    def assemble_model(self) -> ModelExtension:
        """Build a project that only shares its ``.proto`` definitions."""
        self._model.enable()
        self._mark_enabled("model")
        return self._model

    @property
    def force_dependencies(self) -> bool:
        return self._force_dependencies

    @force_dependencies.setter
    def force_dependencies(self, enabled: bool) -> None:
        self._force_dependencies = enabled
        for target in self._targets():
            if enabled:
                force_dependencies(self._context, target)
            else:
                release_dependencies(self._context, target)
        self._logger.debug("force_dependencies_switched", enabled=enabled)

    def disable_java_generation(self) -> None:
        """Skip Java code generation and compilation until Java is enabled."""
        self._java.disable()
        self._toggle_java_tasks(False)

    def describe(self) -> dict[str, object]:
        return {
            "version": self.version(),
            "targets": list(self._enabled),
            "java_enabled": self._java_enabled,
            "force_dependencies": self._force_dependencies,
            "java_codegen": self._java.codegen.describe(),
        }

    def _targets(self) -> tuple[CodeGenTarget, ...]:
        return (self._java, self._javascript, self._dart, self._model)

    def _toggle_java_tasks(self, enabled: bool) -> None:
        self._java_enabled = enabled
        tasks = self._context.project.tasks
        for name in (COMPILE_JAVA, COMPILE_TEST_JAVA):
            task = tasks.find_by_name(name)
            if task is not None:
                task.enabled = enabled

    def _resolve_protos_non_transitively(self) -> None:
        configuration = self._context.project.configurations.find_by_name(
            PROTOBUF_CONFIGURATION
        )
        if configuration is not None:
            configuration.transitive = False

    def _mark_enabled(self, target: str) -> None:
        if target not in self._enabled:
            self._enabled.append(target)
            self._logger.info(
                "code_generation_enabled", project=self._context.project.name, target=target
            )


__all__ = ["Extension"]
