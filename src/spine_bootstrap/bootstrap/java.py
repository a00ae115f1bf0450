"""
spine-bootstrap - Java code generation.

File: src/spine_bootstrap/bootstrap/java.py

Purpose
- Turn a project into a Java project built on the framework: plugins,
  dependencies, generated source roots and ``protoc`` jobs.
- Expose the ``codegen`` switches for Protobuf, gRPC and framework-specific
  Java code.

Functional requirements
- ``enable`` runs the shared baseline before any Java-specific step.
- Turning gRPC on adds the gRPC runtime; turning it off keeps the runtime.
- Turning framework code off disables rejection generation when present.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog

from spine_bootstrap.bootstrap.context import CodeGenContext, disable_baseline, enable_baseline
from spine_bootstrap.bootstrap.dependencies import SpineDependency, protobuf_lite
from spine_bootstrap.constants import (
    GENERATE_REJECTIONS,
    GENERATE_TEST_REJECTIONS,
    MODEL_COMPILER_PLUGIN_ID,
)
from spine_bootstrap.project.host_plugins import ModelCompilerExtension
from spine_bootstrap.project.layout import GeneratedSourceRoot
from spine_bootstrap.protoc.plugin import Name, ProtocPlugin

if TYPE_CHECKING:
    from spine_bootstrap.project.dependencies import Dependency

JAVA_JOB = ProtocPlugin.called(Name.JAVA)
GRPC_JOB = ProtocPlugin.called(Name.GRPC)
SPINE_JOB = ProtocPlugin.called(Name.SPINE_PROTOC)


class JavaCodegenExtension:
    """Which kinds of Java code ``protoc`` generates."""

    def __init__(self, context: CodeGenContext) -> None:
        self._context = context
        self._protobuf = True
        self._grpc = False
        self._spine = True

    @property
    def protobuf(self) -> bool:
        return self._protobuf

    @protobuf.setter
    def protobuf(self, enabled: bool) -> None:
        self._protobuf = enabled
        self._context.generator.switch_built_in(JAVA_JOB, enabled)

    @property
    def grpc(self) -> bool:
        return self._grpc

    @grpc.setter
    def grpc(self, enabled: bool) -> None:
        self._grpc = enabled
        self._context.generator.switch_plugin(GRPC_JOB, enabled)
        if enabled:
            for notation in self._context.artifacts.grpc_dependencies():
                self._context.dependant.implementation(notation)

    @property
    def spine(self) -> bool:
        return self._spine

    @spine.setter
    def spine(self, enabled: bool) -> None:
        self._spine = enabled
        self._context.generator.switch_plugin(SPINE_JOB, enabled)
        self._context.project.plugins.with_plugin(
            MODEL_COMPILER_PLUGIN_ID, self._configure_model_compiler
        )

    def _configure_model_compiler(self) -> None:
        project = self._context.project
        model_compiler = project.extensions.find_by_type(ModelCompilerExtension)
        if model_compiler is not None:
            model_compiler.generate_validating_builders = self._spine
        if not self._spine:
            for name in (GENERATE_REJECTIONS, GENERATE_TEST_REJECTIONS):
                task = project.tasks.find_by_name(name)
                if task is not None:
                    task.enabled = False

    def describe(self) -> dict[str, bool]:
        return {"protobuf": self._protobuf, "grpc": self._grpc, "spine": self._spine}


class JavaExtension:
    """Java code generation for a project built on the framework."""

    def __init__(self, context: CodeGenContext, *, logger: Any | None = None) -> None:
        self._context = context
        self._codegen = JavaCodegenExtension(context)
        self._logger = logger if logger is not None else structlog.get_logger(__name__)

    @property
    def codegen(self) -> JavaCodegenExtension:
        return self._codegen

    def configure_codegen(self, action: Callable[[JavaCodegenExtension], None]) -> None:
        action(self._codegen)

    def enable(self) -> None:
        context = self._context
        enable_baseline(context, JAVA_JOB)
        artifacts = context.artifacts
        self._test_implementation(SpineDependency.testlib(), artifacts.spine_base_version)
        self._test_implementation(SpineDependency.testutil_time(), artifacts.spine_time_version)
        context.plugin_target.apply_model_compiler()
        context.source_superset.register(GeneratedSourceRoot.of(context.project))
        context.dependant.exclude(protobuf_lite())
        if self._codegen.spine:
            context.generator.enable_plugin(SPINE_JOB)
        self._logger.info("java_enabled", project=context.project.name)

    def disable(self) -> None:
        disable_baseline(self._context, JAVA_JOB)

    def forced_dependencies(self) -> tuple[str, ...]:
        return (self._context.artifacts.protobuf_java,)

    def client(self) -> None:
        version = self._context.artifacts.spine_core_version
        self._implementation(SpineDependency.client(), version)
        self._test_implementation(SpineDependency.testutil_client(), version)

    def server(self) -> None:
        version = self._context.artifacts.spine_core_version
        self._implementation(SpineDependency.server(), version)
        self._test_implementation(SpineDependency.testutil_server(), version)

    def web_server(self) -> None:
        self.server()
        self._implementation(SpineDependency.web(), self._context.artifacts.spine_web_version)

    def firebase_web_server(self) -> None:
        self.server()
        self._implementation(
            SpineDependency.firebase_web(), self._context.artifacts.spine_web_version
        )

    def with_datastore(self) -> None:
        version = self._context.artifacts.spine_gcloud_version
        self._implementation(SpineDependency.datastore(), version)
        self._test_implementation(SpineDependency.testutil_gcloud(), version)

    def _implementation(self, module: Dependency, version: str) -> None:
        self._context.dependant.implementation(module.of_version(version).notation())

    def _test_implementation(self, module: Dependency, version: str) -> None:
        self._context.dependant.test_implementation(module.of_version(version).notation())


__all__ = ["GRPC_JOB", "JAVA_JOB", "JavaCodegenExtension", "JavaExtension", "SPINE_JOB"]
