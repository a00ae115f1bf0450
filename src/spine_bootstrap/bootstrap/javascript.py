"""JavaScript code generation."""

from __future__ import annotations

from typing import Final

from spine_bootstrap.bootstrap.context import CodeGenContext, disable_baseline, enable_baseline
from spine_bootstrap.protoc.plugin import Name, ProtocPlugin

IMPORT_STYLE_OPTION: Final[str] = "import_style=commonjs"
JS_JOB = ProtocPlugin.with_option(Name.JS, IMPORT_STYLE_OPTION)


class JavaScriptExtension:
    """Generates CommonJS modules from the project's Protobuf definitions."""

    def __init__(self, context: CodeGenContext) -> None:
        self._context = context

    def enable(self) -> None:
        enable_baseline(self._context, JS_JOB)
        self._context.plugin_target.apply_proto_js_plugin()

    def disable(self) -> None:
        disable_baseline(self._context, JS_JOB)

    def forced_dependencies(self) -> tuple[str, ...]:
        return ()


__all__ = ["IMPORT_STYLE_OPTION", "JS_JOB", "JavaScriptExtension"]
