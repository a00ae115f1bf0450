"""Model-only projects: Protobuf definitions shared by other projects."""

from __future__ import annotations

from spine_bootstrap.bootstrap.context import CodeGenContext, disable_baseline, enable_baseline
from spine_bootstrap.project.layout import GeneratedSourceRoot


class ModelExtension:
    """Assembles the model without generating code for any particular language."""

    def __init__(self, context: CodeGenContext) -> None:
        self._context = context

    def enable(self) -> None:
        context = self._context
        enable_baseline(context, None)
        context.plugin_target.apply_protobuf_plugin()
        context.source_superset.register(GeneratedSourceRoot.of(context.project))

    def disable(self) -> None:
        disable_baseline(self._context, None)

    def forced_dependencies(self) -> tuple[str, ...]:
        return (self._context.artifacts.protobuf_java,)


__all__ = ["ModelExtension"]
