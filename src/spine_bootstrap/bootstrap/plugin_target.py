"""Plugin application helpers for the plugins the extensions rely on."""

from __future__ import annotations

from spine_bootstrap.constants import (
    JAVA_PLUGIN_ID,
    MODEL_COMPILER_PLUGIN_ID,
    PROTO_DART_PLUGIN_ID,
    PROTO_JS_PLUGIN_ID,
    PROTOBUF_PLUGIN_ID,
)
from spine_bootstrap.errors import ExtensionConfigurationError
from spine_bootstrap.project.plugins import PluginTarget


class SpinePluginTarget:
    """A :class:`PluginTarget` with shortcuts for well-known plugins."""

    def __init__(self, delegate: PluginTarget) -> None:
        if delegate is None:
            raise ExtensionConfigurationError("plugin target is required")
        self._delegate = delegate

    def apply(self, plugin_id: str) -> None:
        self._delegate.apply(plugin_id)

    def is_applied(self, plugin_id: str) -> bool:
        return self._delegate.is_applied(plugin_id)

    def apply_java_plugin(self) -> None:
        self.apply(JAVA_PLUGIN_ID)

    def apply_protobuf_plugin(self) -> None:
        self.apply(JAVA_PLUGIN_ID)
        self.apply(PROTOBUF_PLUGIN_ID)

    def apply_model_compiler(self) -> None:
        self.apply(MODEL_COMPILER_PLUGIN_ID)

    def apply_proto_js_plugin(self) -> None:
        self.apply(PROTO_JS_PLUGIN_ID)

    def apply_proto_dart_plugin(self) -> None:
        self.apply(PROTO_DART_PLUGIN_ID)


__all__ = ["SpinePluginTarget"]
