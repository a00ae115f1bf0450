"""Protobuf code-generation job registry."""

from spine_bootstrap.protoc.generator import ProtobufGenerator
from spine_bootstrap.protoc.plugin import Name, ProtocPlugin

__all__ = ["Name", "ProtobufGenerator", "ProtocPlugin"]
