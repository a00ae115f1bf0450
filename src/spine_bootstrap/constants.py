"""Stable identifiers shared by the project model and the Bootstrap extensions."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Final

# Plugin identifiers.
JAVA_PLUGIN_ID: Final[str] = "java"
PROTOBUF_PLUGIN_ID: Final[str] = "com.google.protobuf"
IDEA_PLUGIN_ID: Final[str] = "idea"
MODEL_COMPILER_PLUGIN_ID: Final[str] = "io.spine.mc-java"
PROTO_JS_PLUGIN_ID: Final[str] = "io.spine.mc-js"
PROTO_DART_PLUGIN_ID: Final[str] = "io.spine.proto-dart"

# Source sets.
MAIN_SOURCE_SET: Final[str] = "main"
TEST_SOURCE_SET: Final[str] = "test"

# Dependency configurations.
IMPLEMENTATION: Final[str] = "implementation"
TEST_IMPLEMENTATION: Final[str] = "testImplementation"
RUNTIME_CLASSPATH: Final[str] = "runtimeClasspath"
TEST_RUNTIME_CLASSPATH: Final[str] = "testRuntimeClasspath"
PROTOBUF_CONFIGURATION: Final[str] = "protobuf"

# Task names.
COMPILE_JAVA: Final[str] = "compileJava"
COMPILE_TEST_JAVA: Final[str] = "compileTestJava"
PROCESS_RESOURCES: Final[str] = "processResources"
ASSEMBLE: Final[str] = "assemble"
BUILD: Final[str] = "build"
GENERATE_PROTO: Final[str] = "generateProto"
GENERATE_TEST_PROTO: Final[str] = "generateTestProto"
GENERATE_REJECTIONS: Final[str] = "generateRejections"
GENERATE_TEST_REJECTIONS: Final[str] = "generateTestRejections"
GENERATE_JSON_PARSERS: Final[str] = "generateJsonParsers"
GENERATE_DART: Final[str] = "generateDart"
GENERATE_TEST_DART: Final[str] = "generateTestDart"

# Project layout, relative to the project directory.
BUILD_DIR: Final[PurePosixPath] = PurePosixPath("build")
GENERATED_DIR: Final[PurePosixPath] = PurePosixPath("generated")
GENERATED_JAVA_SUBDIRS: Final[tuple[str, ...]] = ("java", "spine", "grpc")
GENERATED_RESOURCES_SUBDIR: Final[str] = "resources"

# Extension name under which the Bootstrap extension is registered.
SPINE_EXTENSION_NAME: Final[str] = "spine"

__all__ = [
    "ASSEMBLE",
    "BUILD",
    "BUILD_DIR",
    "COMPILE_JAVA",
    "COMPILE_TEST_JAVA",
    "GENERATED_DIR",
    "GENERATED_JAVA_SUBDIRS",
    "GENERATED_RESOURCES_SUBDIR",
    "GENERATE_DART",
    "GENERATE_JSON_PARSERS",
    "GENERATE_PROTO",
    "GENERATE_REJECTIONS",
    "GENERATE_TEST_DART",
    "GENERATE_TEST_PROTO",
    "GENERATE_TEST_REJECTIONS",
    "IDEA_PLUGIN_ID",
    "IMPLEMENTATION",
    "JAVA_PLUGIN_ID",
    "MAIN_SOURCE_SET",
    "MODEL_COMPILER_PLUGIN_ID",
    "PROCESS_RESOURCES",
    "PROTOBUF_CONFIGURATION",
    "PROTOBUF_PLUGIN_ID",
    "PROTO_DART_PLUGIN_ID",
    "PROTO_JS_PLUGIN_ID",
    "RUNTIME_CLASSPATH",
    "SPINE_EXTENSION_NAME",
    "TEST_IMPLEMENTATION",
    "TEST_RUNTIME_CLASSPATH",
    "TEST_SOURCE_SET",
]
