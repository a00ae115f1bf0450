"""External tools run during the build."""

from spine_bootstrap.tools.dart_code_gen import DartCodeGen, ProcessRunner, SubprocessProcessRunner

__all__ = ["DartCodeGen", "ProcessRunner", "SubprocessProcessRunner"]
