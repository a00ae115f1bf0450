"""Code-generation jobs of the Protobuf compiler."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from spine_bootstrap.project.container import NamedContainer
from spine_bootstrap.project.protobuf import PluginOptions


class Name(StrEnum):
    """Known job names, as understood by ``protoc`` and its plugins."""

    JAVA = "java"
    JS = "js"
    GRPC = "grpc"
    SPINE_PROTOC = "spineProtoc"
    DART = "dart"


@dataclass(frozen=True, slots=True)
class ProtocPlugin:
    """A built-in or plugin job, identified by name.

    Two jobs with the same name are equal whatever their options are.
    """

    name: Name
    option: str | None = field(default=None, compare=False)

    Name = Name

    @classmethod
    def called(cls, name: Name | str) -> ProtocPlugin:
        return cls(Name(name))

    @classmethod
    def with_option(cls, name: Name | str, option: str) -> ProtocPlugin:
        if not option:
            raise ValueError("job option must be a non-empty string")
        return cls(Name(name), option)

    def create_in(self, jobs: NamedContainer[PluginOptions]) -> None:
        """Add this job to ``jobs`` unless present, then attach the option if any."""
        options = jobs.maybe_create(self.name.value)
        if self.option is not None:
            options.option(self.option)

    def remove_from(self, jobs: NamedContainer[PluginOptions]) -> None:
        """Remove every entry called like this job, regardless of its options."""
        name = self.name.value
        jobs.remove_if(lambda options: options.name == name)

    def __str__(self) -> str:
        if self.option is None:
            return self.name.value
        return f"{self.name.value}[{self.option}]"


__all__ = ["Name", "ProtocPlugin"]
