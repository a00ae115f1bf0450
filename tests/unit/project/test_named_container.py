"""Unit tests for named element containers."""

from __future__ import annotations

import pytest

from spine_bootstrap.project.container import NamedContainer
from spine_bootstrap.project.layout import SourceSet


def test_maybe_create_returns_existing_element() -> None:
    container: NamedContainer[SourceSet] = NamedContainer(SourceSet)

    first = container.maybe_create("main")

    assert container.maybe_create("main") is first
    assert container.names == ("main",)


def test_add_rejects_duplicates() -> None:
    container: NamedContainer[SourceSet] = NamedContainer(SourceSet)
    container.create("main")

    with pytest.raises(ValueError, match="main"):
        container.add(SourceSet("main"))


def test_create_requires_factory() -> None:
    with pytest.raises(TypeError):
        NamedContainer[SourceSet]().create("main")


def test_get_by_name_lists_known_names() -> None:
    container: NamedContainer[SourceSet] = NamedContainer(SourceSet)
    container.create("main")

    with pytest.raises(KeyError, match="known: \\['main'\\]"):
        container.get_by_name("test")


def test_all_is_live_and_iteration_is_sorted() -> None:
    container: NamedContainer[SourceSet] = NamedContainer(SourceSet)
    container.create("test")
    seen: list[str] = []

    container.all(lambda item: seen.append(item.name))
    container.create("integration")

    assert seen == ["test", "integration"]
    assert [item.name for item in container] == ["integration", "test"]


def test_remove_if_reports_removal() -> None:
    container: NamedContainer[SourceSet] = NamedContainer(SourceSet)
    container.create("main")

    assert container.remove_if(lambda item: item.name == "main")
    assert not container.remove_if(lambda item: item.name == "main")
    assert "main" not in container
