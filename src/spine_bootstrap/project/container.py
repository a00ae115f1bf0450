"""Live, name-keyed object containers used throughout the project model."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, Protocol, TypeVar


class Named(Protocol):
    @property
    def name(self) -> str: ...


T = TypeVar("T", bound=Named)


class NamedContainer(Generic[T]):
    """Duplicate-free container of named objects, iterated in name order.

    ``all(action)`` is live: the action runs for every current element and for
    every element added afterwards.
    """

    __slots__ = ("_factory", "_items", "_observers")

    def __init__(self, factory: Callable[[str], T] | None = None) -> None:
        self._factory = factory
        self._items: dict[str, T] = {}
        self._observers: list[Callable[[T], None]] = []

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(sorted(self._items))

    def add(self, item: T) -> T:
        """Add ``item``; raises ``ValueError`` if the name is taken."""
        if item.name in self._items:
            raise ValueError(f"cannot add {item.name!r}: an element with that name exists")
        self._items[item.name] = item
        for observer in tuple(self._observers):
            observer(item)
        return item

    def create(self, name: str) -> T:
        if self._factory is None:
            raise TypeError("container has no element factory")
        return self.add(self._factory(name))

    def maybe_create(self, name: str) -> T:
        """Return the element called ``name``, creating it if absent."""
        existing = self._items.get(name)
        if existing is not None:
            return existing
        return self.create(name)

    def find_by_name(self, name: str) -> T | None:
        return self._items.get(name)

    def get_by_name(self, name: str) -> T:
        try:
            return self._items[name]
        except KeyError:
            raise KeyError(f"element {name!r} not found; known: {list(self.names)}") from None

    def remove_if(self, predicate: Callable[[T], bool]) -> bool:
        """Remove every element matching ``predicate``; return whether any was removed."""
        doomed = [name for name, item in self._items.items() if predicate(item)]
        for name in doomed:
            del self._items[name]
        return bool(doomed)

    def all(self, action: Callable[[T], None]) -> None:
        """Run ``action`` for each current element and every future one."""
        self._observers.append(action)
        for item in tuple(self):
            action(item)

    def __iter__(self) -> Iterator[T]:
        return iter([self._items[name] for name in sorted(self._items)])

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name: object) -> bool:
        return name in self._items


__all__ = ["Named", "NamedContainer"]
