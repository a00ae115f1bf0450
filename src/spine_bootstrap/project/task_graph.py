"""Deterministic execution graph over task names."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from heapq import heapify, heappop, heappush


class CycleError(ValueError):
    """Raised when task dependencies form a cycle."""

    cycles: tuple[tuple[str, ...], ...]

    def __init__(self, cycles: Iterable[Sequence[str]]) -> None:
        self.cycles = tuple(tuple(path) for path in cycles)
        if not self.cycles:
            message = "task graph contains at least one cycle"
        else:
            preview = ", ".join(" -> ".join(path) for path in self.cycles[:3])
            suffix = "..." if len(self.cycles) > 3 else ""
            message = f"task graph contains cycle(s): {preview}{suffix}"
        super().__init__(message)


class TaskGraph:
    """Directed graph where an edge ``before -> after`` orders two tasks.

    Ties are broken by task name, so the same graph always yields the same
    execution order.
    """

    __slots__ = ("_successors", "_predecessors")

    def __init__(self, edges: Iterable[tuple[str, str]] = ()) -> None:
        self._successors: dict[str, set[str]] = {}
        self._predecessors: dict[str, set[str]] = {}
        for before, after in edges:
            self.add_edge(before, after)

    @property
    def nodes(self) -> tuple[str, ...]:
        return tuple(sorted(self._successors))

    @property
    def edges(self) -> tuple[tuple[str, str], ...]:
        return tuple(
            (before, after)
            for before in sorted(self._successors)
            for after in sorted(self._successors[before])
        )

    def add_node(self, name: str) -> None:
        if not name:
            raise ValueError("task name must be non-empty")
        self._successors.setdefault(name, set())
        self._predecessors.setdefault(name, set())

    def add_edge(self, before: str, after: str) -> None:
        """Require ``before`` to run ahead of ``after``."""
        self.add_node(before)
        self.add_node(after)
        self._successors[before].add(after)
        self._predecessors[after].add(before)

    def predecessors(self, name: str) -> tuple[str, ...]:
        if name not in self._predecessors:
            raise KeyError(f"unknown task: {name}")
        return tuple(sorted(self._predecessors[name]))

    def topological_sort(self) -> tuple[str, ...]:
        """Return the execution order or raise :class:`CycleError`."""
        indegree = {name: len(parents) for name, parents in self._predecessors.items()}
        ready = [name for name, degree in indegree.items() if degree == 0]
        heapify(ready)

        order: list[str] = []
        while ready:
            name = heappop(ready)
            order.append(name)
            for after in self._successors[name]:
                indegree[after] -= 1
                if indegree[after] == 0:
                    heappush(ready, after)

        if len(order) != len(self._successors):
            raise CycleError(self.detect_cycles())
        return tuple(order)

    def detect_cycles(self) -> tuple[tuple[str, ...], ...]:
        """Return closed cycle paths such as ``("a", "b", "a")``."""
        visiting: dict[str, int] = {}
        done: set[str] = set()
        stack: list[str] = []
        found: set[tuple[str, ...]] = set()

        for start in sorted(self._successors):
            if start in done:
                continue
            visiting[start] = 0
            stack.append(start)
            frames: list[Iterator[str]] = [iter(sorted(self._successors[start]))]
            while frames:
                following = next(frames[-1], None)
                if following is None:
                    frames.pop()
                    finished = stack.pop()
                    del visiting[finished]
                    done.add(finished)
                    continue
                if following in visiting:
                    cycle = stack[visiting[following] :]
                    found.add(_canonical(cycle))
                elif following not in done:
                    visiting[following] = len(stack)
                    stack.append(following)
                    frames.append(iter(sorted(self._successors[following])))

        return tuple(sorted(found))


def _canonical(cycle: Sequence[str]) -> tuple[str, ...]:
    core = tuple(cycle)
    best = min(core[offset:] + core[:offset] for offset in range(len(core)))
    return best + (best[0],)


__all__ = ["CycleError", "TaskGraph"]
