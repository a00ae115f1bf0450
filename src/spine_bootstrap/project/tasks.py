"""
spine-bootstrap - tasks of the project model and their execution.

File: src/spine_bootstrap/project/tasks.py

Purpose
- Named tasks with an enabled flag, ordered actions, hard dependencies
  (``depends_on``) and soft ordering (``should_run_after``).
- Execution of requested tasks and their transitive dependencies in a
  deterministic order.

Functional requirements
- Disabled tasks are skipped; their dependencies still run.
- Soft ordering only applies between tasks that are both scheduled.
- Unknown dependencies, cycles and failing actions raise :class:`TaskExecutionError`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

import structlog

from spine_bootstrap.errors import BuildError, TaskExecutionError
from spine_bootstrap.project.container import NamedContainer
from spine_bootstrap.project.task_graph import CycleError, TaskGraph

TaskAction = Callable[["Task"], None]


def task_name_for(verb: str, source_set: str, target: str = "") -> str:
    """Name a per-source-set task: ``compileJava``, ``compileTestJava`` and so on."""
    qualifier = "" if source_set == "main" else source_set[:1].upper() + source_set[1:]
    return f"{verb}{qualifier}{target}"


class TaskOutcome(StrEnum):
    SUCCESS = "success"
    SKIPPED = "skipped"
    NO_ACTIONS = "no-actions"


@dataclass(slots=True)
class Task:
    name: str
    enabled: bool = True
    description: str = ""
    actions: list[TaskAction] = field(default_factory=list)
    dependencies: list[str] = field(default_factory=list)
    run_after: list[str] = field(default_factory=list)

    def do_last(self, action: TaskAction) -> Task:
        self.actions.append(action)
        return self

    def depends_on(self, *names: str) -> Task:
        for name in names:
            if name not in self.dependencies:
                self.dependencies.append(name)
        return self

    def should_run_after(self, *names: str) -> Task:
        for name in names:
            if name not in self.run_after:
                self.run_after.append(name)
        return self


@dataclass(frozen=True, slots=True)
class TaskResult:
    task: str
    outcome: TaskOutcome


class TaskContainer(NamedContainer[Task]):
    """The project's tasks plus an executor for them."""

    __slots__ = ("_logger",)

    def __init__(self, *, logger: Any | None = None) -> None:
        super().__init__(Task)
        self._logger = logger if logger is not None else structlog.get_logger(__name__)

    def execution_plan(self, requested: Iterable[str]) -> tuple[str, ...]:
        """Return the order in which ``requested`` and their dependencies run."""
        scheduled = self._collect(requested)
        graph = TaskGraph()
        for name in scheduled:
            graph.add_node(name)
            task = self.get_by_name(name)
            for dependency in task.dependencies:
                graph.add_edge(dependency, name)
            for earlier in task.run_after:
                if earlier in scheduled:
                    graph.add_edge(earlier, name)
        try:
            return graph.topological_sort()
        except CycleError as exc:
            raise TaskExecutionError(None, str(exc)) from exc

    def execute(self, requested: Sequence[str]) -> tuple[TaskResult, ...]:
        results: list[TaskResult] = []
        for name in self.execution_plan(requested):
            task = self.get_by_name(name)
            outcome = self._run(task)
            self._logger.info("task_finished", task=name, outcome=outcome.value)
            results.append(TaskResult(task=name, outcome=outcome))
        return tuple(results)

    def _collect(self, requested: Iterable[str]) -> set[str]:
        scheduled: set[str] = set()
        pending: list[tuple[str, str | None]] = [(name, None) for name in requested]
        while pending:
            name, dependant = pending.pop()
            if name in scheduled:
                continue
            task = self.find_by_name(name)
            if task is None:
                if dependant is None:
                    raise TaskExecutionError(name, f"task {name!r} not found; known: {list(self.names)}")
                raise TaskExecutionError(
                    dependant, f"task {dependant!r} depends on unknown task {name!r}"
                )
            scheduled.add(name)
            pending.extend((dependency, name) for dependency in task.dependencies)
        return scheduled

    def _run(self, task: Task) -> TaskOutcome:
        if not task.enabled:
            return TaskOutcome.SKIPPED
        if not task.actions:
            return TaskOutcome.NO_ACTIONS
        for action in task.actions:
            try:
                action(task)
            except BuildError as exc:
                raise TaskExecutionError(
                    task.name, f"execution failed for task {task.name!r}: {exc}"
                ) from exc
        return TaskOutcome.SUCCESS


__all__ = [
    "Task",
    "TaskAction",
    "TaskContainer",
    "TaskOutcome",
    "TaskResult",
    "task_name_for",
]
