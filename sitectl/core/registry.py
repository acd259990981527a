"""
Task registry.

A fixed, ordered mapping from command names to tasks. Resolution is by
exact string match only.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .exceptions import UnknownCommandError
from .models.task import Task


class TaskRegistry:
    """
    Ordered name -> Task mapping.

    Registration order is the canonical order used in the usage line and
    in CLI help.
    """

    def __init__(self, tasks: Iterable[Task] = (), prog_name: str = "sitectl") -> None:
        self._tasks: dict[str, Task] = {}
        self._prog_name = prog_name
        for task in tasks:
            self.register(task)

    def register(self, task: Task) -> Task:
        """
        Register a task.

        Raises:
            ValueError: If a task with the same name is already registered
        """
        if task.name in self._tasks:
            raise ValueError(f"Task already registered: {task.name}")
        self._tasks[task.name] = task
        return task

    def names(self) -> list[str]:
        """Registered command names in canonical order."""
        return list(self._tasks)

    def get(self, name: str | None) -> Task | None:
        if name is None:
            return None
        return self._tasks.get(name)

    def resolve(self, name: str | None) -> Task:
        """
        Resolve a command name to its task.

        Raises:
            UnknownCommandError: If name is missing or not registered
        """
        task = self.get(name)
        if task is None:
            raise UnknownCommandError(self.usage(), command=name)
        return task

    def usage(self) -> str:
        """Usage line enumerating every registered command."""
        return f"Usage: {self._prog_name} {{ {' | '.join(self._tasks)} }}"

    def __contains__(self, name: object) -> bool:
        return name in self._tasks

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks.values())

    def __len__(self) -> int:
        return len(self._tasks)
