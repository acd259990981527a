"""
Task and tool command models.

A Task is defined once at startup and never mutated. Its action receives a
TaskContext and either returns (success) or raises a SitectlException.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...tasks.context import TaskContext


TaskAction = Callable[["TaskContext"], None]


@dataclass(frozen=True)
class ToolCommand:
    """A single external tool invocation.

    Attributes:
        tool: Executable name, resolved on the search path
        args: Arguments passed after the tool name
        failure_message: Message reported if the tool exits non-zero
    """

    tool: str
    args: tuple[str, ...] = ()
    failure_message: str | None = None

    @property
    def argv(self) -> list[str]:
        return [self.tool, *self.args]

    def __str__(self) -> str:
        return " ".join(self.argv)


@dataclass(frozen=True)
class Task:
    """A named, operator-invocable unit of work.

    Attributes:
        name: Unique command name
        requires: External tools that must be present, in check order
        action: Procedure run once dependencies are satisfied
        interrupt_safe: Whether an interruption triggers the cleanup action
        help: One-line description for CLI help
    """

    name: str
    requires: tuple[str, ...]
    action: TaskAction = field(compare=False)
    interrupt_safe: bool = False
    help: str = ""
