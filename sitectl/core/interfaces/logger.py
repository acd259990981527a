"""
Logger interface for sitectl diagnostics.

Diagnostics go to the log file (and stderr with --verbose). Anything the
operator is meant to read goes through IPresenter instead.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """Diagnostic logger, optionally bound to the task being run."""

    @abstractmethod
    def debug(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    @abstractmethod
    def info(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    @abstractmethod
    def warning(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    @abstractmethod
    def error(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    @abstractmethod
    def for_task(self, task: str) -> ILogger:
        """
        Return a logger whose records are tagged with a task name.

        Tool invocations logged while a task runs can then be traced back
        to the command that started them.
        """
