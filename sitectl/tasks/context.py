"""
Context handed to every task action.

Carries the frozen settings and the services an action needs; there is
no other shared state between tasks.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING

from ..services.execution.concurrent import ConcurrentPairRunner

if TYPE_CHECKING:
    from ..core.interfaces.logger import ILogger
    from ..core.interfaces.presenter import IPresenter
    from ..core.interfaces.tools import IToolInvoker
    from ..core.models.task import ToolCommand
    from ..core.settings import SitectlSettings


@dataclass(frozen=True)
class TaskContext:
    """Everything a task action may use.

    Attributes:
        settings: Loaded configuration
        invoker: Runs external tools
        cwd: Working directory the tools run in
        presenter: Operator-facing output
        logger: Internal diagnostics
        today: Clock used for dated file names
    """

    settings: SitectlSettings
    invoker: IToolInvoker
    cwd: Path
    presenter: IPresenter
    logger: ILogger
    today: Callable[[], date] = field(default=date.today)

    def run(self, command: ToolCommand) -> None:
        """Run one tool to completion."""
        self.logger.debug("Tool: %s", command)
        self.invoker.run(command.tool, list(command.args), command.failure_message)

    def run_pair(self, first: ToolCommand, second: ToolCommand) -> None:
        """Run two tools concurrently until both exit."""
        ConcurrentPairRunner(self.invoker, self.logger).run(first, second)
