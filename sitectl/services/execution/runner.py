"""
Interrupt-safe task runner.

Drives one task through its lifecycle:

    INVOKED -> DEPENDENCY_CHECKED -> RUNNING -> COMPLETED | FAILED | INTERRUPTED
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from typing import TYPE_CHECKING

from ...core.exceptions import SitectlException, TaskInterruptedError
from ...core.interfaces.logger import ILogger
from ...core.interfaces.presenter import IPresenter
from .signal_handler import InterruptGuard

if TYPE_CHECKING:
    from ...core.models.task import Task, TaskAction
    from ...tasks.context import TaskContext
    from ..tools.checker import DependencyChecker


class TaskRunner:
    """
    Runs tasks after checking their dependencies.

    Interrupt-safe tasks run under an InterruptGuard. If the guard fires,
    the cleanup action runs once, to completion, before the
    TaskInterruptedError propagates to the caller.
    """

    def __init__(
        self,
        context: TaskContext,
        checker: DependencyChecker,
        cleanup: TaskAction | None = None,
        guard_factory: Callable[[], InterruptGuard] | None = None,
        presenter: IPresenter | None = None,
        logger: ILogger | None = None,
    ) -> None:
        """
        Initialize task runner.

        Args:
            context: Context handed to every task action
            checker: Dependency checker run before each action
            cleanup: Action run when an interrupt-safe task is interrupted
            guard_factory: Creates the interrupt guard (defaults to InterruptGuard)
            presenter: Presenter for operator-facing messages
            logger: Logger for internal diagnostics
        """
        self._context = context
        self._checker = checker
        self._cleanup = cleanup
        self._guard_factory = guard_factory or InterruptGuard
        self._presenter = presenter
        self._logger = logger

    @property
    def presenter(self) -> IPresenter:
        if self._presenter is None:
            self._presenter = self._context.presenter
        return self._presenter

    @property
    def logger(self) -> ILogger:
        if self._logger is None:
            self._logger = self._context.logger
        return self._logger

    def run(self, task: Task) -> None:
        """
        Check dependencies and run the task's action.

        Raises:
            MissingDependencyError: If a required tool is missing (action not run)
            ExternalToolError: If a tool invoked by the action fails
            TaskInterruptedError: If an interrupt-safe task was interrupted
        """
        log = self.logger.for_task(task.name)
        log.debug("Invoked")
        self._checker.check(task.requires)
        log.debug("Dependencies satisfied: %s", " ".join(task.requires))
        context = replace(self._context, logger=log)

        if not task.interrupt_safe:
            task.action(context)
            log.debug("Completed")
            return

        guard = self._guard_factory()
        guard.install()
        try:
            task.action(context)
        except TaskInterruptedError as e:
            guard.restore()
            e.task = task.name
            log.info("Interrupted by signal %d", e.signum)
            self._run_cleanup(context)
            raise
        finally:
            guard.restore()
        log.debug("Completed")

    def _run_cleanup(self, context: TaskContext) -> None:
        if self._cleanup is None:
            context.logger.debug("No cleanup action configured")
            return
        self.presenter.print("Interrupted, cleaning up...")
        try:
            self._cleanup(context)
        except SitectlException as e:
            # The interruption remains the reported outcome
            context.logger.error("Cleanup failed: %s", e)
            self.presenter.print_warning(f"Cleanup failed: {e}")
