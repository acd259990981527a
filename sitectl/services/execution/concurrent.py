"""
Concurrent pair runner.

Runs two long-lived tools side by side (e.g. a watch-mode site server
and a watch-mode bundler) and returns only once both have exited.
"""

from ...core.interfaces.logger import ILogger
from ...core.interfaces.tools import IProcessHandle, IToolInvoker
from ...core.models.task import ToolCommand
from ..tools.invoker import raise_for_returncode


class ConcurrentPairRunner:
    """
    Starts two tools, then waits for both.

    A failing process does not stop its sibling. Failures are reported
    after both have exited, first command first. If waiting is interrupted,
    processes still running are terminated and reaped before the exception
    propagates.
    """

    def __init__(self, invoker: IToolInvoker, logger: ILogger | None = None) -> None:
        self._invoker = invoker
        self._logger = logger

    @property
    def logger(self) -> ILogger:
        if self._logger is None:
            from ...core.di import resolve_or_default
            from ..logging import NullLogger

            self._logger = resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
        return self._logger

    def run(self, first: ToolCommand, second: ToolCommand) -> None:
        """
        Run both commands concurrently.

        Raises:
            ExternalToolError: If either command fails to start or exits non-zero
        """
        commands = (first, second)
        handles: list[IProcessHandle] = []
        try:
            for command in commands:
                handles.append(self._invoker.start(command.tool, list(command.args)))
            codes = [handle.wait() for handle in handles]
        finally:
            self._reap(handles)

        self.logger.debug("Pair finished: %s", list(zip([c.tool for c in commands], codes)))
        for command, code in zip(commands, codes):
            raise_for_returncode(command.tool, code, command.failure_message)

    def _reap(self, handles: list[IProcessHandle]) -> None:
        for handle in handles:
            if handle.poll() is None:
                self.logger.debug("Terminating %s", handle.name)
                handle.terminate()
                handle.wait()
