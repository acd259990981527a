"""
External tool invoker.

Runs tools as subprocesses and turns non-zero exits into
ExternalToolError. Effects of the tools themselves are not interpreted.
"""

import shlex
import subprocess
from pathlib import Path

from ...core.exceptions import ExternalToolError
from ...core.interfaces.logger import ILogger

# Shell convention for "command not found"
NOT_FOUND_EXIT_CODE = 127


def _get_logger() -> ILogger:
    from ...core.di import resolve_or_default
    from ..logging import NullLogger

    return resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]


def raise_for_returncode(tool: str, returncode: int, failure_message: str | None = None) -> None:
    """
    Raise ExternalToolError if returncode is non-zero.

    Args:
        tool: Tool name, used in the default message
        returncode: Exit status reported by the process
        failure_message: Tool-specific message overriding the default
    """
    if returncode != 0:
        raise ExternalToolError(
            failure_message or f"{tool} failed with exit code {returncode}",
            tool=tool,
            returncode=returncode,
        )


class ProcessHandle:
    """
    A started external process.

    Owned by whoever started it; it must be waited on (or terminated and
    waited on) so that the child is reaped.
    """

    def __init__(self, name: str, process: subprocess.Popen) -> None:
        self._name = name
        self._process = process

    @property
    def name(self) -> str:
        return self._name

    @property
    def pid(self) -> int:
        return self._process.pid

    @property
    def returncode(self) -> int | None:
        return self._process.returncode

    def wait(self) -> int:
        return self._process.wait()

    def poll(self) -> int | None:
        return self._process.poll()

    def terminate(self) -> None:
        if self._process.poll() is None:
            self._process.terminate()


class ToolInvoker:
    """
    Starts external tools in the working directory.

    Usage:
        invoker = ToolInvoker(cwd=Path.cwd())
        invoker.run("jekyll", ["build"], failure_message="Build failed: jekyll error")
    """

    def __init__(self, cwd: Path | None = None, logger: ILogger | None = None) -> None:
        self._cwd = cwd
        self._logger = logger

    @property
    def logger(self) -> ILogger:
        if self._logger is None:
            self._logger = _get_logger()
        return self._logger

    def run(self, tool: str, args: list[str], failure_message: str | None = None) -> None:
        """
        Run a tool in the foreground and wait for it.

        Raises:
            ExternalToolError: If the tool cannot be started or exits non-zero
        """
        argv = [tool, *args]
        self.logger.info("Running: %s", shlex.join(argv))
        try:
            result = subprocess.run(argv, cwd=self._cwd)
        except OSError as e:
            raise ExternalToolError(
                failure_message or f"{tool} could not be started: {e}",
                tool=tool,
                returncode=NOT_FOUND_EXIT_CODE,
                cause=e,
            ) from e
        self.logger.debug("%s exited: code=%d", tool, result.returncode)
        raise_for_returncode(tool, result.returncode, failure_message)

    def start(self, tool: str, args: list[str]) -> ProcessHandle:
        """
        Start a tool without waiting for it.

        Raises:
            ExternalToolError: If the tool cannot be started
        """
        argv = [tool, *args]
        self.logger.info("Starting: %s", shlex.join(argv))
        try:
            process = subprocess.Popen(argv, cwd=self._cwd)
        except OSError as e:
            raise ExternalToolError(
                f"{tool} could not be started: {e}",
                tool=tool,
                returncode=NOT_FOUND_EXIT_CODE,
                cause=e,
            ) from e
        self.logger.debug("%s started: pid=%d", tool, process.pid)
        return ProcessHandle(tool, process)
