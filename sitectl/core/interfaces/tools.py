"""
Protocols for locating and running external tools.

Tests substitute fakes for these to control tool presence and
subprocess outcomes without touching the real environment.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IToolLocator(Protocol):
    """Protocol for deciding whether a tool is on the search path."""

    def is_available(self, name: str) -> bool:
        """Return True if the named executable can be found."""
        ...


@runtime_checkable
class IProcessHandle(Protocol):
    """Protocol for a started external process."""

    @property
    def name(self) -> str:
        """Tool name the process was started from."""
        ...

    @property
    def returncode(self) -> int | None:
        """Exit status, or None while still running."""
        ...

    def wait(self) -> int:
        """Block until the process exits and return its status."""
        ...

    def poll(self) -> int | None:
        """Return the exit status if the process has exited, else None."""
        ...

    def terminate(self) -> None:
        """Ask the process to stop."""
        ...


@runtime_checkable
class IToolInvoker(Protocol):
    """Protocol for running external tools."""

    def run(self, tool: str, args: list[str], failure_message: str | None = None) -> None:
        """Run a tool to completion, raising ExternalToolError on failure."""
        ...

    def start(self, tool: str, args: list[str]) -> IProcessHandle:
        """Start a tool without waiting for it."""
        ...
