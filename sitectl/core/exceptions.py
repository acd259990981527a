"""
Custom exception hierarchy for sitectl.

Every failure that ends a command is one of these. The CLI prints the
message and exits with the exception's ``exit_code``; nothing is retried.
"""

from __future__ import annotations


class SitectlException(Exception):
    """
    Base exception for all sitectl errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (tool names, paths, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
    """

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class SitectlConfigError(SitectlException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(SitectlConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors, unreadable files, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(SitectlConfigError, ValueError):
    """
    Invalid configuration value.

    Inherits from ValueError so callers validating input can catch either.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Dispatch Errors
# =============================================================================


class UnknownCommandError(SitectlException):
    """
    No command, or a command name that is not registered.

    The message is the full usage line listing every valid command.
    """

    def __init__(
        self,
        message: str,
        *,
        command: str | None = None,
        context: dict | None = None,
    ) -> None:
        ctx = context or {}
        if command is not None:
            ctx["command"] = command
        super().__init__(message, context=ctx)
        self.command = command


class MissingDependencyError(SitectlException):
    """
    One or more required external tools are not on the search path.

    All missing tools are reported together, in the order they were required.
    """

    def __init__(self, missing: list[str], *, context: dict | None = None) -> None:
        self.missing = list(missing)
        ctx = context or {}
        ctx["missing"] = self.missing
        super().__init__(f"{' '.join(self.missing)} is not installed", context=ctx)


# =============================================================================
# Execution Errors
# =============================================================================


class SitectlExecutionError(SitectlException):
    """Base class for errors raised while a task is running."""

    pass


class ExternalToolError(SitectlExecutionError):
    """
    An external tool exited non-zero or could not be started.

    Attributes:
        tool: Name of the tool that failed
        returncode: The tool's exit status (127 if it could not be spawned)
    """

    def __init__(
        self,
        message: str,
        *,
        tool: str,
        returncode: int,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        ctx["tool"] = tool
        ctx["returncode"] = returncode
        super().__init__(message, context=ctx, cause=cause)
        self.tool = tool
        self.returncode = returncode


class TaskInterruptedError(SitectlExecutionError):
    """
    A running task received an interruption signal.

    The exit code follows the shell convention of 128 + signal number.
    """

    def __init__(self, signum: int, *, task: str | None = None) -> None:
        self.signum = signum
        self.task = task
        self.exit_code = 128 + signum
        ctx: dict = {"signum": signum}
        if task:
            ctx["task"] = task
        super().__init__("Interrupted", context=ctx)
