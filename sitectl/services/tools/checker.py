"""
Dependency checker for external tools.

Probes every required tool before a task runs and reports all missing
ones together.
"""

from collections.abc import Iterable

from ...core.exceptions import MissingDependencyError
from ...core.interfaces.logger import ILogger
from ...core.interfaces.tools import IToolLocator


class DependencyChecker:
    """
    Verifies that required tools are available.

    Read-only: tools are located, never executed.
    """

    def __init__(self, locator: IToolLocator, logger: ILogger | None = None) -> None:
        self._locator = locator
        self._logger = logger

    @property
    def logger(self) -> ILogger:
        """Get logger, resolving from container or creating NullLogger."""
        if self._logger is None:
            from ...core.di import resolve_or_default
            from ..logging import NullLogger

            self._logger = resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
        return self._logger

    def missing(self, names: Iterable[str]) -> list[str]:
        """Return the tools that are not available, in input order."""
        return [name for name in names if not self._locator.is_available(name)]

    def check(self, names: Iterable[str]) -> None:
        """
        Check that every named tool is available.

        Args:
            names: Tool names in the order they should be reported

        Raises:
            MissingDependencyError: If one or more tools are missing
        """
        names = list(names)
        self.logger.debug("Checking dependencies: %s", names)
        missing = self.missing(names)
        if missing:
            self.logger.debug("Missing dependencies: %s", missing)
            raise MissingDependencyError(missing)
