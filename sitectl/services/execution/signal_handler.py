"""
Interrupt guard for long-running tasks.

Turns an interruption signal into a TaskInterruptedError raised at the
point where the task is blocked, so the runner can clean up through
ordinary exception handling.
"""

import signal
from collections.abc import Iterable

from ...core.exceptions import TaskInterruptedError
from ...core.interfaces.logger import ILogger

DEFAULT_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class InterruptGuard:
    """
    Installs handlers for interruption signals while a task runs.

    The first signal restores the previous handlers and raises
    TaskInterruptedError. Any later signal is handled by whatever was
    installed before the guard (for SIGINT, Python's KeyboardInterrupt).

    Must be installed from the main thread.
    """

    def __init__(
        self,
        signals: Iterable[int] = DEFAULT_SIGNALS,
        logger: ILogger | None = None,
    ) -> None:
        """
        Initialize guard.

        Args:
            signals: Signal numbers to intercept
            logger: Logger for internal diagnostics
        """
        self._signals = tuple(signals)
        self._original_handlers: dict[int, object] = {}
        self._signum: int | None = None
        self._logger = logger

    @property
    def logger(self) -> ILogger:
        """Get logger, resolving from container or creating NullLogger."""
        if self._logger is None:
            from ...core.di import resolve_or_default
            from ..logging import NullLogger

            self._logger = resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
        return self._logger

    @property
    def installed(self) -> bool:
        return bool(self._original_handlers)

    @property
    def signum(self) -> int | None:
        """Signal that fired, or None."""
        return self._signum

    def is_interrupted(self) -> bool:
        return self._signum is not None

    def install(self) -> None:
        """Install signal handlers, saving the current ones."""
        for sig in self._signals:
            original = signal.signal(sig, self._handle_signal)
            # None means the previous handler was not installed from Python
            self._original_handlers[sig] = signal.SIG_DFL if original is None else original
        self.logger.debug("Interrupt guard installed for signals %s", self._signals)

    def restore(self) -> None:
        """Restore the saved handlers. Safe to call more than once."""
        if not self._original_handlers:
            return
        for sig, handler in self._original_handlers.items():
            signal.signal(sig, handler)  # type: ignore[arg-type]
        self._original_handlers = {}
        self.logger.debug("Interrupt guard restored original handlers")

    def _handle_signal(self, signum: int, frame) -> None:
        self._signum = signum
        self.logger.debug("Signal received: %d", signum)
        self.restore()
        raise TaskInterruptedError(signum)

    def __enter__(self) -> "InterruptGuard":
        self.install()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()
