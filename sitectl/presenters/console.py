"""
Console presenter for terminal output.

Implements human-readable output formatting for the CLI.
"""

import sys

from ..core.interfaces.presenter import IPresenter


class ConsolePresenter(IPresenter):
    """
    Console output presenter.

    Messages go to stdout so that operators and scripts see them in one
    stream; colour is only used on a TTY.
    """

    def __init__(self, use_color: bool = True, file=None) -> None:
        """
        Initialize console presenter.

        Args:
            use_color: Whether to use ANSI color codes
            file: Output file (defaults to the current sys.stdout)
        """
        self._use_color = use_color
        self._file = file

    @property
    def _out(self):
        # Resolved per call so a swapped sys.stdout is honoured
        return self._file or sys.stdout

    def _colored(self) -> bool:
        return self._use_color and self._out.isatty()

    def print(self, message: str) -> None:
        """Print a message to output."""
        print(message, file=self._out)

    def print_error(self, message: str) -> None:
        """Print an error message."""
        if self._colored():
            print(f"\033[91m{message}\033[0m", file=self._out)
        else:
            print(message, file=self._out)

    def print_warning(self, message: str) -> None:
        """Print a warning message."""
        if self._colored():
            print(f"\033[93mWarning: {message}\033[0m", file=self._out)
        else:
            print(f"Warning: {message}", file=self._out)

    def print_success(self, message: str) -> None:
        """Print a success message."""
        if self._colored():
            print(f"\033[92m{message}\033[0m", file=self._out)
        else:
            print(message, file=self._out)
