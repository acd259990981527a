"""
Tool locator backed by the executable search path.
"""

import shutil


class PathToolLocator:
    """
    Finds external tools on PATH.

    Args:
        path: Search path override (defaults to the PATH environment variable)
    """

    def __init__(self, path: str | None = None) -> None:
        self._path = path

    def which(self, name: str) -> str | None:
        """Return the full path of the executable, or None."""
        return shutil.which(name, path=self._path)

    def is_available(self, name: str) -> bool:
        return self.which(name) is not None
