"""Locating, checking and invoking external tools."""

from .checker import DependencyChecker
from .invoker import ProcessHandle, ToolInvoker, raise_for_returncode
from .locator import PathToolLocator

__all__ = [
    "DependencyChecker",
    "PathToolLocator",
    "ProcessHandle",
    "ToolInvoker",
    "raise_for_returncode",
]
