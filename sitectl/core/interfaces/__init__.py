"""Interface and protocol definitions for sitectl services."""

from .logger import ILogger
from .presenter import IPresenter
from .tools import IProcessHandle, IToolInvoker, IToolLocator

__all__ = [
    "ILogger",
    "IPresenter",
    "IProcessHandle",
    "IToolInvoker",
    "IToolLocator",
]
