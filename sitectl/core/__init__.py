"""
Core infrastructure for sitectl.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- The task registry
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container, resolve, try_resolve
from .exceptions import (
    ConfigFileError,
    ConfigValidationError,
    ExternalToolError,
    MissingDependencyError,
    SitectlConfigError,
    SitectlException,
    SitectlExecutionError,
    TaskInterruptedError,
    UnknownCommandError,
)

__all__ = [
    "ConfigFileError",
    "ConfigValidationError",
    "ExternalToolError",
    "MissingDependencyError",
    "ServiceContainer",
    "SitectlConfigError",
    "SitectlException",
    "SitectlExecutionError",
    "TaskInterruptedError",
    "UnknownCommandError",
    "bootstrap",
    "get_container",
    "is_initialized",
    "reset",
    "resolve",
    "try_resolve",
]
