"""
Application bootstrap for sitectl.

Registers the default services in the DI container. Called once at
CLI startup, after settings have been loaded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger
from .interfaces.presenter import IPresenter
from .interfaces.tools import IToolLocator

if TYPE_CHECKING:
    from .settings import SitectlSettings

_initialized = False


def bootstrap(settings: SitectlSettings, verbose: bool = False) -> ServiceContainer:
    """
    Bootstrap the sitectl application.

    Args:
        settings: Loaded settings (logging section drives the logger)
        verbose: Force debug logging to stderr for this invocation

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    from ..presenters.console import ConsolePresenter
    from ..services.logging import SitectlLogger
    from ..services.tools import PathToolLocator

    container.register_singleton(IPresenter, implementation=ConsolePresenter())  # type: ignore[type-abstract]

    def create_logger() -> ILogger:
        return SitectlLogger(settings.logging, verbose=verbose)

    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]
    container.register_singleton(IToolLocator, factory=PathToolLocator)

    _initialized = True
    return container


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    """Check if the application has been bootstrapped."""
    return _initialized
