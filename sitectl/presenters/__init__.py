"""Output presenters for sitectl."""

from .console import ConsolePresenter

__all__ = ["ConsolePresenter"]
