"""
Click decorators for sitectl CLI commands.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from ..core.di import resolve_or_default
from ..core.exceptions import SitectlException, TaskInterruptedError
from ..core.interfaces.presenter import IPresenter
from ..presenters.console import ConsolePresenter
from .context import SitectlContext

F = TypeVar("F", bound=Callable[..., Any])

SIGINT_EXIT_CODE = 130


def report_error(message: str) -> None:
    """Show an error through the invocation's presenter.

    Before a SitectlContext exists (config errors) the registered or
    default console presenter is used.
    """
    click_ctx = click.get_current_context(silent=True)
    obj = click_ctx.find_object(SitectlContext) if click_ctx else None
    if obj is not None:
        presenter = obj.presenter
    else:
        presenter = resolve_or_default(IPresenter, ConsolePresenter)  # type: ignore[type-abstract]
    presenter.print_error(message)


def handle_errors(f: F) -> F:
    """Decorator mapping sitectl exceptions to a message and an exit status.

    Messages go through the presenter, like every other line sitectl prints.
    TaskInterruptedError has already been announced by the runner, so only
    its exit status is applied.

    Usage:
        @click.command()
        @click.pass_obj
        @handle_errors
        def build(ctx: SitectlContext):
            ...
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except TaskInterruptedError as e:
            raise SystemExit(e.exit_code) from e
        except SitectlException as e:
            report_error(e.message)
            raise SystemExit(e.exit_code) from e
        except KeyboardInterrupt as e:
            raise SystemExit(SIGINT_EXIT_CODE) from e

    return wrapper  # type: ignore[return-value]
