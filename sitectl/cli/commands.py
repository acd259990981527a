"""
Click commands generated from the task registry.

Each registered task becomes a subcommand of the same name.
"""

from __future__ import annotations

import click

from ..core.models.task import Task
from ..core.registry import TaskRegistry
from .context import SitectlContext
from .decorators import handle_errors


def make_task_command(task: Task) -> click.Command:
    """Build the click command that runs one task."""

    @click.command(task.name, help=task.help)
    @click.pass_obj
    @handle_errors
    def command(ctx: SitectlContext) -> None:
        ctx.create_runner().run(ctx.registry.resolve(task.name))

    return command


def make_task_commands(registry: TaskRegistry) -> list[click.Command]:
    return [make_task_command(task) for task in registry]
