"""
Local container environment tasks.
"""

from __future__ import annotations

from ..core.models.task import ToolCommand
from .context import TaskContext

DOCKER_COMPOSE = "docker-compose"
DOCKER = "docker"


def up(ctx: TaskContext) -> None:
    # Containers write into the bind-mounted project as another user
    if ctx.settings.docker.fix_permissions:
        ctx.run(ToolCommand("sudo", ("chmod", "-R", "777", "."), "Up failed: chmod error"))
    ctx.run(ToolCommand(DOCKER_COMPOSE, ("up", "-d"), "Up failed: docker-compose error"))


def down(ctx: TaskContext) -> None:
    ctx.run(ToolCommand(DOCKER_COMPOSE, ("down",), "Down failed: docker-compose error"))


def bash(ctx: TaskContext) -> None:
    ctx.run(
        ToolCommand(
            DOCKER_COMPOSE,
            ("exec", ctx.settings.docker.service, "bash"),
            "Shell failed: docker-compose error",
        )
    )


def prune(ctx: TaskContext) -> None:
    ctx.run(
        ToolCommand(
            DOCKER,
            ("system", "prune", "-af", "--volumes"),
            "Prune failed: docker error",
        )
    )
