"""
Click-based CLI for sitectl.

    sitectl [--config PATH] [-v] { dev | build | deploy | backup | preview |
                                   watch | clean | up | down | bash | prune }

A missing or unknown command prints the usage line and exits 1.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import click

from ..core.exceptions import SitectlException
from ..tasks import build_registry
from .commands import make_task_commands
from .context import SitectlContext
from .decorators import report_error

try:
    __version__ = version("sitectl")
except PackageNotFoundError:
    __version__ = "0.1.0"

TASK_REGISTRY = build_registry()


def _usage_exit(ctx: click.Context) -> None:
    click.echo(TASK_REGISTRY.usage())
    ctx.exit(1)


class TaskGroup(click.Group):
    """Group that lists tasks in canonical order and rejects unknown names with exit 1."""

    def list_commands(self, ctx: click.Context) -> list[str]:
        return [name for name in TASK_REGISTRY.names() if name in self.commands]

    def resolve_command(self, ctx: click.Context, args: list[str]):
        if not args or args[0] not in TASK_REGISTRY:
            _usage_exit(ctx)
        return super().resolve_command(ctx, args)


@click.group(cls=TaskGroup, invoke_without_command=True)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Config file (default: .sitectl/config.toml or [tool.sitectl] in pyproject.toml).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.version_option(version=__version__, prog_name="sitectl")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """sitectl - static site workflow runner

    \b
    Site:
        dev       Serve with live reload and rebundle scripts on change
        build     Bundle scripts, then build the site
        deploy    Build and rsync the output directory to the server
        preview   Serve on the configured preview host and port
        watch     Rebuild site and scripts on change
        clean     Remove generated site output
        backup    Archive the project directory

    \b
    Containers:
        up, down, bash, prune
    """
    if ctx.invoked_subcommand is None:
        _usage_exit(ctx)

    if ctx.obj is None:
        try:
            ctx.obj = SitectlContext.create(config_path=config_path, verbose=verbose)
        except SitectlException as e:
            report_error(e.message)
            ctx.exit(e.exit_code)


def register_commands() -> None:
    """Register one command per task with the main group."""
    for cmd in make_task_commands(TASK_REGISTRY):
        cli.add_command(cmd)


register_commands()


__all__ = [
    "TASK_REGISTRY",
    "SitectlContext",
    "__version__",
    "cli",
    "register_commands",
]
