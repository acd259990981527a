"""
Backup task: archive the working directory with 7-Zip.
"""

from __future__ import annotations

from ..core.models.task import ToolCommand
from .context import TaskContext
from .site import jekyll_clean

SEVEN_ZIP = "7z"


def archive_name(ctx: TaskContext) -> str:
    """<dir>-<date>.7z, dated with the configured strftime pattern."""
    stamp = ctx.today().strftime(ctx.settings.backup.date_format)
    return f"{ctx.cwd.name}-{stamp}.7z"


def backup(ctx: TaskContext) -> None:
    """Remove generated output, then archive the project directory.

    Excluded subpaths are given relative to the directory name, which is how
    7z records entries when archiving an absolute directory path.
    """
    settings = ctx.settings.backup
    dir_name = ctx.cwd.name
    name = archive_name(ctx)

    ctx.run(jekyll_clean())
    excludes = [f"-x!{dir_name}/{path}" for path in settings.exclude]
    ctx.run(
        ToolCommand(
            SEVEN_ZIP,
            ("a", *settings.compression_options, *excludes, f"./{name}", str(ctx.cwd)),
            "Backup failed: 7z error",
        )
    )
    ctx.presenter.print_success(f"Created {name}")
