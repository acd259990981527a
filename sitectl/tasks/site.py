"""
Site tasks: generator and bundler workflows plus deploy.
"""

from __future__ import annotations

import glob
from pathlib import Path

from ..core.exceptions import ExternalToolError
from ..core.models.task import ToolCommand
from .context import TaskContext

JEKYLL = "jekyll"
ESBUILD = "esbuild"
RSYNC = "rsync"

_GLOB_CHARS = frozenset("*?[")


def expand_glob(pattern: str, cwd: Path) -> list[str]:
    """
    Expand a glob the way a POSIX shell would.

    Matches are sorted; a pattern that matches nothing is passed through
    literally.
    """
    if not _GLOB_CHARS.intersection(pattern):
        return [pattern]
    matches = sorted(glob.glob(pattern, root_dir=cwd))
    return matches or [pattern]


def jekyll_clean() -> ToolCommand:
    return ToolCommand(JEKYLL, ("clean",), "Clean failed: jekyll error")


def jekyll_build(watch: bool = False) -> ToolCommand:
    args: tuple[str, ...] = ("build",)
    if watch:
        args += ("--watch", "--force_polling")
    return ToolCommand(JEKYLL, args, "Build failed: jekyll error")


def bundle_scripts(ctx: TaskContext, watch: bool = False) -> ToolCommand:
    """esbuild invocation bundling and minifying the configured sources."""
    scripts = ctx.settings.scripts
    args = [
        *expand_glob(scripts.source, ctx.cwd),
        "--bundle",
        f"--outdir={scripts.outdir}",
        "--minify",
    ]
    if watch:
        args.append("--watch")
    return ToolCommand(ESBUILD, tuple(args), "Bundle failed: esbuild error")


def dev(ctx: TaskContext) -> None:
    """Serve with live reload while rebundling scripts on change."""
    server = ToolCommand(
        JEKYLL,
        (
            "serve",
            "--host",
            "0.0.0.0",
            "--watch",
            "--force_polling",
            "--livereload",
            "--incremental",
            "--config",
            ctx.settings.site.config_arg,
        ),
        "Dev server failed: jekyll error",
    )
    ctx.run_pair(server, bundle_scripts(ctx, watch=True))


def build(ctx: TaskContext) -> None:
    ctx.run(bundle_scripts(ctx))
    ctx.run(jekyll_build())


def deploy(ctx: TaskContext) -> None:
    """Clean and build, then mirror the output directory to the remote target.

    The trailing clean also runs when the sync fails, without masking the
    sync error. An interrupt is left to the runner, which cleans once.
    """
    site = ctx.settings.site
    target = ctx.settings.deploy.target

    ctx.run(jekyll_clean())
    build(ctx)
    sync = ToolCommand(
        RSYNC,
        (*ctx.settings.deploy.rsync_options, site.output_dir, target),
        "Deploy failed: rsync error",
    )
    try:
        ctx.run(sync)
    except ExternalToolError:
        try:
            ctx.run(jekyll_clean())
        except ExternalToolError as e:
            ctx.logger.error("Clean after failed sync failed: %s", e)
            ctx.presenter.print_warning(f"Cleanup failed: {e}")
        raise
    ctx.run(jekyll_clean())
    ctx.presenter.print_success(f"Deployed {site.output_dir} to {target}")


def preview(ctx: TaskContext) -> None:
    settings = ctx.settings.preview
    ctx.run(
        ToolCommand(
            JEKYLL,
            ("serve", "--watch", "--host", settings.host, "--port", str(settings.port)),
            "Preview failed: jekyll error",
        )
    )


def watch(ctx: TaskContext) -> None:
    ctx.run_pair(jekyll_build(watch=True), bundle_scripts(ctx, watch=True))


def clean(ctx: TaskContext) -> None:
    ctx.run(jekyll_clean())
