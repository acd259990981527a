"""
Built-in tasks and the fixed registry that maps command names to them.
"""

from ..core.models.task import Task
from ..core.registry import TaskRegistry
from . import backup, compose, site
from .context import TaskContext


def build_registry() -> TaskRegistry:
    """Create the task registry in canonical command order."""
    return TaskRegistry(
        [
            Task(
                "dev",
                (site.JEKYLL, site.ESBUILD),
                site.dev,
                interrupt_safe=True,
                help="Serve with live reload and rebundle scripts on change.",
            ),
            Task(
                "build",
                (site.JEKYLL, site.ESBUILD),
                site.build,
                help="Bundle scripts, then build the site.",
            ),
            Task(
                "deploy",
                (site.JEKYLL, site.ESBUILD, site.RSYNC),
                site.deploy,
                interrupt_safe=True,
                help="Build and rsync the output directory to the server.",
            ),
            Task(
                "backup",
                (backup.SEVEN_ZIP, site.JEKYLL),
                backup.backup,
                help="Archive the project directory to a dated .7z file.",
            ),
            Task(
                "preview",
                (site.JEKYLL,),
                site.preview,
                interrupt_safe=True,
                help="Serve the site on the configured preview host and port.",
            ),
            Task(
                "watch",
                (site.ESBUILD, site.JEKYLL),
                site.watch,
                interrupt_safe=True,
                help="Rebuild site and scripts on change without serving.",
            ),
            Task("clean", (site.JEKYLL,), site.clean, help="Remove generated site output."),
            Task("up", (compose.DOCKER_COMPOSE,), compose.up, help="Start the containers."),
            Task("down", (compose.DOCKER_COMPOSE,), compose.down, help="Stop the containers."),
            Task(
                "bash",
                (compose.DOCKER_COMPOSE,),
                compose.bash,
                help="Open a shell in the site container.",
            ),
            Task("prune", (compose.DOCKER,), compose.prune, help="Remove unused Docker data."),
        ]
    )


__all__ = ["TaskContext", "build_registry"]
