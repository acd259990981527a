"""
Click context object for the sitectl CLI.

Provides SitectlContext, created once per invocation and passed to
commands via Click's ctx.obj mechanism.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.interfaces.logger import ILogger
from ..core.interfaces.presenter import IPresenter
from ..core.interfaces.tools import IToolInvoker, IToolLocator
from ..core.registry import TaskRegistry
from ..core.settings import SitectlSettings, load_settings
from ..services.execution.runner import TaskRunner
from ..services.tools import DependencyChecker, ToolInvoker
from ..tasks import TaskContext, build_registry


@dataclass
class SitectlContext:
    """Per-invocation state shared by all commands.

    Attributes:
        cwd: Working directory the tools run in
        settings: Loaded configuration
        registry: Command name -> task mapping
        locator: Decides whether a tool is installed
        invoker: Runs external tools
        presenter: Operator-facing output
        logger: Internal diagnostics
    """

    cwd: Path
    settings: SitectlSettings
    registry: TaskRegistry
    locator: IToolLocator
    invoker: IToolInvoker
    presenter: IPresenter
    logger: ILogger

    @classmethod
    def create(
        cls,
        cwd: Path | None = None,
        config_path: Path | None = None,
        verbose: bool = False,
    ) -> SitectlContext:
        """Create a SitectlContext for the current environment.

        Loads settings, bootstraps the service container and builds the
        task registry.

        Args:
            cwd: Working directory override (defaults to Path.cwd())
            config_path: Explicit config file (otherwise discovered from cwd)
            verbose: Enable debug logging to stderr

        Raises:
            SitectlConfigError: If configuration cannot be loaded
        """
        from ..core.bootstrap import bootstrap

        if cwd is None:
            cwd = Path.cwd()

        settings = load_settings(config_path=config_path, start_dir=cwd)
        container = bootstrap(settings, verbose=verbose)
        logger = container.resolve(ILogger)  # type: ignore[type-abstract]

        return cls(
            cwd=cwd,
            settings=settings,
            registry=build_registry(),
            locator=container.resolve(IToolLocator),  # type: ignore[type-abstract]
            invoker=ToolInvoker(cwd=cwd, logger=logger),
            presenter=container.resolve(IPresenter),  # type: ignore[type-abstract]
            logger=logger,
        )

    def task_context(self) -> TaskContext:
        return TaskContext(
            settings=self.settings,
            invoker=self.invoker,
            cwd=self.cwd,
            presenter=self.presenter,
            logger=self.logger,
        )

    def create_runner(self) -> TaskRunner:
        """Task runner whose interrupt cleanup is the clean task's action."""
        clean = self.registry.get("clean")
        return TaskRunner(
            self.task_context(),
            DependencyChecker(self.locator, self.logger),
            cleanup=clean.action if clean else None,
            presenter=self.presenter,
            logger=self.logger,
        )
