"""
Shared pytest fixtures for sitectl tests.

Tests never depend on jekyll, esbuild or rsync being installed: tool
presence and subprocess outcomes come from the fakes in fakes.py.
"""

from pathlib import Path

import pytest
from fakes import ALL_TOOLS, FakeInvoker, FakeLocator

from sitectl.cli.context import SitectlContext
from sitectl.core.bootstrap import reset
from sitectl.core.settings import SitectlSettings
from sitectl.presenters.console import ConsolePresenter
from sitectl.services.logging import NullLogger
from sitectl.tasks import TaskContext, build_registry


@pytest.fixture(autouse=True)
def reset_container():
    """Isolate the global service container between tests."""
    reset()
    yield
    reset()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """An empty project directory with a stable name."""
    path = tmp_path / "mysite"
    path.mkdir()
    return path


@pytest.fixture
def invoker() -> FakeInvoker:
    return FakeInvoker()


@pytest.fixture
def settings() -> SitectlSettings:
    return SitectlSettings()


@pytest.fixture
def task_ctx(project_dir: Path, invoker: FakeInvoker, settings: SitectlSettings) -> TaskContext:
    return TaskContext(
        settings=settings,
        invoker=invoker,
        cwd=project_dir,
        presenter=ConsolePresenter(use_color=False),
        logger=NullLogger(),
    )


@pytest.fixture
def make_context(project_dir: Path, settings: SitectlSettings):
    """Factory for a SitectlContext wired with fakes."""

    def _make(invoker: FakeInvoker | None = None, available=ALL_TOOLS) -> SitectlContext:
        return SitectlContext(
            cwd=project_dir,
            settings=settings,
            registry=build_registry(),
            locator=FakeLocator(available),
            invoker=invoker or FakeInvoker(),
            presenter=ConsolePresenter(use_color=False),
            logger=NullLogger(),
        )

    return _make
