"""
Unit tests for the task registry.
"""

import pytest

from sitectl.core.exceptions import UnknownCommandError
from sitectl.core.models import Task
from sitectl.core.registry import TaskRegistry
from sitectl.tasks import build_registry

CANONICAL_ORDER = [
    "dev",
    "build",
    "deploy",
    "backup",
    "preview",
    "watch",
    "clean",
    "up",
    "down",
    "bash",
    "prune",
]

EXPECTED_USAGE = (
    "Usage: sitectl { dev | build | deploy | backup | preview | watch | clean | up | down | bash | prune }"
)


class TestBuiltinRegistry:
    def test_canonical_order(self):
        assert build_registry().names() == CANONICAL_ORDER

    def test_usage_line(self):
        assert build_registry().usage() == EXPECTED_USAGE

    @pytest.mark.parametrize("name", CANONICAL_ORDER)
    def test_resolves_every_registered_name(self, name):
        assert build_registry().resolve(name).name == name

    @pytest.mark.parametrize("name", ["", "Build", "BUILD", "buil", "build ", "deploys", "help"])
    def test_rejects_non_exact_names(self, name):
        with pytest.raises(UnknownCommandError) as exc_info:
            build_registry().resolve(name)

        assert str(exc_info.value) == EXPECTED_USAGE
        assert exc_info.value.command == name
        assert exc_info.value.exit_code == 1

    def test_rejects_missing_name(self):
        with pytest.raises(UnknownCommandError):
            build_registry().resolve(None)

    @pytest.mark.parametrize(
        ("name", "requires"),
        [
            ("dev", ("jekyll", "esbuild")),
            ("build", ("jekyll", "esbuild")),
            ("deploy", ("jekyll", "esbuild", "rsync")),
            ("backup", ("7z", "jekyll")),
            ("preview", ("jekyll",)),
            ("watch", ("esbuild", "jekyll")),
            ("clean", ("jekyll",)),
            ("up", ("docker-compose",)),
            ("down", ("docker-compose",)),
            ("bash", ("docker-compose",)),
            ("prune", ("docker",)),
        ],
    )
    def test_requirements(self, name, requires):
        assert build_registry().resolve(name).requires == requires

    def test_interrupt_safe_tasks(self):
        safe = [task.name for task in build_registry() if task.interrupt_safe]

        assert safe == ["dev", "deploy", "preview", "watch"]


class TestTaskRegistry:
    def test_duplicate_registration_rejected(self):
        registry = TaskRegistry([Task("clean", ("jekyll",), lambda ctx: None)])

        with pytest.raises(ValueError):
            registry.register(Task("clean", (), lambda ctx: None))

    def test_contains_and_len(self):
        registry = TaskRegistry([Task("clean", ("jekyll",), lambda ctx: None)], prog_name="x")

        assert "clean" in registry
        assert "build" not in registry
        assert len(registry) == 1
        assert registry.usage() == "Usage: x { clean }"
