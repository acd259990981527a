"""
Fakes standing in for the tool search path and external processes.

- FakeLocator: configurable tool presence
- FakeInvoker / FakeHandle: record invocations and return scripted exit codes
"""

from collections.abc import Callable

from sitectl.services.tools.invoker import raise_for_returncode

ALL_TOOLS = ("jekyll", "esbuild", "rsync", "7z", "docker-compose", "docker", "sudo")


class FakeLocator:
    """Tool locator that reports a fixed set of tools as installed."""

    def __init__(self, available=ALL_TOOLS) -> None:
        self.available = set(available)
        self.probed: list[str] = []

    def is_available(self, name: str) -> bool:
        self.probed.append(name)
        return name in self.available


class FakeHandle:
    """Process handle with a scripted exit code.

    on_wait runs once, on the first wait() call, before the exit code is
    reported; tests use it to deliver signals while "blocked".
    """

    def __init__(
        self,
        name: str,
        exit_code: int = 0,
        on_wait: Callable[[], None] | None = None,
        events: list | None = None,
    ) -> None:
        self._name = name
        self._exit_code = exit_code
        self._on_wait = on_wait
        self._returncode: int | None = None
        self._events = events if events is not None else []
        self.terminated = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def returncode(self) -> int | None:
        return self._returncode

    def wait(self) -> int:
        self._events.append(("wait", self._name))
        if self._on_wait is not None:
            hook, self._on_wait = self._on_wait, None
            hook()
        if self._returncode is None:
            self._returncode = self._exit_code
        return self._returncode

    def poll(self) -> int | None:
        return self._returncode

    def terminate(self) -> None:
        self.terminated = True
        if self._returncode is None:
            self._returncode = -15


class FakeInvoker:
    """Records tool invocations instead of running them.

    Exit codes are looked up by "<tool> <first arg>" first, then by tool
    name, defaulting to 0.
    """

    def __init__(
        self,
        exit_codes: dict[str, int] | None = None,
        on_wait: dict[str, Callable[[], None]] | None = None,
    ) -> None:
        self.exit_codes = exit_codes or {}
        self.on_wait = on_wait or {}
        self.calls: list[tuple[str, list[str]]] = []
        self.events: list[tuple[str, str]] = []
        self.handles: list[FakeHandle] = []

    def _exit_code(self, tool: str, args: list[str]) -> int:
        if args and f"{tool} {args[0]}" in self.exit_codes:
            return self.exit_codes[f"{tool} {args[0]}"]
        return self.exit_codes.get(tool, 0)

    def run(self, tool: str, args: list[str], failure_message: str | None = None) -> None:
        self.calls.append((tool, list(args)))
        self.events.append(("run", tool))
        raise_for_returncode(tool, self._exit_code(tool, args), failure_message)

    def start(self, tool: str, args: list[str]) -> FakeHandle:
        self.calls.append((tool, list(args)))
        self.events.append(("start", tool))
        handle = FakeHandle(
            tool,
            self._exit_code(tool, args),
            on_wait=self.on_wait.get(tool),
            events=self.events,
        )
        self.handles.append(handle)
        return handle

    def count(self, tool: str, *args: str) -> int:
        return sum(1 for t, a in self.calls if t == tool and a[: len(args)] == list(args))
