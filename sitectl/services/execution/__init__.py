"""Execution services: interrupt guard, task runner and concurrent pair runner."""

from .concurrent import ConcurrentPairRunner
from .runner import TaskRunner
from .signal_handler import DEFAULT_SIGNALS, InterruptGuard

__all__ = [
    "DEFAULT_SIGNALS",
    "ConcurrentPairRunner",
    "InterruptGuard",
    "TaskRunner",
]
