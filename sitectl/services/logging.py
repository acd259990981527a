"""
Diagnostic logging for sitectl.

Every record carries the name of the task that produced it ("-" outside a
task), so one log file can interleave many invocations and still be read
per command:

    2026-10-17 09:12:44 [INFO] deploy: Interrupted by signal 2
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Any

from ..core.interfaces.logger import ILogger
from ..core.models.config import LoggingConfig

LOGGER_NAME = "sitectl"
NO_TASK = "-"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(task)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class TaskLogger(ILogger):
    """ILogger over a stdlib logger, tagging records with a task name."""

    def __init__(self, logger: logging.Logger, task: str = NO_TASK) -> None:
        self._adapter = logging.LoggerAdapter(logger, {"task": task})

    @property
    def task(self) -> str:
        return self._adapter.extra["task"]  # type: ignore[index]

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._adapter.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._adapter.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._adapter.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._adapter.error(message, *args, **kwargs)

    def for_task(self, task: str) -> TaskLogger:
        return TaskLogger(self._adapter.logger, task)


class SitectlLogger(TaskLogger):
    """
    Root sitectl logger, configured from the [logging] section.

    Handlers are rebuilt on construction, so creating a second
    SitectlLogger reconfigures output rather than duplicating it.
    """

    def __init__(
        self,
        config: LoggingConfig | None = None,
        verbose: bool = False,
        name: str = LOGGER_NAME,
    ) -> None:
        """
        Args:
            config: Logging section; defaults apply when omitted
            verbose: Send debug output to stderr regardless of config
            name: stdlib logger name
        """
        config = config or LoggingConfig()
        level = logging.DEBUG if verbose else logging.getLevelName(config.level.upper())

        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = False
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        if config.console or verbose:
            console = logging.StreamHandler(sys.stderr)
            console.setFormatter(formatter)
            logger.addHandler(console)
        if config.file:
            config.file_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                config.file_path,
                maxBytes=config.max_bytes,
                backupCount=config.backups,
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        if not logger.handlers:
            logger.addHandler(logging.NullHandler())

        self.log_file = config.file_path if config.file else None
        super().__init__(logger)


class NullLogger(ILogger):
    """No-op logger for tests and for services used before bootstrap."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def for_task(self, task: str) -> NullLogger:
        return self
