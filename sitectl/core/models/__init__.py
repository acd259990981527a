"""Pydantic and dataclass models for sitectl."""

from .base import ImmutableModel, SitectlBaseModel
from .config import (
    BackupConfig,
    DeployConfig,
    DockerConfig,
    LoggingConfig,
    PreviewConfig,
    ScriptsConfig,
    SiteConfig,
)
from .task import Task, TaskAction, ToolCommand

__all__ = [
    "BackupConfig",
    "DeployConfig",
    "DockerConfig",
    "ImmutableModel",
    "LoggingConfig",
    "PreviewConfig",
    "ScriptsConfig",
    "SiteConfig",
    "SitectlBaseModel",
    "Task",
    "TaskAction",
    "ToolCommand",
]
