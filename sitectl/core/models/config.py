"""
Configuration models.

One frozen Pydantic model per config section. Defaults reproduce the
constants the workflow has always shipped with.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal

from pydantic import ConfigDict, Field, field_validator

from .base import ImmutableModel

LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(ImmutableModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        frozen=True,
        strict=False,  # Allow coercion from TOML/env types
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        revalidate_instances="never",
    )


class SiteConfig(ConfigBaseModel):
    """Static-site generator section."""

    output_dir: str = "dist/"
    config_files: list[str] = Field(default_factory=lambda: ["_config.yml", "_config_dev.yml"])

    @property
    def config_arg(self) -> str:
        """Config file list in the comma-joined form jekyll expects."""
        return ",".join(self.config_files)


class ScriptsConfig(ConfigBaseModel):
    """JS bundler section."""

    source: str = "src/scripts/*.js"
    outdir: str = "src/scripts/dist/"


class DeployConfig(ConfigBaseModel):
    """Remote deploy target and rsync options."""

    user: str = "user"
    host: str = "server.com"
    path: str = "path/to/public_html/"
    rsync_options: list[str] = Field(
        default_factory=lambda: ["-avz", "--delete", "--delete-excluded", "--include=*.htaccess"]
    )

    @field_validator("user", "host")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("deploy user and host must not be empty")
        return v

    @property
    def target(self) -> str:
        """rsync destination in user@host:path form."""
        return f"{self.user}@{self.host}:{self.path}"


class PreviewConfig(ConfigBaseModel):
    """Preview server section."""

    host: str = "192.168.1.126"
    port: Annotated[int, Field(ge=1, le=65535)] = 3000


class BackupConfig(ConfigBaseModel):
    """Archive section."""

    compression_options: list[str] = Field(
        default_factory=lambda: ["-t7z", "-mx=9", "-m0=LZMA2", "-mmt=on"]
    )
    date_format: str = "%d-%m-%Y"
    exclude: list[str] = Field(default_factory=lambda: ["dist", "node_modules"])

    @field_validator("date_format", mode="before")
    @classmethod
    def strip_date_prefix(cls, v: str) -> str:
        """Accept date(1) style patterns such as ``+%d-%m-%Y``."""
        if isinstance(v, str) and v.startswith("+"):
            v = v[1:]
        if not v:
            raise ValueError("backup date_format must not be empty")
        return v


class DockerConfig(ConfigBaseModel):
    """Local container environment section."""

    service: str = "jekyll"
    fix_permissions: bool = True


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section.

    The file handler rotates at max_bytes, keeping `backups` old files.
    """

    level: LogLevel = "warning"
    console: bool = False
    file: bool = True
    file_path: Path = Field(default_factory=lambda: Path.home() / ".sitectl" / "sitectl.log")
    max_bytes: Annotated[int, Field(gt=0)] = 10 * 1024 * 1024
    backups: Annotated[int, Field(ge=0)] = 3

    @field_validator("file_path")
    @classmethod
    def expand_user(cls, v: Path) -> Path:
        return v.expanduser()
