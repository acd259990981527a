"""
Pydantic Settings for sitectl configuration.

Settings are loaded once at startup from a TOML file, environment
variables and model defaults, then passed explicitly to every task.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    SettingsError,
)

from .exceptions import ConfigFileError, ConfigValidationError
from .models.config import (
    BackupConfig,
    DeployConfig,
    DockerConfig,
    LoggingConfig,
    PreviewConfig,
    ScriptsConfig,
    SiteConfig,
)

CONFIG_DIR_NAME = ".sitectl"
CONFIG_FILE_NAME = "config.toml"

_SOURCE_FIELD_RE = re.compile(r'field "([^"]+)"')


def _get_logger():
    from ..services.logging import NullLogger
    from .di import resolve_or_default
    from .interfaces.logger import ILogger

    return resolve_or_default(ILogger, NullLogger)


def find_config_file(start_dir: str | Path | None = None) -> Path | None:
    """
    Find .sitectl/config.toml by walking up from start_dir (or cwd).

    A pyproject.toml with a [tool.sitectl] table also counts.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
                if "sitectl" in data.get("tool", {}):
                    return pyproject
            except tomllib.TOMLDecodeError as e:
                _get_logger().debug("Failed to parse pyproject.toml at %s: %s", pyproject, e)
            except OSError as e:
                _get_logger().debug("Failed to read pyproject.toml at %s: %s", pyproject, e)

    return None


def read_config_file(path: Path) -> dict[str, Any]:
    """
    Read a sitectl TOML config file.

    Args:
        path: .sitectl/config.toml or a pyproject.toml

    Returns:
        The sitectl table as a dict

    Raises:
        ConfigFileError: If the file cannot be read or parsed
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigFileError(
            f"Failed to parse config file {path}: {e}", file_path=str(path), cause=e
        ) from e
    except OSError as e:
        raise ConfigFileError(
            f"Failed to read config file {path}: {e}", file_path=str(path), cause=e
        ) from e

    if path.name == "pyproject.toml":
        data = data.get("tool", {}).get("sitectl", {})
    return data


class SitectlSettings(BaseSettings):
    """sitectl configuration with TOML and environment variable support.

    Priority (highest to lowest):
    1. Environment variables (SITECTL_<section>__<field>)
    2. TOML config file, passed in as init values by load_settings()
    3. Model defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="SITECTL_",
        env_nested_delimiter="__",
        extra="ignore",
        frozen=True,
    )

    site: SiteConfig = Field(default_factory=SiteConfig)
    scripts: ScriptsConfig = Field(default_factory=ScriptsConfig)
    deploy: DeployConfig = Field(default_factory=DeployConfig)
    preview: PreviewConfig = Field(default_factory=PreviewConfig)
    backup: BackupConfig = Field(default_factory=BackupConfig)
    docker: DockerConfig = Field(default_factory=DockerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    config_file: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Environment overrides the file values handed to __init__."""
        return (env_settings, init_settings)


def load_settings(
    config_path: Path | None = None, start_dir: str | Path | None = None
) -> SitectlSettings:
    """Load sitectl settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)

    Returns:
        Frozen SitectlSettings instance with all sources merged

    Raises:
        ConfigFileError: If the config file cannot be read or parsed
        ConfigValidationError: If a value fails validation
    """
    path = config_path or find_config_file(start_dir)
    data: dict[str, Any] = {}
    if path is not None:
        data = read_config_file(path)
        data["config_file"] = str(path)
        _get_logger().debug("Loaded config file: %s", path)

    try:
        return SitectlSettings(**data)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(p) for p in first["loc"])
        raise ConfigValidationError(
            f"Invalid configuration value for {key}: {first['msg']}", key=key, cause=e
        ) from e
    except SettingsError as e:
        # Raised before validation when an environment value cannot be decoded
        match = _SOURCE_FIELD_RE.search(str(e))
        key = match.group(1) if match else None
        raise ConfigValidationError(
            f"Invalid configuration value for {key or 'environment'}: {e}", key=key, cause=e
        ) from e
