"""Configuration file I/O.

This module loads and saves the wildpaths configuration in TOML format
with validation through Pydantic models. The ``[scan]`` section maps
onto ScanOptions, which is passed explicitly into every scan.

Example config.toml::

    [scan]
    default_excludes = ["**/.svn/**", "**/.git/**"]
    case = "native"
    read_errors = "skip"
    follow_symlinks = true
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Any

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from wildpaths.core.paths import get_config_path
from wildpaths.patterns.errors import WildpathsError
from wildpaths.patterns.options import ScanOptions


class ConfigError(WildpathsError):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file is not valid TOML."""


class ConfigValidationError(ConfigError):
    """Raised when the configuration content is invalid."""


class WildpathsConfig(BaseModel):
    """Root of the configuration file.

    Attributes:
        scan: Options applied to every scan.
    """

    model_config = ConfigDict(extra="forbid")

    scan: Annotated[ScanOptions, Field(default_factory=ScanOptions, description="Scan options")]


def load_config(path: Path | None = None) -> WildpathsConfig:
    """Load and validate the configuration file.

    A missing file is not an error: the defaults are returned.

    Args:
        path: Path to the configuration file. If None, uses the default path.

    Returns:
        Validated WildpathsConfig.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
        ConfigError: If the file cannot be read.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return WildpathsConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return WildpathsConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: WildpathsConfig, path: Path | None = None) -> Path:
    """Save the configuration to a TOML file.

    The file is written atomically through a temporary file in the same
    directory and ``os.replace()``.

    Args:
        config: Configuration to save.
        path: Destination path. If None, uses the default path.

    Returns:
        Path where the configuration was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config_to_dict(config), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_to_dict(config: WildpathsConfig) -> dict[str, Any]:
    """Convert a configuration to a dictionary suitable for TOML serialization."""
    return config.model_dump(mode="json")
