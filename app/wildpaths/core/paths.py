"""XDG-compliant path management for wildpaths.

Configuration lives under the XDG config directory:

- Config: ~/.config/wildpaths/config.toml
- Theme:  ~/.config/wildpaths/theme.toml
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "wildpaths"

CONFIG_FILENAME = "config.toml"
THEME_FILENAME = "theme.toml"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/wildpaths/ (or XDG_CONFIG_HOME/wildpaths/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the default configuration file path.

    Returns:
        Path to ~/.config/wildpaths/config.toml.
    """
    return get_config_dir() / CONFIG_FILENAME


def get_theme_path() -> Path:
    """Get the user theme file path.

    Returns:
        Path to ~/.config/wildpaths/theme.toml.
    """
    return get_config_dir() / THEME_FILENAME
