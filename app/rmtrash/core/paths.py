"""XDG-compliant path management for rmtrash.

rmtrash keeps no state of its own; the only files it reads are optional
user configuration files under the XDG config directory:

- Settings: ~/.config/rmtrash/settings.toml
- Theme: ~/.config/rmtrash/theme.toml
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "rmtrash"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/rmtrash/ (or XDG_CONFIG_HOME/rmtrash/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_settings_path() -> Path:
    """Get the settings file path.

    Returns:
        Path to ~/.config/rmtrash/settings.toml.
    """
    return get_config_dir() / "settings.toml"


def get_user_theme_path() -> Path:
    """Get the user theme file path.

    Returns:
        Path to ~/.config/rmtrash/theme.toml.
    """
    return get_config_dir() / "theme.toml"

