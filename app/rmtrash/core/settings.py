"""User settings for rmtrash.

Settings provide defaults for flags a user wants on every invocation
(for example always prompting once, or verbose output). Command-line
flags always take precedence.

Settings are stored in ~/.config/rmtrash/settings.toml:

    interactive = "once"
    preserve_root = true
    one_file_system = false
    verbose = false
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rmtrash.core.paths import get_settings_path
from rmtrash.models.config import InteractiveMode

logger = logging.getLogger(__name__)


class RmtrashSettings(BaseModel):
    """Persistent defaults for removal flags.

    Attributes:
        interactive: Default interactive mode when no -i/-I/--interactive is given.
        preserve_root: Default for --preserve-root / --no-preserve-root.
        one_file_system: Default for --one-file-system.
        verbose: Default for --verbose.
    """

    model_config = ConfigDict(extra="forbid")

    interactive: Annotated[
        InteractiveMode,
        Field(description="Default interactive mode (never, once, always)"),
    ] = InteractiveMode.NEVER
    preserve_root: Annotated[
        bool,
        Field(description="Refuse to operate on the filesystem root"),
    ] = True
    one_file_system: Annotated[
        bool,
        Field(description="Refuse recursive removal across mount points"),
    ] = False
    verbose: Annotated[
        bool,
        Field(description="Print every removed entry"),
    ] = False


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsParseError(SettingsError):
    """Raised when the settings file is not valid TOML."""


def load_settings(path: Path | None = None) -> RmtrashSettings:
    """Load settings from a TOML file.

    A missing file is not an error; defaults are returned instead.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated RmtrashSettings object.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the file cannot be read or doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        logger.debug("No settings file at %s, using defaults", settings_path)
        return RmtrashSettings()
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return RmtrashSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}") from e

