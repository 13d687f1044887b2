"""Output styles for rmtrash.

Each style marks one kind of output: the path in a diagnostic, the
reason it could not be removed, warnings, and verbose removal lines.
Colors can be changed in ~/.config/rmtrash/theme.toml:

    [styles]
    reason = "#ff5555"
"""

import logging
import string
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, ValidationError
from rich.theme import Theme

from rmtrash.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)


def _parse_hex_color(value: object) -> str:
    if not isinstance(value, str):
        msg = "color must be a string"
        raise ValueError(msg)
    color = value.strip()
    digits = color.removeprefix("#")
    if (
        digits == color
        or len(digits) not in (3, 6)
        or any(c not in string.hexdigits for c in digits)
    ):
        msg = f"invalid color {value!r}, expected #RGB or #RRGGBB"
        raise ValueError(msg)
    return color


HexColor = Annotated[str, BeforeValidator(_parse_hex_color)]


class OutputStyles(BaseModel):
    """Colors for each kind of rmtrash output.

    Attributes:
        path: Quoted path in a diagnostic.
        reason: Why a path could not be removed, and fatal errors.
        warning: The "warning:" label.
        removed: Verbose "removed ..." lines.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: HexColor = "#69B9A1"
    reason: HexColor = "#f53263"
    warning: HexColor = "#f5b332"
    removed: HexColor = "#b2bec3"

    def to_rich_theme(self) -> Theme:
        """Build the Rich theme used by the output consoles."""
        return Theme(
            {
                "path": f"bold {self.path}",
                "reason": f"bold {self.reason}",
                "warning": self.warning,
                "removed": self.removed,
            }
        )


def load_styles(path: Path | None = None) -> OutputStyles:
    """Load output styles, applying the user's theme file if it is valid.

    A theme file that cannot be read or validated is ignored as a whole
    with a warning, since output must never fail over colors.

    Args:
        path: Theme file to read. If None, uses the default user theme path.

    Returns:
        OutputStyles with the user's overrides, or the defaults.
    """
    theme_path = path or get_user_theme_path()
    try:
        with open(theme_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return OutputStyles()
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", theme_path, e)
        return OutputStyles()

    try:
        styles = OutputStyles.model_validate(data.get("styles", {}))
    except ValidationError as e:
        logger.warning("Ignoring invalid theme file %s: %s", theme_path, e)
        return OutputStyles()

    logger.debug("Loaded output styles from %s", theme_path)
    return styles


@lru_cache(maxsize=1)
def get_theme() -> Theme:
    """Get the Rich theme for the user's styles, loaded once."""
    return load_styles().to_rich_theme()
