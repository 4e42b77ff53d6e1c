"""Colors for the classification report.

The bundled ``data/theme.toml`` is layered under an optional user file
at ``$XDG_CONFIG_HOME/empd/theme.toml``. Only the ``[colors]`` table is
read; any subset of keys may be overridden.
"""

import logging
import re
import tomllib
from functools import cache
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from empd.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")

# Rich style name -> (color field, bold)
REPORT_STYLES: dict[str, tuple[str, bool]] = {
    "path": ("path", True),
    "count": ("count", True),
    "empty": ("empty", True),
    "not_empty": ("not_empty", True),
    "mark.ok": ("empty", True),
    "mark.fail": ("not_empty", True),
    "success": ("empty", False),
    "warning": ("warning", False),
    "error": ("error", True),
}


class ThemeColors(BaseModel):
    """Hex colors used by the report. Unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str = "#ffffff"
    count: str = "#0ec1c8"
    empty: str = "#03b971"
    not_empty: str = "#f53263"
    warning: str = "#f5b332"
    error: str = "#f53263"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object) -> str:
        if not isinstance(v, str) or not _HEX_COLOR.fullmatch(v.strip()):
            msg = f"expected a #RGB or #RRGGBB color, got {v!r}"
            raise ValueError(msg)
        return v.strip()

    def to_rich_theme(self) -> Theme:
        """Build the Rich styles the reporter and error output refer to."""
        styles: dict[str, str] = {}
        for name, (field, bold) in REPORT_STYLES.items():
            color = getattr(self, field)
            styles[name] = f"bold {color}" if bold else color
        return Theme(styles)


def bundled_theme_path() -> Path:
    return Path(str(resources.files("empd.data").joinpath("theme.toml")))


def read_colors(path: Path) -> dict[str, object]:
    """Read the ``[colors]`` table of a theme file.

    A missing file yields an empty table. An unreadable or malformed file
    is logged and ignored.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return {}
    return colors


def load_theme() -> ThemeColors:
    """Layer the user theme over the bundled one.

    If the merged colors fail validation, the built-in defaults are used.
    """
    colors = read_colors(bundled_theme_path())
    user_path = get_user_theme_path()
    overrides = read_colors(user_path)
    if overrides:
        logger.debug("Applying theme overrides from %s", user_path)

    try:
        return ThemeColors.model_validate({**colors, **overrides})
    except ValidationError as e:
        logger.warning("Invalid theme colors, using defaults: %s", e)
        return ThemeColors()


@cache
def get_theme() -> Theme:
    """Rich theme for the shared consoles, loaded once."""
    return load_theme().to_rich_theme()


def reload_theme() -> Theme:
    get_theme.cache_clear()
    return get_theme()
