"""User preferences for Save Switcher.

Loads UI settings from ~/.save-switcher/preferences.yaml.
Falls back to sensible defaults if the file doesn't exist or is invalid.
Creates a default file on first run so users can discover and edit it.

The persisted session (directory, file, pin) is *not* kept here; it lives
beside the program, see :mod:`save_switcher.persistence.config`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

import yaml

from .constants import DEFAULT_STATUS_CLEAR_SECONDS
from .log import logger
from .platform import save_switcher_home

PREFS_PATH = save_switcher_home() / "preferences.yaml"

THEME_NAMES: tuple[str, ...] = ("dark", "light")

_DEFAULT_YAML = """\
# Save Switcher Preferences
# Delete this file to reset to defaults.

theme: dark                  # dark | light

status:
  clear_seconds: 2.5         # how long "Success!" / "Failed" stays visible

startup:
  start_in_cwd: true         # open in the working directory when nothing is saved
"""


@dataclass
class Preferences:
    """Top-level UI preferences."""

    theme_name: str = "dark"
    status_clear_seconds: float = DEFAULT_STATUS_CLEAR_SECONDS
    start_in_cwd: bool = True


def load_preferences(path: Path | None = None) -> Preferences:
    """Load preferences from YAML file.

    Falls back to sensible defaults if the file doesn't exist or is invalid.
    Creates a default preferences file on first run.
    """
    path = path or PREFS_PATH
    prefs = Preferences()

    if path.exists():
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError):
            logger.debug("failed to read preferences from %s", path, exc_info=True)
            return prefs
        if not isinstance(data, dict):
            return prefs
        theme = data.get("theme")
        if isinstance(theme, str) and theme in THEME_NAMES:
            prefs.theme_name = theme
        if isinstance(data.get("status"), dict):
            seconds = data["status"].get("clear_seconds")
            if isinstance(seconds, (int, float)) and not isinstance(seconds, bool) and seconds > 0:
                prefs.status_clear_seconds = float(seconds)
        if isinstance(data.get("startup"), dict):
            sdata = data["startup"]
            if "start_in_cwd" in sdata:
                prefs.start_in_cwd = bool(sdata["start_in_cwd"])
    else:
        # Create default file for user to customize
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(_DEFAULT_YAML, encoding="utf-8")
        except OSError:
            logger.debug("could not create %s", path, exc_info=True)

    return prefs


def save_theme_name(name: str, path: Path | None = None) -> None:
    """Persist the theme name to the preferences file.

    Surgically updates only the ``theme:`` line, preserving the rest of the
    file (including user comments) as-is.
    """
    path = path or PREFS_PATH
    try:
        if path.exists():
            text = path.read_text(encoding="utf-8")
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            text = _DEFAULT_YAML

        if re.search(r"^theme:", text, re.MULTILINE):
            text = re.sub(
                r"^theme:[ \t]*\S*",
                f"theme: {name}",
                text,
                count=1,
                flags=re.MULTILINE,
            )
        else:
            text = text.rstrip() + f"\n\ntheme: {name}\n"

        path.write_text(text, encoding="utf-8")
    except OSError:
        logger.debug("could not save theme to %s", path, exc_info=True)
