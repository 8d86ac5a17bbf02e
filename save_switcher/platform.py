"""Filesystem locations used by Save Switcher.

The persisted state lives next to the running program, not in the working
directory, so a portable copy of the tool carries its own state with it.
Every other module asks here instead of resolving paths itself.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from .constants import CONFIG_ENV_VAR, CONFIG_FILE_NAME


def program_dir() -> Path:
    """Return the directory of the running program.

    Frozen builds (PyInstaller and friends) report the executable; a
    normal interpreter run reports the script or console-script shim.
    """
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    argv0 = sys.argv[0] if sys.argv and sys.argv[0] else ""
    if not argv0 or argv0 == "-c":
        return Path.cwd()
    return Path(argv0).resolve().parent


def config_path(override: str | os.PathLike[str] | None = None) -> Path:
    """Resolve the persisted-state file.

    Precedence: explicit *override* > ``$SAVE_SWITCHER_CONFIG`` > the
    program directory.
    """
    if override:
        return Path(override).expanduser()
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser()
    return program_dir() / CONFIG_FILE_NAME


def save_switcher_home() -> Path:
    """Return ``~/.save-switcher`` where user preferences are kept."""
    return Path.home() / ".save-switcher"
