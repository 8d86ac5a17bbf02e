"""Module-level constants for Save Switcher."""

from __future__ import annotations

# Only files whose raw name starts with this are promotion candidates.
CANDIDATE_PREFIX = "bf2savefile"

# The active save the game reads; promote copies the chosen file here.
ACTIVE_SAVE_NAME = "bf2savefile.sav"

# Characters skipped by the natural comparator.
SEPARATORS: frozenset[str] = frozenset(" _-.")

CONFIG_FILE_NAME = "config.txt"
CONFIG_ENV_VAR = "SAVE_SWITCHER_CONFIG"

STATUS_SUCCESS = "Success!"
STATUS_FAILED = "Failed"
DEFAULT_STATUS_CLEAR_SECONDS = 2.5

VERSION = "0.1.0"
