"""Candidate discovery for the save picker.

Lists the direct children of a directory and keeps the regular files whose
name starts with :data:`~save_switcher.constants.CANDIDATE_PREFIX`.  The
directory field is rescanned on every keystroke, so a missing or unreadable
directory is a normal state: it yields an empty list instead of raising.

Ordering is not this module's job -- see :mod:`save_switcher.core.ranking`.
"""

from __future__ import annotations

import os
from pathlib import Path

from ..constants import CANDIDATE_PREFIX
from ..log import logger


def _is_candidate(entry: Path, prefix: str) -> bool:
    if not entry.name.startswith(prefix):
        return False
    try:
        return entry.is_file()
    except OSError:
        # Entry vanished or became unreadable mid-listing.
        return False


def scan_directory(
    directory: str | os.PathLike[str],
    prefix: str = CANDIDATE_PREFIX,
) -> list[str]:
    """Return the names of candidate files directly inside *directory*.

    The result is in filesystem listing order.  Nothing is raised for a
    missing, non-directory or unreadable *directory*; the result is ``[]``.
    """
    if not str(directory):
        return []
    root = Path(directory)
    try:
        if not root.is_dir():
            return []
        entries = list(root.iterdir())
    except OSError:
        logger.debug("cannot list directory %s", root, exc_info=True)
        return []
    return [entry.name for entry in entries if _is_candidate(entry, prefix)]
