"""Persisted session state: last directory, last file, pin flag."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ._base import KeyValueStore
from ..log import logger


@dataclass(frozen=True)
class PersistedState:
    """What the picker remembers between runs."""

    directory: str = ""
    file_name: str = ""
    pin: bool = False


class ConfigStore(KeyValueStore):
    """Persisted state in ``config.txt``.

    On-disk format::

        directory=<path>
        file=<name>
        pin=1|0

    Unknown keys are ignored and missing keys fall back to the
    :class:`PersistedState` defaults.
    """

    def __init__(self, path: Path) -> None:
        super().__init__(path)

    def load(self) -> PersistedState:
        """Load the saved state, or the defaults if there is none."""
        raw = self.load_raw()
        return PersistedState(
            directory=raw.get("directory", ""),
            file_name=raw.get("file", ""),
            pin=raw.get("pin", "").startswith("1"),
        )

    def save(self, state: PersistedState) -> bool:
        """Overwrite the file with *state*.  Returns False if it can't be written."""
        try:
            self.save_raw(
                [
                    ("directory", state.directory),
                    ("file", state.file_name),
                    ("pin", "1" if state.pin else "0"),
                ]
            )
        except OSError:
            logger.warning("could not write config to %s", self.path, exc_info=True)
            return False
        logger.debug("saved state to %s", self.path)
        return True
