"""Base ``key=value`` text persistence store."""

from __future__ import annotations

from pathlib import Path

from ..log import logger


class KeyValueStore:
    """Line-oriented ``key=value`` file store.

    Values are UTF-8 so any path or file name survives a round trip.
    Subclasses map the raw ``dict[str, str]`` to their own types.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    # -- core I/O -------------------------------------------------------------

    def load_raw(self) -> dict[str, str]:
        """Read and parse the file, returning ``{}`` on any error.

        Lines without ``=`` are skipped; later duplicates win.
        """
        try:
            if not self.path.exists():
                return {}
            with self.path.open(encoding="utf-8", newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError):
            logger.debug("failed to load store from %s", self.path, exc_info=True)
            return {}
        data: dict[str, str] = {}
        # Only "\n" ends a line; other line breaks are legal in file names.
        for line in text.split("\n"):
            line = line.removesuffix("\r")
            key, sep, value = line.partition("=")
            if sep:
                data[key] = value
        return data

    def save_raw(self, items: list[tuple[str, str]]) -> None:
        """Overwrite the file with *items*, one ``key=value`` per line.

        Raises ``OSError`` when the file cannot be written.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8", newline="\n") as f:
            for key, value in items:
                f.write(f"{key}={value}\n")
