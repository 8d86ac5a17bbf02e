"""Shared test fixtures for the save-switcher test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from save_switcher.persistence import ConfigStore
from save_switcher.preferences import Preferences


@pytest.fixture
def save_dir(tmp_path: Path) -> Path:
    """A game directory with three numbered saves, an active save and noise."""
    folder = tmp_path / "saves"
    folder.mkdir()
    (folder / "bf2savefile10.sav").write_bytes(b"ten")
    (folder / "bf2savefile2.sav").write_bytes(b"two")
    (folder / "bf2savefile1.sav").write_bytes(b"one")
    (folder / "bf2savefile.sav").write_bytes(b"active")
    (folder / "notes.txt").write_text("not a save")
    (folder / "bf2savefile_dir").mkdir()
    return folder


@pytest.fixture
def config_store(tmp_path: Path) -> ConfigStore:
    """A ConfigStore writing under tmp_path, never beside the real program."""
    return ConfigStore(tmp_path / "program" / "config.txt")


@pytest.fixture
def prefs() -> Preferences:
    """Default preferences with a short status timeout for pilot tests."""
    return Preferences(status_clear_seconds=0.2)
