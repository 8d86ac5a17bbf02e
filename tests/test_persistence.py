"""Tests for persistence stores.

Each store is tested for:
  1. load() on non-existent file returns correct default
  2. save() then load() round-trips correctly
  3. load() on unreadable content returns default (graceful degradation)
  4. Store-specific features
"""

from __future__ import annotations

from pathlib import Path

import pytest

from save_switcher.persistence import ConfigStore, PersistedState
from save_switcher.persistence._base import KeyValueStore


# ---------------------------------------------------------------------------
# Base KeyValueStore
# ---------------------------------------------------------------------------


class TestKeyValueStore:
    def test_load_raw_nonexistent(self, tmp_path):
        store = KeyValueStore(tmp_path / "nope.txt")
        assert store.load_raw() == {}

    def test_save_and_load_raw(self, tmp_path):
        store = KeyValueStore(tmp_path / "kv.txt")
        store.save_raw([("a", "1"), ("b", "two")])
        assert store.load_raw() == {"a": "1", "b": "two"}

    def test_value_may_contain_equals(self, tmp_path):
        store = KeyValueStore(tmp_path / "kv.txt")
        store.save_raw([("directory", "C:/games/a=b")])
        assert store.load_raw() == {"directory": "C:/games/a=b"}

    def test_lines_without_equals_ignored(self, tmp_path):
        path = tmp_path / "kv.txt"
        path.write_text("garbage\nkey=value\n\n")
        assert KeyValueStore(path).load_raw() == {"key": "value"}

    def test_later_duplicate_wins(self, tmp_path):
        path = tmp_path / "kv.txt"
        path.write_text("k=first\nk=second\n")
        assert KeyValueStore(path).load_raw() == {"k": "second"}

    def test_crlf_line_endings(self, tmp_path):
        path = tmp_path / "kv.txt"
        path.write_bytes(b"k=v\r\nother=w\r\n")
        assert KeyValueStore(path).load_raw() == {"k": "v", "other": "w"}

    def test_invalid_utf8_returns_empty(self, tmp_path):
        path = tmp_path / "kv.txt"
        path.write_bytes(b"directory=\xff\xfe\n")
        assert KeyValueStore(path).load_raw() == {}

    def test_save_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "deep" / "nested" / "kv.txt"
        KeyValueStore(path).save_raw([("a", "1")])
        assert path.exists()

    def test_path_is_directory_returns_empty(self, tmp_path):
        assert KeyValueStore(tmp_path).load_raw() == {}


# ---------------------------------------------------------------------------
# ConfigStore
# ---------------------------------------------------------------------------


class TestConfigStore:
    def test_load_missing_returns_defaults(self, config_store):
        assert config_store.load() == PersistedState("", "", False)

    def test_load_missing_is_idempotent(self, config_store):
        first = config_store.load()
        second = config_store.load()
        assert first == second == PersistedState()
        assert not config_store.path.exists()

    def test_round_trip(self, config_store):
        state = PersistedState(directory="/a/b", file_name="bf2savefile1.sav", pin=True)
        assert config_store.save(state) is True
        assert config_store.load() == state

    def test_round_trip_unicode(self, config_store):
        state = PersistedState(
            directory="/home/zoë/Spiele/存档",
            file_name="bf2savefile_ünïcode 3.sav",
            pin=False,
        )
        config_store.save(state)
        assert config_store.load() == state

    @pytest.mark.parametrize("char", ["\x85", "\u2028", "\u2029", "\x0c", "\x1e", "\r"])
    def test_round_trip_line_break_characters(self, config_store, char):
        state = PersistedState(
            directory=f"/games/a{char}b",
            file_name=f"bf2savefile{char}1.sav",
            pin=True,
        )
        assert config_store.save(state) is True
        assert config_store.load() == state

    def test_exact_file_format(self, config_store):
        config_store.save(PersistedState("/a/b", "bf2savefile1.sav", True))
        raw = config_store.path.read_bytes()
        assert raw == b"directory=/a/b\nfile=bf2savefile1.sav\npin=1\n"

    def test_pin_false_written_as_zero(self, config_store):
        config_store.save(PersistedState("/a", "x", False))
        assert config_store.path.read_text().splitlines()[2] == "pin=0"

    def test_save_overwrites_not_merges(self, config_store):
        config_store.path.parent.mkdir(parents=True)
        config_store.path.write_text("directory=/old\nfile=old\npin=1\nextra=keep?\n")
        config_store.save(PersistedState("/new", "", False))
        text = config_store.path.read_text()
        assert "extra" not in text
        assert "/old" not in text
        assert config_store.load() == PersistedState("/new", "", False)

    def test_unknown_keys_ignored(self, config_store):
        config_store.path.parent.mkdir(parents=True)
        config_store.path.write_text("version=9\ndirectory=/x\ncolour=red\n")
        assert config_store.load() == PersistedState("/x", "", False)

    def test_partial_fields_default(self, config_store):
        config_store.path.parent.mkdir(parents=True)
        config_store.path.write_text("file=bf2savefile3.sav\n")
        assert config_store.load() == PersistedState("", "bf2savefile3.sav", False)

    def test_pin_only_true_for_one(self, config_store):
        config_store.path.parent.mkdir(parents=True)
        for raw, expected in (("1", True), ("0", False), ("", False), ("yes", False), ("10", True)):
            config_store.path.write_text(f"pin={raw}\n")
            assert config_store.load().pin is expected

    def test_save_failure_reported(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("I am a file, not a directory")
        store = ConfigStore(blocker / "config.txt")
        assert store.save(PersistedState("/a", "b", True)) is False

    def test_save_to_directory_path_reported(self, tmp_path: Path):
        store = ConfigStore(tmp_path)
        assert store.save(PersistedState()) is False
