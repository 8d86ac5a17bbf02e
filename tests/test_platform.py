"""Tests for save_switcher.platform path resolution."""

from __future__ import annotations

import sys
from pathlib import Path

from save_switcher import platform as sw_platform
from save_switcher.constants import CONFIG_ENV_VAR, CONFIG_FILE_NAME


class TestProgramDir:
    def test_uses_script_directory(self, tmp_path: Path, monkeypatch):
        script = tmp_path / "bin" / "save-switcher"
        script.parent.mkdir()
        script.write_text("")
        monkeypatch.setattr(sys, "argv", [str(script)])
        monkeypatch.delattr(sys, "frozen", raising=False)
        assert sw_platform.program_dir() == script.parent.resolve()

    def test_frozen_uses_executable(self, tmp_path: Path, monkeypatch):
        exe = tmp_path / "dist" / "SaveSwitcher.exe"
        monkeypatch.setattr(sys, "frozen", True, raising=False)
        monkeypatch.setattr(sys, "executable", str(exe))
        assert sw_platform.program_dir() == exe.parent.resolve()

    def test_interactive_falls_back_to_cwd(self, tmp_path: Path, monkeypatch):
        monkeypatch.setattr(sys, "argv", [""])
        monkeypatch.delattr(sys, "frozen", raising=False)
        monkeypatch.chdir(tmp_path)
        assert sw_platform.program_dir() == Path.cwd()


class TestConfigPath:
    def test_override_wins(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "env.txt"))
        assert sw_platform.config_path(tmp_path / "cli.txt") == tmp_path / "cli.txt"

    def test_env_var(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "env.txt"))
        assert sw_platform.config_path() == tmp_path / "env.txt"

    def test_default_beside_program(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        monkeypatch.setattr(sw_platform, "program_dir", lambda: tmp_path)
        assert sw_platform.config_path() == tmp_path / CONFIG_FILE_NAME
