"""Tests for the ``wendy-makeproject`` command line.

Covers:
- Successful scaffolds (explicit and default path)
- Exit status 1 with no filesystem effects on usage and validation errors
- Exit status 1 on a filesystem conflict
- --src, --link-media and --replace-alias flags
- --version
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from wendy_tools import __version__
from wendy_tools.cli.makeproject import main

pytestmark = pytest.mark.unit


class TestMakeprojectSuccess:
    def test_explicit_path(self, tmp_path: Path):
        root = tmp_path / "games" / "spaceship"
        assert main(["Game", "SpaceShip", str(root)]) == 0
        assert (root / "CMakeLists.txt").is_file()
        assert (root / "Game.h").is_file()
        assert (root / "Game.cpp").is_file()
        assert "namespace spaceship" in (root / "Game.h").read_text(encoding="utf-8")

    def test_default_path_is_name(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        assert main(["demo", "Bloom"]) == 0
        assert (tmp_path / "bloom" / "Demo.cpp").is_file()

    def test_twice_succeeds(self, tmp_path: Path):
        root = tmp_path / "particles"
        assert main(["test", "particles", str(root)]) == 0
        assert main(["test", "particles", str(root)]) == 0
        assert sorted(os.listdir(root / "data")) == [
            "fonts", "models", "shaders", "sounds", "textures",
        ]

    def test_src_flag(self, tmp_path: Path):
        root = tmp_path / "p"
        assert main(["game", "p", str(root), "--src"]) == 0
        assert (root / "src").is_dir()

    def test_link_media_flags(self, tmp_path: Path):
        root = tmp_path / "p"
        (root / "data").mkdir(parents=True)
        (root / "data" / "wendy").symlink_to("/elsewhere")

        assert main(["game", "p", str(root), "--link-media"]) == 0
        assert os.readlink(root / "data" / "wendy") == "/elsewhere"

        assert main(["game", "p", str(root), "--link-media", "--replace-alias"]) == 0
        assert os.readlink(root / "data" / "wendy") == "../../wendy/media/wendy"

    def test_summary_printed(self, tmp_path: Path, capsys):
        main(["game", "spaceship", str(tmp_path / "s")])
        err = capsys.readouterr().err
        assert "Scaffold" in err
        assert "CMakeLists.txt" in err


class TestMakeprojectFailures:
    def test_invalid_kind(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys):
        monkeypatch.chdir(tmp_path)
        assert main(["Foo", "spaceship"]) == 1
        assert os.listdir(tmp_path) == []
        err = capsys.readouterr().err
        assert "Foo is not a valid project type" in err
        assert "usage:" in err

    def test_invalid_name(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys):
        monkeypatch.chdir(tmp_path)
        assert main(["Game", "9lives"]) == 1
        assert os.listdir(tmp_path) == []
        assert "9lives is not a valid project name" in capsys.readouterr().err

    def test_missing_arguments(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        assert main(["Game"]) == 1
        assert os.listdir(tmp_path) == []

    def test_too_many_arguments(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        assert main(["Game", "a", "b", "c"]) == 1
        assert os.listdir(tmp_path) == []

    def test_conflict(self, tmp_path: Path, capsys):
        root = tmp_path / "p"
        (root / "data").mkdir(parents=True)
        (root / "data" / "fonts").write_text("", encoding="utf-8")

        assert main(["game", "p", str(root)]) == 1
        assert not (root / "CMakeLists.txt").exists()
        assert "blocked" in capsys.readouterr().err

    def test_bad_env_config(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("WENDY_ALIAS_POLICY", "merge")
        assert main(["game", "p", str(tmp_path / "p")]) == 1


class TestMakeprojectVersion:
    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out
