"""Integration tests for the scaffold and descriptor pipelines.

These tests run the real command-line entry points against temporary
directories: scaffold a project next to a fake engine checkout, then fill
its data directory with material and texture descriptors.

No compiler or engine build is required.
"""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from wendy_tools.cli import makeproject, material, texture


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """A directory holding a fake engine checkout with shared media."""
    media = tmp_path / "wendy" / "media" / "wendy"
    media.mkdir(parents=True)
    (media / "default.program").write_text("<program version='1'/>\n", encoding="utf-8")
    (tmp_path / "wendy" / "CMakeLists.txt").write_text("project(wendy)\n", encoding="utf-8")
    return tmp_path


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


@pytest.mark.integration
class TestScaffoldThenDescribe:
    def test_full_flow(self, workspace: Path, sample_obj: Path):
        root = workspace / "spaceship"

        assert makeproject.main(["game", "SpaceShip", str(root), "--link-media"]) == 0
        assert (root / "data" / "wendy" / "default.program").is_file()

        models = root / "data" / "models"
        textures = root / "data" / "textures"

        assert material.main(["-d", str(models), "-p", "default", str(sample_obj)]) == 0
        assert texture.main(
            ["-d", str(textures), "-f", "trilinear", "-m", "art/hull.png", "art/hull.png"]
        ) == 0

        assert sorted(os.listdir(models)) == ["Stone.material", "Wood.material"]
        assert os.listdir(textures) == ["hull.texture"]

        hull = ET.parse(textures / "hull.texture").getroot()
        assert hull.attrib == {
            "version": "1",
            "filter": "trilinear",
            "mipmapped": "true",
            "image": "hull",
        }

    def test_rescaffold_keeps_descriptors_and_refreshes_stubs(self, workspace: Path, sample_obj: Path):
        root = workspace / "bloom"
        assert makeproject.main(["demo", "bloom", str(root)]) == 0

        models = root / "data" / "models"
        assert material.main(["-d", str(models), str(sample_obj)]) == 0
        wood = models / "Wood.material"
        wood.write_text("<material version='4'><!-- tuned --></material>\n", encoding="utf-8")

        source = root / "Demo.cpp"
        source.write_text("int main() { return 0; }\n", encoding="utf-8")

        assert makeproject.main(["demo", "bloom", str(root)]) == 0
        assert material.main(["-d", str(models), str(sample_obj)]) == 0

        assert "tuned" in wood.read_text(encoding="utf-8")
        assert "bool Demo::init(void)" in source.read_text(encoding="utf-8")

    def test_blocked_scaffold_then_fixed(self, workspace: Path):
        root = workspace / "particles"
        (root / "data").mkdir(parents=True)
        (root / "data" / "sounds").write_text("oops", encoding="utf-8")

        assert makeproject.main(["test", "particles", str(root)]) == 1
        assert not (root / "Test.h").exists()

        (root / "data" / "sounds").unlink()
        assert makeproject.main(["test", "particles", str(root)]) == 0
        assert (root / "Test.h").is_file()
        assert (root / "data" / "sounds").is_dir()
