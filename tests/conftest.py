"""Shared pytest fixtures for the wendy-tools test suite.

Provides reusable fixtures for:
- A clean environment (no ``WENDY_*`` overrides leak in from the shell)
- Default configuration and validated project specs
- Sample Wavefront meshes and image paths for descriptor generation
"""

from __future__ import annotations

import os
import textwrap
from pathlib import Path

import pytest

from wendy_tools.config import ToolConfig
from wendy_tools.scaffolder.models import ProjectKind, ProjectSpec


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def clean_wendy_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Strip every ``WENDY_*`` variable so ``ToolConfig.from_env`` sees defaults."""
    for key in list(os.environ):
        if key.startswith("WENDY_"):
            monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Configuration & specs
# ---------------------------------------------------------------------------

@pytest.fixture
def tool_config() -> ToolConfig:
    """Default configuration."""
    return ToolConfig()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Not-yet-existing project directory inside a temp dir."""
    return tmp_path / "projects" / "spaceship"


@pytest.fixture
def game_spec(project_root: Path) -> ProjectSpec:
    """A validated Game project named ``spaceship``."""
    return ProjectSpec(kind=ProjectKind.GAME, name="spaceship", root_path=project_root)


# ---------------------------------------------------------------------------
# Asset sources
# ---------------------------------------------------------------------------

SAMPLE_OBJ = textwrap.dedent("""\
    # Blender export
    mtllib crate.mtl
    o Crate
    v 1.0 1.0 -1.0
    v 1.0 -1.0 -1.0
    v -1.0 -1.0 -1.0
    usemtl Wood
    f 1 2 3
    usemtl Stone
    f 1 2 3
    usemtl Wood
    f 3 2 1
      usemtl Indented
    # usemtl Commented
    usemtl Wood
    f 2 3 1
""")


@pytest.fixture
def sample_obj(tmp_path: Path) -> Path:
    """A mesh using ``Wood`` three times and ``Stone`` once."""
    path = tmp_path / "src" / "crate.obj"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(SAMPLE_OBJ, encoding="utf-8")
    return path


@pytest.fixture
def write_obj(tmp_path: Path):
    """Factory writing ``.obj`` files with the given ``usemtl`` names."""

    def _write(name: str, materials: list[str]) -> Path:
        path = tmp_path / "src" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        lines = ["o Mesh"]
        for material in materials:
            lines.append(f"usemtl {material}")
            lines.append("f 1 2 3")
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Existing, empty descriptor output directory."""
    path = tmp_path / "out"
    path.mkdir()
    return path
