"""Pydantic v2 models for the project scaffolder.

Defines the validated project specification, the set of directories a
scaffolded project requires and the rendered text artifacts.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field

from wendy_tools.utils import capitalize_name


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ProjectKind(str, Enum):
    """The three kinds of executable project the engine tree hosts."""
    DEMO = "Demo"
    GAME = "Game"
    TEST = "Test"


# ---------------------------------------------------------------------------
# Project specification
# ---------------------------------------------------------------------------

class ProjectSpec(BaseModel):
    """A validated, immutable description of the project to scaffold.

    ``name`` is always lower-case; the capitalized form is derived on demand
    for display strings and the bundle name.
    """

    model_config = ConfigDict(frozen=True)

    kind: ProjectKind = Field(..., description="Project kind, also the generated class name")
    name: str = Field(..., description="Lower-cased identifier, also the namespace name")
    root_path: Path = Field(..., description="Directory the project is generated into")

    @property
    def type_name(self) -> str:
        """Class name used in the header and source stubs (``Demo``)."""
        return self.kind.value

    @property
    def type_lower(self) -> str:
        """Lower-cased kind (``demo``), used for the instance and bundle id."""
        return self.kind.value.lower()

    @property
    def display_name(self) -> str:
        """Capitalized project name (``Mygame``) for window titles and bundles."""
        return capitalize_name(self.name)


# ---------------------------------------------------------------------------
# Required directories
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RequiredPathSet:
    """Sorted, de-duplicated relative directory paths a project must contain."""

    paths: tuple[str, ...] = ()

    @classmethod
    def of(cls, paths: Iterable[str]) -> "RequiredPathSet":
        normalized = {_normalize_relative(p) for p in paths}
        normalized.discard("")
        return cls(paths=tuple(sorted(normalized)))

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)

    def __contains__(self, item: object) -> bool:
        return item in self.paths


def _normalize_relative(path: str) -> str:
    parts = [p for p in str(path).replace("\\", "/").split("/") if p and p != "."]
    return "/".join(parts)


# ---------------------------------------------------------------------------
# Rendered output
# ---------------------------------------------------------------------------

class GeneratedArtifact(BaseModel):
    """One rendered text file, relative to the project root."""

    model_config = ConfigDict(frozen=True)

    relative_path: Path
    content: str


class RenderedProject(BaseModel):
    """The three coupled artifacts rendered from one ``ProjectSpec``."""

    model_config = ConfigDict(frozen=True)

    build_config: GeneratedArtifact
    header: GeneratedArtifact
    source: GeneratedArtifact

    def artifacts(self) -> list[GeneratedArtifact]:
        return [self.build_config, self.header, self.source]


class ScaffoldResult(BaseModel):
    """Summary of one scaffold run."""

    root: Path
    created_dirs: list[Path] = Field(default_factory=list)
    written_files: list[Path] = Field(default_factory=list)
    alias: Path | None = None
