"""Wendy project scaffolder -- generates new executable projects.

Takes a project kind, name and optional path, validates them and renders a
project directory containing the data layout, a ``CMakeLists.txt`` and a
header/source stub pair.

Quick usage::

    from wendy_tools.scaffolder import ProjectGenerator, validate_spec

    spec = validate_spec("game", "spaceship")
    result = ProjectGenerator().generate(spec)
"""

from wendy_tools.scaffolder.generator import ArtifactRenderer, ProjectGenerator
from wendy_tools.scaffolder.models import (
    GeneratedArtifact,
    ProjectKind,
    ProjectSpec,
    RenderedProject,
    RequiredPathSet,
    ScaffoldResult,
)
from wendy_tools.scaffolder.templates import TemplateRenderer
from wendy_tools.scaffolder.tree import ensure_tree, link_shared_assets
from wendy_tools.scaffolder.validator import validate_spec

__all__ = [
    "ArtifactRenderer",
    "GeneratedArtifact",
    "ProjectGenerator",
    "ProjectKind",
    "ProjectSpec",
    "RenderedProject",
    "RequiredPathSet",
    "ScaffoldResult",
    "TemplateRenderer",
    "ensure_tree",
    "link_shared_assets",
    "validate_spec",
]
