"""Main scaffolding orchestrator.

Takes a validated ``ProjectSpec`` and generates a project directory for the
engine tree: the data directory layout, a ``CMakeLists.txt`` and a header
and source stub for the project's single class.
"""

from __future__ import annotations

import posixpath
from pathlib import Path
from typing import Any

from wendy_tools.config import ToolConfig
from wendy_tools.scaffolder.models import (
    GeneratedArtifact,
    ProjectSpec,
    RenderedProject,
    ScaffoldResult,
)
from wendy_tools.scaffolder.templates import TemplateRenderer, write_file
from wendy_tools.scaffolder.tree import ensure_tree, link_shared_assets


BUILD_CONFIG_FILE = "CMakeLists.txt"


# ---------------------------------------------------------------------------
# Artifact rendering
# ---------------------------------------------------------------------------


class ArtifactRenderer:
    """Renders the build configuration, header and source for one project.

    All three artifacts are rendered from a single context dictionary built
    from the ``ProjectSpec``, so the class, namespace and display names can
    never disagree between files.
    """

    def __init__(
        self,
        config: ToolConfig | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or ToolConfig()
        self.renderer = renderer or TemplateRenderer()

    def build_context(self, spec: ProjectSpec) -> dict[str, Any]:
        """Build the Jinja2 template context for *spec*."""
        cfg = self.config
        return {
            "project_name": spec.name,
            "type_name": spec.type_name,
            "type_lower": spec.type_lower,
            "display_name": spec.display_name,
            "bundle_identifier": f"{cfg.bundle_prefix}.{spec.type_lower}s.{spec.name}",
            "header_file": self.header_name(spec),
            "source_file": self.source_name(spec),
            "data_dir": cfg.data_dir,
            "engine_dir": cfg.engine_dir,
            "engine_name": posixpath.basename(cfg.engine_dir.rstrip("/")),
            "cmake_minimum_version": cfg.cmake_minimum_version,
            "cxx_standard_flag": cfg.cxx_standard_flag,
            "project_version": cfg.project_version,
        }

    def header_name(self, spec: ProjectSpec) -> str:
        return f"{spec.type_name}.{self.config.header_ext}"

    def source_name(self, spec: ProjectSpec) -> str:
        return f"{spec.type_name}.{self.config.source_ext}"

    def render(self, spec: ProjectSpec) -> RenderedProject:
        """Render all three artifacts without touching the filesystem."""
        context = self.build_context(spec)
        return RenderedProject(
            build_config=GeneratedArtifact(
                relative_path=Path(BUILD_CONFIG_FILE),
                content=self.renderer.render("CMakeLists.txt.j2", context),
            ),
            header=GeneratedArtifact(
                relative_path=Path(self.header_name(spec)),
                content=self.renderer.render("project.h.j2", context),
            ),
            source=GeneratedArtifact(
                relative_path=Path(self.source_name(spec)),
                content=self.renderer.render("project.cpp.j2", context),
            ),
        )

    def write(self, root: str | Path, rendered: RenderedProject) -> list[Path]:
        """Write every artifact under *root*, replacing existing files."""
        written: list[Path] = []
        for artifact in rendered.artifacts():
            target = Path(root) / artifact.relative_path
            write_file(target, artifact.content)
            written.append(target)
        return written


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Scaffold orchestrator.

    Runs the directory step strictly before the artifact step: a
    ``FilesystemConflict`` raised while building the tree propagates before
    any artifact is written.
    """

    def __init__(self, config: ToolConfig | None = None) -> None:
        self.config = config or ToolConfig()
        self.artifacts = ArtifactRenderer(self.config)

    def generate(self, spec: ProjectSpec) -> ScaffoldResult:
        """Generate the complete project for *spec*.

        Returns:
            A ``ScaffoldResult`` listing created directories and written files.
        """
        root = spec.root_path
        result = ScaffoldResult(root=root)

        # 1. Required directories (fatal on conflict)
        result.created_dirs = ensure_tree(root, self.config.required_paths())

        # 2. Shared media alias
        if self.config.link_shared_media:
            result.alias = link_shared_assets(root, self.config)

        # 3. Render and write the build configuration and stubs
        rendered = self.artifacts.render(spec)
        result.written_files = self.artifacts.write(root, rendered)

        return result
