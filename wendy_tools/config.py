"""Wendy tools configuration.

Typed configuration for the scaffold and descriptor pipelines.  Settings use
Pydantic v2 models so they are validated at construction time and can be
overridden from environment variables without boiler-plate.  One instance is
built per invocation and passed explicitly through the pipeline.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from wendy_tools.scaffolder.models import RequiredPathSet


MATERIAL_SCHEMA_VERSION = 4
TEXTURE_SCHEMA_VERSION = 1
TECHNIQUE_QUALITY = "1"
DEFAULT_PROGRAM = "default"


class AliasPolicy(str, Enum):
    """What to do when the shared-media alias already exists."""
    SKIP = "skip"
    REPLACE = "replace"


class ToolConfig(BaseModel):
    """Global wendy-tools configuration.

    Holds every tuneable constant used when scaffolding a project: the data
    directory layout, build-configuration constants and the shared-media
    alias settings.
    """

    model_config = ConfigDict(frozen=True)

    data_dir: str = Field(default="data")
    data_subdirs: list[str] = Field(
        default_factory=lambda: ["fonts", "sounds", "shaders", "models", "textures"]
    )
    create_src: bool = Field(default=False, description="Also require a src/ directory")

    cmake_minimum_version: str = Field(default="2.6")
    cxx_standard_flag: str = Field(default="-std=c++0x")
    engine_dir: str = Field(default="../wendy", description="Engine sources, relative to the project")
    bundle_prefix: str = Field(default="org.elmindreda")
    project_version: str = Field(default="0.1")
    header_ext: str = Field(default="h")
    source_ext: str = Field(default="cpp")

    link_shared_media: bool = Field(default=False)
    shared_media_target: str = Field(default="../../wendy/media/wendy")
    shared_media_name: str = Field(default="wendy")
    alias_policy: AliasPolicy = Field(default=AliasPolicy.SKIP)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    def required_paths(self) -> "RequiredPathSet":
        """Return the directories every scaffolded project must contain."""
        from wendy_tools.scaffolder.models import RequiredPathSet

        paths = [f"{self.data_dir}/{sub}" for sub in self.data_subdirs]
        if self.create_src:
            paths.append("src")
        return RequiredPathSet.of(paths)

    @property
    def shared_media_path(self) -> str:
        """Relative path of the shared-media alias inside the project."""
        return f"{self.data_dir}/{self.shared_media_name}"

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, **overrides: Any) -> "ToolConfig":
        """Build a ``ToolConfig`` from environment variables.

        Recognised variables (all optional):
            WENDY_DATA_SUBDIRS, WENDY_CREATE_SRC, WENDY_LINK_SHARED_MEDIA,
            WENDY_ALIAS_POLICY, WENDY_CXX_STANDARD_FLAG, WENDY_BUNDLE_PREFIX,
            WENDY_CMAKE_MINIMUM_VERSION.

        Keyword *overrides* win over the environment.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("WENDY_DATA_SUBDIRS"):
            kwargs["data_subdirs"] = [
                s.strip() for s in os.environ["WENDY_DATA_SUBDIRS"].split(",") if s.strip()
            ]
        if os.environ.get("WENDY_CREATE_SRC"):
            kwargs["create_src"] = _env_flag(os.environ["WENDY_CREATE_SRC"])
        if os.environ.get("WENDY_LINK_SHARED_MEDIA"):
            kwargs["link_shared_media"] = _env_flag(os.environ["WENDY_LINK_SHARED_MEDIA"])
        if os.environ.get("WENDY_ALIAS_POLICY"):
            kwargs["alias_policy"] = AliasPolicy(os.environ["WENDY_ALIAS_POLICY"].lower())
        if os.environ.get("WENDY_CXX_STANDARD_FLAG"):
            kwargs["cxx_standard_flag"] = os.environ["WENDY_CXX_STANDARD_FLAG"]
        if os.environ.get("WENDY_BUNDLE_PREFIX"):
            kwargs["bundle_prefix"] = os.environ["WENDY_BUNDLE_PREFIX"]
        if os.environ.get("WENDY_CMAKE_MINIMUM_VERSION"):
            kwargs["cmake_minimum_version"] = os.environ["WENDY_CMAKE_MINIMUM_VERSION"]

        kwargs.update(overrides)
        return cls(**kwargs)


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")
