"""Pydantic v2 models for asset descriptors.

A descriptor is a small XML file next to an asset that tells the engine how
to load it.  Materials reference a shader program; textures carry sampling
attributes for one image.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from wendy_tools.config import MATERIAL_SCHEMA_VERSION, TEXTURE_SCHEMA_VERSION


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class DescriptorKind(str, Enum):
    """Descriptor file kind; the value is also the XML root element name."""
    MATERIAL = "material"
    TEXTURE = "texture"

    @property
    def extension(self) -> str:
        return f".{self.value}"

    @property
    def schema_version(self) -> int:
        if self is DescriptorKind.MATERIAL:
            return MATERIAL_SCHEMA_VERSION
        return TEXTURE_SCHEMA_VERSION

    @property
    def recognized_attributes(self) -> tuple[str, ...]:
        if self is DescriptorKind.MATERIAL:
            return ("program",)
        return ("filter", "address", "rectangular", "mipmapped", "image")


class FilterMode(str, Enum):
    NEAREST = "nearest"
    LINEAR = "linear"
    TRILINEAR = "trilinear"


class AddressMode(str, Enum):
    WRAP = "wrap"
    CLAMP = "clamp"


class WriteStatus(str, Enum):
    """Outcome of writing one descriptor."""
    WRITTEN = "written"
    SKIPPED = "skipped"


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

class TextureOptions(BaseModel):
    """Sampling options shared by every texture in one batch."""

    model_config = ConfigDict(frozen=True)

    filter: Optional[FilterMode] = None
    address: Optional[AddressMode] = None
    rectangular: bool = False
    mipmapped: bool = False

    def attributes(self) -> dict[str, str]:
        """Return only the supplied options, in serialization order."""
        attrs: dict[str, str] = {}
        if self.filter is not None:
            attrs["filter"] = self.filter.value
        if self.address is not None:
            attrs["address"] = self.address.value
        if self.rectangular:
            attrs["rectangular"] = "true"
        if self.mipmapped:
            attrs["mipmapped"] = "true"
        return attrs


# ---------------------------------------------------------------------------
# Descriptor
# ---------------------------------------------------------------------------

class AssetDescriptor(BaseModel):
    """One material or texture descriptor, ready to serialize.

    The schema version is not a field: it is fixed by ``kind``.
    """

    model_config = ConfigDict(frozen=True)

    kind: DescriptorKind
    name: str = Field(..., min_length=1)
    attributes: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_attributes(self) -> "AssetDescriptor":
        allowed = self.kind.recognized_attributes
        unknown = [key for key in self.attributes if key not in allowed]
        if unknown:
            raise ValueError(f"unrecognized {self.kind.value} attributes: {', '.join(unknown)}")
        if self.kind is DescriptorKind.TEXTURE and self.attributes.get("image") != self.name:
            raise ValueError("texture descriptors must carry their own image attribute")
        if self.kind is DescriptorKind.MATERIAL and not self.attributes.get("program"):
            raise ValueError("material descriptors must name a program")
        return self

    @property
    def schema_version(self) -> int:
        return self.kind.schema_version

    @property
    def filename(self) -> str:
        return f"{self.name}{self.kind.extension}"


def material_descriptor(name: str, program: str) -> AssetDescriptor:
    """Descriptor for material *name* rendered with shader *program*."""
    return AssetDescriptor(
        kind=DescriptorKind.MATERIAL,
        name=name,
        attributes={"program": program},
    )


def texture_descriptor(name: str, options: TextureOptions | None = None) -> AssetDescriptor:
    """Descriptor for the texture backed by image *name*."""
    attrs = (options or TextureOptions()).attributes()
    attrs["image"] = name
    return AssetDescriptor(kind=DescriptorKind.TEXTURE, name=name, attributes=attrs)


# ---------------------------------------------------------------------------
# Batch results
# ---------------------------------------------------------------------------

class BatchResult(BaseModel):
    """Paths written and skipped by one descriptor batch."""

    written: list[Path] = Field(default_factory=list)
    skipped: list[Path] = Field(default_factory=list)
