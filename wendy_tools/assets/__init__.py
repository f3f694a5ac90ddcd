"""Asset descriptor generation.

Derives material descriptors from the ``usemtl`` lines of ``.obj`` meshes
and texture descriptors from ``.png`` file names, then writes each one as an
XML file unless it already exists.

Quick usage::

    from wendy_tools.assets import DescriptorWriter, extract_material_names, material_descriptor

    names = extract_material_names(["ship.obj", "station.obj"])
    DescriptorWriter("data/materials").write_all(
        material_descriptor(name, "default") for name in names
    )
"""

from wendy_tools.assets.extractor import (
    extract_material_names,
    extract_texture_name,
    extract_texture_names,
)
from wendy_tools.assets.models import (
    AddressMode,
    AssetDescriptor,
    BatchResult,
    DescriptorKind,
    FilterMode,
    TextureOptions,
    WriteStatus,
    material_descriptor,
    texture_descriptor,
)
from wendy_tools.assets.writer import DescriptorWriter, serialize, write_if_absent

__all__ = [
    "AddressMode",
    "AssetDescriptor",
    "BatchResult",
    "DescriptorKind",
    "DescriptorWriter",
    "FilterMode",
    "TextureOptions",
    "WriteStatus",
    "extract_material_names",
    "extract_texture_name",
    "extract_texture_names",
    "material_descriptor",
    "serialize",
    "texture_descriptor",
    "write_if_absent",
]
