"""XML serialization of asset descriptors.

Descriptors are written once and then owned by whoever edits them: an
existing target file is never opened for writing.  Any I/O failure aborts
the whole batch; files written before the failure stay on disk.
"""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from io import BytesIO
from pathlib import Path
from typing import Iterable

from wendy_tools.assets.models import AssetDescriptor, BatchResult, DescriptorKind, WriteStatus
from wendy_tools.config import TECHNIQUE_QUALITY
from wendy_tools.errors import DescriptorIOError
from wendy_tools.utils import join_descriptor_path, print_info


# ---------------------------------------------------------------------------
# Tree building
# ---------------------------------------------------------------------------


def build_element(descriptor: AssetDescriptor) -> ET.Element:
    """Build the XML element tree for *descriptor*."""
    root = ET.Element(descriptor.kind.value)
    root.set("version", str(descriptor.schema_version))

    if descriptor.kind is DescriptorKind.MATERIAL:
        technique = ET.SubElement(root, "technique", {"quality": TECHNIQUE_QUALITY})
        render_pass = ET.SubElement(technique, "pass")
        ET.SubElement(render_pass, "program", {"name": descriptor.attributes["program"]})
    else:
        for key, value in descriptor.attributes.items():
            root.set(key, value)

    return root


def serialize(descriptor: AssetDescriptor) -> bytes:
    """Serialize *descriptor* to an XML document with declaration.

    Output uses two-space indentation and ends with a newline.
    """
    tree = ET.ElementTree(build_element(descriptor))
    ET.indent(tree, space="  ")
    buffer = BytesIO()
    tree.write(buffer, encoding="utf-8", xml_declaration=True)
    return buffer.getvalue() + b"\n"


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------


def descriptor_path(directory: str | Path, descriptor: AssetDescriptor) -> Path:
    return join_descriptor_path(directory, descriptor.name, descriptor.kind.extension)


def write_if_absent(directory: str | Path, descriptor: AssetDescriptor) -> WriteStatus:
    """Write *descriptor* into *directory* unless its file already exists.

    Raises:
        DescriptorIOError: If the file cannot be created or written.
    """
    target = descriptor_path(directory, descriptor)
    if os.path.lexists(target):
        return WriteStatus.SKIPPED

    content = serialize(descriptor)
    try:
        # Exclusive create: never truncate a file that appeared after the check.
        handle = open(target, "xb")
    except FileExistsError:
        return WriteStatus.SKIPPED
    except OSError as exc:
        raise DescriptorIOError(target) from exc

    try:
        with handle:
            handle.write(content)
    except OSError as exc:
        # Only complete descriptors stay on disk.
        target.unlink(missing_ok=True)
        raise DescriptorIOError(target) from exc
    return WriteStatus.WRITTEN


class DescriptorWriter:
    """Writes a batch of descriptors into one output directory."""

    def __init__(self, directory: str | Path = ".", verbose: bool = False) -> None:
        self.directory = Path(directory)
        self.verbose = verbose

    def write(self, descriptor: AssetDescriptor) -> WriteStatus:
        status = write_if_absent(self.directory, descriptor)
        if self.verbose:
            path = descriptor_path(self.directory, descriptor)
            verb = "Created" if status is WriteStatus.WRITTEN else "Skipped"
            print_info(f"{verb} {path}")
        return status

    def write_all(self, descriptors: Iterable[AssetDescriptor]) -> BatchResult:
        """Write every descriptor, stopping at the first I/O failure.

        Raises:
            DescriptorIOError: On the first descriptor that fails to write.
        """
        result = BatchResult()
        for descriptor in descriptors:
            status = self.write(descriptor)
            path = descriptor_path(self.directory, descriptor)
            if status is WriteStatus.WRITTEN:
                result.written.append(path)
            else:
                result.skipped.append(path)
        return result
