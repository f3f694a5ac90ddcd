"""Extraction of descriptor names from raw asset sources.

Mesh sources are Wavefront ``.obj`` files; every ``usemtl <name>`` line
names a material.  Image sources contribute their file stem.  Extraction is
a read-only pass: nothing here writes to disk.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Iterator

MESH_SUFFIX = ".obj"
IMAGE_SUFFIX = ".png"

USEMTL_RE = re.compile(r"^usemtl\s+([A-Za-z][A-Za-z0-9_]*)\s*$")
IMAGE_NAME_RE = re.compile(r"([^/]+)\.png\Z")


def is_mesh_source(path: str | Path) -> bool:
    return str(path).endswith(MESH_SUFFIX)


def iter_material_names(lines: Iterable[str]) -> Iterator[str]:
    """Yield the material name of every ``usemtl`` line in *lines*.

    Lines that do not match are skipped, including names that are not plain
    identifiers (``Metal.001``, ``9lives``).  Duplicates are yielded as found.
    """
    for line in lines:
        match = USEMTL_RE.match(line)
        if match:
            yield match.group(1)


def extract_material_names(paths: Iterable[str | Path]) -> list[str]:
    """Collect the unique material names used by every mesh in *paths*.

    All files are read completely before the result is returned, so callers
    see each name exactly once no matter how many files reference it.

    Returns:
        Sorted, de-duplicated material names.

    Raises:
        OSError: If a mesh file cannot be read.
    """
    names: set[str] = set()
    for path in paths:
        with open(path, encoding="utf-8", errors="replace") as handle:
            names.update(iter_material_names(handle))
    return sorted(names)


def extract_texture_name(path: str | Path) -> str | None:
    """Return the image name for *path*, or ``None`` if it is not a ``.png``.

    Examples::

        extract_texture_name("art/brick.png") -> "brick"
        extract_texture_name("art/brick.jpg") -> None
    """
    match = IMAGE_NAME_RE.search(Path(path).as_posix())
    if match is None:
        return None
    return match.group(1)


def extract_texture_names(paths: Iterable[str | Path]) -> list[str]:
    """Image names for every ``.png`` in *paths*, in input order, first occurrence wins."""
    seen: dict[str, None] = {}
    for path in paths:
        name = extract_texture_name(path)
        if name is not None:
            seen.setdefault(name, None)
    return list(seen)
