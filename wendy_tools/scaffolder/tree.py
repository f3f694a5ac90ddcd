"""Directory tree creation for scaffolded projects.

Creates the required directory layout under a project root, treating
existing directories as already satisfied and any non-directory entry in
the way as a fatal conflict.  Also manages the optional alias from the
project's data directory to the shared engine media tree.
"""

from __future__ import annotations

import os
from pathlib import Path

from wendy_tools.config import AliasPolicy, ToolConfig
from wendy_tools.errors import FilesystemConflict
from wendy_tools.scaffolder.models import RequiredPathSet


def ensure_tree(root: str | Path, required: RequiredPathSet) -> list[Path]:
    """Ensure every path in *required* exists as a directory under *root*.

    Paths are processed in sorted order.  Directories created before a
    conflict is detected are left in place.

    Returns:
        The directories that did not exist before and were created.

    Raises:
        FilesystemConflict: If a required path, or one of its ancestors, is
            occupied by something that is not a directory.
    """
    base = Path(root)
    created: list[Path] = []

    for rel in required:
        path = base / rel
        if path.is_dir():
            continue
        if os.path.lexists(path):
            raise FilesystemConflict(path)

        blocker = _blocking_ancestor(path)
        if blocker is not None:
            raise FilesystemConflict(blocker)

        missing = [p for p in (path, *path.parents) if not os.path.lexists(p)]
        path.mkdir(parents=True)
        created.extend(reversed(missing))

    return created


def _blocking_ancestor(path: Path) -> Path | None:
    """Return the nearest ancestor of *path* that exists but is not a directory."""
    for parent in path.parents:
        if parent.is_dir():
            return None
        if os.path.lexists(parent):
            return parent
    return None


def link_shared_assets(root: str | Path, config: ToolConfig) -> Path | None:
    """Alias the shared engine media tree into the project's data directory.

    The alias is a relative symbolic link at ``<root>/<data_dir>/<name>``
    pointing at ``config.shared_media_target``.  When an entry already sits
    at the alias path, ``config.alias_policy`` decides: ``skip`` leaves it
    alone, ``replace`` swaps an existing link for a fresh one.

    Returns:
        The alias path, or ``None`` if an existing entry was kept.

    Raises:
        FilesystemConflict: If ``replace`` is requested but the entry in the
            way is a real file or directory rather than a link.
    """
    alias = Path(root) / config.shared_media_path

    if os.path.lexists(alias):
        if config.alias_policy is AliasPolicy.SKIP:
            return None
        if not alias.is_symlink():
            raise FilesystemConflict(alias)
        alias.unlink()

    alias.parent.mkdir(parents=True, exist_ok=True)
    alias.symlink_to(config.shared_media_target, target_is_directory=True)
    return alias
