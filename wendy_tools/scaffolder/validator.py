"""Validation of raw project-specification input.

Project names follow a fixed ASCII identifier grammar: a leading ASCII
letter followed by ASCII letters, digits or underscores.  Non-ASCII letters
and a leading underscore are rejected.
"""

from __future__ import annotations

import re
from pathlib import Path

from wendy_tools.errors import InvalidKind, InvalidName
from wendy_tools.scaffolder.models import ProjectKind, ProjectSpec
from wendy_tools.utils import capitalize_name

IDENTIFIER_RE = re.compile(r"[A-Za-z][A-Za-z0-9_]*")


def is_identifier(value: str) -> bool:
    """Return ``True`` if *value* satisfies the identifier grammar."""
    return IDENTIFIER_RE.fullmatch(value) is not None


def normalize_kind(raw_kind: str) -> ProjectKind:
    """Case-normalize *raw_kind* and map it onto a ``ProjectKind``.

    Raises:
        InvalidKind: If the normalized value is not Demo, Game or Test.
    """
    kind = capitalize_name(str(raw_kind).strip())
    try:
        return ProjectKind(kind)
    except ValueError:
        raise InvalidKind(kind) from None


def normalize_name(raw_name: str) -> str:
    """Lower-case *raw_name* and check it against the identifier grammar.

    Raises:
        InvalidName: If the lower-cased name is not an identifier.
    """
    name = str(raw_name).lower()
    if not is_identifier(name):
        raise InvalidName(name)
    return name


def validate_spec(
    raw_kind: str,
    raw_name: str,
    raw_path: str | Path | None = None,
) -> ProjectSpec:
    """Build a ``ProjectSpec`` from unvalidated command-line values.

    The root path defaults to the normalized name, so a project named
    ``foo`` is scaffolded into ``./foo``.  No filesystem access happens here.
    """
    kind = normalize_kind(raw_kind)
    name = normalize_name(raw_name)
    root = Path(raw_path) if raw_path else Path(name)
    return ProjectSpec(kind=kind, name=name, root_path=root)
