"""Shared utility functions for wendy-tools.

Provides Rich-based diagnostic output and small path helpers used by the
scaffold and descriptor pipelines.
"""

from __future__ import annotations

import re
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

# Diagnostics go to stderr so generated output on stdout stays clean.
console = Console(stderr=True, highlight=False, soft_wrap=True)


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------


def join_descriptor_path(directory: str | Path, name: str, extension: str) -> Path:
    """Join ``directory/name + extension`` collapsing duplicate separators.

    Examples::

        join_descriptor_path("out/", "Wood", ".material") -> Path("out/Wood.material")
        join_descriptor_path(".", "brick", ".texture")    -> Path("brick.texture")
    """
    raw = f"{directory}/{name}{extension}"
    return Path(re.sub(r"/{2,}", "/", raw))


def capitalize_name(name: str) -> str:
    """First letter upper-cased, the rest lower-cased (``mygame`` -> ``Mygame``)."""
    return name[:1].upper() + name[1:].lower()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_info(message: str) -> None:
    """Print a dimmed informational message."""
    console.print(f"[dim]{escape(message)}[/dim]")
