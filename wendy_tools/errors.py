"""Exception hierarchy shared by the scaffold and descriptor tools.

Core functions raise these; only the CLI entry points catch them and turn
them into a diagnostic plus exit status 1.
"""

from __future__ import annotations

from pathlib import Path


class WendyToolError(Exception):
    """Base class for every fatal wendy-tools condition."""


class UsageError(WendyToolError):
    """Raised when a command line cannot be parsed."""


class SpecValidationError(WendyToolError):
    """Raised when user input fails validation."""

    def __init__(self, value: str, message: str) -> None:
        self.value = value
        super().__init__(message)


class InvalidKind(SpecValidationError):
    def __init__(self, value: str) -> None:
        super().__init__(value, f"{value} is not a valid project type")


class InvalidName(SpecValidationError):
    def __init__(self, value: str) -> None:
        super().__init__(value, f"{value} is not a valid project name")


class InvalidOption(SpecValidationError):
    """An option value outside its allowed set."""

    def __init__(self, option: str, value: str, message: str | None = None) -> None:
        self.option = option
        super().__init__(value, message or f"Invalid {option} '{value}'")


class FilesystemConflict(WendyToolError):
    """A required directory path is occupied by something that is not a directory."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f"{self.path} blocked")


class DescriptorIOError(WendyToolError):
    """Writing a descriptor failed; aborts the whole batch."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f"Failed to create {self.path}")
