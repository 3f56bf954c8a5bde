"""
Summary: Exception hierarchy raised by the tag editing engine.
Why: Give callers one base class to catch while keeping each failure typed.
"""

from __future__ import annotations

from pathlib import Path


class TagEditError(Exception):
    """Base class for every tag editing failure."""


class UnsupportedImageFormatError(TagEditError):
    """Raised when a cover path carries an extension outside the allow-list."""

    def __init__(self, extension: str) -> None:
        self.extension: str = extension
        shown = f".{extension}" if extension else "(no extension)"
        super().__init__(f"Unsupported image format: {shown} (supported: jpg, jpeg, png, webp)")


class FileReadError(TagEditError):
    """Raised when the cover image cannot be read from disk."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path: Path = path
        super().__init__(f"Cannot read file '{path}': {reason}")


class InvalidDateError(TagEditError):
    """Raised when a recording date is neither ``YYYY`` nor ``YYYY-MM-DD``."""

    def __init__(self, value: str) -> None:
        self.value: str = value
        super().__init__(f"Invalid date '{value}': expected YYYY or YYYY-MM-DD")


class UnknownFieldError(TagEditError):
    """Signals a field name without a registry entry.

    The remover treats it as "skip this name"; it never aborts an edit.
    """

    def __init__(self, name: str) -> None:
        self.name: str = name
        super().__init__(f"Unknown field '{name}'")


class TagFileNotFoundError(TagEditError):
    """Raised when the target MP3 file does not exist."""

    def __init__(self, path: Path) -> None:
        self.path: Path = path
        super().__init__(f"File '{path}' does not exist")


class TagStoreError(TagEditError):
    """Raised when the tag container cannot be loaded from or saved to a file."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path: Path = path
        super().__init__(f"Tag I/O failed for '{path}': {reason}")


__all__ = [
    "TagEditError",
    "UnsupportedImageFormatError",
    "FileReadError",
    "InvalidDateError",
    "UnknownFieldError",
    "TagFileNotFoundError",
    "TagStoreError",
]
