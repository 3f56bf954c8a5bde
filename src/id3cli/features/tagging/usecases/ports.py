"""Summary: Ports defining tagging use case dependencies.
Why: Decouple the edit flow from mutagen file I/O so tests can swap in fakes."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from mutagen.id3 import ID3


@runtime_checkable
class TagStorePort(Protocol):
    """Port for reading and writing the ID3 container of one file."""

    def exists(self, path: Path) -> bool:
        """Return True when ``path`` points to an existing file."""
        ...

    def load(self, path: Path) -> ID3 | None:
        """Decode the tag of ``path``; ``None`` when the file carries no ID3 header."""
        ...

    def save(self, tags: ID3, path: Path) -> None:
        """Encode ``tags`` back into ``path``."""
        ...


__all__ = ["TagStorePort"]
