"""
Summary: Sparse edit request consumed by the apply-metadata orchestrator.
Why: Keep "absent means untouched" explicit through None instead of empty values.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, fields
from pathlib import Path


@dataclass(frozen=True, slots=True)
class EditRequest:
    """Requested field changes for one file.

    ``None`` leaves the corresponding frame untouched; any other value,
    including an empty string, replaces it. ``compilation`` only ever sets
    the flag: ``False`` is the same as not asking.
    """

    title: str | None = None
    artists: Sequence[str] | None = None
    album: str | None = None
    year: int | None = None
    genre: str | None = None
    track: int | None = None
    season: int | None = None
    date: str | None = None
    copyright: str | None = None
    composer: str | None = None
    subtitle: str | None = None
    original_artist: str | None = None
    album_artist: str | None = None
    cover: Path | None = None
    lyrics: str | None = None
    url: str | None = None
    compilation: bool = False
    album_sort: str | None = None
    artist_sort: str | None = None
    title_sort: str | None = None

    def is_empty(self) -> bool:
        """Return True when no field would be written."""

        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "compilation":
                if value:
                    return False
            elif value is not None:
                return False
        return True


__all__ = ["EditRequest"]
