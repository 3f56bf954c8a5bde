"""src/id3cli/features/tagging/usecases/setters.py
Where: Tagging feature usecases layer.
What: One setter per editable field, each replacing exactly one frame of an ID3 container.
Why: Keep frame construction in one place so the orchestrator stays a plain dispatch table.
"""

from __future__ import annotations

import datetime as dt
import re
from collections.abc import Sequence
from typing import Final

from mutagen.id3 import (
    APIC,
    ID3,
    TALB,
    TCMP,
    TCOM,
    TCON,
    TCOP,
    TDRC,
    TIT2,
    TIT3,
    TOPE,
    TPE1,
    TPE2,
    TPOS,
    TRCK,
    TSOA,
    TSOP,
    TSOT,
    TYER,
    USLT,
    WOAR,
    Frame,
    PictureType,
)

from id3cli.config.settings import ARTIST_SEPARATOR, COVER_DESCRIPTION, LYRICS_LANGUAGE
from id3cli.features.tagging.domain.errors import InvalidDateError
from id3cli.features.tagging.domain.image_format import CoverImage

# UTF-8 for every text-bearing frame
_UTF8: Final[int] = 3

_DATE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\d{4}(?:-\d{2}-\d{2})?$")


def _replace(tags: ID3, frame: Frame) -> None:
    tags.setall(frame.FrameID, [frame])


def _text(tags: ID3, frame_type: type[Frame], value: object) -> None:
    _replace(tags, frame_type(encoding=_UTF8, text=[str(value)]))


# Single-value text -----------------------------------------------------------


def set_title(tags: ID3, title: str) -> None:
    _text(tags, TIT2, title)


def set_album(tags: ID3, album: str) -> None:
    _text(tags, TALB, album)


def set_genre(tags: ID3, genre: str) -> None:
    _text(tags, TCON, genre)


def set_year(tags: ID3, year: int | str) -> None:
    """Store ``year`` as decimal text in ``TYER``."""

    _text(tags, TYER, year)


def set_track(tags: ID3, track: int | str) -> None:
    _text(tags, TRCK, track)


def set_season(tags: ID3, season: int | str) -> None:
    """Store the season (part of set) number in ``TPOS``."""

    _text(tags, TPOS, season)


def set_copyright(tags: ID3, copyright_text: str) -> None:
    _text(tags, TCOP, copyright_text)


def set_composer(tags: ID3, composer: str) -> None:
    _text(tags, TCOM, composer)


def set_subtitle(tags: ID3, subtitle: str) -> None:
    _text(tags, TIT3, subtitle)


def set_original_artist(tags: ID3, artist: str) -> None:
    _text(tags, TOPE, artist)


def set_album_artist(tags: ID3, artist: str) -> None:
    _text(tags, TPE2, artist)


# Multi-artist ----------------------------------------------------------------


def join_artists(artists: Sequence[str]) -> str:
    """Join ``artists`` with the fixed separator, preserving their order.

    Raises:
        ValueError: If ``artists`` is empty.
    """

    if isinstance(artists, str):
        return artists
    if len(artists) == 0:
        raise ValueError("At least one artist is required")
    return ARTIST_SEPARATOR.join(artists)


def set_artists(tags: ID3, artists: Sequence[str]) -> None:
    """Write all ``artists`` into a single ``TPE1`` text value."""

    _text(tags, TPE1, join_artists(artists))


# Date ------------------------------------------------------------------------


def parse_recording_date(value: str) -> str:
    """Validate a ``YYYY`` or ``YYYY-MM-DD`` recording date and return it unchanged.

    Raises:
        InvalidDateError: If ``value`` matches neither form or names a day
            that does not exist.
    """

    if not _DATE_PATTERN.fullmatch(value):
        raise InvalidDateError(value)
    if len(value) > 4:
        try:
            _ = dt.date.fromisoformat(value)
        except ValueError as exc:
            raise InvalidDateError(value) from exc
    return value


def set_date(tags: ID3, value: str) -> None:
    """Store a validated recording date as a ``TDRC`` timestamp frame."""

    _text(tags, TDRC, parse_recording_date(value))


# Cover art -------------------------------------------------------------------


def _free_picture_description(tags: ID3) -> str:
    # APIC frames are keyed by description, so a surviving picture that
    # already uses "Cover" must not be overwritten by the new front cover.
    taken = {frame.desc for frame in tags.getall("APIC")}
    desc = COVER_DESCRIPTION
    suffix = 2
    while desc in taken:
        desc = f"{COVER_DESCRIPTION} ({suffix})"
        suffix += 1
    return desc


def set_cover(tags: ID3, cover: CoverImage) -> None:
    """Replace the front cover picture, leaving other picture types in place."""

    for frame in tags.getall("APIC"):
        if frame.type == PictureType.COVER_FRONT:
            del tags[frame.HashKey]
    tags.add(
        APIC(
            encoding=_UTF8,
            mime=cover.mime_type,
            type=PictureType.COVER_FRONT,
            desc=_free_picture_description(tags),
            data=cover.data,
        )
    )


# Long-form and link frames ---------------------------------------------------


def set_lyrics(tags: ID3, lyrics: str) -> None:
    """Store unsynchronised lyrics in Spanish with an empty descriptor."""

    _replace(tags, USLT(encoding=_UTF8, lang=LYRICS_LANGUAGE, desc="", text=lyrics))


def set_url(tags: ID3, url: str) -> None:
    """Store ``url`` verbatim as the official artist webpage link."""

    _replace(tags, WOAR(url=url))


def set_compilation(tags: ID3, compilation: bool) -> None:
    """Mark the file as part of a compilation.

    A false flag is a no-op: an existing ``TCMP`` frame is neither cleared nor
    rewritten to ``"0"``.
    """

    if compilation:
        _text(tags, TCMP, "1")


# Sort orders -----------------------------------------------------------------


def set_album_sort(tags: ID3, value: str) -> None:
    _text(tags, TSOA, value)


def set_artist_sort(tags: ID3, value: str) -> None:
    _text(tags, TSOP, value)


def set_title_sort(tags: ID3, value: str) -> None:
    _text(tags, TSOT, value)


__all__ = [
    "join_artists",
    "parse_recording_date",
    "set_album",
    "set_album_artist",
    "set_album_sort",
    "set_artist_sort",
    "set_artists",
    "set_compilation",
    "set_composer",
    "set_copyright",
    "set_cover",
    "set_date",
    "set_genre",
    "set_lyrics",
    "set_original_artist",
    "set_season",
    "set_subtitle",
    "set_title",
    "set_title_sort",
    "set_track",
    "set_url",
    "set_year",
]
