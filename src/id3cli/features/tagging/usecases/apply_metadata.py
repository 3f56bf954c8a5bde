"""src/id3cli/features/tagging/usecases/apply_metadata.py
Where: Tagging feature usecases layer.
What: Apply a sparse EditRequest to an ID3 container in a fixed field order.
Why: Run every fallible step before the first mutation so bad input leaves the container as loaded.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final

from mutagen.id3 import ID3

from id3cli.features.tagging.domain.edit_request import EditRequest
from id3cli.features.tagging.domain.fields import FieldKey
from id3cli.features.tagging.domain.image_format import CoverImage, load_cover

from . import setters
from .setters import parse_recording_date


@dataclass(frozen=True, slots=True)
class _Step:
    key: FieldKey
    attribute: str
    apply: Callable[[ID3, Any], None]


# Application order. The cover always runs last.
_STEPS: Final[tuple[_Step, ...]] = (
    _Step(FieldKey.TITLE, "title", setters.set_title),
    _Step(FieldKey.ARTIST, "artists", setters.set_artists),
    _Step(FieldKey.ALBUM, "album", setters.set_album),
    _Step(FieldKey.YEAR, "year", setters.set_year),
    _Step(FieldKey.GENRE, "genre", setters.set_genre),
    _Step(FieldKey.TRACK, "track", setters.set_track),
    _Step(FieldKey.SEASON, "season", setters.set_season),
    _Step(FieldKey.DATE, "date", setters.set_date),
    _Step(FieldKey.COPYRIGHT, "copyright", setters.set_copyright),
    _Step(FieldKey.COMPOSER, "composer", setters.set_composer),
    _Step(FieldKey.SUBTITLE, "subtitle", setters.set_subtitle),
    _Step(FieldKey.ORIGINAL_ARTIST, "original_artist", setters.set_original_artist),
    _Step(FieldKey.ALBUM_ARTIST, "album_artist", setters.set_album_artist),
    _Step(FieldKey.LYRICS, "lyrics", setters.set_lyrics),
    _Step(FieldKey.URL, "url", setters.set_url),
    _Step(FieldKey.COMPILATION, "compilation", setters.set_compilation),
    _Step(FieldKey.ALBUM_SORT, "album_sort", setters.set_album_sort),
    _Step(FieldKey.ARTIST_SORT, "artist_sort", setters.set_artist_sort),
    _Step(FieldKey.TITLE_SORT, "title_sort", setters.set_title_sort),
    _Step(FieldKey.COVER, "cover", setters.set_cover),
)


def _prepare(request: EditRequest) -> dict[str, Any]:
    """Collect the populated values, validating and loading fallible inputs.

    Raises:
        InvalidDateError: If the date is malformed.
        UnsupportedImageFormatError: If the cover extension is not allowed.
        FileReadError: If the cover cannot be read.
        ValueError: If an empty artist list was requested.
    """

    values: dict[str, Any] = {}
    for step in _STEPS:
        value = getattr(request, step.attribute)
        if value is None:
            continue
        if step.key is FieldKey.COMPILATION and not value:
            continue
        values[step.attribute] = value

    if "artists" in values:
        _ = setters.join_artists(values["artists"])
    if "date" in values:
        values["date"] = parse_recording_date(values["date"])
    if "cover" in values:
        cover: CoverImage = load_cover(values["cover"])
        values["cover"] = cover
    return values


def apply_metadata(tags: ID3, request: EditRequest) -> list[FieldKey]:
    """Write every populated field of ``request`` into ``tags``.

    Returns:
        list[FieldKey]: Fields written, in application order.

    Raises:
        TagEditError: The first preparation failure; ``tags`` is untouched then.
        ValueError: If an empty artist list was requested.
    """

    values = _prepare(request)
    applied: list[FieldKey] = []
    for step in _STEPS:
        if step.attribute not in values:
            continue
        step.apply(tags, values[step.attribute])
        applied.append(step.key)
    return applied


__all__ = ["apply_metadata"]
