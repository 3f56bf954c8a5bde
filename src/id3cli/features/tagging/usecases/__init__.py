"""
Summary: Use cases of the tagging feature.
Why: Expose setters, removal and orchestration behind one import path.
"""

from .apply_metadata import apply_metadata
from .events import TagEvent
from .ports import TagStorePort
from .remover import RemovalResult, remove_fields
from .setters import (
    join_artists,
    parse_recording_date,
    set_album,
    set_album_artist,
    set_album_sort,
    set_artist_sort,
    set_artists,
    set_compilation,
    set_composer,
    set_copyright,
    set_cover,
    set_date,
    set_genre,
    set_lyrics,
    set_original_artist,
    set_season,
    set_subtitle,
    set_title,
    set_title_sort,
    set_track,
    set_url,
    set_year,
)

__all__ = [
    "apply_metadata",
    "TagEvent",
    "TagStorePort",
    "RemovalResult",
    "remove_fields",
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
