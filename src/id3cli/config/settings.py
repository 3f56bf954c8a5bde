"""Where: src/id3cli/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Out-of-range config values fall back to the defaults instead of failing startup.
"""

from __future__ import annotations

from id3cli.config.config import (
    ID3_VERSION_DEFAULT,
    LYRICS_PREVIEW_LINES_DEFAULT,
    config as app_config,
)

# Fixed tag conventions -------------------------------------------------------

# Separator used when several artists share one TPE1 frame. A slash would
# collide with artist names such as "AC/DC".
ARTIST_SEPARATOR: str = "; "

# ISO 639-2 language code attached to USLT lyrics frames.
LYRICS_LANGUAGE: str = "spa"

# Description stored on the APIC front-cover frame.
COVER_DESCRIPTION: str = "Cover"


# Config-driven values ---------------------------------------------------------

_id3_version = getattr(app_config, "id3_version", ID3_VERSION_DEFAULT)
ID3_VERSION: int = _id3_version if _id3_version in (3, 4) else ID3_VERSION_DEFAULT

_preview_lines = getattr(app_config, "lyrics_preview_lines", LYRICS_PREVIEW_LINES_DEFAULT)
LYRICS_PREVIEW_LINES: int = (
    _preview_lines
    if isinstance(_preview_lines, int) and _preview_lines >= 0
    else LYRICS_PREVIEW_LINES_DEFAULT
)


__all__ = [
    "ARTIST_SEPARATOR",
    "LYRICS_LANGUAGE",
    "COVER_DESCRIPTION",
    "ID3_VERSION",
    "LYRICS_PREVIEW_LINES",
]
