"""
Summary: Static registry of editable ID3 fields and their bilingual aliases.
Why: Resolve user-facing field names to frame identifiers from one immutable table.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, StrEnum
from types import MappingProxyType
import unicodedata
from typing import Final

from .errors import UnknownFieldError


class FieldKey(StrEnum):
    """Canonical, language-independent identifiers of the editable fields."""

    TITLE = "title"
    ARTIST = "artist"
    ALBUM = "album"
    YEAR = "year"
    GENRE = "genre"
    TRACK = "track"
    SEASON = "season"
    DATE = "date"
    COPYRIGHT = "copyright"
    COMPOSER = "composer"
    SUBTITLE = "subtitle"
    ORIGINAL_ARTIST = "original_artist"
    ALBUM_ARTIST = "album_artist"
    COVER = "cover"
    LYRICS = "lyrics"
    URL = "url"
    COMPILATION = "compilation"
    ALBUM_SORT = "album_sort"
    ARTIST_SORT = "artist_sort"
    TITLE_SORT = "title_sort"


class Cardinality(Enum):
    """How many user values a field stores in its single frame."""

    SINGLE = "single"
    JOINED = "joined"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Registry entry binding a field to its frame and accepted names."""

    key: FieldKey
    frame_id: str
    cardinality: Cardinality
    aliases: frozenset[str]


def _spec(
    key: FieldKey,
    frame_id: str,
    *aliases: str,
    cardinality: Cardinality = Cardinality.SINGLE,
) -> FieldSpec:
    return FieldSpec(
        key=key,
        frame_id=frame_id,
        cardinality=cardinality,
        aliases=frozenset({key.value, *aliases}),
    )


_SPECS: Final[tuple[FieldSpec, ...]] = (
    _spec(FieldKey.TITLE, "TIT2", "título", "titulo"),
    _spec(FieldKey.ARTIST, "TPE1", "artista", cardinality=Cardinality.JOINED),
    _spec(FieldKey.ALBUM, "TALB", "álbum"),
    _spec(FieldKey.YEAR, "TYER", "año", "ano"),
    _spec(FieldKey.GENRE, "TCON", "género", "genero"),
    _spec(FieldKey.TRACK, "TRCK", "pista"),
    _spec(FieldKey.SEASON, "TPOS", "temporada"),
    _spec(FieldKey.DATE, "TDRC", "fecha"),
    _spec(FieldKey.COPYRIGHT, "TCOP"),
    _spec(FieldKey.COMPOSER, "TCOM", "compositor"),
    _spec(
        FieldKey.SUBTITLE,
        "TIT3",
        "subtítulo",
        "subtitulo",
        "description",
        "descripción",
        "descripcion",
    ),
    _spec(
        FieldKey.ORIGINAL_ARTIST,
        "TOPE",
        "original-artist",
        "artista_original",
        "artista-original",
    ),
    _spec(FieldKey.ALBUM_ARTIST, "TPE2", "album-artist", "artista_album", "artista-album"),
    _spec(FieldKey.COVER, "APIC", "carátula", "caratula"),
    _spec(FieldKey.LYRICS, "USLT", "letra"),
    _spec(FieldKey.URL, "WOAR"),
    _spec(FieldKey.COMPILATION, "TCMP", "compilación", "compilacion"),
    _spec(FieldKey.ALBUM_SORT, "TSOA", "album-sort", "orden_album", "orden-album"),
    _spec(FieldKey.ARTIST_SORT, "TSOP", "artist-sort", "orden_artista", "orden-artista"),
    _spec(FieldKey.TITLE_SORT, "TSOT", "title-sort", "orden_titulo", "orden-titulo"),
)

FIELD_REGISTRY: Final[Mapping[FieldKey, FieldSpec]] = MappingProxyType(
    {spec.key: spec for spec in _SPECS}
)

_ALIAS_INDEX: Final[Mapping[str, FieldKey]] = MappingProxyType(
    {alias.casefold(): spec.key for spec in _SPECS for alias in spec.aliases}
)


def _normalize(name: str) -> str:
    return unicodedata.normalize("NFC", name.strip()).casefold()


def resolve_field(name: str) -> FieldKey | None:
    """Return the canonical key for ``name`` in English or Spanish, else ``None``."""

    return _ALIAS_INDEX.get(_normalize(name))


def require_field(name: str) -> FieldKey:
    """Return the canonical key for ``name``.

    Raises:
        UnknownFieldError: If no registry entry accepts ``name``.
    """

    key = resolve_field(name)
    if key is None:
        raise UnknownFieldError(name)
    return key


def field_spec(key: FieldKey) -> FieldSpec:
    """Return the registry entry for ``key``."""

    return FIELD_REGISTRY[key]


def frame_id_for(key: FieldKey) -> str:
    """Return the ID3 frame identifier storing ``key``."""

    return FIELD_REGISTRY[key].frame_id


def supported_names() -> list[str]:
    """Return canonical names in registry order, used in help and warnings."""

    return [key.value for key in FIELD_REGISTRY]


__all__ = [
    "Cardinality",
    "FIELD_REGISTRY",
    "FieldKey",
    "FieldSpec",
    "field_spec",
    "frame_id_for",
    "require_field",
    "resolve_field",
    "supported_names",
]
