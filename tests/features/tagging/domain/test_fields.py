"""
Summary: Verify the field registry resolves bilingual aliases to canonical keys.
Why: Removal by name depends on every alias mapping to exactly one frame.
"""

from __future__ import annotations

import pytest

from id3cli.features.tagging.domain.errors import UnknownFieldError
from id3cli.features.tagging.domain.fields import (
    FIELD_REGISTRY,
    Cardinality,
    FieldKey,
    field_spec,
    frame_id_for,
    require_field,
    resolve_field,
    supported_names,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("title", FieldKey.TITLE),
        ("título", FieldKey.TITLE),
        ("titulo", FieldKey.TITLE),
        ("artista", FieldKey.ARTIST),
        ("álbum", FieldKey.ALBUM),
        ("año", FieldKey.YEAR),
        ("carátula", FieldKey.COVER),
        ("letra", FieldKey.LYRICS),
        ("compilación", FieldKey.COMPILATION),
        ("orden-album", FieldKey.ALBUM_SORT),
        ("album-sort", FieldKey.ALBUM_SORT),
        ("descripción", FieldKey.SUBTITLE),
    ],
)
def test_resolve_field_accepts_english_and_spanish(name: str, expected: FieldKey) -> None:
    assert resolve_field(name) is expected


def test_resolve_field_folds_case_and_whitespace() -> None:
    assert resolve_field("  TÍTULO ") is FieldKey.TITLE
    assert resolve_field("Cover") is FieldKey.COVER


def test_resolve_field_returns_none_for_unknown_names() -> None:
    assert resolve_field("bitrate") is None
    assert resolve_field("") is None


def test_require_field_raises_unknown_field_error() -> None:
    with pytest.raises(UnknownFieldError) as exc_info:
        _ = require_field("bitrate")
    assert exc_info.value.name == "bitrate"


def test_registry_covers_every_field_key() -> None:
    assert set(FIELD_REGISTRY) == set(FieldKey)
    assert supported_names()[0] == "title"
    assert len(supported_names()) == len(FieldKey)


def test_only_artist_is_joined() -> None:
    joined = [key for key, spec in FIELD_REGISTRY.items() if spec.cardinality is Cardinality.JOINED]
    assert joined == [FieldKey.ARTIST]


def test_frame_ids_are_unique() -> None:
    frame_ids = [frame_id_for(key) for key in FieldKey]
    assert len(frame_ids) == len(set(frame_ids))
    assert frame_id_for(FieldKey.YEAR) == "TYER"
    assert frame_id_for(FieldKey.DATE) == "TDRC"
    assert frame_id_for(FieldKey.COVER) == "APIC"


def test_field_spec_describes_artist_as_joined() -> None:
    spec = field_spec(FieldKey.ARTIST)
    assert spec.frame_id == "TPE1"
    assert spec.cardinality is Cardinality.JOINED
    assert "artista" in spec.aliases
