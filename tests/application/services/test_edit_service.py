"""
Summary: Verify the edit service loads, mutates and saves through the store port.
Why: The file must be written only when something changed and never after an error.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from mutagen.id3 import ID3, TALB, TIT2

from id3cli.application.services import EditTagsService
from id3cli.features.tagging import (
    EditRequest,
    FieldKey,
    InvalidDateError,
    TagFileNotFoundError,
)


class InMemoryTagStore:
    """Keep tags per path in memory and count saves."""

    def __init__(self, files: dict[Path, ID3 | None] | None = None) -> None:
        self.files: dict[Path, ID3 | None] = dict(files or {})
        self.saved: list[Path] = []

    def exists(self, path: Path) -> bool:
        return path in self.files

    def load(self, path: Path) -> ID3 | None:
        return self.files[path]

    def save(self, tags: ID3, path: Path) -> None:
        self.files[path] = tags
        self.saved.append(path)


SONG = Path("/music/yesterday.mp3")


def _tagged() -> ID3:
    tags = ID3()
    tags.add(TIT2(encoding=3, text=["Help!"]))
    tags.add(TALB(encoding=3, text=["Help!"]))
    return tags


def test_edit_creates_tag_when_file_has_none() -> None:
    store = InMemoryTagStore({SONG: None})
    service = EditTagsService(store=store)

    outcome = service.edit(SONG, EditRequest(title="Yesterday"))

    assert outcome.created
    assert outcome.saved
    assert outcome.applied == [FieldKey.TITLE]
    saved = store.files[SONG]
    assert saved is not None
    assert saved["TIT2"].text == ["Yesterday"]


def test_edit_removes_before_setting() -> None:
    store = InMemoryTagStore({SONG: _tagged()})
    service = EditTagsService(store=store)

    outcome = service.edit(SONG, EditRequest(title="Yesterday"), remove=["título", "álbum"])

    saved = store.files[SONG]
    assert saved is not None
    assert saved["TIT2"].text == ["Yesterday"]
    assert saved.getall("TALB") == []
    assert outcome.removed == [FieldKey.TITLE, FieldKey.ALBUM]
    assert store.saved == [SONG]


def test_edit_without_changes_does_not_save() -> None:
    store = InMemoryTagStore({SONG: _tagged()})
    service = EditTagsService(store=store)

    outcome = service.edit(SONG, EditRequest(), remove=["bitrate"])

    assert not outcome.changed
    assert not outcome.saved
    assert outcome.unknown == ["bitrate"]
    assert store.saved == []


def test_edit_missing_file_raises() -> None:
    service = EditTagsService(store=InMemoryTagStore())
    with pytest.raises(TagFileNotFoundError):
        _ = service.edit(SONG, EditRequest(title="Yesterday"))


def test_edit_error_skips_save() -> None:
    store = InMemoryTagStore({SONG: _tagged()})
    service = EditTagsService(store=store)

    with pytest.raises(InvalidDateError):
        _ = service.edit(SONG, EditRequest(title="Yesterday", date="65"))

    assert store.saved == []


def test_read_returns_loaded_tags() -> None:
    tags = _tagged()
    service = EditTagsService(store=InMemoryTagStore({SONG: tags}))
    assert service.read(SONG) is tags


def test_read_missing_file_raises() -> None:
    service = EditTagsService(store=InMemoryTagStore())
    with pytest.raises(TagFileNotFoundError):
        _ = service.read(SONG)
