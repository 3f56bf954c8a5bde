"""Shared pytest fixtures for tagging feature tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from mutagen.id3 import APIC, ID3, TALB, TCMP, TIT2, TPE1, PictureType


def snapshot(tags: ID3) -> dict[str, str]:
    """Return a comparable view of every frame keyed by hash key."""

    return {key: repr(frame) for key, frame in tags.items()}


@pytest.fixture
def empty_tags() -> ID3:
    """Provide an ID3 container without frames."""

    return ID3()


@pytest.fixture
def populated_tags() -> ID3:
    """Provide a container already holding several frames."""

    tags = ID3()
    tags.add(TIT2(encoding=3, text=["Help!"]))
    tags.add(TPE1(encoding=3, text=["The Beatles"]))
    tags.add(TALB(encoding=3, text=["Help!"]))
    tags.add(TCMP(encoding=3, text=["1"]))
    tags.add(
        APIC(
            encoding=3,
            mime="image/jpeg",
            type=PictureType.COVER_BACK,
            desc="Back",
            data=b"back-cover-bytes",
        )
    )
    return tags


@pytest.fixture
def cover_png(tmp_path: Path) -> Path:
    """Write a small fake PNG file and return its path."""

    path = tmp_path / "cover.PNG"
    _ = path.write_bytes(b"\x89PNG\r\n\x1a\nfake-image-data")
    return path


@pytest.fixture
def frame_snapshot() -> Callable[[ID3], dict[str, str]]:
    """Expose ``snapshot`` to tests as a fixture."""

    return snapshot
