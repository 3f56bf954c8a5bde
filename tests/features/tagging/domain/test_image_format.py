"""Tests for cover image format detection and loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from id3cli.features.tagging.domain.errors import FileReadError, UnsupportedImageFormatError
from id3cli.features.tagging.domain.image_format import ImageFormat, detect_format, load_cover


@pytest.mark.parametrize(
    ("path", "mime"),
    [
        ("cover.jpg", "image/jpeg"),
        ("cover.JPEG", "image/jpeg"),
        ("cover.PNG", "image/png"),
        ("dir.with.dots/cover.webp", "image/webp"),
    ],
)
def test_detect_format_matches_extension_case_insensitively(path: str, mime: str) -> None:
    assert detect_format(path).mime_type == mime


def test_detect_format_does_not_need_the_file(tmp_path: Path) -> None:
    assert detect_format(tmp_path / "missing.png") is ImageFormat.PNG


@pytest.mark.parametrize("path", ["cover.gif", "cover.bmp", "cover", "cover.png.txt"])
def test_detect_format_rejects_other_extensions(path: str) -> None:
    with pytest.raises(UnsupportedImageFormatError):
        _ = detect_format(path)


def test_unsupported_format_names_the_extension() -> None:
    with pytest.raises(UnsupportedImageFormatError) as exc_info:
        _ = detect_format("cover.gif")
    assert exc_info.value.extension == "gif"
    assert ".gif" in str(exc_info.value)


def test_load_cover_reads_bytes_and_mime(cover_png: Path) -> None:
    cover = load_cover(cover_png)
    assert cover.mime_type == "image/png"
    assert cover.data == cover_png.read_bytes()


def test_load_cover_wraps_os_errors(tmp_path: Path) -> None:
    missing = tmp_path / "missing.jpg"
    with pytest.raises(FileReadError) as exc_info:
        _ = load_cover(missing)
    assert exc_info.value.path == missing
    assert isinstance(exc_info.value.__cause__, OSError)


def test_load_cover_rejects_format_before_reading(mocker: MockerFixture, tmp_path: Path) -> None:
    open_mock = mocker.patch(
        "id3cli.features.tagging.domain.image_format.open", create=True
    )
    with pytest.raises(UnsupportedImageFormatError):
        _ = load_cover(tmp_path / "cover.gif")
    open_mock.assert_not_called()
