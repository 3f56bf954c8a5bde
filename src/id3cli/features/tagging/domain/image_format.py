"""
Summary: Cover image format detection and loading.
Why: Reject unsupported images by extension before any file I/O happens.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Final

from .errors import FileReadError, UnsupportedImageFormatError


class ImageFormat(StrEnum):
    """Cover formats accepted for embedding; values are MIME types."""

    JPEG = "image/jpeg"
    PNG = "image/png"
    WEBP = "image/webp"

    @property
    def mime_type(self) -> str:
        return self.value


_EXTENSION_FORMATS: Final[dict[str, ImageFormat]] = {
    "jpg": ImageFormat.JPEG,
    "jpeg": ImageFormat.JPEG,
    "png": ImageFormat.PNG,
    "webp": ImageFormat.WEBP,
}


@dataclass(frozen=True, slots=True)
class CoverImage:
    """Validated cover bytes paired with their MIME type."""

    mime_type: str
    data: bytes


def detect_format(path: Path | str) -> ImageFormat:
    """Map the extension of ``path`` to an ``ImageFormat``.

    Only the path string is inspected; the file is never opened.

    Raises:
        UnsupportedImageFormatError: If the extension is missing or not allowed.
    """

    extension = Path(path).suffix.lstrip(".").lower()
    image_format = _EXTENSION_FORMATS.get(extension)
    if image_format is None:
        raise UnsupportedImageFormatError(extension)
    return image_format


def load_cover(path: Path | str) -> CoverImage:
    """Validate the format of ``path`` and read its full content.

    Raises:
        UnsupportedImageFormatError: If the extension is not allowed.
        FileReadError: If the file cannot be read.
    """

    image_format = detect_format(path)
    cover_path = Path(path)
    try:
        with open(cover_path, "rb") as f:
            data = f.read()
    except OSError as exc:
        raise FileReadError(cover_path, exc.strerror or str(exc)) from exc
    return CoverImage(mime_type=image_format.mime_type, data=data)


__all__ = ["CoverImage", "ImageFormat", "detect_format", "load_cover"]
