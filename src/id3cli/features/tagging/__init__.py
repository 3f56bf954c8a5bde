"""Public surface for the tagging feature."""

from .domain import (
    CoverImage,
    EditRequest,
    FieldKey,
    FileReadError,
    ImageFormat,
    InvalidDateError,
    TagEditError,
    TagFileNotFoundError,
    TagStoreError,
    UnknownFieldError,
    UnsupportedImageFormatError,
    detect_format,
    resolve_field,
)
from .usecases import RemovalResult, TagEvent, TagStorePort, apply_metadata, remove_fields

__all__ = [
    "CoverImage",
    "EditRequest",
    "FieldKey",
    "FileReadError",
    "ImageFormat",
    "InvalidDateError",
    "TagEditError",
    "TagFileNotFoundError",
    "TagStoreError",
    "UnknownFieldError",
    "UnsupportedImageFormatError",
    "detect_format",
    "resolve_field",
    "RemovalResult",
    "TagEvent",
    "TagStorePort",
    "apply_metadata",
    "remove_fields",
]
