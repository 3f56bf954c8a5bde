"""
Summary: Domain types of the tagging feature.
Why: Keep pure value objects and the field registry free of mutagen imports.
"""

from .edit_request import EditRequest
from .errors import (
    FileReadError,
    InvalidDateError,
    TagEditError,
    TagFileNotFoundError,
    TagStoreError,
    UnknownFieldError,
    UnsupportedImageFormatError,
)
from .fields import (
    FIELD_REGISTRY,
    Cardinality,
    FieldKey,
    FieldSpec,
    field_spec,
    frame_id_for,
    require_field,
    resolve_field,
    supported_names,
)
from .image_format import CoverImage, ImageFormat, detect_format, load_cover

__all__ = [
    "EditRequest",
    "TagEditError",
    "FileReadError",
    "InvalidDateError",
    "TagFileNotFoundError",
    "TagStoreError",
    "UnknownFieldError",
    "UnsupportedImageFormatError",
    "FIELD_REGISTRY",
    "Cardinality",
    "FieldKey",
    "FieldSpec",
    "field_spec",
    "frame_id_for",
    "require_field",
    "resolve_field",
    "supported_names",
    "CoverImage",
    "ImageFormat",
    "detect_format",
    "load_cover",
]
