"""src/id3cli/features/tagging/usecases/events.py
Where: Tagging feature usecases layer.
What: Structured event identifiers attached to tag editing log records.
Why: Let the console handler style records without parsing message text.
"""

from __future__ import annotations

from enum import StrEnum


class TagEvent(StrEnum):
    """Structured event identifiers for tag editing logs."""

    FILE_LOAD = "tag.file.load"
    FILE_CREATED = "tag.file.created"
    FIELD_SET = "tag.field.set"
    FIELD_REMOVED = "tag.field.removed"
    FIELD_UNKNOWN = "tag.field.unknown"
    FILE_SAVED = "tag.file.saved"
    FILE_UNCHANGED = "tag.file.unchanged"
    FILE_ERROR = "tag.file.error"


__all__ = ["TagEvent"]
