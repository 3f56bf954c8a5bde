"""Application service implementations."""

from .edit_service import EditOutcome, EditTagsService

__all__ = ["EditOutcome", "EditTagsService"]
