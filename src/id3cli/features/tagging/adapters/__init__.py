"""Adapters for the tagging feature."""

from .mutagen_store import MutagenTagStore

__all__ = ["MutagenTagStore"]
