"""Display management for CLI interface."""

from id3cli.ui.cli.display.tags import TagDisplay

__all__ = ["TagDisplay"]
