"""Command line interface package."""

from id3cli.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
