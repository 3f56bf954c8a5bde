"""Command line argument options."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, final

from id3cli.features.tagging import EditRequest


@final
@dataclass(slots=True)
class EditArgs:
    """Command line arguments for the ``edit`` subcommand."""

    command: Literal["edit"]
    file_path: Path
    request: EditRequest
    remove: list[str] = field(default_factory=list)
    verbose: bool = False
    quiet: bool = False


@final
@dataclass(slots=True)
class ShowArgs:
    """Command line arguments for the ``show`` subcommand."""

    command: Literal["show"]
    file_path: Path
    verbose: bool = False
    quiet: bool = False


CLIArgs = EditArgs | ShowArgs

__all__ = ["CLIArgs", "EditArgs", "ShowArgs"]
