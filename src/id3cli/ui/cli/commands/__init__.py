"""Command execution package for CLI."""

from id3cli.ui.cli.commands.executor import CommandExecutor
from id3cli.ui.cli.commands.edit import EditCommand
from id3cli.ui.cli.commands.show import ShowCommand

__all__ = [
    "CommandExecutor",
    "EditCommand",
    "ShowCommand",
]
